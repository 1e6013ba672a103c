"""Sound effects for matches, swaps and settling gems."""

from __future__ import annotations

import os
from enum import Enum
from functools import lru_cache
from typing import Any, Mapping, Union

import pygame


class SoundEffect(Enum):
    MATCH = 0
    SWAP = 1
    GEM_SETTLE = 2


class SoundController:
    """Plays the game's sound effects; effects without a sound are skipped."""

    def __init__(self, sounds: Mapping[SoundEffect, Any]) -> None:
        self._sounds = dict(sounds)

    @classmethod
    def load(cls, paths: Mapping[SoundEffect, Union[str, os.PathLike]]) -> "SoundController":
        """Load each effect from a sound file."""
        sounds = {}
        for effect, path in paths.items():
            try:
                if pygame.mixer.get_init() is None:
                    pygame.mixer.init()
                sounds[effect] = pygame.mixer.Sound(os.fspath(path))
            except (pygame.error, OSError) as exc:
                raise RuntimeError(f"failed to load sound {os.fspath(path)!r}: {exc}") from exc
        return cls(sounds)

    def _play(self, effect: SoundEffect, volume: float) -> None:
        sound = self._sounds.get(effect)
        if sound is None:
            return
        sound.set_volume(volume)
        sound.play()

    def play_match(self, volume: float = 1.0) -> None:
        self._play(SoundEffect.MATCH, volume)

    def play_swap(self, volume: float = 1.0) -> None:
        self._play(SoundEffect.SWAP, volume)

    def play_gem_settle(self, volume: float = 1.0) -> None:
        self._play(SoundEffect.GEM_SETTLE, volume)


@lru_cache(maxsize=None)
def get_sound_controller() -> SoundController:
    """The shared controller; it starts with no sounds loaded."""
    return SoundController({})