"""Loading and looking up textures by name."""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Dict, Union

import pygame

from gemswap.vectors import Vec2


class AssetError(RuntimeError):
    """An asset could not be loaded or is not known."""


class Texture:
    """An image ready to be drawn."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface

    @property
    def size(self) -> Vec2:
        width, height = self.surface.get_size()
        return Vec2(float(width), float(height))


class AssetManager:
    """Keeps loaded textures under the names they were loaded with."""

    def __init__(self) -> None:
        self._textures: Dict[str, Texture] = {}

    def load_texture(self, name: str, path: Union[str, os.PathLike]) -> Texture:
        try:
            surface = pygame.image.load(os.fspath(path))
        except (pygame.error, OSError) as exc:
            raise AssetError(f"failed to load image file {os.fspath(path)!r}") from exc
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()
        return self.add_texture(name, Texture(surface))

    def add_texture(self, name: str, texture: Texture) -> Texture:
        self._textures[name] = texture
        return texture

    def texture(self, name: str) -> Texture:
        try:
            return self._textures[name]
        except KeyError:
            raise AssetError(f"no texture named {name!r}") from None


@lru_cache(maxsize=None)
def get_asset_manager() -> AssetManager:
    """The process-wide asset manager."""
    return AssetManager()