"""Base game entity with position, size and queued position tweens."""

from __future__ import annotations

import itertools
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Deque, Optional

from gemswap.settings import GEM_HEIGHT, GEM_WIDTH
from gemswap.vectors import Vec2

TweenCallback = Callable[["GameEntity"], None]


class TweenType(Enum):
    LINEAR = "linear"


@dataclass
class Tween:
    """A movement of the entity's top-left corner from ``start`` to ``end``."""

    start: Vec2
    end: Vec2
    time: float
    tween_type: TweenType = TweenType.LINEAR
    on_finish: Optional[TweenCallback] = None
    elapsed: float = 0.0


class GameEntity:
    """Something drawn on screen that can be pooled and moved by tweens."""

    _ids = itertools.count()

    def __init__(self) -> None:
        super().__init__()
        self.entity_id = next(GameEntity._ids)
        self.radius = 0.0
        self.tex_index = 0
        self.renderer: Any = None
        self.sprite: Any = None
        self.size = Vec2()
        self.center = Vec2()
        self.rotation = 0.0
        self._position = Vec2()
        self._active = False
        self._tweening = False
        self._current: Optional[Tween] = None
        self._queue: Deque[Tween] = deque()

    def setup(
        self,
        renderer: Any,
        sprite: Any,
        position: Vec2 = Vec2(),
        size: Vec2 = Vec2(50.0, 50.0),
    ) -> None:
        self.renderer = renderer
        self.sprite = sprite
        self.size = size
        self.position = position

    def reset(self) -> None:
        """Prepare the entity for reuse from a pool."""
        self._tweening = False
        self._current = None
        self._queue.clear()

    def set_active(self, active: bool) -> None:
        self._tweening = False
        self._current = None
        self._queue.clear()
        self._active = active

    @property
    def active(self) -> bool:
        return self._active

    @property
    def position(self) -> Vec2:
        return self._position

    @position.setter
    def position(self, value: Vec2) -> None:
        self._position = value
        self.center = value + self.size * 0.5

    @property
    def tweening(self) -> bool:
        return self._tweening

    def is_inside_circle(self, other_center: Vec2, radius: float) -> bool:
        offset = self.center - other_center
        return offset.dot(offset) < radius * radius

    def add_tween(
        self,
        to_position: Vec2,
        time: float,
        tween_type: TweenType = TweenType.LINEAR,
        on_finish: Optional[TweenCallback] = None,
    ) -> None:
        """Move so that a gem-sized box ends up centred on ``to_position``.

        A tween added while another runs waits in a queue and starts from
        wherever the entity is when its turn comes.
        """
        target = to_position - Vec2(GEM_WIDTH, GEM_HEIGHT) * 0.5
        tween = Tween(self._position, target, time, tween_type, on_finish)
        if self._tweening:
            self._queue.append(tween)
        else:
            self._tweening = True
            self._current = tween

    def tick(self, dt: float) -> None:
        if not self._tweening or self._current is None:
            return
        tween = self._current
        tween.elapsed += dt
        progress = tween.elapsed / tween.time if tween.time > 0 else 1.0
        self.position = tween.start + (tween.end - tween.start) * progress
        self._tweening = tween.elapsed < tween.time
        if self._tweening:
            return
        self.position = tween.end
        if tween.on_finish is not None:
            tween.on_finish(self)
        if self._queue:
            following = self._queue.popleft()
            following.elapsed = 0.0
            following.start = self._position
            self._current = following
            self._tweening = True

    def render(self) -> None:
        self.renderer.draw_image(self.sprite, self._position, self.size, self.rotation)