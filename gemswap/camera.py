"""A 2D camera that follows a point and stays inside the map."""

from __future__ import annotations

from gemswap.matrix import Mat4, look_at
from gemswap.settings import HEIGHT, WIDTH
from gemswap.vectors import Vec2, Vec3, Vec4

_UP = Vec4(0.0, 1.0, 0.0)


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _look_down_at(position: Vec3) -> Mat4:
    eye = Vec4(position.x, position.y, position.z)
    target = Vec4(position.x, position.y, 0.0)
    return look_at(eye, target, _UP)


class Camera:
    """Holds a view matrix looking straight down the z axis at a 2D point."""

    def __init__(self, point: Vec2) -> None:
        self.map_size = Vec2()
        self.view = Mat4.identity()
        self._position = Vec3()
        self.reset(point)

    def reset(self, point: Vec2) -> None:
        """Place the camera directly above ``point``."""
        self._position = Vec3(point.x, point.y, 1.0)
        self.view = _look_down_at(self._position)

    def update(self, point: Vec2) -> None:
        """Centre the screen on ``point``, clamped to the map bounds."""
        x = _clamp(point.x - WIDTH / 2.0, 0.0, self.map_size.x)
        y = _clamp(point.y - HEIGHT / 2.0, 0.0, self.map_size.y)
        self._position = Vec3(x, y, 0.1)
        self.view = _look_down_at(self._position)

    @property
    def position(self) -> Vec2:
        return Vec2(self._position.x, self._position.y)