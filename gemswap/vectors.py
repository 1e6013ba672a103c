"""Small vector types and scalar helpers for 2D game math."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

PIE = 3.1415926535


def matrix_index(row: int, col: int) -> int:
    """Flat index of an element in a row-major 4x4 matrix."""
    return row * 4 + col


def one_radian() -> float:
    """Degrees in one radian."""
    return 180.0 / PIE


def radians(angle_in_degrees: float) -> float:
    return angle_in_degrees / one_radian()


def degrees(angle_in_radians: float) -> float:
    return angle_in_radians * one_radian()


def map_to_range(
    src_min: float, src_max: float, dest_min: float, dest_max: float, value: float
) -> float:
    """Scale ``value`` by the ratio of the two ranges and offset it by ``dest_min``.

    The source minimum only enters through the slope; it is not subtracted
    from ``value``.
    """
    slope = (dest_max - dest_min) / (src_max - src_min)
    return dest_min + slope * value


def grid_index(row: int, col: int, max_col: int) -> int:
    """Flat index of a cell in a row-major grid ``max_col`` wide."""
    return row * max_col + col


def lerp(a: float, b: float, t: float) -> float:
    return t * b + (1 - t) * a


@dataclass(frozen=True)
class Vec2:
    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union[float, "Vec2"]) -> "Vec2":
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vec2":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def normalize(self) -> "Vec2":
        length = self.length()
        return Vec2(self.x / length, self.y / length)

    def length(self) -> float:
        return (self.x * self.x + self.y * self.y) ** 0.5

    def dot(self, other: "Vec2") -> float:
        return self.x * other.x + self.y * other.y


@dataclass(frozen=True)
class Vec3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[float, "Vec3"]) -> "Vec3":
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    __rmul__ = __mul__

    def normalize(self) -> "Vec3":
        length = self.length()
        return Vec3(self.x / length, self.y / length, self.z / length)

    def length(self) -> float:
        return (self.x * self.x + self.y * self.y + self.z * self.z) ** 0.5

    def dot(self, other: "Vec3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vec3") -> "Vec3":
        return Vec3(
            self.y * other.z - other.y * self.z,
            self.z * other.x - other.z * self.x,
            self.x * other.y - other.x * self.y,
        )


@dataclass(frozen=True)
class Vec4:
    """Homogeneous vector; arithmetic works on x, y, z and resets w to 1."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def from_vec2(cls, other: Vec2) -> "Vec4":
        return cls(other.x, other.y, 0.0, 1.0)

    @classmethod
    def from_vec3(cls, other: Vec3) -> "Vec4":
        return cls(other.x, other.y, other.z, 0.0)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __add__(self, other: "Vec4") -> "Vec4":
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec4") -> "Vec4":
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x - other.x, self.y - other.y, self.z - other.z)

    def normalize(self) -> "Vec4":
        length = self.length()
        return Vec4(self.x / length, self.y / length, self.z / length)

    def length(self) -> float:
        return (self.x * self.x + self.y * self.y + self.z * self.z) ** 0.5

    def dot(self, other: "Vec4") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vec4") -> "Vec4":
        return Vec4(
            self.y * other.z - other.y * self.z,
            self.z * other.x - other.z * self.x,
            self.x * other.y - other.x * self.y,
        )