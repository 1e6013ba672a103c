"""Row-major 4x4 matrices and the usual transform builders."""

from __future__ import annotations

import math
from typing import Iterable, Union

from gemswap.vectors import Vec4, matrix_index, radians

_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


class Mat4:
    """An immutable 4x4 matrix stored row-major, as sixteen floats."""

    __slots__ = ("_elements",)

    def __init__(self, elements: Iterable[float]) -> None:
        values = tuple(float(v) for v in elements)
        if len(values) != 16:
            raise ValueError(f"a 4x4 matrix needs 16 elements, got {len(values)}")
        self._elements = values

    @classmethod
    def identity(cls) -> "Mat4":
        return cls(_IDENTITY)

    @classmethod
    def filled(cls, value: float) -> "Mat4":
        return cls([value] * 16)

    def __getitem__(self, key: Union[int, tuple[int, int]]) -> float:
        if isinstance(key, tuple):
            row, col = key
            if not (0 <= row < 4 and 0 <= col < 4):
                raise IndexError(f"matrix position {key} out of range")
            return self._elements[matrix_index(row, col)]
        return self._elements[key]

    def __mul__(self, other: "Mat4") -> "Mat4":
        if not isinstance(other, Mat4):
            return NotImplemented
        return Mat4(
            sum(self[i, k] * other[k, j] for k in range(4))
            for i in range(4)
            for j in range(4)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return self._elements == other._elements

    def __hash__(self) -> int:
        return hash(self._elements)

    def __repr__(self) -> str:
        return f"Mat4({list(self._elements)!r})"

    def values(self) -> tuple[float, ...]:
        """The sixteen elements in row-major order."""
        return self._elements


def _with(base: Mat4, updates: dict[tuple[int, int], float]) -> Mat4:
    elements = list(base.values())
    for (row, col), value in updates.items():
        elements[matrix_index(row, col)] = value
    return Mat4(elements)


def translate(matrix: Mat4, direction: Vec4) -> Mat4:
    move = _with(
        Mat4.identity(),
        {(3, 0): direction.x, (3, 1): direction.y, (3, 2): direction.z},
    )
    return matrix * move


def scale(matrix: Mat4, units: Vec4) -> Mat4:
    stretch = _with(
        Mat4.identity(),
        {(0, 0): units.x, (1, 1): units.y, (2, 2): units.z},
    )
    return stretch * matrix


def rotate(matrix: Mat4, angle_in_radians: float, axis: Vec4) -> Mat4:
    n = axis.normalize()
    nx, ny, nz = n.x, n.y, n.z
    sine = math.sin(angle_in_radians)
    cosine = math.cos(angle_in_radians)
    one_cos = 1.0 - cosine
    turn = _with(
        Mat4.identity(),
        {
            (0, 0): nx * nx * one_cos + cosine,
            (0, 1): nx * ny * one_cos + nz * sine,
            (0, 2): nz * nx * one_cos - ny * sine,
            (1, 0): nx * ny * one_cos - nz * sine,
            (1, 1): ny * ny * one_cos + cosine,
            (1, 2): ny * nz * one_cos + nx * sine,
            (2, 0): nz * nx * one_cos + ny * sine,
            (2, 1): ny * nz * one_cos - nx * sine,
            (2, 2): nz * nz * one_cos + cosine,
        },
    )
    return matrix * turn


def ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> Mat4:
    return _with(
        Mat4.identity(),
        {
            (0, 0): 2.0 / (right - left),
            (1, 1): 2.0 / (top - bottom),
            (2, 2): -2.0 / (far - near),
            (3, 0): -(right + left) / (right - left),
            (3, 1): -(top + bottom) / (top - bottom),
            (3, 2): -(far + near) / (far - near),
        },
    )


def frustum(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> Mat4:
    return _with(
        Mat4.filled(0.0),
        {
            (0, 0): (2.0 * near) / (right - left),
            (1, 1): (2.0 * near) / (top - bottom),
            (2, 0): (right + left) / (right - left),
            (2, 1): (top + bottom) / (top - bottom),
            (2, 2): -(far + near) / (far - near),
            (2, 3): -1.0,
            (3, 2): -(2.0 * far * near) / (far - near),
            (3, 3): 0.0,
        },
    )


def perspective(
    field_of_view: float, aspect_ratio: float, near: float, far: float
) -> Mat4:
    """Symmetric frustum; ``field_of_view`` is in degrees."""
    half_height = near * math.tan(radians(field_of_view / 2.0))
    half_width = half_height * aspect_ratio
    return frustum(-half_width, half_width, -half_height, half_height, near, far)


def look_at(position: Vec4, center: Vec4, up: Vec4) -> Mat4:
    direction = (position - center).normalize()
    right = up.cross(direction).normalize()
    cam_up = direction.cross(right).normalize()
    return _with(
        Mat4.identity(),
        {
            (0, 0): right.x,
            (1, 0): right.y,
            (2, 0): right.z,
            (0, 1): cam_up.x,
            (1, 1): cam_up.y,
            (2, 1): cam_up.z,
            (0, 2): direction.x,
            (1, 2): direction.y,
            (2, 2): direction.z,
            (3, 0): -position.dot(right),
            (3, 1): -position.dot(cam_up),
            (3, 2): -position.dot(direction),
        },
    )