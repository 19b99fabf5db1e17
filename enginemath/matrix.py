"""Row-major 3x3 and 4x4 matrices."""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Real
from typing import Sequence

from .vector import Vector3

Rows = tuple[tuple[float, ...], ...]


def _zeros(size: int) -> Rows:
    return tuple((0.0,) * size for _ in range(size))


def _square(rows: Sequence[Sequence[float]], size: int) -> Rows:
    result = tuple(tuple(float(value) for value in row) for row in rows)
    if len(result) != size or any(len(row) != size for row in result):
        raise ValueError(f"expected a {size}x{size} matrix")
    return result


@dataclass(frozen=True, slots=True)
class Matrix3x3:
    """A 3x3 matrix stored as rows."""

    m: Rows = field(default_factory=lambda: _zeros(3))

    def __post_init__(self) -> None:
        object.__setattr__(self, "m", _square(self.m, 3))


@dataclass(frozen=True, slots=True)
class Matrix4x4:
    """A 4x4 matrix stored as rows; vectors multiply from the left."""

    m: Rows = field(default_factory=lambda: _zeros(4))

    def __post_init__(self) -> None:
        object.__setattr__(self, "m", _square(self.m, 4))

    def _map(self, func) -> Matrix4x4:
        return Matrix4x4(tuple(tuple(func(value) for value in row) for row in self.m))

    def __add__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4(
            tuple(
                tuple(a + b for a, b in zip(row_a, row_b))
                for row_a, row_b in zip(self.m, other.m)
            )
        )

    def __sub__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4(
            tuple(
                tuple(a - b for a, b in zip(row_a, row_b))
                for row_a, row_b in zip(self.m, other.m)
            )
        )

    def __mul__(self, other: Matrix4x4 | float) -> Matrix4x4:
        if isinstance(other, Matrix4x4):
            columns = list(zip(*other.m))
            return Matrix4x4(
                tuple(
                    tuple(sum(a * b for a, b in zip(row, col)) for col in columns)
                    for row in self.m
                )
            )
        if isinstance(other, Real):
            return self._map(lambda value: value * other)
        return NotImplemented

    def __truediv__(self, scalar: float) -> Matrix4x4:
        if not isinstance(scalar, Real):
            return NotImplemented
        return self._map(lambda value: value / scalar)

    def column(self, col: int) -> Vector3:
        """The first three entries of column ``col``."""
        return Vector3(self.m[0][col], self.m[1][col], self.m[2][col])