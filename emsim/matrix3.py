"""3x3 matrices stored row-major, used for rotating meshes."""

from __future__ import annotations

import math
from typing import Iterable

from .vec3 import Vec3


class Matrix3:
    """A 3x3 matrix of nine row-major values."""

    __slots__ = ("values",)

    def __init__(self, values: Iterable[float]) -> None:
        vals = tuple(float(v) for v in values)
        if len(vals) != 9:
            raise ValueError(f"a 3x3 matrix needs 9 values, got {len(vals)}")
        self.values = vals

    def _row(self, i: int) -> tuple[float, float, float]:
        return self.values[3 * i: 3 * i + 3]

    def _column(self, j: int) -> tuple[float, float, float]:
        return self.values[j::3]

    def __matmul__(self, other: Matrix3 | Vec3) -> Matrix3 | Vec3:
        if isinstance(other, Matrix3):
            return Matrix3(
                sum(a * b for a, b in zip(self._row(i), other._column(j)))
                for i in range(3)
                for j in range(3)
            )
        if isinstance(other, Vec3):
            return Vec3(*(sum(a * b for a, b in zip(self._row(i), other)) for i in range(3)))
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix3):
            return NotImplemented
        return self.values == other.values

    def __repr__(self) -> str:
        return f"Matrix3({list(self.values)!r})"

    def __str__(self) -> str:
        return "".join(
            "(" + "".join(f"{v:.6f}, " for v in self._row(i)) + ")\n" for i in range(3)
        )


def euler_rotation(rot: Vec3) -> Matrix3:
    """Build the rotation matrix Ry @ Rx @ Rz for angles given in radians."""
    c, s = math.cos(rot.x), math.sin(rot.x)
    rx = Matrix3([1, 0, 0, 0, c, -s, 0, s, c])
    c, s = math.cos(rot.y), math.sin(rot.y)
    ry = Matrix3([c, 0, s, 0, 1, 0, -s, 0, c])
    c, s = math.cos(rot.z), math.sin(rot.z)
    rz = Matrix3([c, -s, 0, s, c, 0, 0, 0, 1])
    return ry @ rx @ rz