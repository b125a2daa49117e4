"""Triangle meshes for the simulated bodies."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import NamedTuple

from .matrix3 import Matrix3
from .vec3 import Vec3


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255


class Triangle(NamedTuple):
    """Three vertex indices into a mesh's vertex list."""

    a: int
    b: int
    c: int


@dataclass
class Mesh:
    """A triangle mesh with a centre point, a colour and a draw style."""

    center: Vec3
    color: Color
    wireframe: bool = False
    vertices: list[Vec3] = field(default_factory=list)
    tris: list[Triangle] = field(default_factory=list)

    def translate(self, delta: Vec3) -> None:
        """Move the centre and every vertex by ``delta``."""
        self.center = self.center + delta
        self.vertices = [v + delta for v in self.vertices]

    def rotate_about_center(self, matrix: Matrix3) -> None:
        """Apply ``matrix`` to every vertex relative to the centre."""
        c = self.center
        self.vertices = [(matrix @ (v - c)) + c for v in self.vertices]


def tetrahedron(center: Vec3, radius: float, color: Color, wireframe: bool = False) -> Mesh:
    """Build a four-faced mesh with its apex ``radius`` above ``center``."""
    ang = 0.33981
    b = radius * math.sin(ang)
    c = radius * math.cos(ang)
    offsets = [Vec3(0, 0, radius), Vec3(c, 0, -b), Vec3(-c, 0, -b), Vec3(0, c, -b)]
    tris = [Triangle(0, 1, 2), Triangle(0, 1, 3), Triangle(0, 2, 3), Triangle(1, 2, 3)]
    return Mesh(center, color, wireframe, [center + o for o in offsets], tris)


_ICOSAHEDRON_TRIS = [
    (0, 1, 2), (0, 3, 2), (3, 4, 2), (3, 5, 4), (4, 6, 2),
    (6, 1, 2), (0, 1, 7), (1, 8, 6), (6, 8, 9), (9, 4, 6),
    (4, 9, 5), (7, 8, 1), (10, 0, 3), (10, 5, 3), (10, 7, 0),
    (11, 5, 10), (11, 5, 9), (11, 9, 8), (11, 8, 7), (11, 7, 10),
]


def icosahedron(center: Vec3, radius: float, color: Color, wireframe: bool = False) -> Mesh:
    """Build a twenty-faced mesh with all twelve vertices ``radius`` from ``center``."""
    ang = 1 / math.sqrt(5)
    start = Vec3(radius * math.cos(math.asin(ang)), radius * ang, 0.0)
    c1 = start.cycle()
    c2 = c1.cycle()
    offsets = [
        start,
        c1,
        c2,
        start.negate(False, True, False),
        c1.negate(False, True, False),
        c1.negate(False, True, True),
        c2.negate(True, False, False),
        c1.negate(False, False, True),
        start.negate(True, False, False),
        start.negate(True, True, False),
        c2.negate(False, False, True),
        c2.negate(True, False, True),
    ]
    return Mesh(
        center,
        color,
        wireframe,
        [center + o for o in offsets],
        [Triangle(*t) for t in _ICOSAHEDRON_TRIS],
    )


def sphere(
    center: Vec3,
    radius: float,
    color: Color,
    wireframe: bool = False,
    subdivisions: int = 3,
) -> Mesh:
    """Build a sphere by repeatedly subdividing an icosahedron.

    Each subdivision splits every triangle into four, pushing the new
    edge midpoints out onto the sphere's surface.
    """
    if subdivisions < 0:
        raise ValueError("subdivisions must be non-negative")
    mesh = icosahedron(center, radius, color, wireframe)
    vertices = mesh.vertices
    midpoints: dict[tuple[int, int], int] = {}

    def midpoint(i1: int, i2: int) -> int:
        key = (min(i1, i2), max(i1, i2))
        if key in midpoints:
            return midpoints[key]
        mid = (vertices[i1] + vertices[i2]) * 0.5
        mid = (mid - center).normalize() * radius + center
        vertices.append(mid)
        midpoints[key] = len(vertices) - 1
        return midpoints[key]

    tris = mesh.tris
    for _ in range(subdivisions):
        refined: list[Triangle] = []
        for tri in tris:
            m01 = midpoint(tri.a, tri.b)
            m12 = midpoint(tri.b, tri.c)
            m20 = midpoint(tri.c, tri.a)
            refined.extend(
                (
                    Triangle(tri.a, m01, m20),
                    Triangle(tri.b, m12, m01),
                    Triangle(tri.c, m20, m12),
                    Triangle(m01, m12, m20),
                )
            )
        tris = refined
    mesh.tris = tris
    return mesh