"""Orbit camera, projection, clipping, depth ordering and shading of meshes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, NamedTuple, Protocol, Sequence, TypeVar

from .objects import Color, Mesh
from .vec3 import Vec3

_UP = Vec3(0.0, 1.0, 0.0)
_PITCH_LIMIT = 1.5
_MIN_DISTANCE = 0.1

_AMBIENT = 0.28
_DIFFUSE_WEIGHT = 0.27
_SPECULAR_WEIGHT = 0.48
_SHININESS = 16


class ScreenPoint(NamedTuple):
    """A pixel position on the screen."""

    x: int
    y: int


class ShadedVertex(NamedTuple):
    """A projected vertex with its lit colour."""

    position: ScreenPoint
    color: Color


CamTriangle = tuple[Vec3, Vec3, Vec3]
ShadedTriangle = tuple[ShadedVertex, ShadedVertex, ShadedVertex]


class _HasCenter(Protocol):
    @property
    def center(self) -> Vec3: ...


_T = TypeVar("_T", bound=_HasCenter)


@dataclass
class Camera:
    """A camera orbiting ``target`` at ``distance``, steered by yaw and pitch."""

    target: Vec3 = field(default_factory=Vec3)
    distance: float = 5.0
    yaw: float = 0.0
    pitch: float = 0.0
    rotate_speed: float = 0.005
    pan_speed: float = 0.01
    focal_length: float = 4.0
    near: float = 0.1
    cam_pos: Vec3 = field(init=False)
    forward: Vec3 = field(init=False)
    right: Vec3 = field(init=False)
    up: Vec3 = field(init=False)

    def __post_init__(self) -> None:
        self.compute_vectors()

    def position(self) -> Vec3:
        """Return the camera's world position on its orbit."""
        from math import cos, sin

        t = self.target
        return Vec3(
            t.x + self.distance * cos(self.pitch) * sin(self.yaw),
            t.y + self.distance * sin(self.pitch),
            t.z + self.distance * cos(self.pitch) * cos(self.yaw),
        )

    def compute_vectors(self) -> None:
        """Recompute the position and the forward, right and up axes."""
        self.cam_pos = self.position()
        self.forward = (self.target - self.cam_pos).normalize()
        self.right = self.forward.cross(_UP).normalize()
        self.up = self.right.cross(self.forward).normalize()

    def rotate(self, dx: float, dy: float) -> None:
        """Turn the orbit by a mouse movement of ``dx``, ``dy`` pixels."""
        self.yaw += dx * self.rotate_speed
        self.pitch += dy * self.rotate_speed
        self.pitch = max(-_PITCH_LIMIT, min(_PITCH_LIMIT, self.pitch))

    def pan(self, dx: float, dy: float) -> None:
        """Slide the orbit target across the view plane by a mouse movement."""
        self.compute_vectors()
        factor = self.distance / self.focal_length * self.pan_speed
        delta = self.right * (-dx * factor) + self.up * (dy * factor)
        self.target = self.target + delta

    def zoom(self, wheel_y: float) -> None:
        """Move closer for a positive wheel step, further away otherwise."""
        self.distance *= 0.9 if wheel_y > 0 else 1.1
        self.distance = max(self.distance, _MIN_DISTANCE)


def intersect_plane(p: Vec3, q: Vec3, near: float) -> Vec3:
    """Return the point on segment ``p``-``q`` where z equals ``near``.

    The interpolation parameter is clamped to the segment.
    """
    t = (near - p.z) / (q.z - p.z)
    t = min(1.0, max(0.0, t))
    return p + (q - p) * t


@dataclass
class Viewport:
    """Projects world geometry through a camera onto a ``width`` x ``height`` screen."""

    width: int
    height: int
    camera: Camera = field(default_factory=Camera)
    scale: float = 100.0
    light_dir: Vec3 = field(default_factory=lambda: Vec3(0.0, 1.0, 1.0).normalize())

    def world_to_cam(self, point: Vec3) -> Vec3:
        """Express a world point in camera coordinates (z along the view)."""
        cam = self.camera
        to_point = point - cam.cam_pos
        return Vec3(to_point.dot(cam.right), to_point.dot(cam.up), to_point.dot(cam.forward))

    def cam_to_screen(self, c: Vec3) -> ScreenPoint:
        """Perspective-project a camera-space point to pixel coordinates."""
        f = self.camera.focal_length / c.z
        x_proj = f * c.x
        y_proj = f * c.y
        return ScreenPoint(
            int(x_proj * self.scale + self.width * 0.5),
            int(-y_proj * self.scale + self.height * 0.5),
        )

    def clip_line(self, a: Vec3, b: Vec3) -> tuple[Vec3, Vec3] | None:
        """Clip a camera-space segment to the near plane.

        Returns None when the whole segment lies behind it.
        """
        near = self.camera.near
        if a.z < near and b.z < near:
            return None
        if a.z < near:
            t = (near - a.z) / (b.z - a.z)
            a = a + (b - a) * t
        elif b.z < near:
            t = (near - b.z) / (a.z - b.z)
            b = b + (a - b) * t
        return a, b

    def clip_triangle(self, a: Vec3, b: Vec3, c: Vec3) -> list[CamTriangle]:
        """Clip a camera-space triangle to the near plane into 0, 1 or 2 triangles."""
        near = self.camera.near
        points = (a, b, c)
        inside = [p.z >= near for p in points]
        count = sum(inside)
        if count == 0:
            return []
        if count == 3:
            return [(a, b, c)]

        polygon: list[Vec3] = []
        for i, p in enumerate(points):
            ni = (i + 1) % 3
            if inside[i]:
                polygon.append(p)
            if inside[i] != inside[ni]:
                polygon.append(intersect_plane(p, points[ni], near))

        if len(polygon) == 3:
            return [(polygon[0], polygon[1], polygon[2])]
        return [
            (polygon[0], polygon[1], polygon[2]),
            (polygon[0], polygon[2], polygon[3]),
        ]

    def all_outside(self, points: Iterable[ScreenPoint]) -> bool:
        """True when every point lies beyond the same edge of the screen."""
        pts = list(points)
        return (
            all(p.x < 0 for p in pts)
            or all(p.x > self.width for p in pts)
            or all(p.y < 0 for p in pts)
            or all(p.y > self.height for p in pts)
        )

    def depth_sort(self, scene: Sequence[_T]) -> list[_T]:
        """Order items by the depth of their centres, furthest first.

        Items at equal depth keep their original order.
        """
        return sorted(scene, key=lambda item: self.world_to_cam(item.center).z, reverse=True)

    def shade(self, base: Color, normal_cam: Vec3, point_cam: Vec3, light_cam: Vec3) -> Color:
        """Light ``base`` with ambient, half-Lambert and Blinn-Phong terms."""
        half_lambert = 0.5 * normal_cam.dot(light_cam) + 0.5
        view = (self.camera.cam_pos - point_cam).normalize()
        halfway = (light_cam + view).normalize()
        specular = max(0.0, normal_cam.dot(halfway)) ** _SHININESS
        diff = _AMBIENT + _DIFFUSE_WEIGHT * half_lambert + _SPECULAR_WEIGHT * specular
        diff = max(0.0, min(1.0, diff))
        return Color(int(base.r * diff), int(base.g * diff), int(base.b * diff), 255)

    def fill_triangles(self, mesh: Mesh) -> list[ShadedTriangle]:
        """Project, clip and shade a mesh's faces, furthest faces first."""
        sums = [Vec3() for _ in mesh.vertices]
        counts = [0] * len(mesh.vertices)
        faces: list[tuple[tuple[int, int, int], CamTriangle, float]] = []

        for tri in mesh.tris:
            a, b, c = (mesh.vertices[i] for i in tri)
            normal = (b - a).cross(c - a).normalize()
            for idx in tri:
                sums[idx] = sums[idx] + normal
                counts[idx] += 1
            cam_pts = (self.world_to_cam(a), self.world_to_cam(b), self.world_to_cam(c))
            depth = sum(p.z for p in cam_pts) / 3.0
            faces.append((tuple(tri), cam_pts, depth))

        normals = [
            (s * (1.0 / n)).normalize() if n and s.magnitude() > 0 else s
            for s, n in zip(sums, counts)
        ]
        faces.sort(key=lambda face: face[2], reverse=True)
        light_cam = self.world_to_cam(self.light_dir).normalize()

        result: list[ShadedTriangle] = []
        for indices, cam_pts, _ in faces:
            for clipped in self.clip_triangle(*cam_pts):
                screen = [self.cam_to_screen(p) for p in clipped]
                if self.all_outside(screen):
                    continue
                shaded = tuple(
                    ShadedVertex(
                        pos,
                        self.shade(
                            mesh.color,
                            self.world_to_cam(normals[vi]).normalize(),
                            point,
                            light_cam,
                        ),
                    )
                    for vi, pos, point in zip(indices, screen, clipped)
                )
                result.append(shaded)  # type: ignore[arg-type]
        return result