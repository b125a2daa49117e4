"""Interactive window that simulates and draws the scene with pygame."""

from __future__ import annotations

import argparse
from enum import Enum

import pygame

from .objects import Color, Mesh, sphere
from .physics import PhysicsObject, euler_rotate, integrate_forward
from .vec3 import Vec3
from .view import Viewport

_BLACK = (0, 0, 0)
_WHITE = (255, 255, 255)
_CROSSHAIR_HALF = 0.2
_FRAME_DELAY_MS = 16
_DT = 1 / 60.0


class Key(Enum):
    """Keyboard keys the renderer tracks; NXN stands for any other key."""

    Q = 0
    W = 1
    E = 2
    A = 3
    S = 4
    D = 5
    NXN = 6


_KEYCODES = {
    pygame.K_q: Key.Q,
    pygame.K_w: Key.W,
    pygame.K_e: Key.E,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
}


def map_key(keycode: int) -> Key:
    """Map a pygame key code to a tracked key, or Key.NXN."""
    return _KEYCODES.get(keycode, Key.NXN)


def load_scene() -> list[PhysicsObject]:
    """Build the initial scene: a heavy red sphere and a lighter moving green one."""
    red = Color(255, 40, 40, 255)
    green = Color(40, 255, 40, 255)
    heavy = PhysicsObject(sphere(Vec3(5, 0, 0), 1, red, False), 1e12, 0)
    light = PhysicsObject(sphere(Vec3(-5, 0, 0), 1, green, False), 1e10, 0)
    light.velocity = Vec3(-1, 0, 0)
    return [heavy, light]


def _ctrl_held() -> bool:
    try:
        return bool(pygame.key.get_mods() & pygame.KMOD_CTRL)
    except pygame.error:
        return False


class Renderer3D:
    """Owns the scene, the camera and the drawing surface."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.viewport = Viewport(width, height)
        self.surface = pygame.Surface((width, height))
        self.scene: list[PhysicsObject] = []
        self.key_map: dict[Key, bool] = {k: False for k in Key if k is not Key.NXN}
        self.running = True
        self.sim_time = 0.0
        self._rotating = False
        self._panning = False
        self._last = (0, 0)

    @property
    def camera(self):
        return self.viewport.camera

    def run(self) -> None:
        """Open the window and simulate and draw until it is closed."""
        pygame.init()
        try:
            self.surface = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption("Viewport")
            self.scene.extend(load_scene())
            self.running = True
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                self._tick(_DT)
                self.render_frame()
                pygame.display.flip()
                pygame.time.delay(_FRAME_DELAY_MS)
        finally:
            pygame.quit()

    def _tick(self, dt: float) -> None:
        self.camera.compute_vectors()
        integrate_forward(self.scene, self.sim_time, dt)
        euler_rotate(self.scene, dt)
        self.sim_time += dt

    def render_frame(self) -> None:
        """Clear the surface and draw the scene, furthest bodies first, then the crosshair."""
        self.surface.fill(_BLACK)
        self.scene[:] = self.viewport.depth_sort(self.scene)
        for body in self.scene:
            self._draw_mesh(body.mesh)
        self._draw_crosshair()

    def _draw_line(self, p1: Vec3, p2: Vec3, color) -> None:
        vp = self.viewport
        clipped = vp.clip_line(vp.world_to_cam(p1), vp.world_to_cam(p2))
        if clipped is None:
            return
        s1, s2 = (vp.cam_to_screen(p) for p in clipped)
        if (
            (s1.x < 0 and s2.x < 0)
            or (s1.x > self.width and s2.x > self.width)
            or (s1.y < 0 and s2.y < 0)
            or (s1.y > self.height and s2.y > self.height)
        ):
            return
        pygame.draw.line(self.surface, color, tuple(s1), tuple(s2))

    def _draw_crosshair(self) -> None:
        t = self.camera.target
        for axis in (
            Vec3(_CROSSHAIR_HALF, 0, 0),
            Vec3(0, _CROSSHAIR_HALF, 0),
            Vec3(0, 0, _CROSSHAIR_HALF),
        ):
            self._draw_line(t - axis, t + axis, _WHITE)

    def _draw_mesh(self, mesh: Mesh) -> None:
        base = (mesh.color.r, mesh.color.g, mesh.color.b)
        if mesh.wireframe:
            verts = mesh.vertices
            for tri in mesh.tris:
                for i, j in ((tri.a, tri.b), (tri.b, tri.c), (tri.c, tri.a)):
                    self._draw_line(verts[i], verts[j], base)
            return
        for triangle in self.viewport.fill_triangles(mesh):
            colors = [v.color for v in triangle]
            avg = tuple(
                sum(getattr(c, ch) for c in colors) // len(colors) for ch in ("r", "g", "b")
            )
            pygame.draw.polygon(self.surface, avg, [tuple(v.position) for v in triangle])

    def handle_event(self, event) -> None:
        """Apply one pygame event to the camera, key state or running flag."""
        kind = event.type
        if kind == pygame.QUIT:
            self.running = False
        elif kind == pygame.MOUSEMOTION:
            x, y = event.pos
            dx, dy = x - self._last[0], y - self._last[1]
            if self._rotating:
                self.camera.rotate(dx, dy)
                self._last = (x, y)
            elif self._panning:
                self.camera.pan(dx, dy)
                self._last = (x, y)
        elif kind == pygame.MOUSEWHEEL:
            self.camera.zoom(event.y)
        elif kind == pygame.MOUSEBUTTONDOWN:
            if event.button == pygame.BUTTON_RIGHT:
                self._rotating = True
                self._last = tuple(event.pos)
            elif event.button == pygame.BUTTON_LEFT and _ctrl_held():
                self._panning = True
                self._last = tuple(event.pos)
        elif kind == pygame.MOUSEBUTTONUP:
            if event.button == pygame.BUTTON_RIGHT:
                self._rotating = False
            elif event.button == pygame.BUTTON_LEFT:
                self._panning = False
        elif kind in (pygame.KEYDOWN, pygame.KEYUP):
            key = map_key(event.key)
            if key is not Key.NXN:
                self.key_map[key] = kind == pygame.KEYDOWN


def main(argv: list[str] | None = None) -> int:
    """Open an 800x600 viewport and run the simulation."""
    parser = argparse.ArgumentParser(prog="emsim", description="Charged-body simulation viewer.")
    parser.parse_args(argv)
    Renderer3D(800, 600).run()
    return 0