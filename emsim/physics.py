"""Point-body dynamics: Coulomb and gravitational forces, RK4 stepping, spin."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import NamedTuple, Sequence

from .matrix3 import euler_rotation
from .objects import Mesh
from .vec3 import Vec3

EPSILON_NAUGHT = 8.854e-12
COULOMB_CONSTANT = 1 / (4 * math.pi * EPSILON_NAUGHT)
GRAVITATIONAL_CONSTANT = 6.6743e-11

_TWO_PI = 2 * math.pi


@dataclass
class PhysicsObject:
    """A mesh with mass, charge and linear and angular motion state."""

    mesh: Mesh
    mass: float
    charge: float
    velocity: Vec3 = field(default_factory=Vec3)
    acceleration: Vec3 = field(default_factory=Vec3)
    angular_velocity: Vec3 = field(default_factory=Vec3)
    angular_acceleration: Vec3 = field(default_factory=Vec3)
    rotation: Vec3 = field(default_factory=Vec3)

    @property
    def center(self) -> Vec3:
        """The centre of the underlying mesh."""
        return self.mesh.center

    def rotate(self, dt: float) -> None:
        """Advance the spin by ``dt`` seconds and turn the mesh accordingly."""
        self.angular_velocity = self.angular_velocity + self.angular_acceleration * dt
        self._apply_rotation(self.angular_velocity * dt)

    def _apply_rotation(self, rot: Vec3) -> None:
        total = self.rotation + rot
        self.rotation = Vec3(*(a - _TWO_PI if a > _TWO_PI else a for a in total))
        self.mesh.rotate_about_center(euler_rotation(rot))


class _State(NamedTuple):
    r: Vec3
    v: Vec3

    def advanced(self, d: _State, factor: float) -> _State:
        return _State(self.r + d.r * factor, self.v + d.v * factor)


def _separation(target: PhysicsObject, emitter: PhysicsObject) -> tuple[Vec3, float]:
    r = target.center - emitter.center
    dist = r.magnitude()
    if dist == 0:
        raise ValueError("bodies share the same centre; force is undefined")
    return r, dist


def coulomb_force(target: PhysicsObject, emitter: PhysicsObject) -> Vec3:
    """Electrostatic force exerted on ``target`` by ``emitter``."""
    r, dist = _separation(target, emitter)
    scale = COULOMB_CONSTANT * target.charge * emitter.charge / dist**3
    return r * scale


def gravitational_force(target: PhysicsObject, emitter: PhysicsObject) -> Vec3:
    """Gravitational force exerted on ``target`` by ``emitter``."""
    r, dist = _separation(target, emitter)
    scale = -GRAVITATIONAL_CONSTANT * target.mass * emitter.mass / dist**3
    return r * scale


def net_force(scene: Sequence[PhysicsObject], index: int) -> Vec3:
    """Sum of all forces on ``scene[index]`` from every other body."""
    target = scene[index]
    force = Vec3()
    for j, emitter in enumerate(scene):
        if j == index:
            continue
        force = force + coulomb_force(target, emitter) + gravitational_force(target, emitter)
    return force


def _derivative(scene: Sequence[PhysicsObject], index: int, state: _State) -> _State:
    return _State(state.v, net_force(scene, index) * (1.0 / scene[index].mass))


def integrate_forward(scene: Sequence[PhysicsObject], t: float, dt: float) -> None:
    """Advance positions and velocities of every body by one RK4 step of ``dt``.

    Forces are taken from the positions at the start of the step; ``t`` is the
    current simulation time.
    """
    y0 = [_State(p.center, p.velocity) for p in scene]

    def stage(base: list[_State], factor: float, step: list[_State] | None) -> list[_State]:
        states = base if step is None else [s.advanced(d, factor) for s, d in zip(base, step)]
        return [_derivative(scene, i, s) for i, s in enumerate(states)]

    k1 = stage(y0, 0.0, None)
    k2 = stage(y0, 0.5, k1)
    k3 = stage(y0, 0.5, k2)
    k4 = stage(y0, 1.0, k3)

    for body, a, b, c, d in zip(scene, k1, k2, k3, k4):
        dr = (a.r + b.r * 2.0 + c.r * 2.0 + d.r) * (1.0 / 6.0)
        dv = (a.v + b.v * 2.0 + c.v * 2.0 + d.v) * (1.0 / 6.0)
        body.mesh.translate(dr * dt)
        body.velocity = body.velocity + dv * dt


def euler_rotate(scene: Sequence[PhysicsObject], dt: float) -> None:
    """Advance the spin of every body by ``dt``."""
    for body in scene:
        body.rotate(dt)