# emsim

An interactive 3D viewer for a small n-body simulation. Each body is a
shaded triangle mesh that carries a mass and an electric charge. Bodies
attract each other through gravity and attract or repel each other through
the Coulomb force. Positions and velocities advance by a fourth-order
Runge–Kutta step. Each body also turns at its own angular velocity.

## Installation

```
pip install .
```

This installs `pygame`, which provides the window and the drawing.

## Running

```
emsim
```

This opens an 800×600 window titled "Viewport" with two spheres. The heavy
red sphere (mass 1e12) starts at `x = 5`. The lighter green sphere (mass
1e10) starts at `x = -5` and moves along `-x` at one unit per second. Both
spheres are uncharged. The simulation steps at 1/60 s per frame.

Controls:

- **Right mouse drag**: orbit the camera around its target (pitch is limited to ±1.5 rad)
- **Ctrl + left mouse drag**: pan the target across the view plane
- **Mouse wheel**: zoom in (closer by 10 %) or out (further by 10 %)

The white crosshair marks the camera's target. Filled meshes are lit with
ambient, half-Lambert and Blinn-Phong terms, and each triangle is drawn in
the average of its three vertex colours.

## Using the library

```python
from emsim.vec3 import Vec3
from emsim.objects import Color, sphere
from emsim.physics import PhysicsObject, integrate_forward

heavy = PhysicsObject(sphere(Vec3(5, 0, 0), 1.0, Color(255, 40, 40), False, 3), 1e12, 0.0)
light = PhysicsObject(sphere(Vec3(-5, 0, 0), 1.0, Color(40, 255, 40), False, 3), 1e10, 0.0)
light.velocity = Vec3(-1, 0, 0)

scene = [heavy, light]
t, dt = 0.0, 1 / 60
for _ in range(60):
    integrate_forward(scene, t, dt)
    t += dt
print(light.mesh.center)
```

Modules:

- `emsim.vec3`: `Vec3`, an immutable vector with `+`, `-`, scalar `*`,
  `cross`, `dot`, `magnitude`, `normalize` (raises `ValueError` for the zero
  vector), `cycle` and `negate`
- `emsim.matrix3`: `Matrix3`, a row-major 3×3 matrix that multiplies with
  `m @ n` and `m @ v`, and `euler_rotation`, which builds `Ry @ Rx @ Rz`
- `emsim.objects`: `Mesh`, `Triangle` and `Color`, plus the `tetrahedron`,
  `icosahedron` and `sphere` builders; `sphere` subdivides an icosahedron
  `subdivisions` times (default 3)
- `emsim.physics`: `PhysicsObject`, `coulomb_force`, `gravitational_force`,
  `net_force`, `integrate_forward` and `euler_rotate`; force functions raise
  `ValueError` when two bodies share a centre
- `emsim.view`: `Camera` (orbit, pan, zoom) and `Viewport` (projection,
  near-plane clipping of lines and triangles, depth sorting, shading and
  `fill_triangles`)
- `emsim.renderer`: `Renderer3D`, the window and event loop, with
  `load_scene`, `map_key` and `main`

## What it does not do

- The Q, W, E, A, S and D keys are tracked in `Renderer3D.key_map`, but
  nothing acts on them.
- The scene is fixed: the `emsim` command takes no options, and there is no
  way to add bodies, charges or spin from the window.
- Bodies pass through each other; there is no collision handling.

## Tests

```
pip install .[test]
pytest
```