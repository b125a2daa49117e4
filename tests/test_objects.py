import math

import pytest

from emsim.matrix3 import euler_rotation
from emsim.objects import Color, Mesh, Triangle, icosahedron, sphere, tetrahedron
from emsim.vec3 import Vec3

RED = Color(255, 40, 40)
CENTER = Vec3(5.0, -1.0, 2.0)


def distances(mesh):
    return [(v - mesh.center).magnitude() for v in mesh.vertices]


def indices_valid(mesh):
    n = len(mesh.vertices)
    return all(0 <= i < n for tri in mesh.tris for i in tri)


def test_color_default_alpha():
    assert Color(1, 2, 3).a == 255


def test_tetrahedron_shape():
    m = tetrahedron(CENTER, 2.0, RED, True)
    assert len(m.vertices) == 4
    assert len(m.tris) == 4
    assert m.wireframe is True
    assert m.vertices[0] == CENTER + Vec3(0, 0, 2.0)
    assert distances(m) == pytest.approx([2.0] * 4)
    assert indices_valid(m)


def test_icosahedron_shape():
    m = icosahedron(CENTER, 1.5, RED, False)
    assert len(m.vertices) == 12
    assert len(m.tris) == 20
    assert distances(m) == pytest.approx([1.5] * 12)
    assert indices_valid(m)
    assert len(set(m.vertices)) == 12


def test_sphere_without_subdivision_matches_icosahedron():
    s = sphere(CENTER, 1.0, RED, False, 0)
    ico = icosahedron(CENTER, 1.0, RED, False)
    assert s.vertices == ico.vertices
    assert s.tris == ico.tris


@pytest.mark.parametrize("level", [1, 2, 3])
def test_sphere_subdivision(level):
    s = sphere(CENTER, 2.0, RED, False, level)
    assert len(s.tris) == 20 * 4**level
    assert distances(s) == pytest.approx([2.0] * len(s.vertices))
    assert indices_valid(s)
    assert len(set(s.vertices)) == len(s.vertices)


def test_sphere_default_subdivisions():
    s = sphere(Vec3(), 1.0, RED)
    assert len(s.tris) == 1280
    assert len(s.vertices) == 642


def test_sphere_negative_subdivisions_raises():
    with pytest.raises(ValueError):
        sphere(Vec3(), 1.0, RED, False, -1)


def test_translate_moves_everything():
    m = icosahedron(Vec3(), 1.0, RED)
    before = list(m.vertices)
    delta = Vec3(1.0, 2.0, -3.0)
    m.translate(delta)
    assert m.center == delta
    assert all(a + delta == b for a, b in zip(before, m.vertices))


def test_rotate_about_center_keeps_radius():
    m = sphere(CENTER, 1.25, RED, False, 1)
    m.rotate_about_center(euler_rotation(Vec3(0.4, -1.1, 2.3)))
    assert m.center == CENTER
    assert distances(m) == pytest.approx([1.25] * len(m.vertices))


def test_rotate_quarter_turn_about_z():
    m = Mesh(Vec3(1, 1, 1), RED, False, [Vec3(2, 1, 1)], [Triangle(0, 0, 0)])
    m.rotate_about_center(euler_rotation(Vec3(0, 0, math.pi / 2)))
    assert tuple(m.vertices[0]) == pytest.approx((1.0, 2.0, 1.0))