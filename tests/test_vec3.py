import math

import pytest

from emsim.vec3 import Vec3


def test_default_is_zero():
    assert tuple(Vec3()) == (0.0, 0.0, 0.0)


def test_add_and_sub_round_trip():
    a = Vec3(1.5, -2.0, 3.25)
    b = Vec3(-0.5, 4.0, 1.0)
    assert (a + b) - b == a
    assert a - a == Vec3()


def test_scalar_multiplication_both_sides():
    v = Vec3(1.0, 2.0, 3.0)
    assert v * 2 == Vec3(2.0, 4.0, 6.0)
    assert 2 * v == v * 2
    assert -v == v * -1


def test_cross_of_axes():
    x, y, z = Vec3(1, 0, 0), Vec3(0, 1, 0), Vec3(0, 0, 1)
    assert x.cross(y) == z
    assert y.cross(z) == x
    assert z.cross(x) == y


def test_cross_is_orthogonal():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)
    assert b.cross(a) == -c


def test_dot_and_magnitude():
    v = Vec3(3.0, 4.0, 0.0)
    assert v.magnitude() == pytest.approx(5.0)
    assert v.dot(v) == pytest.approx(v.magnitude() ** 2)


def test_normalize_gives_unit_length():
    v = Vec3(2.0, -7.0, 1.5).normalize()
    assert v.magnitude() == pytest.approx(1.0)


def test_normalize_zero_raises():
    with pytest.raises(ValueError):
        Vec3().normalize()


def test_str_format():
    assert str(Vec3(1, 2, 3)) == "(1.000000, 2.000000, 3.000000)"


def test_cycle():
    v = Vec3(1.0, 2.0, 3.0)
    assert v.cycle() == Vec3(3.0, 1.0, 2.0)
    assert v.cycle().cycle().cycle() == v


@pytest.mark.parametrize(
    "flags",
    [(False, False, False), (True, False, False), (False, True, True), (True, True, True)],
)
def test_negate_flags(flags):
    v = Vec3(1.0, -2.0, 3.0)
    n = v.negate(*flags)
    for orig, got, flag in zip(v, n, flags):
        assert got == (-orig if flag else orig)
    assert n.negate(*flags) == v
    assert math.isclose(n.magnitude(), v.magnitude())