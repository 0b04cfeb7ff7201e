import pytest

from raytracer.ray import Ray
from raytracer.vector import Vec3


def test_default_ray_is_zero():
    r = Ray()
    assert r.origin == Vec3()
    assert r.direction == Vec3()


def test_at_zero_is_origin():
    origin = Vec3(1, 2, 3)
    r = Ray(origin, Vec3(4, 5, 6))
    assert r.at(0) == origin


def test_at_one_is_origin_plus_direction():
    origin = Vec3(1, 2, 3)
    direction = Vec3(-1, 0.5, 2)
    assert Ray(origin, direction).at(1) == origin + direction


def test_points_are_collinear():
    r = Ray(Vec3(1, 1, 1), Vec3(0, 2, -1))
    a = r.at(2.5) - r.origin
    assert a.cross(r.direction).is_near_zero()
    assert (r.at(3) - r.at(1)).length() == pytest.approx(2 * r.direction.length())


def test_negative_parameter_goes_backwards():
    r = Ray(Vec3(), Vec3(1, 0, 0))
    assert r.at(-2) == -r.at(2)