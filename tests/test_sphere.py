import pytest

from raytracer.color import Color
from raytracer.materials import Lambertian
from raytracer.ray import Ray
from raytracer.sphere import Sphere
from raytracer.vector import Vec3

MATERIAL = Lambertian(Color(0.5, 0.5, 0.5))


def _sphere():
    return Sphere(Vec3(0, 0, 0), 1.0, MATERIAL)


def test_hit_from_outside():
    sphere = _sphere()
    ray = Ray(Vec3(0, 0, -5), Vec3(0, 0, 1))
    rec = sphere.hit(ray, 0.001, float("inf"))
    assert (rec.point - sphere.center).length() == pytest.approx(sphere.radius)
    assert rec.point == ray.at(rec.t)
    assert rec.front_face is True
    assert rec.normal.length() == pytest.approx(1.0)
    assert rec.normal.dot(ray.direction) < 0
    assert rec.material is MATERIAL


def test_miss_returns_none():
    ray = Ray(Vec3(0, 5, -5), Vec3(0, 0, 1))
    assert _sphere().hit(ray, 0.001, float("inf")) is None


def test_far_root_when_near_root_excluded():
    sphere = _sphere()
    ray = Ray(Vec3(0, 0, -5), Vec3(0, 0, 1))
    near = sphere.hit(ray, 0.001, float("inf"))
    far = sphere.hit(ray, near.t + 0.01, float("inf"))
    assert far.t > near.t
    assert far.front_face is False
    assert (far.point - sphere.center).length() == pytest.approx(sphere.radius)


def test_t_max_excludes_hits():
    sphere = _sphere()
    ray = Ray(Vec3(0, 0, -5), Vec3(0, 0, 1))
    near = sphere.hit(ray, 0.001, float("inf"))
    assert sphere.hit(ray, 0.001, near.t - 0.01) is None


def test_hit_from_inside_has_inward_normal():
    sphere = Sphere(Vec3(1, 2, 3), 2.0, MATERIAL)
    ray = Ray(sphere.center, Vec3(1, 1, 0))
    rec = sphere.hit(ray, 0.001, float("inf"))
    assert rec.front_face is False
    assert rec.normal.dot(rec.point - sphere.center) < 0
    assert (rec.point - sphere.center).length() == pytest.approx(sphere.radius)


def test_sphere_behind_ray_is_missed():
    ray = Ray(Vec3(0, 0, 5), Vec3(0, 0, 1))
    assert _sphere().hit(ray, 0.001, float("inf")) is None