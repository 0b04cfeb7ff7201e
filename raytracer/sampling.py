"""Random numbers and geometric sampling helpers."""

from __future__ import annotations

import math
import random

from .vector import Vec3

INFINITY = math.inf
PI = math.pi

_rng = random.Random(0)


def seed(value: int | float | str | bytes | None) -> None:
    """Reseed the shared generator used by all sampling functions."""
    _rng.seed(value)


def random_double(low: float = 0.0, high: float = 1.0) -> float:
    """Return a random real in [low, high)."""
    return low + (high - low) * _rng.random()


def random_vec3(low: float = 0.0, high: float = 1.0) -> Vec3:
    """Return a vector whose components are each uniform in [low, high)."""
    return Vec3(random_double(low, high), random_double(low, high), random_double(low, high))


def random_unit_vector() -> Vec3:
    return random_point_in_unit_sphere().unit_vector()


def degrees_to_radians(degrees: float) -> float:
    return degrees * PI / 180.0


def random_point_in_unit_sphere() -> Vec3:
    while True:
        p = random_vec3(-1, 1)
        if p.length_squared() < 1:
            return p


def random_dir_in_hemisphere(normal: Vec3) -> Vec3:
    """Return a random point in the unit sphere on the same side as ``normal``."""
    in_unit_sphere = random_point_in_unit_sphere()
    if in_unit_sphere.dot(normal) > 0.0:
        return in_unit_sphere
    return -in_unit_sphere


def random_point_in_unit_disk() -> Vec3:
    while True:
        p = Vec3(random_double(-1, 1), random_double(-1, 1), 0)
        if p.length_squared() < 1:
            return p