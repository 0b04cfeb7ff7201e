"""Surface materials and the optics they rely on."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from . import sampling
from .color import Color
from .hittable import HitRecord
from .ray import Ray
from .vector import Vec3


def reflect(v: Vec3, n: Vec3) -> Vec3:
    """Mirror ``v`` about the surface with normal ``n``."""
    return v - 2 * v.dot(n) * n


def refract(r_in: Vec3, n: Vec3, eta_ratio: float) -> Vec3:
    """Bend the unit vector ``r_in`` through a surface by Snell's law."""
    cos_theta = min((-r_in).dot(n), 1.0)
    r_out_perpendicular = eta_ratio * (r_in + cos_theta * n)
    r_out_parallel = -math.sqrt(abs(1.0 - r_out_perpendicular.length_squared())) * n
    return r_out_perpendicular + r_out_parallel


def reflectance(cosine: float, refraction_ratio: float) -> float:
    """Schlick's approximation of the reflection coefficient."""
    r0 = (1 - refraction_ratio) / (1 + refraction_ratio)
    r0 = r0 * r0
    return r0 + (1 - r0) * (1 - cosine) ** 5


@dataclass(frozen=True)
class Scatter:
    """The ray leaving a surface and how much it is attenuated."""

    attenuation: Color
    scattered: Ray


class Material(ABC):
    @abstractmethod
    def scatter(self, ray_in: Ray, record: HitRecord) -> Scatter | None:
        """Return the scattered ray, or None if the ray is absorbed."""


@dataclass(frozen=True)
class Lambertian(Material):
    """Ideal diffuse surface."""

    albedo: Color

    def scatter(self, ray_in: Ray, record: HitRecord) -> Scatter | None:
        direction = record.normal + sampling.random_unit_vector()
        # A random vector opposite to the normal would give a zero direction.
        if direction.is_near_zero():
            direction = record.normal
        return Scatter(self.albedo, Ray(record.point, direction))


@dataclass(frozen=True)
class Metal(Material):
    """Reflective surface; ``fuzz`` is capped at 1."""

    albedo: Color
    fuzz: float = 0.0

    def __post_init__(self) -> None:
        if not self.fuzz < 1:
            object.__setattr__(self, "fuzz", 1.0)

    def scatter(self, ray_in: Ray, record: HitRecord) -> Scatter | None:
        reflected = reflect(ray_in.direction.unit_vector(), record.normal)
        direction = reflected + self.fuzz * sampling.random_point_in_unit_sphere()
        return Scatter(self.albedo, Ray(record.point, direction))


@dataclass(frozen=True)
class Dielectric(Material):
    """Transparent surface that both reflects and refracts."""

    albedo: Color
    refraction_index: float

    def scatter(self, ray_in: Ray, record: HitRecord) -> Scatter | None:
        ratio = 1.0 / self.refraction_index if record.front_face else self.refraction_index
        unit_dir = ray_in.direction.unit_vector()
        cos_theta = min((-unit_dir).dot(record.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        cannot_refract = ratio * sin_theta > 1.0
        if cannot_refract or reflectance(cos_theta, ratio) > sampling.random_double():
            direction = reflect(unit_dir, record.normal)
        else:
            direction = refract(unit_dir, record.normal, ratio)
        return Scatter(self.albedo, Ray(record.point, direction))