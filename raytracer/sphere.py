"""Sphere primitive."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .hittable import HitRecord, Hittable
from .materials import Material
from .ray import Ray
from .vector import Vec3


@dataclass(frozen=True)
class Sphere(Hittable):
    center: Vec3
    radius: float
    material: Material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius

        discriminant = half_b * half_b - a * c
        if discriminant < 0:
            return None
        sqrtd = math.sqrt(discriminant)

        root = (-half_b - sqrtd) / a
        if root < t_min or t_max < root:
            root = (-half_b + sqrtd) / a
            if root < t_min or t_max < root:
                return None

        point = ray.at(root)
        outward_normal = (point - self.center) / self.radius
        return HitRecord.with_face_normal(root, point, ray, outward_normal, self.material)