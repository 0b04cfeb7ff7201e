"""Ray intersection records and the interface for hittable objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .ray import Ray
from .vector import Vec3

if TYPE_CHECKING:
    from .materials import Material


@dataclass(frozen=True)
class HitRecord:
    """Where and how a ray struck a surface."""

    t: float
    point: Vec3
    normal: Vec3
    front_face: bool
    material: Material

    @classmethod
    def with_face_normal(
        cls,
        t: float,
        point: Vec3,
        ray: Ray,
        outward_normal: Vec3,
        material: Material,
    ) -> HitRecord:
        """Build a record whose normal always points against the incoming ray."""
        front_face = ray.direction.dot(outward_normal) < 0
        normal = outward_normal if front_face else -outward_normal
        return cls(t=t, point=point, normal=normal, front_face=front_face, material=material)


class Hittable(ABC):
    """Anything a ray can intersect."""

    @abstractmethod
    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        """Return the nearest hit with t in [t_min, t_max], or None."""