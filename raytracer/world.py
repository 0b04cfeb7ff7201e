"""A collection of hittable objects and the random demo scene."""

from __future__ import annotations

from dataclasses import dataclass, field

from . import sampling
from .color import Color
from .hittable import HitRecord, Hittable
from .materials import Dielectric, Lambertian, Material, Metal
from .ray import Ray
from .sphere import Sphere
from .vector import Vec3


@dataclass
class World:
    """A scene: the nearest hit among all its objects wins."""

    objects: list[Hittable] = field(default_factory=list)

    def add(self, obj: Hittable) -> None:
        self.objects.append(obj)

    def clear(self) -> None:
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        """Return the closest hit with t in [t_min, t_max], or None."""
        closest: HitRecord | None = None
        closest_so_far = t_max
        for obj in self.objects:
            record = obj.hit(ray, t_min, closest_so_far)
            if record is not None:
                closest = record
                closest_so_far = record.t
        return closest


def generate_random_world() -> World:
    """Build the demo scene of many small spheres around three large ones."""
    world = World()
    world.add(Sphere(Vec3(0, 1000, 0), 1000, Lambertian(Color(0.5, 0.5, 0.5))))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = sampling.random_double()
            center = Vec3(
                a + 0.9 * sampling.random_double(),
                -0.2,
                b + 0.9 * sampling.random_double(),
            )
            if (center - Vec3(4, 0.2, 0)).length() <= 0.9:
                continue

            material: Material
            if choose_mat < 0.8:
                albedo = Color(*(Color.random() * Color.random()))
                material = Lambertian(albedo)
            elif choose_mat < 0.95:
                material = Metal(Color.random(0.5, 1), sampling.random_double(0, 0.5))
            else:
                material = Dielectric(Color(1, 1, 1), 1.5)
            world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Vec3(0, -1, 0), 1.0, Dielectric(Color.random(), 1.5)))
    world.add(Sphere(Vec3(-4, -1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Vec3(4, -1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))
    return world