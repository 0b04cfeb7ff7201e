"""Thin-lens camera that generates primary rays."""

from __future__ import annotations

import math

from . import sampling
from .ray import Ray
from .vector import Vec3


class Camera:
    """A positionable camera with a vertical field of view and depth of field."""

    def __init__(
        self,
        look_from: Vec3,
        look_at: Vec3,
        view_up: Vec3,
        vertical_fov_degrees: float,
        aspect_ratio: float,
        aperture: float,
        focus_dist: float,
    ) -> None:
        theta = sampling.degrees_to_radians(vertical_fov_degrees)
        viewport_height = 2.0 * math.tan(theta / 2)
        viewport_width = aspect_ratio * viewport_height

        self.w = (look_from - look_at).unit_vector()
        self.u = view_up.cross(self.w).unit_vector()
        self.v = self.w.cross(self.u)

        self.origin = look_from
        self.horizontal = focus_dist * viewport_width * self.u
        self.vertical = focus_dist * viewport_height * self.v
        self.lower_left_corner = (
            self.origin - self.horizontal / 2 - self.vertical / 2 - focus_dist * self.w
        )
        self.lens_radius = aperture / 2

    def get_ray(self, s: float, t: float) -> Ray:
        """Ray through the viewport point at fractions ``s`` across and ``t`` up."""
        rd = self.lens_radius * sampling.random_point_in_unit_disk()
        offset = self.u * rd.x + self.v * rd.y
        target = self.lower_left_corner + s * self.horizontal + t * self.vertical
        return Ray(self.origin + offset, target - self.origin - offset)