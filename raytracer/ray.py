"""A ray with an origin and a direction."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vector import Vec3


@dataclass(frozen=True)
class Ray:
    origin: Vec3 = field(default_factory=Vec3)
    direction: Vec3 = field(default_factory=Vec3)

    def at(self, t: float) -> Vec3:
        """Point along the ray at parameter ``t``."""
        return self.origin + t * self.direction