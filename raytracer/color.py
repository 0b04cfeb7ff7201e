"""RGB colour whose components are validated to lie in [0, 1]."""

from __future__ import annotations

from dataclasses import dataclass

from . import sampling
from .vector import Vec3


def validate_color_value(value: float) -> float:
    """Return ``value`` if it lies in [0, 1], otherwise raise ValueError."""
    if not (0.0 <= value <= 1.0):
        raise ValueError("Color value must be between 0.0f and 1.0f range.")
    return value


@dataclass(frozen=True, eq=False)
class Color(Vec3):
    """A colour; arithmetic on colours yields plain unbounded vectors."""

    def __post_init__(self) -> None:
        for component in self:
            validate_color_value(component)

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    @classmethod
    def random(cls, low: float = 0.0, high: float = 1.0) -> Color:
        return cls(*sampling.random_vec3(low, high))