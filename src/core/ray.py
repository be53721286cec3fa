# core/ray.py
from dataclasses import dataclass

from core.vector import Vector3


@dataclass(frozen=True)
class Ray:
    """
    Represents a ray in 3D space with an origin and direction.
    The direction is not required to be unit length.
    """
    origin: Vector3
    direction: Vector3

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t
