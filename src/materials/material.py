# materials/material.py
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord


class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials are shared between spheres and never modified after
    construction, so one instance may be read from many threads.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Ray, Vector3]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the surface
        absorbs the ray. All randomness comes from rng.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
