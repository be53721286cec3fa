# camera/camera.py
import math
from core.vector import Vector3
from core.ray import Ray
from core.utils import random_in_unit_disk


class Camera:
    """
    Thin-lens camera positioned with look-from/look-at/up.

    u and v passed to get_ray() are normalized image-plane coordinates:
    u runs left to right, v bottom to top. With a zero aperture the camera
    degenerates to a pinhole.
    """
    def __init__(self, lookfrom: Vector3, lookat: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 1.0, mirror_lens_offset: bool = False):
        if aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {aspect_ratio}")
        if focus_dist <= 0:
            raise ValueError(f"focus_dist must be positive, got {focus_dist}")
        if aperture < 0:
            raise ValueError(f"aperture must not be negative, got {aperture}")

        self.vfov = vfov  # Vertical field of view in degrees
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture
        self.focus_dist = focus_dist
        self.lens_radius = aperture / 2.0
        # Aim lens rays at (target - origin + offset) instead of
        # (target - (origin + offset)).
        self.mirror_lens_offset = mirror_lens_offset

        theta = math.radians(vfov)
        viewport_height = 2.0 * math.tan(theta / 2)
        viewport_width = aspect_ratio * viewport_height

        # Orthonormal basis: forward looks at the target, right and up span the image plane.
        self.forward = (lookat - lookfrom).normalize()
        self.right = self.forward.cross(vup).normalize()
        self.up = self.right.cross(self.forward)
        if self.right.near_zero():
            raise ValueError("vup must not be parallel to the viewing direction")

        self.position = lookfrom
        self.horizontal = self.right * viewport_width * focus_dist
        self.vertical = self.up * viewport_height * focus_dist
        self.lower_left_corner = (self.position +
                                  self.forward * focus_dist -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5)

    def get_ray(self, u: float, v: float, rng) -> Ray:
        """Generates a ray through (u, v) with depth of field."""
        target = self.lower_left_corner + self.horizontal * u + self.vertical * v
        if self.lens_radius <= 0:
            return Ray(self.position, target - self.position)

        # Random point on the lens, expressed in the camera basis
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.right * rd.x + self.up * rd.y

        if self.mirror_lens_offset:
            direction = target - self.position + offset
        else:
            direction = target - self.position - offset
        return Ray(self.position + offset, direction)

    def __repr__(self) -> str:
        return (f"Camera(position={self.position}, forward={self.forward}, "
                f"vfov={self.vfov}, aperture={self.aperture}, focus_dist={self.focus_dist})")
