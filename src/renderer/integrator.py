# renderer/integrator.py
import math

from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable

# Lower intersection bound; keeps scattered rays from re-hitting their own origin.
T_MIN = 0.001

HORIZON_COLOR = Vector3(1.0, 1.0, 1.0)
ZENITH_COLOR = Vector3(0.5, 0.7, 1.0)


def background(ray: Ray) -> Vector3:
    """
    Vertical sky gradient: white at the horizon blending to blue at the zenith.
    """
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return HORIZON_COLOR * (1.0 - t) + ZENITH_COLOR * t


def ray_color(ray: Ray, world: Hittable, depth: int, rng) -> Vector3:
    """
    Estimates the color seen along a ray by following at most `depth` bounces.

    Each bounce multiplies the running attenuation by the material's
    attenuation. The path turns black when a surface absorbs it or the
    bounce budget runs out, and picks up the sky color when it escapes.
    """
    attenuation = Vector3(1.0, 1.0, 1.0)
    while depth > 0:
        rec = world.hit(ray, T_MIN, math.inf)
        if rec is None:
            return attenuation * background(ray)

        scattered = rec.material.scatter(ray, rec, rng)
        if scattered is None:
            return Vector3(0.0, 0.0, 0.0)

        ray, color = scattered
        attenuation = attenuation * color
        depth -= 1

    # Bounce limit reached, no more light is gathered.
    return Vector3(0.0, 0.0, 0.0)
