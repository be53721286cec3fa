# core/utils.py
import math
from typing import Optional

import numpy as np

from core.vector import Vector3


def pixel_rng(seed: int, index: int) -> np.random.Generator:
    """
    Returns the random generator owned by a single pixel task.
    The stream depends only on the run seed and the pixel index, so a
    render is reproducible regardless of which worker runs the task.
    """
    return np.random.default_rng([seed, index])


def fresh_seed() -> int:
    """
    Draws a new run seed from OS entropy.
    """
    return int(np.random.SeedSequence().generate_state(1, dtype=np.uint64)[0])


def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.length_squared() < 1.0:
            return p


def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    A sample landing exactly on the origin comes back as the zero vector.
    """
    return random_in_unit_sphere(rng).normalize()


def random_in_unit_disk(rng) -> Vector3:
    """
    Random point in the unit disk on the z=0 plane, used for lens sampling.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0)
        if p.length_squared() < 1.0:
            return p


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Bends the unit vector uv through a surface with normal n (Snell's law).
    The caller is responsible for ruling out total internal reflection.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel


def schlick(cosine: float, ref_idx: float) -> float:
    """
    Schlick's polynomial approximation of Fresnel reflectance.
    """
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow(1.0 - cosine, 5)


def clamp(x: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, x))


def optional_seed(seed: Optional[int]) -> int:
    """
    Resolves the run seed, drawing a fresh one when none was requested.
    """
    return fresh_seed() if seed is None else seed
