"""Pytest configuration for path tracer tests.

Shared fixtures: seeded random generators, scripted random sources for
exact material tests, small scenes and render settings.
"""

import numpy as np
import pytest

from camera.camera import Camera
from config import RenderSettings
from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian


class ScriptedRng:
    """Random source that replays fixed values.

    uniform() ignores its bounds and returns the next scripted value, which
    lets a test place a rejection-sampled vector exactly.
    """

    def __init__(self, uniforms=(), randoms=()):
        self._uniforms = list(uniforms)
        self._randoms = list(randoms)

    def uniform(self, low=0.0, high=1.0):
        return self._uniforms.pop(0)

    def random(self):
        return self._randoms.pop(0)


@pytest.fixture
def rng():
    """A seeded numpy generator."""
    return np.random.default_rng(12345)


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRng instances."""
    return ScriptedRng


@pytest.fixture
def matte():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def single_sphere_world(matte):
    """One large sphere straight ahead of a camera at the origin, filling its view."""
    return HittableList([Sphere(Vector3(0, 0, -3), 2.0, matte)])


@pytest.fixture
def empty_world():
    return HittableList()


@pytest.fixture
def pinhole_camera():
    """Camera at the origin looking down -z with a 90 degree vertical FOV."""
    return Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), Vector3(0, 1, 0), 90, 1.0)


@pytest.fixture
def tiny_settings():
    """2x2 image, one sample per pixel, fixed seed."""
    return RenderSettings(width=2, height=2, samples_per_pixel=1, max_depth=5, seed=7, workers=2)
