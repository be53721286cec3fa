"""Tests for Lambertian, Metal and Dielectric scattering."""

import math

import numpy as np
import pytest

from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.dielectric import Dielectric
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.presets import ColorPresets, DielectricPresets, MetalPresets

UP = Vector3(0, 1, 0)


def make_record(front_face=True, normal=UP):
    return HitRecord(p=Vector3(0, 0, 0), normal=normal, t=1.0, front_face=front_face)


class TestLambertian:
    def test_always_scatters_with_albedo(self, rng):
        albedo = Vector3(0.8, 0.3, 0.1)
        material = Lambertian(albedo)
        ray_in = Ray(Vector3(0, 1, 0), Vector3(0, -1, 0))
        for _ in range(200):
            result = material.scatter(ray_in, make_record(), rng)
            assert result is not None
            scattered, attenuation = result
            assert attenuation == albedo
            assert scattered.origin == Vector3(0, 0, 0)
            # normal + unit vector never points below the surface
            assert scattered.direction.dot(UP) >= 0

    def test_degenerate_direction_falls_back_to_normal(self, scripted_rng):
        # Random unit vector comes out as exactly -normal.
        rng = scripted_rng(uniforms=[0.0, -0.5, 0.0])
        scattered, _ = Lambertian(Vector3(1, 1, 1)).scatter(
            Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), make_record(), rng
        )
        assert scattered.direction == UP


class TestMetal:
    def test_mirror_reflection(self, rng):
        albedo = Vector3(0.8, 0.6, 0.2)
        material = Metal(albedo, 0.0)
        scattered, attenuation = material.scatter(
            Ray(Vector3(-1, 1, 0), Vector3(1, -1, 0)), make_record(), rng
        )
        assert attenuation == albedo
        expected = Vector3(1, 1, 0).normalize()
        assert scattered.direction.x == pytest.approx(expected.x)
        assert scattered.direction.y == pytest.approx(expected.y)
        assert scattered.direction.z == pytest.approx(0.0)

    def test_absorbs_when_scattered_into_surface(self, scripted_rng):
        material = Metal(Vector3(1, 1, 1), 1.0)
        rng = scripted_rng(uniforms=[0.0, -0.5, 0.0])
        grazing = Ray(Vector3(-1, 0.01, 0), Vector3(1, -0.01, 0))
        assert material.scatter(grazing, make_record(), rng) is None

    def test_scattered_direction_is_above_surface_when_returned(self, rng):
        material = Metal(Vector3(1, 1, 1), 0.7)
        ray_in = Ray(Vector3(-1, 1, 0), Vector3(1, -0.3, 0.2))
        scattered_count = 0
        for _ in range(300):
            result = material.scatter(ray_in, make_record(), rng)
            if result is not None:
                scattered_count += 1
                assert result[0].direction.dot(UP) > 0
        assert scattered_count > 0

    @pytest.mark.parametrize("fuzz, expected", [(-0.5, 0.0), (0.25, 0.25), (3.0, 1.0)])
    def test_fuzz_is_clamped(self, fuzz, expected):
        assert Metal(Vector3(1, 1, 1), fuzz).fuzz == expected


class TestDielectric:
    def test_attenuation_is_always_white(self, rng):
        glass = Dielectric(1.5)
        for i in range(300):
            direction = Vector3(math.cos(i), -1.0, math.sin(i * 0.7))
            result = glass.scatter(Ray(Vector3(0, 1, 0), direction), make_record(i % 2 == 0), rng)
            assert result is not None
            assert result[1] == Vector3(1.0, 1.0, 1.0)

    def test_total_internal_reflection(self, scripted_rng):
        # Inside the glass at a steep angle: sin(theta) * 1.5 > 1
        rng = scripted_rng(randoms=[0.99])
        scattered, _ = Dielectric(1.5).scatter(
            Ray(Vector3(0, 0, 0), Vector3(1, -0.5, 0)), make_record(front_face=False), rng
        )
        expected = Vector3(1, 0.5, 0).normalize()
        assert scattered.direction.x == pytest.approx(expected.x)
        assert scattered.direction.y == pytest.approx(expected.y)

    def test_refracts_straight_through_at_normal_incidence(self, scripted_rng):
        rng = scripted_rng(randoms=[0.5])  # above Schlick reflectance (0.04)
        scattered, _ = Dielectric(1.5).scatter(
            Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), make_record(), rng
        )
        assert scattered.direction.x == pytest.approx(0.0)
        assert scattered.direction.y == pytest.approx(-1.0)

    def test_schlick_draw_below_reflectance_reflects(self, scripted_rng):
        rng = scripted_rng(randoms=[0.01])
        scattered, _ = Dielectric(1.5).scatter(
            Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), make_record(), rng
        )
        assert scattered.direction.y == pytest.approx(1.0)

    def test_entering_bends_toward_normal(self, scripted_rng):
        rng = scripted_rng(randoms=[0.99])
        incoming = Vector3(math.sin(0.6), -math.cos(0.6), 0)
        scattered, _ = Dielectric(1.5).scatter(Ray(Vector3(0, 0, 0), incoming), make_record(), rng)
        sin_out = scattered.direction.x / scattered.direction.length()
        assert sin_out == pytest.approx(math.sin(0.6) / 1.5)


class TestPresets:
    def test_presets_build_expected_types(self):
        assert isinstance(MetalPresets.gold(), Metal)
        assert isinstance(DielectricPresets.glass(), Dielectric)
        assert DielectricPresets.glass().ref_idx == 1.5
        assert isinstance(ColorPresets.matte(ColorPresets.GRAY), Lambertian)

    def test_shared_material_instance(self):
        glass = DielectricPresets.glass()
        records = [make_record(), make_record(front_face=False)]
        rng = np.random.default_rng(0)
        for rec in records:
            glass.scatter(Ray(Vector3(0, 1, 0), Vector3(0.2, -1, 0)), rec, rng)
        assert glass.ref_idx == 1.5

    def test_color_presets_hold_only_material_tints(self):
        names = {n for n in vars(ColorPresets) if n.isupper()}
        assert names == {"OLIVE", "NAVY", "GRAY"}
