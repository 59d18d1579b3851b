"""Tests for the path tracing integrator.

Tests cover:
- Bounce budget and absorption terminating paths with black
- The sky gradient for escaping rays
- Attenuation accumulated along a path
- Gamma correction and 8-bit quantization
"""

import math

import numpy as np

from ray_tracing.core.integrator import (
    SKY_BLUE,
    WHITE,
    background,
    gamma_correct,
    quantize,
    ray_colour,
    to_pixel,
)
from ray_tracing.core.ray import Ray
from ray_tracing.core.vector import Point, Vector
from ray_tracing.geometry.sphere import Sphere
from ray_tracing.materials.metal import Metal
from ray_tracing.scene.intersection import SurfaceSet
from ray_tracing.scene.surface import UniformSurface

ORIGIN = Point(0.0, 0.0, 0.0)


def close(v, expected, tol=1e-12):
    return all(abs(a - b) < tol for a, b in zip(v, expected))


class TestBackground:
    """Tests for the sky gradient."""

    def test_straight_up_is_sky_blue(self):
        assert close(background(Ray(ORIGIN, Vector(0.0, 1.0, 0.0))), SKY_BLUE)

    def test_straight_down_is_white(self):
        assert close(background(Ray(ORIGIN, Vector(0.0, -3.0, 0.0))), WHITE)

    def test_horizontal_is_midway(self):
        colour = background(Ray(ORIGIN, Vector(0.0, 0.0, -1.0)))
        assert close(colour, (0.75, 0.85, 1.0))


class TestRayColour:
    """Tests for ray_colour."""

    def test_zero_depth_is_black(self, rng):
        ray = Ray(ORIGIN, Vector(0.0, 1.0, 0.0))
        assert ray_colour(ray, SurfaceSet(), 0, rng) == Vector.zero()

    def test_miss_returns_background(self, rng):
        ray = Ray(ORIGIN, Vector(0.3, 0.4, -1.0))
        assert ray_colour(ray, SurfaceSet(), 1, rng) == background(ray)

    def test_absorbed_is_black(self, rng, wall_shape, echo_material):
        world = SurfaceSet([UniformSurface(wall_shape(1.0), echo_material(absorb=True))])
        ray = Ray(ORIGIN, Vector(0.0, 0.0, -1.0))
        assert ray_colour(ray, world, 10, rng) == Vector.zero()

    def test_attenuation_applied_per_bounce(self, rng):
        """A mirror bounce back into the sky picks up the albedo once."""
        mirror = UniformSurface(Sphere(Point(0.0, 0.0, -2.0), 1.0), Metal(Vector.splat(0.5)))
        world = SurfaceSet([mirror])
        ray = Ray(ORIGIN, Vector(0.0, 0.0, -1.0))
        colour = ray_colour(ray, world, 2, rng)
        assert close(colour, (0.375, 0.425, 0.5))

    def test_budget_exhausted_is_black(self, rng):
        mirror = UniformSurface(Sphere(Point(0.0, 0.0, -2.0), 1.0), Metal(Vector.splat(0.5)))
        ray = Ray(ORIGIN, Vector(0.0, 0.0, -1.0))
        assert ray_colour(ray, SurfaceSet([mirror]), 1, rng) == Vector.zero()

    def test_zero_direction_gives_nan_not_error(self, rng):
        """A degenerate ray yields a non-finite colour, dropped to black on output."""
        ray = Ray(ORIGIN, Vector.zero())
        colour = ray_colour(ray, SurfaceSet(), 1, rng)
        assert all(math.isnan(c) for c in colour)
        assert to_pixel(colour) == (0, 0, 0)

    def test_zero_direction_in_scene(self, rng):
        sphere = UniformSurface(Sphere(Point(0.0, 0.0, -2.0), 1.0), Metal(Vector.splat(0.5)))
        ray = Ray(ORIGIN, Vector.zero())
        colour = ray_colour(ray, SurfaceSet([sphere]), 3, rng)
        assert all(math.isnan(c) for c in colour)

    def test_deep_budget_does_not_recurse(self, rng, wall_shape, echo_material):
        """A path trapped between hits runs out of budget without recursion errors."""
        world = SurfaceSet([UniformSurface(wall_shape(1.0), echo_material(Vector.splat(1.0)))])
        ray = Ray(ORIGIN, Vector(0.0, 0.0, -1.0))
        assert ray_colour(ray, world, 5000, rng) == Vector.zero()


class TestDisplayTransform:
    """Tests for gamma correction and quantization."""

    def test_gamma_is_square_root(self):
        assert np.allclose(gamma_correct([0.0, 0.25, 1.0]), [0.0, 0.5, 1.0])

    def test_quantize_truncates_and_saturates(self):
        values = quantize([0.0, 0.5, 1.0, 1.5, -0.2])
        assert values.dtype == np.uint8
        assert values.tolist() == [0, 127, 255, 255, 0]

    def test_quantize_non_finite(self):
        assert quantize([math.nan, math.inf, -math.inf]).tolist() == [0, 255, 0]

    def test_gamma_of_negative_quantizes_to_zero(self):
        assert quantize(gamma_correct([-1.0])).tolist() == [0]

    def test_to_pixel(self):
        assert to_pixel(Vector(0.25, 1.0, 0.0)) == (127, 255, 0)
        assert to_pixel(Vector(0.25, 1.0, 0.0), gamma=False) == (63, 255, 0)
