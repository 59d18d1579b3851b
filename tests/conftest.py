"""Pytest configuration for raytracer tests.

This module provides shared fixtures for all test modules: a seeded random
generator so stochastic tests are reproducible, and small fake shapes and
materials for exercising scene logic without real geometry.
"""

from typing import Optional

import numpy as np
import pytest

from ray_tracing.core.ray import Interval, Ray
from ray_tracing.core.vector import Point, UnitVector, Vector
from ray_tracing.geometry.shape import Shape
from ray_tracing.materials.material import EnteringProbe, Material, Reflection


@pytest.fixture
def rng():
    """Seeded random generator, fresh for every test."""
    return np.random.default_rng(42)


class WallShape(Shape):
    """Shape hit at a fixed ray parameter, whatever the ray.

    Its outward normal is always +x.
    """

    def __init__(self, border: float) -> None:
        self.border = border

    def intersection(self, ray: Ray, time_interval: Interval) -> Optional[float]:
        return self.border if time_interval.contains(self.border) else None

    def outwards_normal(self, point: Point) -> Vector:
        return Vector(1.0, 0.0, 0.0)


class EchoMaterial(Material):
    """Material that reflects along the rebound normal and records probe use."""

    def __init__(self, attenuation: Vector = Vector(0.0, 0.0, 0.0), absorb: bool = False) -> None:
        self.attenuation = attenuation
        self.absorb = absorb
        self.probe_results: list[bool] = []

    def random_reflection(
        self,
        ray_direction: UnitVector,
        rebound_normal: UnitVector,
        entering_surface: EnteringProbe,
        rng: np.random.Generator,
    ) -> Optional[Reflection]:
        self.probe_results.append(entering_surface())
        if self.absorb:
            return None
        return Reflection(attenuation=self.attenuation, direction=rebound_normal)


@pytest.fixture
def wall_shape():
    """Factory for WallShape instances."""
    return WallShape


@pytest.fixture
def echo_material():
    """Factory for EchoMaterial instances."""
    return EchoMaterial
