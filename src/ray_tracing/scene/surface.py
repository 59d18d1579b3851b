"""Renderable surfaces: a Shape bound to a Material.

A Surface is the unit the scene is built from. It answers the intersection
query through its shape and the scatter query by combining the shape's
rebound normal with the material's scattering model.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ray_tracing.core.ray import Interval, Ray
from ray_tracing.core.vector import Point, UnitVector, Vector
from ray_tracing.geometry.shape import Shape
from ray_tracing.materials.material import Material


@dataclass(frozen=True)
class ScatteredRay:
    """An attenuated, scattered ray.

    Attributes:
        attenuation: Per-channel colour multiplier picked up at the bounce.
        ray: The new ray leaving the surface.
    """

    attenuation: Vector
    ray: Ray


class Surface(ABC):
    """Abstract base class for anything a SurfaceSet can hold."""

    @abstractmethod
    def intersection(self, ray: Ray, time_interval: Interval) -> Optional[float]:
        """Return the first t in ``time_interval`` at which ``ray`` hits, or None."""

    @abstractmethod
    def scatter(
        self, point: Point, ray: Ray, rng: np.random.Generator
    ) -> Optional[ScatteredRay]:
        """Scatter ``ray`` arriving at ``point``; None means absorbed."""


class UniformSurface(Surface):
    """A Shape with the same Material everywhere on it.

    Attributes:
        shape: The geometry.
        material: The scattering model.
    """

    def __init__(self, shape: Shape, material: Material) -> None:
        self.shape = shape
        self.material = material

    def intersection(self, ray: Ray, time_interval: Interval) -> Optional[float]:
        return self.shape.intersection(ray, time_interval)

    def scatter(
        self, point: Point, ray: Ray, rng: np.random.Generator
    ) -> Optional[ScatteredRay]:
        """Scatter an incident ray at a point on this surface.

        The material receives the normalized incident direction and the
        normal oriented against the ray. Whether the ray is entering the
        shape is only computed if the material asks for it.

        Args:
            point: Hit point on the surface.
            ray: The incident ray.
            rng: Random source.

        Returns:
            The scattered ray starting at ``point``, or None if absorbed.
        """
        reflection = self.material.random_reflection(
            UnitVector.from_vector(ray.direction),
            self.shape.normal_against_ray(point, ray),
            lambda: self.shape.is_entering(point, ray),
            rng,
        )
        if reflection is None:
            return None
        return ScatteredRay(
            attenuation=reflection.attenuation,
            ray=Ray(origin=point, direction=reflection.direction),
        )

    def __repr__(self) -> str:
        return f"UniformSurface(shape={self.shape!r}, material={self.material!r})"
