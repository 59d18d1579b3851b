"""Shape interface for ray-intersectable geometry.

A Shape answers two geometric questions: where along a ray it is first
hit, and which way its surface faces at a point. Everything about how
light behaves at that point belongs to a Material.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Optional

from ray_tracing.core.ray import Interval, Ray
from ray_tracing.core.vector import Point, UnitVector, Vector


class Shape(ABC):
    """Abstract base class for geometric primitives."""

    @abstractmethod
    def intersection(self, ray: Ray, time_interval: Interval) -> Optional[float]:
        """Find the first time at which ``ray`` meets this shape.

        Args:
            ray: The ray to test.
            time_interval: The accepted range of t values, including its
                boundary convention.

        Returns:
            The smallest t in ``time_interval`` at which the ray is on the
            surface, or None.
        """

    @abstractmethod
    def outwards_normal(self, point: Point) -> Vector:
        """Return the unit normal at ``point``, pointing out of the shape.

        Behaviour is undefined for points that are not on the surface.
        """

    def normal_against_ray(self, point: Point, ray: Ray) -> UnitVector:
        """Return the unit normal at ``point`` oriented against ``ray``.

        This is the outward normal flipped, when necessary, so that its dot
        product with the ray direction is not positive.
        """
        n = self.outwards_normal(point)
        sign = -math.copysign(1.0, n.dot(ray.direction))
        return UnitVector.from_vector(sign * n)

    def is_entering(self, point: Point, ray: Ray) -> bool:
        """Whether ``ray`` crosses into the shape at ``point``.

        A ray enters when it travels against the outward normal.
        """
        return self.outwards_normal(point).dot(ray.direction) < 0.0
