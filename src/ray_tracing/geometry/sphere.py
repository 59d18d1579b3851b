"""Sphere primitive with ray-sphere intersection.

The ray-sphere intersection is found by solving:
    |origin + t * direction - center|^2 = radius^2

With oc = center - origin this expands to the quadratic:
    a*t^2 - 2*h*t + c = 0

where:
    a = dot(direction, direction)
    h = dot(direction, oc)  (half of the traditional 'b', sign flipped)
    c = dot(oc, oc) - radius^2

giving roots t = (h -/+ sqrt(h^2 - a*c)) / a. The nearer root is tried
first and the farther one only if the nearer lies outside the search
interval.

Example:
    >>> from ray_tracing.core.ray import Interval, IntervalBounds, Ray
    >>> from ray_tracing.core.vector import Point, Vector
    >>> from ray_tracing.geometry.sphere import Sphere
    >>> sphere = Sphere(Point(2.0, 0.0, 0.0), 1.0)
    >>> ray = Ray(Point(0.0, 0.0, 0.0), Vector(1.0, 0.0, 0.0))
    >>> sphere.intersection(ray, Interval.positive_reals(IntervalBounds.OPEN))
    1.0
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from ray_tracing.core.ray import Interval, Ray
from ray_tracing.core.vector import Point, Vector
from ray_tracing.geometry.shape import Shape


class Sphere(Shape):
    """A sphere defined by center point and radius.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere (strictly positive).

    Raises:
        ValueError: If radius is not strictly positive.
    """

    __slots__ = ("center", "radius")

    def __init__(self, center: Point, radius: float) -> None:
        if not radius > 0.0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = float(radius)

    def intersection(self, ray: Ray, time_interval: Interval) -> Optional[float]:
        oc = self.center - ray.origin
        a = ray.direction.l2_norm_squared()
        h = ray.direction.dot(oc)
        c = oc.l2_norm_squared() - self.radius * self.radius
        discriminant = h * h - a * c
        if discriminant < 0.0:
            return None

        sqrt_d = math.sqrt(discriminant)
        # A zero direction gives a == 0 and NaN roots, which no interval contains
        with np.errstate(divide="ignore", invalid="ignore"):
            roots = np.array([h - sqrt_d, h + sqrt_d], dtype=np.float64) / np.float64(a)
        for root in roots:
            if time_interval.contains(float(root)):
                return float(root)
        return None

    def outwards_normal(self, point: Point) -> Vector:
        """Outward normal (point - center) / radius; unit length on the surface."""
        return (point - self.center) / self.radius

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius})"
