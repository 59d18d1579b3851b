"""Ray and Interval data structures.

A Ray is an origin point plus a direction vector, evaluated parametrically
with ``at(t)``. An Interval is the numeric range of ``t`` values an
intersection query accepts; each end may be open or closed so that hits on
the exact boundary are counted once.

Example:
    >>> from ray_tracing.core.ray import Interval, IntervalBounds, Ray
    >>> from ray_tracing.core.vector import Point, Vector
    >>> ray = Ray(Point(0.0, 0.0, 0.0), Vector(0.0, 0.0, -1.0))
    >>> ray.at(5.0)
    Vector(0.0, 0.0, -5.0)
    >>> Interval(3.0, 5.5, IntervalBounds.OPEN).contains(5.5)
    False
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum

from ray_tracing.core.vector import Point, Vector

MAX_FLOAT = sys.float_info.max


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. Not required to be
            normalized.
    """

    origin: Point
    direction: Vector

    @classmethod
    def from_two_points(cls, origin: Point, through: Point) -> Ray:
        """Create the ray starting at ``origin`` and passing through ``through``.

        The direction is ``through - origin``, so ``at(1.0) == through``.
        """
        return cls(origin, through - origin)

    def at(self, t: float) -> Point:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Positive values are in front of the origin.

        Returns:
            The point origin + t * direction.
        """
        return self.origin + self.direction * t


class IntervalBounds(Enum):
    """Which ends of an Interval are included."""

    OPEN = "open"
    CLOSED = "closed"
    LEFT_OPEN_RIGHT_CLOSED = "left_open_right_closed"
    LEFT_CLOSED_RIGHT_OPEN = "left_closed_right_open"


@dataclass(frozen=True)
class Interval:
    """A numeric range [min, max] with a boundary inclusion convention.

    Attributes:
        min: Lower end of the range.
        max: Upper end of the range.
        bounds: Which ends are included in the range.

    Raises:
        ValueError: If min > max.
    """

    min: float
    max: float
    bounds: IntervalBounds = IntervalBounds.OPEN

    def __post_init__(self) -> None:
        if self.min > self.max:
            raise ValueError(
                f"Interval minimum {self.min} is greater than its maximum {self.max}"
            )

    @classmethod
    def all_reals(cls, bounds: IntervalBounds) -> Interval:
        """Return the interval spanning every finite float."""
        return cls(-MAX_FLOAT, MAX_FLOAT, bounds)

    @classmethod
    def positive_reals(cls, bounds: IntervalBounds) -> Interval:
        """Return the interval (0.0, MAX_FLOAT) with the given bounds."""
        return cls(0.0, MAX_FLOAT, bounds)

    @classmethod
    def empty(cls) -> Interval:
        """Return the empty interval (0.0, 0.0)."""
        return cls(0.0, 0.0, IntervalBounds.OPEN)

    def size(self) -> float:
        return self.max - self.min

    def contains(self, value: float) -> bool:
        """Test whether ``value`` lies in the interval.

        Args:
            value: The number to test.

        Returns:
            True if value is inside the range under this interval's bounds.
            NaN is never contained.
        """
        if self.bounds is IntervalBounds.OPEN:
            return self.min < value < self.max
        if self.bounds is IntervalBounds.CLOSED:
            return self.min <= value <= self.max
        if self.bounds is IntervalBounds.LEFT_OPEN_RIGHT_CLOSED:
            return self.min < value <= self.max
        return self.min <= value < self.max

    def with_max(self, new_max: float, bounds: IntervalBounds) -> Interval:
        """Return a copy narrowed to ``[min, new_max]`` with new bounds."""
        return Interval(self.min, new_max, bounds)
