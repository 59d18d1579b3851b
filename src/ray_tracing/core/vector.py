"""Vector algebra for CPU ray tracing.

This module provides the immutable Vector value type used for points,
directions and colours throughout the renderer, along with the UnitVector
refinement and the random sampling helpers used by the Monte Carlo
estimator.

Comparison semantics:
    Comparing a Vector against a scalar broadcasts the scalar across all
    three components. A relation holds only when it holds for every
    component, so ``Vector(1, 2, 3) > 0.0`` is True while
    ``Vector(1, 2, 3) > 2.0`` is False.

Example:
    >>> from ray_tracing.core.vector import Vector
    >>> a = Vector(1.0, 2.0, 2.0)
    >>> a.l2_norm()
    3.0
    >>> a.normalize() == a / 3.0
    True
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Union

import numpy as np

Scalar = Union[int, float]


class Vector:
    """A 3-component real vector.

    Vectors are immutable: every operation returns a new instance.

    Attributes:
        x: First component.
        y: Second component.
        z: Third component.
    """

    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float) -> None:
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "z", float(z))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def zero(cls) -> Vector:
        """Return the zero vector."""
        return Vector(0.0, 0.0, 0.0)

    @classmethod
    def splat(cls, value: float) -> Vector:
        """Return a vector with every component equal to ``value``."""
        return Vector(value, value, value)

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def __add__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, (int, float)):
            return Vector(self.x + other, self.y + other, self.z + other)
        return NotImplemented

    def __radd__(self, other):
        # sum() starts from the integer 0
        return self.__add__(other)

    def __sub__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, (int, float)):
            return Vector(self.x - other, self.y - other, self.z - other)
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, (int, float)):
            return Vector(other - self.x, other - self.y, other - self.z)
        return NotImplemented

    def __mul__(self, other):
        """Multiply component-wise by a Vector, or scale by a scalar."""
        if isinstance(other, Vector):
            return Vector(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vector(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        if isinstance(other, (int, float)):
            return Vector(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    # =========================================================================
    # Comparison (scalars broadcast, all components must satisfy the relation)
    # =========================================================================

    def _pairs(self, other):
        if isinstance(other, Vector):
            return ((self.x, other.x), (self.y, other.y), (self.z, other.z))
        if isinstance(other, (int, float)):
            return ((self.x, other), (self.y, other), (self.z, other))
        return None

    def __eq__(self, other):
        pairs = self._pairs(other)
        if pairs is None:
            return NotImplemented
        return all(s == o for s, o in pairs)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other):
        pairs = self._pairs(other)
        if pairs is None:
            return NotImplemented
        return all(s < o for s, o in pairs)

    def __le__(self, other):
        pairs = self._pairs(other)
        if pairs is None:
            return NotImplemented
        return all(s <= o for s, o in pairs)

    def __gt__(self, other):
        pairs = self._pairs(other)
        if pairs is None:
            return NotImplemented
        return all(s > o for s, o in pairs)

    def __ge__(self, other):
        pairs = self._pairs(other)
        if pairs is None:
            return NotImplemented
        return all(s >= o for s, o in pairs)

    __hash__ = None  # type: ignore[assignment]

    # =========================================================================
    # Products and norms
    # =========================================================================

    def dot(self, other: Vector) -> float:
        """Compute the dot product of two vectors.

        Args:
            other: Second vector.

        Returns:
            The dot product self . other.
        """
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        """Compute the cross product self x other."""
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def l2_norm_squared(self) -> float:
        """Compute the squared Euclidean length.

        Cheaper than l2_norm() when only comparing magnitudes.
        """
        return self.dot(self)

    def l2_norm(self) -> float:
        return math.sqrt(self.l2_norm_squared())

    def normalize(self) -> Vector:
        """Return the unit vector parallel to this one.

        The zero vector has no direction. Normalizing it is not checked and
        yields a vector of NaN components, which propagate through the
        render and are quantized to 0.

        Returns:
            self / |self|.
        """
        return Vector(*_scaled_by_inverse(self, self.l2_norm()))

    def map(self, func: Callable[[float], float]) -> Vector:
        """Apply ``func`` to each component.

        Example:
            >>> Vector(1.0, 4.0, 9.0).map(math.sqrt)
            Vector(1.0, 2.0, 3.0)
        """
        return Vector(func(self.x), func(self.y), func(self.z))

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x}, {self.y}, {self.z})"


def _scaled_by_inverse(vector: Vector, norm: float) -> tuple[float, float, float]:
    # float64 division so a zero norm gives NaN rather than raising
    with np.errstate(divide="ignore", invalid="ignore"):
        scaled = np.array(vector.to_tuple(), dtype=np.float64) / np.float64(norm)
    return (float(scaled[0]), float(scaled[1]), float(scaled[2]))


# Points share the Vector representation
Point = Vector


class UnitVector(Vector):
    """A Vector known by construction to have unit length.

    UnitVector carries no extra state; it is a typed invariant. Any
    arithmetic on a UnitVector yields a plain Vector.
    """

    __slots__ = ()

    @classmethod
    def from_vector(cls, vector: Vector) -> UnitVector:
        """Create the unit vector parallel to ``vector``.

        Args:
            vector: Any vector (need not be unit length). The zero vector
                gives NaN components.

        Returns:
            The normalized vector.
        """
        return cls(*_scaled_by_inverse(vector, vector.l2_norm()))

    @classmethod
    def from_angles(cls, incline: float, rotation: float) -> UnitVector:
        """Create a unit vector from spherical angles.

        Args:
            incline: Angle in radians to the x-y plane.
            rotation: Angle in radians within the x-y plane.

        Returns:
            (cos(incline) cos(rotation), cos(incline) sin(rotation), sin(incline)).
        """
        hypotenuse = math.cos(incline)
        return cls(
            hypotenuse * math.cos(rotation),
            hypotenuse * math.sin(rotation),
            math.sin(incline),
        )


# =============================================================================
# Random Sampling Utilities for Monte Carlo
# =============================================================================


def random_in_range(low: float, high: float, rng: np.random.Generator) -> Vector:
    """Generate a vector with each component uniform in [low, high).

    Args:
        low: Inclusive lower bound.
        high: Exclusive upper bound.
        rng: Random source.

    Returns:
        A random vector v with low <= v < high.
    """
    x, y, z = rng.random(3)
    return low + (high - low) * Vector(x, y, z)


def random_unit_vector(rng: np.random.Generator) -> UnitVector:
    """Generate a random unit vector from uniformly drawn angles.

    Both the incline and the rotation are drawn uniformly from [0, 2*pi)
    and converted with UnitVector.from_angles.

    Args:
        rng: Random source.

    Returns:
        A random unit vector.
    """
    incline, rotation = 2.0 * math.pi * rng.random(2)
    return UnitVector.from_angles(float(incline), float(rotation))
