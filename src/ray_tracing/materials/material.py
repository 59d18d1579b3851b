"""Base material interface.

A Material maps an incident direction and the rebound normal (the surface
normal oriented against the incident ray) to a scattered direction and a
colour attenuation, or to None when the light is absorbed.

Materials are stateless during a render and may be shared read-only
between surfaces.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ray_tracing.core.vector import UnitVector, Vector

# Lazily evaluated "is the ray entering the surface?" query
EnteringProbe = Callable[[], bool]


@dataclass(frozen=True)
class Reflection:
    """Outcome of a scatter event at a material.

    Attributes:
        attenuation: Per-channel colour multiplier for the scattered light.
        direction: Unit direction of the scattered ray.
    """

    attenuation: Vector
    direction: UnitVector


class Material(ABC):
    """Abstract base class for scattering models."""

    @abstractmethod
    def random_reflection(
        self,
        ray_direction: UnitVector,
        rebound_normal: UnitVector,
        entering_surface: EnteringProbe,
        rng: np.random.Generator,
    ) -> Optional[Reflection]:
        """Scatter an incident ray.

        Args:
            ray_direction: Unit direction of the incident ray.
            rebound_normal: Unit surface normal pointing against the
                incident ray.
            entering_surface: Zero-argument callable reporting whether the
                ray is entering the medium. Only materials that need it
                call it.
            rng: Random source for stochastic materials.

        Returns:
            The attenuation and scattered direction, or None if absorbed.
        """
