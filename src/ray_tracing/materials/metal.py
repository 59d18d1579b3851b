"""Metal (specular reflective) material implementation.

Metals mirror the incident ray about the surface normal:
    R = I - 2(I . N)N

where I is the incident direction and N is the rebound normal. The
reflected light is tinted by the metal's albedo. Nothing is absorbed.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ray_tracing.core.vector import UnitVector, Vector
from ray_tracing.materials.material import EnteringProbe, Material, Reflection


def reflect(incident: Vector, normal: Vector) -> Vector:
    """Reflect an incident vector about a normal.

    Args:
        incident: The incoming direction vector (pointing toward the surface).
        normal: The surface normal (should be normalized).

    Returns:
        The reflected direction vector.
    """
    return incident - 2.0 * incident.dot(normal) * normal


class Metal(Material):
    """Perfect mirror material.

    Attributes:
        albedo: The reflective colour (RGB) tinting reflected light.
    """

    def __init__(self, albedo: Vector) -> None:
        self.albedo = albedo

    def random_reflection(
        self,
        ray_direction: UnitVector,
        rebound_normal: UnitVector,
        entering_surface: EnteringProbe,
        rng: np.random.Generator,
    ) -> Optional[Reflection]:
        direction = UnitVector.from_vector(reflect(ray_direction, rebound_normal))
        return Reflection(attenuation=self.albedo, direction=direction)

    def __repr__(self) -> str:
        return f"Metal(albedo={self.albedo!r})"
