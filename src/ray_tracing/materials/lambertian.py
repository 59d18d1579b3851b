"""Lambertian (ideal diffuse) material implementation.

The scattered direction is the rebound normal plus a random unit vector,
renormalized. Adding a unit vector to a unit normal keeps the result in the
normal's hemisphere (the dot product is 1 + cos(angle) >= 0) and
concentrates samples around the normal, giving a cosine-weighted lobe.

Because the sampling density already matches the cosine term, the
attenuation reduces to the albedo:
    attenuation = (BRDF * cos_theta) / pdf = (albedo / pi) * cos_theta / (cos_theta / pi)

Example:
    >>> import numpy as np
    >>> from ray_tracing.core.vector import UnitVector, Vector
    >>> from ray_tracing.materials.lambertian import Lambertian
    >>> material = Lambertian(Vector(0.5, 0.5, 0.5))
    >>> normal = UnitVector(0.0, 1.0, 0.0)
    >>> incident = UnitVector(0.0, -1.0, 0.0)
    >>> reflection = material.random_reflection(
    ...     incident, normal, lambda: True, np.random.default_rng(0)
    ... )
    >>> reflection.direction.dot(normal) >= 0.0
    True
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ray_tracing.core.vector import UnitVector, Vector, random_unit_vector
from ray_tracing.materials.material import EnteringProbe, Material, Reflection


class Lambertian(Material):
    """Lambertian (ideal diffuse) material.

    Attributes:
        albedo: The diffuse reflectance colour (RGB). Represents the fraction
            of light reflected for each colour channel.
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
        direction = UnitVector.from_vector(rebound_normal + random_unit_vector(rng))
        return Reflection(attenuation=self.albedo, direction=direction)

    def __repr__(self) -> str:
        return f"Lambertian(albedo={self.albedo!r})"
