"""Dielectric (glass/water) material implementation.

Dielectrics always refract the incident ray according to Snell's law:
    n1 * sin(theta1) = n2 * sin(theta2)

In vector form, with a unit incident direction I, the unit rebound normal N
and eta = n1 / n2, the refracted ray R splits into:
    R_perp = eta * (I - (I . N) N)
    R_par  = -N * sqrt(1 - |R_perp|^2)

There is no reflection branch: total internal reflection and Fresnel
weighting are not modelled. When |R_perp| exceeds 1 the square root is NaN
and the resulting sample is dropped to black when quantized.

Common refraction indices:
    - Air: 1.0
    - Water: 1.33
    - Glass: 1.5
    - Diamond: 2.4
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ray_tracing.core.vector import UnitVector, Vector
from ray_tracing.materials.material import EnteringProbe, Material, Reflection

WHITE = Vector(1.0, 1.0, 1.0)


def refract(incident: Vector, normal: Vector, eta: float) -> Vector:
    """Refract a unit incident vector through a surface.

    Args:
        incident: The incoming direction (should be normalized).
        normal: The rebound normal (normalized, pointing against incident).
        eta: Ratio of refractive indices, n_incident / n_transmitted.

    Returns:
        The refracted direction. Components are NaN when no real refracted
        direction exists.
    """
    perpendicular = eta * (incident - incident.dot(normal) * normal)
    with np.errstate(invalid="ignore"):
        cos_t = float(np.sqrt(1.0 - perpendicular.l2_norm_squared()))
    parallel = -cos_t * normal
    return perpendicular + parallel


class Dielectric(Material):
    """Clear refractive material.

    Attributes:
        refraction_index: Index of refraction of the medium relative to its
            surroundings.

    Raises:
        ValueError: If refraction_index is not positive.
    """

    def __init__(self, refraction_index: float) -> None:
        if not refraction_index > 0.0:
            raise ValueError(
                f"Refraction index must be positive, got {refraction_index}"
            )
        self.refraction_index = float(refraction_index)

    def random_reflection(
        self,
        ray_direction: UnitVector,
        rebound_normal: UnitVector,
        entering_surface: EnteringProbe,
        rng: np.random.Generator,
    ) -> Optional[Reflection]:
        if entering_surface():
            relative_index = self.refraction_index
        else:
            relative_index = 1.0 / self.refraction_index
        refracted = refract(ray_direction, rebound_normal, 1.0 / relative_index)
        return Reflection(attenuation=WHITE, direction=UnitVector.from_vector(refracted))

    def __repr__(self) -> str:
        return f"Dielectric(refraction_index={self.refraction_index})"
