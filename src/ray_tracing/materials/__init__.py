"""Materials module for scattering models.

Components:
    material: Material interface and the Reflection result
    lambertian: Ideal diffuse reflection
    metal: Perfect mirror reflection
    dielectric: Refraction through glass-like media

Each material provides random_reflection(), mapping an incident direction
and rebound normal to an attenuation and a scattered direction, or None if
the light is absorbed.
"""

from .dielectric import Dielectric, refract
from .lambertian import Lambertian
from .material import EnteringProbe, Material, Reflection
from .metal import Metal, reflect

__all__ = [
    "Material",
    "Reflection",
    "EnteringProbe",
    "Lambertian",
    "Metal",
    "reflect",
    "Dielectric",
    "refract",
]
