"""Geometry module for shape primitives.

Components:
    shape: Shape interface (intersection, outward normal, rebound normal)
    sphere: Sphere primitive with ray-sphere intersection

Ray-object intersection follows the pattern:
    t = shape.intersection(ray, interval)  # None on a miss
"""

from .shape import Shape
from .sphere import Sphere

__all__ = [
    "Shape",
    "Sphere",
]
