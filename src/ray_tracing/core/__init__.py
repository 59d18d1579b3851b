"""Core rendering module.

Components:
    vector: Vector/Point/UnitVector algebra and random direction sampling
    ray: Ray and Interval data structures
    integrator: Radiance estimation along a ray, gamma and quantization
    render: Renderer filling an image buffer through a camera

The core module handles the Monte Carlo estimate of the light arriving
along each camera ray, bounded by a bounce budget.
"""

from .ray import MAX_FLOAT, Interval, IntervalBounds, Ray
from .vector import Point, UnitVector, Vector, random_in_range, random_unit_vector

# Note: integrator and render are NOT imported here to avoid circular imports.
# Import directly from ray_tracing.core.integrator or ray_tracing.core.render.

__all__ = [
    "Vector",
    "Point",
    "UnitVector",
    "random_in_range",
    "random_unit_vector",
    "Ray",
    "Interval",
    "IntervalBounds",
    "MAX_FLOAT",
]
