"""Path tracing integrator for Monte Carlo light transport.

This module estimates the radiance arriving along a ray by following it
through the scene, scattering at each surface according to its material,
and multiplying the attenuations picked up along the way.

Termination:
    - Bounce budget exhausted: the path contributes no light (zero colour).
    - Absorbed by a material: zero colour.
    - Escapes the scene: the sky gradient, scaled by the accumulated
      attenuation.

The recursive definition

    ray_colour(ray, depth) = attenuation * ray_colour(scattered, depth - 1)

is evaluated as a loop carrying the running attenuation product, so deep
bounce limits never touch the interpreter's recursion limit.

Display transform:
    Sample averages are linear. gamma_correct() applies a per-channel square
    root (gamma 2) and quantize() maps [0, 1] to 8-bit values by scaling by
    255 and truncating.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from ray_tracing.core.ray import MAX_FLOAT, Interval, IntervalBounds, Ray
from ray_tracing.core.vector import Vector
from ray_tracing.scene.intersection import SurfaceSet

# Lower bound of the hit search, to avoid re-hitting the surface a ray
# just left ("shadow acne")
RAY_EPSILON = 0.001

WHITE = Vector(1.0, 1.0, 1.0)
SKY_BLUE = Vector(0.5, 0.7, 1.0)

SEARCH_INTERVAL = Interval(RAY_EPSILON, MAX_FLOAT, IntervalBounds.OPEN)


def background(ray: Ray) -> Vector:
    """Colour of the sky seen along ``ray``.

    Linearly blends white (looking straight down) into sky blue (looking
    straight up) using the normalized direction's y component mapped from
    [-1, 1] to [0, 1].
    """
    a = (ray.direction.normalize().y + 1.0) / 2.0
    return (1.0 - a) * WHITE + a * SKY_BLUE


def ray_colour(
    ray: Ray,
    world: SurfaceSet,
    depth: int,
    rng: np.random.Generator,
) -> Vector:
    """Estimate the colour of light arriving along ``ray``.

    Args:
        ray: The ray to trace.
        world: The scene.
        depth: Remaining bounce budget. Zero returns black immediately.
        rng: Random source for material scattering.

    Returns:
        The linear RGB radiance estimate.
    """
    attenuation = WHITE
    for _ in range(depth):
        hit = world.intersection(ray, SEARCH_INTERVAL)
        if hit is None:
            return attenuation * background(ray)

        point = ray.at(hit.t)
        scattered = hit.surface.scatter(point, ray, rng)
        if scattered is None:
            return Vector.zero()

        attenuation = attenuation * scattered.attenuation
        ray = scattered.ray

    return Vector.zero()


def gamma_correct(colour: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Apply gamma 2 (per-channel square root) to linear colour values.

    Negative and non-finite inputs produce NaN, which quantize() maps to 0.
    """
    with np.errstate(invalid="ignore"):
        return np.sqrt(np.asarray(colour, dtype=np.float64))


def quantize(colour: npt.ArrayLike) -> npt.NDArray[np.uint8]:
    """Map colour values in [0, 1] to 8-bit channel values.

    Values are multiplied by 255 and truncated. Out-of-range values saturate
    to [0, 255] and NaN becomes 0.

    Args:
        colour: Array of colour values of any shape.

    Returns:
        uint8 array of the same shape.
    """
    scaled = np.asarray(colour, dtype=np.float64) * 255.0
    scaled = np.nan_to_num(scaled, nan=0.0, posinf=255.0, neginf=0.0)
    return np.clip(np.trunc(scaled), 0.0, 255.0).astype(np.uint8)


def to_pixel(colour: Vector, gamma: bool = True) -> tuple[int, int, int]:
    """Convert one averaged linear colour into an 8-bit RGB triple."""
    values = np.array(colour.to_tuple(), dtype=np.float64)
    if gamma:
        values = gamma_correct(values)
    r, g, b = quantize(values)
    return int(r), int(g), int(b)
