"""Pinhole camera model for primary ray generation.

The eye sits at the origin looking down the -z axis. The viewport is a
rectangle in the plane z = -focal_length, centred on the view axis, with
the image's pixels laid out on it as a regular grid. The gap between the
viewport edge and the outermost pixel centres is half a pixel spacing.

Pixel (col, row) = (0, 0) is the top-left of the image; columns grow to
the right (+x) and rows grow downwards (-y).

Antialiasing:
    Each pixel is estimated from one ray through its exact centre plus
    ``antialiasing`` rays whose pixel coordinates are jittered by
    independent uniform offsets in [-0.5, 0.5] on both axes, so every
    sample stays inside the pixel's footprint. The samples are averaged.

Example:
    >>> import numpy as np
    >>> from ray_tracing.camera.pinhole import Camera
    >>> camera = Camera(400, 225, 2.0 * 16.0 / 9.0, 2.0, 1.0, 0, 10)
    >>> ray = camera.get_ray(200, 112)
"""

from __future__ import annotations

import numpy as np

from ray_tracing.config import RenderConfig
from ray_tracing.core.integrator import ray_colour
from ray_tracing.core.ray import Interval, IntervalBounds, Ray
from ray_tracing.core.vector import Point, Vector
from ray_tracing.scene.intersection import SurfaceSet

# Sub-pixel offsets for jittered samples, in pixel units
JITTER = Interval(-0.5, 0.5, IntervalBounds.CLOSED)


class Camera:
    """A pinhole camera with jittered supersampling.

    Attributes:
        image_width: Image width in pixels.
        image_height: Image height in pixels.
        antialiasing: Number of extra jittered samples per pixel.
        max_ray_bounces: Bounce budget for each path.
        eye_point: Camera position (the origin).
        pixel_delta_u: Offset between horizontally adjacent pixel centres.
        pixel_delta_v: Offset between vertically adjacent pixel centres.
        pixel00: Centre of the top-left pixel on the viewport.
    """

    def __init__(
        self,
        image_width: int,
        image_height: int,
        viewport_width: float,
        viewport_height: float,
        focal_length: float,
        antialiasing: int = 0,
        max_ray_bounces: int = 50,
    ) -> None:
        self.image_width = image_width
        self.image_height = image_height
        self.viewport_width = viewport_width
        self.viewport_height = viewport_height
        self.focal_length = focal_length
        self.antialiasing = antialiasing
        self.max_ray_bounces = max_ray_bounces

        self.eye_point = Point(0.0, 0.0, 0.0)
        viewport_u = Vector(viewport_width, 0.0, 0.0)
        viewport_v = Vector(0.0, -viewport_height, 0.0)

        self.pixel_delta_u = viewport_u / image_width
        self.pixel_delta_v = viewport_v / image_height

        viewport_upper_left = (
            self.eye_point
            - viewport_u / 2.0
            - viewport_v / 2.0
            - Vector(0.0, 0.0, focal_length)
        )
        self.pixel00 = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) / 2.0

    @classmethod
    def from_config(cls, config: RenderConfig) -> Camera:
        """Create a camera from a validated RenderConfig."""
        return cls(
            image_width=config.image_width,
            image_height=config.image_height,
            viewport_width=config.viewport_width,
            viewport_height=config.viewport_height,
            focal_length=config.focal_length,
            antialiasing=config.antialiasing,
            max_ray_bounces=config.max_ray_bounces,
        )

    @property
    def samples_per_pixel(self) -> int:
        return self.antialiasing + 1

    def get_ray(self, col: float, row: float) -> Ray:
        """Generate the ray from the eye through pixel coordinates (col, row).

        Integer coordinates land on pixel centres.
        """
        target = self.pixel00 + col * self.pixel_delta_u + row * self.pixel_delta_v
        return Ray.from_two_points(self.eye_point, target)

    def get_ray_jittered(self, col: int, row: int, rng: np.random.Generator) -> Ray:
        """Generate a ray through a uniformly random point of the pixel's footprint.

        Args:
            col: Pixel column.
            row: Pixel row.
            rng: Random source for the sub-pixel offsets.

        Returns:
            A primary ray for an antialiasing sample.
        """
        dx, dy = JITTER.min + JITTER.size() * rng.random(2)
        return self.get_ray(col + float(dx), row + float(dy))

    def pixel_rays(self, col: int, row: int, rng: np.random.Generator) -> list[Ray]:
        """All primary rays for one pixel: the jittered ones, then the centre ray."""
        rays = [self.get_ray_jittered(col, row, rng) for _ in range(self.antialiasing)]
        rays.append(self.get_ray(col, row))
        return rays

    def pixel_colour(
        self,
        col: int,
        row: int,
        world: SurfaceSet,
        rng: np.random.Generator,
    ) -> Vector:
        """Estimate the averaged linear colour of one pixel.

        Args:
            col: Pixel column (0 is the left edge).
            row: Pixel row (0 is the top edge).
            world: The scene.
            rng: Random source.

        Returns:
            The mean of ray_colour over the pixel's antialiasing + 1 samples.
        """
        total = sum(
            (
                ray_colour(ray, world, self.max_ray_bounces, rng)
                for ray in self.pixel_rays(col, row, rng)
            ),
            Vector.zero(),
        )
        return total / self.samples_per_pixel

    def __repr__(self) -> str:
        return (
            f"Camera(image={self.image_width}x{self.image_height}, "
            f"viewport={self.viewport_width}x{self.viewport_height}, "
            f"focal_length={self.focal_length}, antialiasing={self.antialiasing}, "
            f"max_ray_bounces={self.max_ray_bounces})"
        )
