"""Render configuration.

RenderConfig gathers every knob of a render in one validated dataclass so
that scenes, cameras and scripts agree on the same numbers.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderConfig:
    """Configuration for a render.

    Attributes:
        image_width: Output width in pixels.
        image_height: Output height in pixels.
        viewport_width: Width of the viewport in scene units.
        viewport_height: Height of the viewport in scene units.
        focal_length: Distance from the eye to the viewport plane.
        antialiasing: Number of extra jittered samples per pixel, on top of
            the sample through the pixel centre.
        max_ray_bounces: Bounce budget for each traced path.
        gamma_correct: Whether to apply gamma 2 before quantizing.
        seed: Seed for the random generator, or None for fresh entropy.
    """

    image_width: int = 800
    image_height: int = 450
    viewport_width: float = 2.0 * 800 / 450
    viewport_height: float = 2.0
    focal_length: float = 1.0
    antialiasing: int = 7
    max_ray_bounces: int = 50
    gamma_correct: bool = True
    seed: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.image_width <= 0 or self.image_height <= 0:
            raise ValueError(
                f"Image dimensions must be positive, got "
                f"{self.image_width}x{self.image_height}"
            )
        if self.viewport_width <= 0.0 or self.viewport_height <= 0.0:
            raise ValueError(
                f"Viewport dimensions must be positive, got "
                f"{self.viewport_width}x{self.viewport_height}"
            )
        if self.focal_length <= 0.0:
            raise ValueError(f"focal_length must be positive, got {self.focal_length}")
        if self.antialiasing < 0:
            raise ValueError(f"antialiasing must be >= 0, got {self.antialiasing}")
        if self.max_ray_bounces < 0:
            raise ValueError(f"max_ray_bounces must be >= 0, got {self.max_ray_bounces}")

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height of the output image."""
        return self.image_width / self.image_height

    @classmethod
    def from_width(
        cls,
        image_width: int,
        aspect_ratio: float = 16.0 / 9.0,
        viewport_height: float = 2.0,
        **kwargs,
    ) -> RenderConfig:
        """Build a config from a width and aspect ratio.

        The height is the truncated ``image_width / aspect_ratio`` and the
        viewport width is scaled so that pixels stay square.

        Example:
            >>> RenderConfig.from_width(400).image_height
            225

        Raises:
            ValueError: If the aspect ratio is not positive or the derived
                height is less than one pixel.
        """
        if aspect_ratio <= 0.0:
            raise ValueError(f"aspect_ratio must be positive, got {aspect_ratio}")
        image_height = int(image_width / aspect_ratio)
        if image_height <= 0:
            raise ValueError(
                f"Image width {image_width} at aspect ratio {aspect_ratio:.3f} "
                f"gives a height of {image_height} pixels"
            )
        viewport_width = viewport_height * image_width / image_height
        return cls(
            image_width=image_width,
            image_height=image_height,
            viewport_width=viewport_width,
            viewport_height=viewport_height,
            **kwargs,
        )

    @classmethod
    def reference(cls) -> RenderConfig:
        """The default two-sphere render: 800 px wide at 16:9, 7 extra samples, 50 bounces."""
        return cls.from_width(800, antialiasing=7, max_ray_bounces=50)
