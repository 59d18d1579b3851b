"""Renderer driving the camera over the whole pixel grid.

This module provides a convenient wrapper around the camera and integrator
that supports:
- Row-major rendering into a NumPy colour buffer
- Progress callbacks for UI updates
- A generator form yielding after each row
- Cooperative cancellation between pixels

Pixels are independent, so the buffer is filled in row-major order
(left to right, top to bottom) from a single random generator. A render is
reproducible given the generator's seed.

Example:
    >>> import numpy as np
    >>> from ray_tracing.camera.pinhole import Camera
    >>> from ray_tracing.core.render import Renderer
    >>> from ray_tracing.scene.presets import create_two_sphere_scene
    >>>
    >>> world = create_two_sphere_scene()
    >>> camera = Camera(64, 36, 2.0 * 64 / 36, 2.0, 1.0, 0, 5)
    >>> renderer = Renderer(camera, world, rng=np.random.default_rng(42))
    >>> image = renderer.render()
    >>> image.shape
    (36, 64, 3)
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Generator
from typing import Optional

import numpy as np
import numpy.typing as npt

from ray_tracing.camera.pinhole import Camera
from ray_tracing.core.integrator import gamma_correct, quantize
from ray_tracing.scene.intersection import SurfaceSet

logger = logging.getLogger(__name__)

# Callback receives (rows_completed, total_rows)
ProgressCallback = Callable[[int, int], None]

# Polled between pixels; returning True stops the render
CancelCheck = Callable[[], bool]


class RenderCancelledError(RuntimeError):
    """Raised when a render is cancelled between pixels."""

    def __init__(self, rows_completed: int, total_rows: int) -> None:
        super().__init__(f"Render cancelled after {rows_completed}/{total_rows} rows")
        self.rows_completed = rows_completed
        self.total_rows = total_rows


class Renderer:
    """Renders a scene through a camera into a linear colour buffer.

    The scene and camera are only read. The colour buffer is owned by the
    renderer and overwritten by each call to render().

    Attributes:
        camera: The camera generating primary rays.
        world: The scene.
    """

    def __init__(
        self,
        camera: Camera,
        world: SurfaceSet,
        rng: Optional[np.random.Generator] = None,
        cancel: Optional[CancelCheck] = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            camera: Camera configuration and ray generator.
            world: The scene to render.
            rng: Random source. A fresh default generator is used if None.
            cancel: Optional predicate checked before every pixel.
        """
        self.camera = camera
        self.world = world
        self._rng = rng if rng is not None else np.random.default_rng()
        self._cancel = cancel
        self._image = np.zeros((camera.image_height, camera.image_width, 3), dtype=np.float64)
        self._rows_completed = 0

    @property
    def width(self) -> int:
        return self.camera.image_width

    @property
    def height(self) -> int:
        return self.camera.image_height

    @property
    def rows_completed(self) -> int:
        """Number of fully rendered rows in the current buffer."""
        return self._rows_completed

    def render_rows(self) -> Generator[tuple[int, int], None, None]:
        """Render the image row by row, yielding progress after each row.

        This is a generator-based alternative to render() with callbacks.

        Yields:
            Tuple of (rows_completed, total_rows).

        Raises:
            RenderCancelledError: If the cancel predicate fires between pixels.
        """
        self._image.fill(0.0)
        self._rows_completed = 0
        total_rows = self.height
        start = time.perf_counter()
        logger.info(
            "Rendering %dx%d image, %d samples per pixel, %d surfaces",
            self.width,
            self.height,
            self.camera.samples_per_pixel,
            len(self.world),
        )

        for row in range(total_rows):
            for col in range(self.width):
                if self._cancel is not None and self._cancel():
                    logger.info("Render cancelled at row %d, column %d", row, col)
                    raise RenderCancelledError(self._rows_completed, total_rows)
                colour = self.camera.pixel_colour(col, row, self.world, self._rng)
                self._image[row, col] = colour.to_tuple()
            self._rows_completed = row + 1
            logger.debug("Rendered row %d/%d", self._rows_completed, total_rows)
            yield (self._rows_completed, total_rows)

        logger.info("Render finished in %.2fs", time.perf_counter() - start)

    def render(self, callback: Optional[ProgressCallback] = None) -> npt.NDArray[np.float64]:
        """Render the full image.

        Args:
            callback: Optional function called after each row with
                (rows_completed, total_rows).

        Returns:
            The linear colour buffer, shape (height, width, 3).

        Raises:
            RenderCancelledError: If the cancel predicate fires between pixels.
        """
        for done, total in self.render_rows():
            if callback is not None:
                callback(done, total)
        return self.get_image_numpy()

    def get_image_numpy(self) -> npt.NDArray[np.float64]:
        """Return a copy of the linear colour buffer, shape (height, width, 3)."""
        return self._image.copy()

    def get_image_uint8(self, gamma: bool = True) -> npt.NDArray[np.uint8]:
        """Get the rendered image as an 8-bit NumPy array.

        Args:
            gamma: Apply gamma 2 (square root) before quantizing.

        Returns:
            NumPy array of shape (height, width, 3) with dtype uint8.
        """
        image = self._image
        if gamma:
            image = gamma_correct(image)
        return quantize(image)

    def iter_pixels(self, gamma: bool = True) -> Generator[tuple[int, int, int], None, None]:
        """Yield quantized RGB triples in row-major order for an encoder."""
        for r, g, b in self.get_image_uint8(gamma=gamma).reshape(-1, 3):
            yield int(r), int(g), int(b)

    def __repr__(self) -> str:
        return (
            f"Renderer(width={self.width}, height={self.height}, "
            f"rows_completed={self.rows_completed})"
        )
