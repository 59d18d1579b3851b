"""Image export utilities for rendered images.

This module hands finished renders to Pillow, which picks the on-disk
format from the file extension.

Supported formats:
    - PNG (8-bit RGB)
    - PPM (binary P6)
    - Anything else Pillow can write from an RGB image

Example:
    >>> from ray_tracing.preview.export import save_render
    >>> save_render(renderer, "output.png")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Union

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

if TYPE_CHECKING:
    from ray_tracing.core.render import Renderer

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def save_image(pixels: npt.NDArray[np.uint8], filepath: PathLike) -> None:
    """Save an 8-bit RGB image.

    Args:
        pixels: Array of shape (height, width, 3) with dtype uint8, rows
            ordered top to bottom.
        filepath: Output path; the extension selects the format.

    Raises:
        ValueError: If the array is not (height, width, 3) uint8.
    """
    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"Expected an array of shape (H, W, 3), got {pixels.shape}")
    if pixels.dtype != np.uint8:
        raise ValueError(f"Expected dtype uint8, got {pixels.dtype}")

    pil_image = PILImage.fromarray(pixels)
    pil_image.save(filepath)
    logger.info("Saved %dx%d image to %s", pixels.shape[1], pixels.shape[0], filepath)


def save_render(renderer: Renderer, filepath: PathLike, *, gamma: bool = True) -> None:
    """Save the renderer's current image.

    Args:
        renderer: The Renderer whose buffer to save.
        filepath: Output path; the extension selects the format.
        gamma: Apply gamma 2 before quantizing.
    """
    save_image(renderer.get_image_uint8(gamma=gamma), filepath)


def load_image(filepath: PathLike) -> npt.NDArray[np.uint8]:
    """Load an image file as an (H, W, 3) uint8 array."""
    with PILImage.open(filepath) as image:
        return np.asarray(image.convert("RGB"), dtype=np.uint8)
