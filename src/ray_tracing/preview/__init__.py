"""Preview module for image output.

Components:
    export: Saving rendered images to disk via Pillow
"""

from .export import load_image, save_image, save_render

__all__ = [
    "save_image",
    "save_render",
    "load_image",
]
