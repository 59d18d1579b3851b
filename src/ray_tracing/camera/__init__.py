"""Camera module for primary ray generation.

Components:
    pinhole: Axis-aligned pinhole camera with jittered supersampling
"""

from .pinhole import Camera

__all__ = [
    "Camera",
]
