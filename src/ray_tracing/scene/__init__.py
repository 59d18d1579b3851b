"""Scene module: surfaces, nearest-hit resolution and scene building.

Components:
    surface: Surface interface, UniformSurface (Shape + Material), ScatteredRay
    intersection: SurfaceSet and its nearest-hit query with exact-tie tracking
    manager: SceneManager for building scenes from materials and spheres
    presets: Ready-made scenes

Scene data is plain Python objects, read-only while a render runs.
"""

from .intersection import SurfaceSet, SurfaceSetIntersection
from .manager import (
    MaterialInfo,
    MaterialType,
    SceneConfig,
    SceneManager,
    SphereInfo,
)
from .presets import SCENES, create_material_scene, create_two_sphere_scene
from .surface import ScatteredRay, Surface, UniformSurface

__all__ = [
    # Surfaces
    "Surface",
    "UniformSurface",
    "ScatteredRay",
    # Intersection
    "SurfaceSet",
    "SurfaceSetIntersection",
    # Manager
    "SceneManager",
    "SceneConfig",
    "MaterialType",
    "MaterialInfo",
    "SphereInfo",
    # Presets
    "SCENES",
    "create_two_sphere_scene",
    "create_material_scene",
]
