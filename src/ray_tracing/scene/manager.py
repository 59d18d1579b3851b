"""Scene manager coordinating spheres and materials.

This module provides a high-level scene building API on top of SurfaceSet.
Materials are registered once and referred to by ID, so several spheres can
share one material read-only. The manager also converts scenes to and from
plain configuration dictionaries.

The SceneManager maintains:
- A material_id space across all material types
- The (Shape, Material) pairs added so far, as a SurfaceSet
- Scene serialization/configuration support

Example:
    >>> from ray_tracing.scene.manager import SceneManager
    >>> scene = SceneManager()
    >>> mat_id = scene.add_lambertian_material(albedo=(0.8, 0.3, 0.3))
    >>> scene.add_sphere(center=(0, 0, -1), radius=0.5, material_id=mat_id)
    0
    >>> len(scene.world)
    1
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ray_tracing.core.vector import Point, Vector
from ray_tracing.geometry.sphere import Sphere
from ray_tracing.materials.dielectric import Dielectric
from ray_tracing.materials.lambertian import Lambertian
from ray_tracing.materials.material import Material
from ray_tracing.materials.metal import Metal
from ray_tracing.scene.intersection import SurfaceSet
from ray_tracing.scene.surface import UniformSurface

logger = logging.getLogger(__name__)

Triple = tuple[float, float, float]


class MaterialType(Enum):
    """Enumeration of supported material types."""

    LAMBERTIAN = "lambertian"
    METAL = "metal"
    DIELECTRIC = "dielectric"


@dataclass
class MaterialInfo:
    """Information about a registered material.

    Attributes:
        material_id: The material ID.
        material_type: The type of material.
        material: The material instance shared by every sphere using it.
        params: The material parameters as provided during creation.
    """

    material_id: int
    material_type: MaterialType
    material: Material
    params: dict[str, Any]


@dataclass
class SphereInfo:
    """Information about a sphere in the scene.

    Attributes:
        sphere_index: Position of the sphere in the scene's insertion order.
        center: The center of the sphere.
        radius: The radius of the sphere.
        material_id: The material ID assigned to the sphere.
    """

    sphere_index: int
    center: Triple
    radius: float
    material_id: int


@dataclass
class SceneConfig:
    """Configuration for scene serialization.

    Attributes:
        materials: List of material configurations, e.g.
            ``{"type": "metal", "albedo": [0.8, 0.8, 0.8]}``.
        spheres: List of sphere configurations, e.g.
            ``{"center": [0, 0, -1], "radius": 0.5, "material_id": 0}``.
    """

    materials: list[dict[str, Any]] = field(default_factory=list)
    spheres: list[dict[str, Any]] = field(default_factory=list)


def _triple(values: Any, name: str) -> Triple:
    if len(values) != 3:
        raise ValueError(f"{name} must have 3 components, got {len(values)}")
    return (float(values[0]), float(values[1]), float(values[2]))


class SceneManager:
    """Scene builder tracking materials and spheres.

    Attributes:
        materials: List of MaterialInfo for all registered materials.
        spheres: List of SphereInfo for all spheres in the scene.
        world: The SurfaceSet handed to the renderer.

    Example:
        >>> scene = SceneManager()
        >>> red_diffuse = scene.add_lambertian_material(albedo=(0.8, 0.1, 0.1))
        >>> gold_metal = scene.add_metal_material(albedo=(0.8, 0.6, 0.2))
        >>> glass = scene.add_dielectric_material(refraction_index=1.5)
        >>> scene.add_sphere((0, 0, -1), 0.5, red_diffuse)
        0
        >>> scene.add_sphere((1, 0, -1), 0.5, gold_metal)
        1
        >>> scene.add_sphere((-1, 0, -1), 0.5, glass)
        2
    """

    def __init__(self) -> None:
        """Initialize an empty scene."""
        self.materials: list[MaterialInfo] = []
        self.spheres: list[SphereInfo] = []
        self.world = SurfaceSet()

    def clear(self) -> None:
        """Clear the entire scene (spheres and materials)."""
        self.materials.clear()
        self.spheres.clear()
        self.world.clear()

    # =========================================================================
    # Material Management
    # =========================================================================

    def _register(
        self, material_type: MaterialType, material: Material, params: dict[str, Any]
    ) -> int:
        material_id = len(self.materials)
        self.materials.append(
            MaterialInfo(
                material_id=material_id,
                material_type=material_type,
                material=material,
                params=params,
            )
        )
        logger.debug("Registered material %d: %r", material_id, material)
        return material_id

    def add_lambertian_material(self, albedo: Triple) -> int:
        """Add a Lambertian (diffuse) material to the scene.

        Args:
            albedo: The diffuse reflectance colour as (R, G, B).

        Returns:
            The material ID for this material.
        """
        albedo = _triple(albedo, "albedo")
        return self._register(
            MaterialType.LAMBERTIAN, Lambertian(Vector(*albedo)), {"albedo": albedo}
        )

    def add_metal_material(self, albedo: Triple) -> int:
        """Add a metal (mirror) material to the scene.

        Args:
            albedo: The reflective colour as (R, G, B).

        Returns:
            The material ID for this material.
        """
        albedo = _triple(albedo, "albedo")
        return self._register(MaterialType.METAL, Metal(Vector(*albedo)), {"albedo": albedo})

    def add_dielectric_material(self, refraction_index: float = 1.5) -> int:
        """Add a dielectric (glass/water) material to the scene.

        Args:
            refraction_index: Index of refraction. Default is 1.5 (typical glass).

        Returns:
            The material ID for this material.

        Raises:
            ValueError: If refraction_index is not positive.
        """
        return self._register(
            MaterialType.DIELECTRIC,
            Dielectric(refraction_index),
            {"refraction_index": float(refraction_index)},
        )

    def get_material_count(self) -> int:
        """Get the total number of materials in the scene."""
        return len(self.materials)

    def get_material_info(self, material_id: int) -> MaterialInfo | None:
        """Get information about a material by ID, or None if not found."""
        if 0 <= material_id < len(self.materials):
            return self.materials[material_id]
        return None

    # =========================================================================
    # Primitive Management
    # =========================================================================

    def add_sphere(self, center: Triple, radius: float, material_id: int) -> int:
        """Add a sphere to the scene.

        Args:
            center: The center point of the sphere as (x, y, z).
            radius: The radius of the sphere (must be positive).
            material_id: The material ID to assign to the sphere.

        Returns:
            The index of the added sphere.

        Raises:
            ValueError: If material_id is invalid or radius is not positive.
        """
        info = self.get_material_info(material_id)
        if info is None:
            raise ValueError(f"Invalid material_id: {material_id}")

        center = _triple(center, "center")
        sphere = Sphere(Point(*center), radius)
        self.world.add(UniformSurface(sphere, info.material))

        sphere_index = len(self.spheres)
        self.spheres.append(
            SphereInfo(
                sphere_index=sphere_index,
                center=center,
                radius=float(radius),
                material_id=material_id,
            )
        )
        return sphere_index

    def add_lambertian_sphere(
        self, center: Triple, radius: float, albedo: Triple
    ) -> tuple[int, int]:
        """Add a sphere with a new Lambertian material.

        Returns:
            Tuple of (sphere_index, material_id).
        """
        material_id = self.add_lambertian_material(albedo)
        return self.add_sphere(center, radius, material_id), material_id

    def add_metal_sphere(
        self, center: Triple, radius: float, albedo: Triple
    ) -> tuple[int, int]:
        """Add a sphere with a new metal material.

        Returns:
            Tuple of (sphere_index, material_id).
        """
        material_id = self.add_metal_material(albedo)
        return self.add_sphere(center, radius, material_id), material_id

    def add_dielectric_sphere(
        self, center: Triple, radius: float, refraction_index: float = 1.5
    ) -> tuple[int, int]:
        """Add a sphere with a new dielectric material.

        Returns:
            Tuple of (sphere_index, material_id).
        """
        material_id = self.add_dielectric_material(refraction_index)
        return self.add_sphere(center, radius, material_id), material_id

    def get_sphere_count(self) -> int:
        """Get the number of spheres in the scene."""
        return len(self.spheres)

    # =========================================================================
    # Scene Serialization
    # =========================================================================

    def to_config(self) -> SceneConfig:
        """Export the scene to a configuration object."""
        config = SceneConfig()
        for mat in self.materials:
            params = {k: list(v) if isinstance(v, tuple) else v for k, v in mat.params.items()}
            config.materials.append({"type": mat.material_type.value, **params})
        for sphere in self.spheres:
            config.spheres.append(
                {
                    "center": list(sphere.center),
                    "radius": sphere.radius,
                    "material_id": sphere.material_id,
                }
            )
        return config

    def from_config(self, config: SceneConfig) -> None:
        """Load a scene from a configuration object.

        Clears the current scene and loads the configuration.

        Args:
            config: The scene configuration to load.

        Raises:
            ValueError: If the configuration contains invalid data.
        """
        self.clear()

        # Materials first, spheres refer to them by ID
        for mat_config in config.materials:
            mat_type = str(mat_config.get("type", "")).lower()
            if mat_type == MaterialType.LAMBERTIAN.value:
                self.add_lambertian_material(mat_config.get("albedo", [0.5, 0.5, 0.5]))
            elif mat_type == MaterialType.METAL.value:
                self.add_metal_material(mat_config.get("albedo", [0.8, 0.8, 0.8]))
            elif mat_type == MaterialType.DIELECTRIC.value:
                self.add_dielectric_material(mat_config.get("refraction_index", 1.5))
            else:
                raise ValueError(f"Unknown material type: {mat_type!r}")

        for sphere_config in config.spheres:
            self.add_sphere(
                sphere_config.get("center", [0.0, 0.0, 0.0]),
                sphere_config.get("radius", 1.0),
                sphere_config.get("material_id", 0),
            )

        logger.debug(
            "Loaded scene with %d materials and %d spheres",
            len(self.materials),
            len(self.spheres),
        )

    def to_dict(self) -> dict[str, Any]:
        """Export the scene to a dictionary (for JSON serialization)."""
        config = self.to_config()
        return {"materials": config.materials, "spheres": config.spheres}

    def from_dict(self, data: dict[str, Any]) -> None:
        """Load a scene from a dictionary with 'materials' and 'spheres' keys."""
        self.from_config(
            SceneConfig(
                materials=data.get("materials", []),
                spheres=data.get("spheres", []),
            )
        )
