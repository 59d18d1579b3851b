"""Ready-made scenes.

Scene layout (camera at the origin looking down -z):
    - A sphere of radius 0.5 centred at (0, 0, -1)
    - A "ground" sphere of radius 100 centred at (0, -100.5, -1), whose top
      touches the bottom of the small sphere

Example:
    >>> from ray_tracing.scene.presets import create_two_sphere_scene
    >>> world = create_two_sphere_scene()
    >>> len(world)
    2
"""

from __future__ import annotations

from ray_tracing.scene.intersection import SurfaceSet
from ray_tracing.scene.manager import SceneManager

GREY = (0.5, 0.5, 0.5)

SPHERE_CENTER = (0.0, 0.0, -1.0)
SPHERE_RADIUS = 0.5
GROUND_CENTER = (0.0, -100.5, -1.0)
GROUND_RADIUS = 100.0


def create_two_sphere_scene(albedo: tuple[float, float, float] = GREY) -> SurfaceSet:
    """Create the reference scene: one diffuse sphere resting on a diffuse ground.

    Both spheres share one Lambertian material.

    Args:
        albedo: Diffuse colour of both spheres.

    Returns:
        The scene, foreground sphere first.
    """
    scene = SceneManager()
    material_id = scene.add_lambertian_material(albedo)
    scene.add_sphere(SPHERE_CENTER, SPHERE_RADIUS, material_id)
    scene.add_sphere(GROUND_CENTER, GROUND_RADIUS, material_id)
    return scene.world


def create_material_scene() -> SurfaceSet:
    """Create a row of three spheres, one per material, on a diffuse ground.

    Left to right: glass (refraction index 1.5), diffuse, metal.
    """
    scene = SceneManager()
    scene.add_lambertian_sphere(GROUND_CENTER, GROUND_RADIUS, (0.8, 0.8, 0.0))
    scene.add_dielectric_sphere((-1.0, 0.0, -1.0), SPHERE_RADIUS, 1.5)
    scene.add_lambertian_sphere(SPHERE_CENTER, SPHERE_RADIUS, (0.1, 0.2, 0.5))
    scene.add_metal_sphere((1.0, 0.0, -1.0), SPHERE_RADIUS, (0.8, 0.6, 0.2))
    return scene.world


SCENES = {
    "spheres": create_two_sphere_scene,
    "materials": create_material_scene,
}
