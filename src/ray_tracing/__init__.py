"""CPU path tracer.

This package renders scenes of spheres with diffuse, metallic and
refractive materials by Monte Carlo path tracing, with support for:
- Jittered supersampling for antialiasing
- Bounded-depth path tracing with per-material scattering
- Exact-tie aware nearest-hit resolution across the scene

Subpackages:
    core: Vector algebra, rays and intervals, the integrator and the renderer
    geometry: Shape interface and the sphere primitive
    materials: Lambertian, metal and dielectric scattering models
    scene: Surfaces, the scene container and scene building
    camera: Pinhole camera with primary ray generation
    preview: Image export
"""

__version__ = "0.1.0"
