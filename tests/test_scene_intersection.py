"""Tests for scene-level intersection.

Tests cover:
- Nearest hit among several surfaces
- Exact ties reported with every surface, in insertion order
- Strictly nearer hits replacing a tie list
- Misses, empty scenes and clearing
- Surface scattering and lazy evaluation of the entering probe
"""

from ray_tracing.core.ray import Interval, IntervalBounds, Ray
from ray_tracing.core.vector import Point, Vector
from ray_tracing.geometry.sphere import Sphere
from ray_tracing.materials.lambertian import Lambertian
from ray_tracing.scene.intersection import SurfaceSet
from ray_tracing.scene.surface import UniformSurface

GREY = Lambertian(Vector(0.5, 0.5, 0.5))
RAY = Ray(Point(0.0, 0.0, 0.0), Vector(0.0, 0.0, -1.0))
POSITIVE = Interval.positive_reals(IntervalBounds.OPEN)


def sphere_surface(z, radius=0.5):
    return UniformSurface(Sphere(Point(0.0, 0.0, z), radius), GREY)


class TestNearestHit:
    """Tests for SurfaceSet.intersection."""

    def test_empty_scene(self):
        assert SurfaceSet().intersection(RAY, POSITIVE) is None

    def test_miss(self):
        world = SurfaceSet([UniformSurface(Sphere(Point(0.0, 5.0, -1.0), 0.5), GREY)])
        assert world.intersection(RAY, POSITIVE) is None

    def test_nearest_of_two(self):
        far = sphere_surface(-5.0)
        near = sphere_surface(-2.0)
        world = SurfaceSet([far, near])
        hit = world.intersection(RAY, POSITIVE)
        assert hit.t == 1.5
        assert hit.surfaces == [near]
        assert hit.surface is near

    def test_insertion_order_does_not_change_nearest(self):
        far = sphere_surface(-5.0)
        near = sphere_surface(-2.0)
        hit = SurfaceSet([near, far]).intersection(RAY, POSITIVE)
        assert hit.t == 1.5
        assert hit.surfaces == [near]

    def test_respects_interval(self):
        near = sphere_surface(-2.0)
        world = SurfaceSet([near])
        hit = world.intersection(RAY, Interval(2.0, 10.0, IntervalBounds.OPEN))
        assert hit.t == 2.5


class TestTies:
    """Tests for surfaces hit at exactly the same t."""

    def test_tie_reports_both(self, wall_shape):
        first = UniformSurface(wall_shape(2.0), GREY)
        second = UniformSurface(wall_shape(2.0), GREY)
        hit = SurfaceSet([first, second]).intersection(RAY, POSITIVE)
        assert hit.t == 2.0
        assert hit.surfaces == [first, second]
        assert hit.surface is first

    def test_three_way_tie_in_insertion_order(self, wall_shape):
        surfaces = [UniformSurface(wall_shape(3.0), GREY) for _ in range(3)]
        hit = SurfaceSet(surfaces).intersection(RAY, POSITIVE)
        assert hit.surfaces == surfaces

    def test_nearer_replaces_tie_list(self, wall_shape):
        a = UniformSurface(wall_shape(4.0), GREY)
        b = UniformSurface(wall_shape(4.0), GREY)
        c = UniformSurface(wall_shape(1.0), GREY)
        hit = SurfaceSet([a, b, c]).intersection(RAY, POSITIVE)
        assert hit.t == 1.0
        assert hit.surfaces == [c]

    def test_tie_after_nearer(self, wall_shape):
        a = UniformSurface(wall_shape(4.0), GREY)
        b = UniformSurface(wall_shape(1.0), GREY)
        c = UniformSurface(wall_shape(1.0), GREY)
        hit = SurfaceSet([a, b, c]).intersection(RAY, POSITIVE)
        assert hit.t == 1.0
        assert hit.surfaces == [b, c]

    def test_tangent_spheres_tie(self):
        """Two spheres grazed by the ray at the same point are both reported."""
        above = UniformSurface(Sphere(Point(2.0, 1.0, 0.0), 1.0), GREY)
        below = UniformSurface(Sphere(Point(2.0, -1.0, 0.0), 1.0), GREY)
        ray = Ray(Point(0.0, 0.0, 0.0), Vector(1.0, 0.0, 0.0))
        hit = SurfaceSet([above, below]).intersection(ray, POSITIVE)
        assert hit.t == 2.0
        assert hit.surfaces == [above, below]

    def test_tie_with_closed_interval(self, wall_shape):
        a = UniformSurface(wall_shape(2.0), GREY)
        b = UniformSurface(wall_shape(2.0), GREY)
        hit = SurfaceSet([a, b]).intersection(RAY, Interval(0.0, 2.0, IntervalBounds.CLOSED))
        assert hit.surfaces == [a, b]

    def test_left_closed_right_open_excludes_initial_max(self, wall_shape):
        a = UniformSurface(wall_shape(2.0), GREY)
        window = Interval(0.0, 2.0, IntervalBounds.LEFT_CLOSED_RIGHT_OPEN)
        assert SurfaceSet([a]).intersection(RAY, window) is None


class TestSurfaceSetContainer:
    """Tests for SurfaceSet container behaviour."""

    def test_add_len_iter(self):
        world = SurfaceSet()
        a = sphere_surface(-1.0)
        b = sphere_surface(-3.0)
        world.add(a)
        world.add(b)
        assert len(world) == 2
        assert list(world) == [a, b]

    def test_clear(self):
        world = SurfaceSet([sphere_surface(-1.0)])
        world.clear()
        assert len(world) == 0
        assert world.intersection(RAY, POSITIVE) is None


class TestUniformSurfaceScatter:
    """Tests for UniformSurface.scatter."""

    def test_scattered_ray_starts_at_point(self, rng, wall_shape, echo_material):
        material = echo_material(attenuation=Vector(0.2, 0.4, 0.6))
        surface = UniformSurface(wall_shape(1.0), material)
        ray = Ray(Point(0.0, 0.0, 0.0), Vector(1.0, 0.0, 0.0))
        point = ray.at(1.0)
        scattered = surface.scatter(point, ray, rng)
        assert scattered.ray.origin == point
        assert scattered.attenuation == Vector(0.2, 0.4, 0.6)
        # Rebound normal faces back along the ray
        assert scattered.ray.direction == Vector(-1.0, 0.0, 0.0)
        # Travelling along the outward normal means leaving
        assert material.probe_results == [False]

    def test_probe_reports_entering(self, rng, wall_shape, echo_material):
        material = echo_material()
        surface = UniformSurface(wall_shape(1.0), material)
        ray = Ray(Point(0.0, 0.0, 0.0), Vector(-1.0, 0.0, 0.0))
        surface.scatter(ray.at(1.0), ray, rng)
        assert material.probe_results == [True]

    def test_absorbed(self, rng, wall_shape, echo_material):
        surface = UniformSurface(wall_shape(1.0), echo_material(absorb=True))
        assert surface.scatter(Point(1.0, 0.0, 0.0), RAY, rng) is None

    def test_probe_is_lazy(self, rng):
        """Materials that never ask never trigger the normal computation."""

        class CountingSphere(Sphere):
            __slots__ = ("normal_calls",)

            def outwards_normal(self, point):
                self.normal_calls += 1
                return super().outwards_normal(point)

        shape = CountingSphere(Point(0.0, 0.0, -2.0), 1.0)
        shape.normal_calls = 0
        surface = UniformSurface(shape, GREY)
        point = RAY.at(shape.intersection(RAY, POSITIVE))
        surface.scatter(point, RAY, rng)
        # Only the rebound normal needs it
        assert shape.normal_calls == 1
