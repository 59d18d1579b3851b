"""Scene-level nearest-hit resolution.

A SurfaceSet holds every surface in the scene and answers "what does this
ray hit first?" by a linear scan in insertion order.

The scan keeps a search window whose upper end shrinks to the nearest hit
found so far. After the first hit the upper end is made inclusive, so a
later surface hit at exactly the same t is still reported. Such a surface
joins the tie list; a strictly nearer hit replaces it. The returned tie list
is therefore complete and ordered by insertion, whatever order the surfaces
were added in.

Example:
    >>> from ray_tracing.core.ray import Interval, IntervalBounds, Ray
    >>> from ray_tracing.core.vector import Point, Vector
    >>> from ray_tracing.geometry.sphere import Sphere
    >>> from ray_tracing.materials.lambertian import Lambertian
    >>> from ray_tracing.scene.intersection import SurfaceSet
    >>> from ray_tracing.scene.surface import UniformSurface
    >>> world = SurfaceSet()
    >>> grey = Lambertian(Vector(0.5, 0.5, 0.5))
    >>> world.add(UniformSurface(Sphere(Point(0.0, 0.0, -1.0), 0.5), grey))
    >>> ray = Ray(Point(0.0, 0.0, 0.0), Vector(0.0, 0.0, -1.0))
    >>> world.intersection(ray, Interval.positive_reals(IntervalBounds.OPEN)).t
    0.5
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional

from ray_tracing.core.ray import Interval, IntervalBounds, Ray
from ray_tracing.scene.surface import Surface

# Bounds used once a hit has been found: the upper end becomes inclusive so
# exact ties are detected, the lower end keeps the caller's convention.
_SUBSEQUENT_BOUNDS = {
    IntervalBounds.OPEN: IntervalBounds.LEFT_OPEN_RIGHT_CLOSED,
    IntervalBounds.CLOSED: IntervalBounds.CLOSED,
    IntervalBounds.LEFT_OPEN_RIGHT_CLOSED: IntervalBounds.LEFT_OPEN_RIGHT_CLOSED,
    IntervalBounds.LEFT_CLOSED_RIGHT_OPEN: IntervalBounds.CLOSED,
}


@dataclass
class SurfaceSetIntersection:
    """Nearest intersection of a ray with a SurfaceSet.

    Attributes:
        t: The smallest ray parameter at which any surface is hit.
        surfaces: Every surface hit at exactly ``t``, in insertion order.
            Never empty.
    """

    t: float
    surfaces: list[Surface] = field(default_factory=list)

    @property
    def surface(self) -> Surface:
        """The surface used for shading: the first one added among the ties."""
        return self.surfaces[0]


class SurfaceSet:
    """Ordered collection of surfaces queried for the nearest hit.

    The set owns its surfaces. It is filled before rendering and must not be
    mutated while a render is reading it.
    """

    def __init__(self, surfaces: Optional[list[Surface]] = None) -> None:
        self._surfaces: list[Surface] = list(surfaces) if surfaces else []

    def add(self, surface: Surface) -> None:
        """Append a surface to the scene."""
        self._surfaces.append(surface)

    def clear(self) -> None:
        """Remove every surface, e.g. between independent renders."""
        self._surfaces.clear()

    def __len__(self) -> int:
        return len(self._surfaces)

    def __iter__(self) -> Iterator[Surface]:
        return iter(self._surfaces)

    def intersection(
        self, ray: Ray, time_interval: Interval
    ) -> Optional[SurfaceSetIntersection]:
        """Find the nearest intersection of ``ray`` with any surface.

        Args:
            ray: The ray to trace.
            time_interval: The accepted range of t values.

        Returns:
            The nearest t and all surfaces achieving it, or None if no
            surface is hit inside ``time_interval``.
        """
        subsequent_bounds = _SUBSEQUENT_BOUNDS[time_interval.bounds]
        window = time_interval
        result: Optional[SurfaceSetIntersection] = None

        for surface in self._surfaces:
            t = surface.intersection(ray, window)
            if t is None:
                continue
            if result is not None and t == window.max:
                result.surfaces.append(surface)
            else:
                result = SurfaceSetIntersection(t=t, surfaces=[surface])
            window = window.with_max(t, subsequent_bounds)

        return result
