"""Intersection records and scene-wide hit selection.

An ``Intersection`` pairs a distance ``t`` along a ray with the shape that
produced it. ``Intersections`` gathers the candidates for one ray, keeps
them sorted by ``t`` and caches the hit: the entry with the smallest
non-negative ``t``. Intersections behind the ray origin (``t < 0``) stay in
the set but are never selected as the hit.

Sets built per shape are merged with ``extend`` so that the visible surface
is chosen across the whole scene rather than per shape. Merging keeps the
set fully sorted and the cached hit consistent, so ``hit()`` never rescans.

Equal ``t`` values keep their insertion order (the sort is stable); which of
two coincident intersections becomes the hit is otherwise unspecified.

Example:
    >>> from src.tracer.geometry.sphere import Sphere
    >>> s = Sphere()
    >>> xs = Intersections([Intersection(5.0, s), Intersection(-3.0, s), Intersection(2.0, s)])
    >>> [i.t for i in xs]
    [-3.0, 2.0, 5.0]
    >>> xs.hit().t
    2.0
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from operator import attrgetter
from typing import TYPE_CHECKING

from src.tracer.core.ray import Ray
from src.tracer.core.tuples import EPSILON, Tuple4, dot

if TYPE_CHECKING:
    from src.tracer.geometry.shape import Shape

_by_t = attrgetter("t")


@dataclass(frozen=True)
class PrecomputedData:
    """Shading geometry derived from one hit.

    Attributes:
        t: Distance along the ray of the hit.
        object: The shape that was hit.
        point: World-space hit location.
        eyev: Unit vector from the hit point back toward the ray origin.
        normalv: Unit surface normal, flipped to face the eye when needed.
        inside: True if the raw normal pointed away from the eye, meaning
            the ray started inside the shape.
        over_point: ``point`` nudged along ``normalv`` by EPSILON. Shadow
            rays start here so the surface does not shadow itself.
    """

    t: float
    object: Shape
    point: Tuple4
    eyev: Tuple4
    normalv: Tuple4
    inside: bool
    over_point: Tuple4


@dataclass(frozen=True, eq=False)
class Intersection:
    """A candidate ray/shape hit.

    Attributes:
        t: Signed distance along the ray.
        object: The shape intersected. Held by reference; equality uses
            the shape's identity, not its value.
    """

    t: float
    object: Shape

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.t == other.t and self.object is other.object

    def __hash__(self) -> int:
        return hash((self.t, id(self.object)))

    def prepare_computations(self, ray: Ray) -> PrecomputedData:
        """Derive the shading inputs for this intersection.

        Args:
            ray: The ray that produced this intersection.

        Returns:
            PrecomputedData whose normal always faces the eye
            (``dot(normalv, eyev) >= 0``).
        """
        point = ray.position(self.t)
        eyev = -ray.direction
        normalv = self.object.normal_at(point)

        inside = dot(normalv, eyev) < 0.0
        if inside:
            normalv = -normalv

        # Offset after the flip so over_point is on the eye side of the surface
        over_point = point + normalv * EPSILON

        return PrecomputedData(
            t=self.t,
            object=self.object,
            point=point,
            eyev=eyev,
            normalv=normalv,
            inside=inside,
            over_point=over_point,
        )


class Intersections:
    """Sorted set of intersections for one ray, with a cached hit.

    The set is mutated only by ``extend`` and must not be shared across
    threads; each ray builds its own.
    """

    def __init__(self, intersections: Iterable[Intersection] = ()) -> None:
        self._items: list[Intersection] = sorted(intersections, key=_by_t)
        self._hit: Intersection | None = next((i for i in self._items if i.t >= 0.0), None)

    def hit(self) -> Intersection | None:
        """Return the intersection with the smallest non-negative t, if any.

        A ``None`` result means the ray escapes the scene; it is not an error.
        """
        return self._hit

    def extend(self, other: Intersections) -> None:
        """Merge another set into this one in place.

        Args:
            other: Intersections to merge. Left unchanged.
        """
        self._items.extend(other._items)
        self._items.sort(key=_by_t)

        other_hit = other._hit
        if other_hit is not None and (self._hit is None or other_hit.t < self._hit.t):
            self._hit = other_hit

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Intersection:
        return self._items[index]

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        ts = ", ".join(f"{i.t:g}" for i in self._items)
        return f"Intersections([{ts}], hit={None if self._hit is None else self._hit.t})"
