"""Unit tests for intersection records and hit selection.

Tests cover:
- Intersection equality by (t, shape identity)
- Sorting and indexing of intersection sets
- Hit selection ignoring negative t, independent of input order
- Merging sets with extend (scene-wide hit, commutativity)
- Precomputed shading geometry (eye vector, normal flip, over_point)
"""

import itertools
import math

import pytest

from src.tracer.core.matrix import translation
from src.tracer.core.ray import Ray
from src.tracer.core.tuples import EPSILON, approx_equal, dot, point, vector
from src.tracer.geometry.plane import Plane
from src.tracer.geometry.sphere import Sphere
from src.tracer.scene.intersection import Intersection, Intersections


class TestIntersection:
    """Tests for single intersection records."""

    def test_intersection_encapsulates_t_and_object(self, sphere):
        """Test that an intersection stores t and its shape."""
        i = Intersection(3.5, sphere)
        assert i.t == 3.5
        assert i.object is sphere

    def test_equality_uses_shape_identity(self):
        """Test that equal t on distinct (but identical-looking) shapes differ."""
        s1 = Sphere()
        s2 = Sphere()
        assert Intersection(1.0, s1) == Intersection(1.0, s1)
        assert Intersection(1.0, s1) != Intersection(1.0, s2)
        assert Intersection(1.0, s1) != Intersection(2.0, s1)


class TestIntersectionsCollection:
    """Tests for the sorted intersection set."""

    def test_aggregate_intersections(self, sphere):
        """Test that intersections are counted and indexable."""
        xs = Intersections([Intersection(1.0, sphere), Intersection(2.0, sphere)])
        assert len(xs) == 2
        assert xs[0].t == 1.0
        assert xs[1].t == 2.0

    def test_intersections_sorted_by_t(self, sphere):
        """Test that construction sorts ascending by t."""
        xs = Intersections(Intersection(t, sphere) for t in [5.0, 7.0, -3.0, 2.0])
        assert [i.t for i in xs] == [-3.0, 2.0, 5.0, 7.0]

    def test_empty_set(self):
        """Test that an empty set has no hit and is falsy."""
        xs = Intersections()
        assert len(xs) == 0
        assert not xs
        assert xs.hit() is None

    def test_out_of_range_index_fails(self, sphere):
        """Test that indexing past the end raises."""
        xs = Intersections([Intersection(1.0, sphere)])
        with pytest.raises(IndexError):
            xs[1]

    def test_shape_intersect_sets_object(self, sphere):
        """Test that a shape's intersections refer back to that shape."""
        xs = sphere.intersect(Ray(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0)))
        assert len(xs) == 2
        assert xs[0].object is sphere
        assert xs[1].object is sphere


class TestHit:
    """Tests for hit selection."""

    def test_hit_all_positive(self, sphere):
        """Test the hit when all intersections have positive t."""
        i1 = Intersection(1.0, sphere)
        i2 = Intersection(2.0, sphere)
        assert Intersections([i2, i1]).hit() == i1

    def test_hit_some_negative(self, sphere):
        """Test the hit when some intersections have negative t."""
        i1 = Intersection(-1.0, sphere)
        i2 = Intersection(1.0, sphere)
        assert Intersections([i2, i1]).hit() == i2

    def test_hit_all_negative(self, sphere):
        """Test that there is no hit when all t are negative."""
        xs = Intersections([Intersection(-2.0, sphere), Intersection(-1.0, sphere)])
        assert xs.hit() is None

    def test_hit_at_zero_counts(self, sphere):
        """Test that t == 0 is a valid hit."""
        i0 = Intersection(0.0, sphere)
        assert Intersections([Intersection(-1.0, sphere), i0]).hit() == i0

    def test_hit_lowest_non_negative(self, sphere):
        """Test that the hit is always the lowest non-negative intersection."""
        i4 = Intersection(2.0, sphere)
        xs = Intersections(
            [Intersection(5.0, sphere), Intersection(7.0, sphere), Intersection(-3.0, sphere), i4]
        )
        assert xs.hit() == i4

    def test_hit_independent_of_input_order(self, sphere):
        """Test every ordering of the inputs selects the same hit."""
        items = [Intersection(t, sphere) for t in [5.0, 7.0, -3.0, 2.0, -0.5]]
        for order in itertools.permutations(items):
            assert Intersections(order).hit().t == 2.0


class TestExtend:
    """Tests for merging intersection sets."""

    def test_extend_gets_union(self):
        """Test merging two shapes' intersections selects the global hit."""
        s1 = Sphere()
        xs1 = Intersections(Intersection(t, s1) for t in [5.0, 7.0, -3.0, 2.0])
        s2 = Sphere()
        i6 = Intersection(1.0, s2)
        xs2 = Intersections([Intersection(-1.0, s2), i6, Intersection(2.0, s2)])

        xs1.extend(xs2)

        assert len(xs1) == 7
        assert xs1.hit() == i6
        assert [i.t for i in xs1] == sorted(i.t for i in xs1)
        # The merged-in set is untouched
        assert len(xs2) == 3

    def test_extend_into_set_without_hit(self, sphere):
        """Test that a hit from the other side is adopted."""
        xs = Intersections([Intersection(-1.0, sphere)])
        i = Intersection(3.0, sphere)
        xs.extend(Intersections([i]))
        assert xs.hit() == i

    def test_extend_with_set_without_hit(self, sphere):
        """Test that an existing hit survives merging a hitless set."""
        i = Intersection(3.0, sphere)
        xs = Intersections([i])
        xs.extend(Intersections([Intersection(-4.0, sphere)]))
        assert xs.hit() == i
        assert [x.t for x in xs] == [-4.0, 3.0]

    def test_extend_both_without_hit(self, sphere):
        """Test merging two hitless sets stays hitless."""
        xs = Intersections([Intersection(-1.0, sphere)])
        xs.extend(Intersections([Intersection(-2.0, sphere)]))
        assert xs.hit() is None
        assert len(xs) == 2

    @pytest.mark.parametrize(
        "ts_a, ts_b",
        [
            ([4.0, 6.0], [4.5, 5.5]),
            ([-1.0, 1.0], [0.5, 3.0]),
            ([-6.0, -4.0], [2.0]),
            ([-2.0], [-3.0]),
            ([], [1.0, 2.0]),
        ],
    )
    def test_extend_is_commutative(self, ts_a, ts_b):
        """Test A+B and B+A agree on count and hit distance."""
        sa, sb = Sphere(), Sphere()

        ab = Intersections(Intersection(t, sa) for t in ts_a)
        ab.extend(Intersections(Intersection(t, sb) for t in ts_b))
        ba = Intersections(Intersection(t, sb) for t in ts_b)
        ba.extend(Intersections(Intersection(t, sa) for t in ts_a))

        assert len(ab) == len(ba)
        hit_ab, hit_ba = ab.hit(), ba.hit()
        assert (hit_ab is None) == (hit_ba is None)
        if hit_ab is not None:
            assert hit_ab.t == hit_ba.t


class TestPrepareComputations:
    """Tests for derived shading geometry."""

    def test_precompute_state(self, sphere):
        """Test the point and eye vector of a precomputed hit."""
        ray = Ray(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0))
        i = Intersection(4.0, sphere)
        comps = i.prepare_computations(ray)

        assert comps.t == i.t
        assert comps.object is sphere
        assert approx_equal(comps.point, point(0.0, 0.0, -1.0))
        assert approx_equal(comps.eyev, vector(0.0, 0.0, -1.0))
        assert approx_equal(comps.normalv, vector(0.0, 0.0, -1.0))

    def test_hit_on_outside(self, sphere):
        """Test that a hit from outside is not flagged as inside."""
        ray = Ray(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0))
        comps = Intersection(4.0, sphere).prepare_computations(ray)
        assert comps.inside is False

    def test_hit_on_inside(self, sphere):
        """Test that a hit from inside flips the normal toward the eye."""
        ray = Ray(point(0.0, 0.0, 0.0), vector(0.0, 0.0, 1.0))
        comps = Intersection(1.0, sphere).prepare_computations(ray)

        assert approx_equal(comps.point, point(0.0, 0.0, 1.0))
        assert approx_equal(comps.eyev, vector(0.0, 0.0, -1.0))
        assert comps.inside is True
        assert approx_equal(comps.normalv, vector(0.0, 0.0, -1.0))

    def test_hit_offsets_point(self):
        """Test that over_point sits above the surface by at least EPSILON/2."""
        ray = Ray(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0))
        shape = Sphere(transform=translation(0.0, 0.0, 1.0))
        comps = Intersection(5.0, shape).prepare_computations(ray)

        assert comps.over_point[2] < -EPSILON / 2
        assert comps.point[2] > comps.over_point[2]

    def test_over_point_follows_flipped_normal(self):
        """Test the offset stays on the eye side when hitting a plane from below."""
        plane = Plane()
        ray = Ray(point(0.0, -1.0, 0.0), vector(0.0, 1.0, 0.0))
        comps = Intersection(1.0, plane).prepare_computations(ray)

        assert comps.inside is True
        assert approx_equal(comps.normalv, vector(0.0, -1.0, 0.0))
        assert comps.over_point[1] < -EPSILON / 2

    @pytest.mark.parametrize(
        "origin, direction",
        [
            ((0.0, 0.0, -5.0), (0.0, 0.0, 1.0)),
            ((0.0, 0.0, 0.0), (0.0, 1.0, 0.0)),
            ((3.0, 2.0, -4.0), (-0.5, -0.3, 0.8)),
            ((0.2, 0.1, 0.0), (1.0, 1.0, 1.0)),
        ],
    )
    def test_normal_always_faces_eye(self, origin, direction):
        """Test that every hit yields dot(normalv, eyev) >= 0."""
        sphere = Sphere()
        d = vector(*direction)
        ray = Ray(point(*origin), d / math.sqrt(dot(d, d)))
        for i in sphere.intersect(ray):
            comps = i.prepare_computations(ray)
            assert dot(comps.normalv, comps.eyev) >= 0.0
            raw_normal = sphere.normal_at(comps.point)
            assert comps.inside == (dot(raw_normal, comps.eyev) < 0.0)
