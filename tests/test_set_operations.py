"""
Tests for Intersection, Hull Union and N-ary Helpers
"""

import numpy as np
import pytest
from real_interval import Interval, InvalidBoundsError, enclose, hull, intersection


class TestIntervalIntersection:
    """Test interval intersection."""

    def test_overlapping(self):
        """Test overlapping intervals."""
        iv = Interval(-1.0, 2.0)
        shifted = iv + 0.5
        assert shifted == Interval(-0.5, 2.5)
        assert iv & shifted == Interval(-0.5, 2.0)

    def test_disjoint(self):
        """Disjoint intervals have no intersection."""
        assert (Interval(0.0, 1.0) & Interval(2.0, 3.0)) is None
        assert Interval(2.0, 3.0).intersect(Interval(0.0, 1.0)) is None

    def test_touching(self):
        """Touching intervals meet in a single point."""
        result = Interval(0.0, 1.0) & Interval(1.0, 2.0)
        assert result == Interval.point(1.0)
        assert result.is_degenerate

    def test_nested(self):
        """The inner interval is the intersection."""
        outer = Interval(-5.0, 5.0)
        inner = Interval(-1.0, 2.0)
        assert outer & inner == inner
        assert inner & outer == inner

    def test_degenerate_operand(self):
        """A point intersects an interval containing it."""
        assert Interval(0.0, 2.0) & Interval.point(1.0) == Interval.point(1.0)
        assert (Interval(0.0, 2.0) & Interval.point(3.0)) is None

    def test_non_interval_operand(self):
        """Intersecting with a scalar is a type error."""
        with pytest.raises(TypeError):
            Interval(0.0, 1.0) & 1.0


class TestIntervalUnion:
    """Test convex hull union."""

    def test_overlapping(self):
        """Hull of overlapping intervals."""
        iv = Interval(-1.0, 2.0)
        assert iv | (iv + 0.5) == Interval(-1.0, 2.5)

    def test_disjoint_includes_gap(self):
        """Hull of disjoint intervals spans the gap."""
        assert Interval(0.0, 1.0) | Interval(2.0, 3.0) == Interval(0.0, 3.0)
        assert Interval(2.0, 3.0).hull_union(Interval(0.0, 1.0)) == Interval(0.0, 3.0)

    def test_points(self):
        """Hull of two points."""
        assert Interval.point(1.0) | Interval.point(-1.0) == Interval(-1.0, 1.0)

    def test_contains_both(self):
        """The hull contains both operands."""
        a = Interval(-3.0, -1.0)
        b = Interval(4.0, 8.0)
        h = a | b
        assert h & a == a
        assert h & b == b


class TestHelpers:
    """Test n-ary helpers."""

    def test_hull(self):
        """Hull of several intervals."""
        result = hull(Interval(0.0, 1.0), Interval(5.0, 6.0), Interval(-2.0, -1.0))
        assert result == Interval(-2.0, 6.0)
        assert hull(Interval(1.0, 2.0)) == Interval(1.0, 2.0)

    def test_intersection(self):
        """Intersection of several intervals."""
        result = intersection(Interval(0.0, 4.0), Interval(1.0, 5.0), Interval(-1.0, 3.0))
        assert result == Interval(1.0, 3.0)

    def test_intersection_empty(self):
        """Any disjoint pair empties the result."""
        result = intersection(Interval(0.0, 4.0), Interval(5.0, 6.0), Interval(0.0, 10.0))
        assert result is None

    def test_enclose(self):
        """Enclose sample values."""
        assert enclose([0.5, -1.0, 2.0, 1.25]) == Interval(-1.0, 2.0)
        assert enclose(np.array([3.0])) == Interval.point(3.0)
        assert enclose(x / 2 for x in range(5)) == Interval(0.0, 2.0)

    def test_enclose_nan(self):
        """NaN samples are rejected."""
        with pytest.raises(InvalidBoundsError):
            enclose([1.0, float("nan")])

    @pytest.mark.parametrize("func", [hull, intersection])
    def test_no_intervals(self, func):
        """Helpers need at least one interval."""
        with pytest.raises(ValueError):
            func()

    def test_enclose_empty(self):
        """enclose needs at least one value."""
        with pytest.raises(ValueError):
            enclose([])
