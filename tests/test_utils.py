"""Tests for the geometry and spatial helpers in polydissolve.core."""

import numpy as np
import pytest
from shapely.geometry import LinearRing, LineString, MultiPolygon, Point, Polygon, box

from polydissolve.core import InvalidGeometryType, InvalidRingShape, SharedEdgePolicy
from polydissolve.core.geometry_utils import (
    as_linear_ring,
    as_shell_polygon,
    iter_polygons,
    ring_coordinates,
)
from polydissolve.core.spatial_utils import (
    build_envelope_index,
    envelope_scan_order,
    envelopes_intersect,
)
from polydissolve.core.types import coerce_enum


class TestGeometryUtils:
    """Tests for polygon decomposition and ring coercion."""

    def test_iter_polygons(self):
        poly = box(0, 0, 1, 1)
        multi = MultiPolygon([box(0, 0, 1, 1), box(2, 2, 3, 3)])

        assert list(iter_polygons(poly)) == [poly]
        assert len(list(iter_polygons(multi))) == 2

    def test_iter_polygons_rejects_points(self):
        with pytest.raises(InvalidGeometryType):
            list(iter_polygons(Point(0, 0)))

    def test_ring_coordinates_exterior_first(self):
        hole = [(4, 4), (6, 4), (6, 6), (4, 6)]
        poly = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)], holes=[hole])

        rings = ring_coordinates(poly)

        assert len(rings) == 2
        assert isinstance(rings[0], np.ndarray)
        assert rings[0].shape == (5, 2)
        np.testing.assert_array_equal(rings[1][0], [4, 4])

    def test_ring_coordinates_empty(self):
        assert ring_coordinates(Polygon()) == []

    def test_as_linear_ring(self):
        ring = LinearRing([(0, 0), (1, 0), (1, 1)])
        assert as_linear_ring(ring) is ring
        assert isinstance(as_linear_ring(box(0, 0, 1, 1)), LinearRing)
        closed = LineString([(0, 0), (1, 0), (1, 1), (0, 0)])
        assert isinstance(as_linear_ring(closed), LinearRing)

    def test_as_linear_ring_rejects(self):
        with pytest.raises(InvalidRingShape):
            as_linear_ring(LineString([(0, 0), (1, 0), (1, 1)]))
        with pytest.raises(InvalidRingShape):
            as_linear_ring(Point(0, 0))

    def test_as_linear_ring_rejects_degenerate(self):
        with pytest.raises(InvalidRingShape):
            as_linear_ring(LineString([(0, 0), (1, 1), (0, 0)]))
        with pytest.raises(InvalidRingShape):
            as_linear_ring(LinearRing())
        with pytest.raises(InvalidRingShape):
            as_linear_ring(Polygon())

    def test_as_shell_polygon_rejects_empty(self):
        with pytest.raises(InvalidRingShape):
            as_shell_polygon(LinearRing())
        with pytest.raises(InvalidRingShape):
            as_shell_polygon(Polygon())

    def test_as_shell_polygon(self):
        poly = box(0, 0, 1, 1)
        assert as_shell_polygon(poly) is poly
        shell = as_shell_polygon(LinearRing([(0, 0), (1, 0), (1, 1)]))
        assert isinstance(shell, Polygon)
        assert shell.area == pytest.approx(0.5)


class TestSpatialUtils:
    """Tests for envelope ordering and indexing."""

    def test_scan_order_by_min_x(self):
        geoms = [box(5, 0, 6, 1), box(0, 50, 1, 51), box(2, -10, 3, -9)]
        assert envelope_scan_order(geoms) == [1, 2, 0]

    def test_scan_order_ties_prefer_larger_envelope(self):
        small = box(0, 0, 1, 1)
        big = box(0, 0, 10, 10)
        assert envelope_scan_order([small, big]) == [1, 0]

    def test_scan_order_is_stable(self):
        a = box(0, 0, 1, 1)
        b = box(0, 5, 1, 6)
        assert envelope_scan_order([a, b]) == [0, 1]
        assert envelope_scan_order([b, a]) == [0, 1]

    def test_scan_order_empty(self):
        assert envelope_scan_order([]) == []

    def test_envelopes_intersect(self):
        assert envelopes_intersect(box(0, 0, 2, 2), box(1, 1, 3, 3))
        assert envelopes_intersect(box(0, 0, 1, 1), box(1, 0, 2, 1))
        assert not envelopes_intersect(box(0, 0, 1, 1), box(2, 2, 3, 3))

    def test_build_envelope_index(self):
        geoms = [box(0, 0, 10, 10), box(2, 2, 3, 3), box(20, 20, 21, 21)]
        tree = build_envelope_index(geoms)

        hits = sorted(int(i) for i in tree.query(geoms[0]))
        assert hits == [0, 1]


class TestCoerceEnum:
    """Tests for coerce_enum()."""

    def test_member_passthrough(self):
        assert coerce_enum(SharedEdgePolicy.WARN, SharedEdgePolicy) is SharedEdgePolicy.WARN

    def test_string_value(self):
        assert coerce_enum("warn", SharedEdgePolicy) is SharedEdgePolicy.WARN
        assert coerce_enum("WARN", SharedEdgePolicy) is SharedEdgePolicy.WARN

    def test_unknown(self):
        with pytest.raises(ValueError, match="SharedEdgePolicy"):
            coerce_enum("never", SharedEdgePolicy)
        with pytest.raises(ValueError):
            coerce_enum(3, SharedEdgePolicy)
