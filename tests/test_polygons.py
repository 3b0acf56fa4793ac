"""Tests for Polygon and MultiPolygon assembly and ring winding."""

import pytest
from geojson_assembler import (
    InvalidGeometry,
    is_counterclockwise,
    multi_polygon,
    polygon,
)


def _polygon_accessors(outer, holes):
    rings = [outer] + holes
    return len(rings), (lambda r: len(rings[r])), (lambda r, p: rings[r][p])


def _check_ring(ring, length, ccw):
    assert len(ring) == length + 1
    assert ring[0] == ring[-1]
    assert is_counterclockwise(ring) == ccw


class TestPolygon:
    def test_exterior_ccw_holes_cw(self, outer_3d, holes_3d):
        result = polygon(*_polygon_accessors(outer_3d, holes_3d))
        assert result["type"] == "Polygon"
        rings = result["coordinates"]
        assert len(rings) == 3
        _check_ring(rings[0], 4, True)
        _check_ring(rings[1], 3, False)
        _check_ring(rings[2], 3, False)

    def test_clockwise_exterior_is_reversed(self, square_cw):
        result = polygon(*_polygon_accessors(square_cw, []))
        ring = result["coordinates"][0]
        expected = [list(p) for p in reversed(square_cw)]
        assert ring == expected + [expected[0]]

    def test_rings_kept_in_input_order(self, outer_3d, holes_3d):
        result = polygon(*_polygon_accessors(outer_3d, holes_3d))
        # The first hole is already clockwise and comes out untouched
        assert result["coordinates"][1][:3] == [list(p) for p in holes_3d[0]]
        # The second one is reversed
        assert result["coordinates"][2][:3] == [list(p) for p in reversed(holes_3d[1])]

    def test_hole_detection_is_positional(self, square_ccw):
        """A ring is a hole because of its index, not its shape."""
        big = [(x * 10, y * 10) for x, y in square_ccw]
        result = polygon(*_polygon_accessors(square_ccw, [big]))
        _check_ring(result["coordinates"][0], 4, True)
        _check_ring(result["coordinates"][1], 4, False)

    def test_2d_and_3d_match(self, outer_3d, holes_3d):
        flat_outer = [p[:2] for p in outer_3d]
        flat_holes = [[p[:2] for p in hole] for hole in holes_3d]
        result_3d = polygon(*_polygon_accessors(outer_3d, holes_3d))
        result_2d = polygon(*_polygon_accessors(flat_outer, flat_holes))
        stripped = [[pos[:2] for pos in ring] for ring in result_3d["coordinates"]]
        assert stripped == result_2d["coordinates"]

    def test_no_rings(self):
        with pytest.raises(InvalidGeometry):
            polygon(0, lambda r: 0, lambda r, p: (0, 0))

    def test_degenerate_hole_reports_index(self, outer_3d):
        rings = [outer_3d, outer_3d[:2]]
        with pytest.raises(InvalidGeometry) as exc_info:
            polygon(2, lambda r: len(rings[r]), lambda r, p: rings[r][p])
        assert exc_info.value.path == (1,)

    def test_lazy_call_order(self, recorder, square_ccw):
        rings = [square_ccw, square_ccw[:3]]
        events = []
        get_length = recorder(lambda r: events.append(("length", r)) or len(rings[r]))
        get_point = recorder(lambda r, p: events.append(("point", r, p)) or rings[r][p])
        polygon(2, get_length, get_point)
        assert events == (
            [("length", 0)] + [("point", 0, p) for p in range(4)]
            + [("length", 1)] + [("point", 1, p) for p in range(3)]
        )

    def test_idempotent(self, outer_3d, holes_3d):
        accessors = _polygon_accessors(outer_3d, holes_3d)
        assert polygon(*accessors) == polygon(*accessors)


class TestMultiPolygon:
    @pytest.fixture
    def polygons(self, outer_3d, holes_3d):
        return [
            [outer_3d] + holes_3d,
            [[(1, 2, 3), (4, 2, 6), (4, 5, 9)]],
        ]

    @staticmethod
    def _build(polygons):
        return multi_polygon(
            len(polygons),
            lambda i: len(polygons[i]),
            lambda i, r: len(polygons[i][r]),
            lambda i, r, p: polygons[i][r][p],
        )

    def test_each_polygon_normalized(self, polygons):
        result = self._build(polygons)
        assert result["type"] == "MultiPolygon"
        coords = result["coordinates"]
        assert len(coords) == 2
        assert len(coords[0]) == 3
        assert len(coords[1]) == 1
        for rings in coords:
            for r, ring in enumerate(rings):
                assert ring[0] == ring[-1]
                assert is_counterclockwise(ring) == (r == 0)

    def test_same_as_polygon(self, polygons):
        result = self._build(polygons)
        for i, rings in enumerate(polygons):
            single = polygon(len(rings), lambda r: len(rings[r]), lambda r, p: rings[r][p])
            assert result["coordinates"][i] == single["coordinates"]

    def test_empty(self):
        result = multi_polygon(0, lambda i: 1, lambda i, r: 3, lambda i, r, p: (0, 0))
        assert result == {"type": "MultiPolygon", "coordinates": []}

    def test_polygon_without_rings(self, polygons):
        polygons.append([])
        with pytest.raises(InvalidGeometry) as exc_info:
            self._build(polygons)
        assert exc_info.value.path == (2,)

    def test_degenerate_ring_reports_path(self, polygons):
        polygons[1].append([(0, 0, 0), (1, 1, 1)])
        with pytest.raises(InvalidGeometry) as exc_info:
            self._build(polygons)
        assert exc_info.value.path == (1, 1)
        assert "[1][1]" in str(exc_info.value)

    def test_lazy_call_order(self, recorder, square_ccw):
        polygons = [[square_ccw[:3]], [square_ccw[:3], square_ccw[1:]]]
        events = []
        get_num_rings = recorder(lambda i: events.append(("rings", i)) or len(polygons[i]))
        get_length = recorder(lambda i, r: events.append(("length", i, r)) or len(polygons[i][r]))
        get_point = recorder(lambda i, r, p: events.append(("point", i, r, p)) or polygons[i][r][p])
        multi_polygon(2, get_num_rings, get_length, get_point)
        assert events == (
            [("rings", 0), ("length", 0, 0)] + [("point", 0, 0, p) for p in range(3)]
            + [("rings", 1), ("length", 1, 0)] + [("point", 1, 0, p) for p in range(3)]
            + [("length", 1, 1)] + [("point", 1, 1, p) for p in range(3)]
        )

    def test_2d_and_3d_match(self, polygons):
        flat = [[[p[:2] for p in ring] for ring in rings] for rings in polygons]
        result_3d = self._build(polygons)
        result_2d = self._build(flat)
        stripped = [
            [[pos[:2] for pos in ring] for ring in rings]
            for rings in result_3d["coordinates"]
        ]
        assert stripped == result_2d["coordinates"]
