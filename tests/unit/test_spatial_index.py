"""
test_spatial_index.py - Tests for the seat grid index and hit testing

Tests for:
- Index completeness
- Multi-cell registration and cell boundaries
- Over-inclusive candidates versus precise hits
- Rebuild and clear
"""

import pytest


def seat_geometry(x, y, width=0.5, depth=0.5):
    from seatmap.geometry.cabin import SeatGeometry
    from seatmap.geometry.primitives import CabinCoordinate

    return SeatGeometry(center=CabinCoordinate(x, y), width=width, depth=depth)


class TestSpatialIndex:
    """Tests for SpatialIndex."""

    def test_seat_spanning_cells_registered_in_each(self):
        from seatmap.spatial.index import GridKey, SpatialIndex

        index = SpatialIndex()
        index.insert(0, seat_geometry(1.0, 1.0))

        assert sorted(index.cells_for(0), key=lambda k: (k.x, k.y)) == [
            GridKey(0, 0), GridKey(0, 1), GridKey(1, 0), GridKey(1, 1),
        ]
        assert len(index) == 4

    def test_max_edge_on_boundary_stays_in_cell(self):
        from seatmap.spatial.index import GridKey, SpatialIndex

        index = SpatialIndex()
        index.insert(0, seat_geometry(0.5, 0.5, width=1.0, depth=1.0))

        assert index.cells_for(0) == [GridKey(0, 0)]

    def test_negative_coordinates_floor(self):
        from seatmap.geometry.primitives import CabinCoordinate
        from seatmap.spatial.index import GridKey, SpatialIndex

        index = SpatialIndex()

        assert index.cell_key(CabinCoordinate(-0.2, 3.9)) == GridKey(-1, 3)

    def test_query_far_point_is_empty(self):
        from seatmap.geometry.primitives import CabinCoordinate
        from seatmap.spatial.index import SpatialIndex

        index = SpatialIndex.build([seat_geometry(1.0, 1.0)])

        assert index.query(CabinCoordinate(100.0, 100.0)) == []

    def test_query_returns_copy(self):
        from seatmap.geometry.primitives import CabinCoordinate
        from seatmap.spatial.index import SpatialIndex

        index = SpatialIndex.build([seat_geometry(1.0, 1.0)])
        index.query(CabinCoordinate(1.0, 1.0)).append(99)

        assert index.query(CabinCoordinate(1.0, 1.0)) == [0]

    def test_clear(self):
        from seatmap.geometry.primitives import CabinCoordinate
        from seatmap.spatial.index import SpatialIndex

        index = SpatialIndex.build([seat_geometry(1.0, 1.0), seat_geometry(3.0, 3.0)])
        index.clear()

        assert len(index) == 0
        assert index.seat_count == 0
        assert index.query(CabinCoordinate(1.0, 1.0)) == []

    def test_query_rect(self):
        from seatmap.geometry.primitives import Rect
        from seatmap.spatial.index import SpatialIndex

        index = SpatialIndex.build([seat_geometry(1.0, 1.0), seat_geometry(5.0, 5.0)])

        assert index.query_rect(Rect(0.0, 0.0, 2.0, 2.0)) == {0}
        assert index.query_rect(Rect(0.0, 0.0, 6.0, 6.0)) == {0, 1}

    def test_invalid_cell_size(self):
        from seatmap.spatial.index import SpatialIndex

        with pytest.raises(ValueError):
            SpatialIndex(cell_size=0.0)


class TestA320Index:
    """Index properties over the generated A320 layout."""

    def test_every_seat_indexed(self, a320_layout):
        from seatmap.spatial.hit_test import SeatHitTester

        index = SeatHitTester(a320_layout).index

        assert index.indexed_seats == set(range(160))

    def test_completeness(self, a320_layout):
        """Every point inside a seat finds that seat among the candidates."""
        from seatmap.geometry.primitives import CabinCoordinate
        from seatmap.spatial.hit_test import SeatHitTester

        tester = SeatHitTester(a320_layout)
        for i, seat in enumerate(a320_layout.seats):
            rect = seat.rect
            for fx, fy in [(0.5, 0.5), (0.01, 0.01), (0.99, 0.99), (0.01, 0.99)]:
                point = CabinCoordinate(rect.x + fx * rect.width, rect.y + fy * rect.height)
                assert i in tester.candidates(point), f"{seat.id} missing at {point}"
                assert tester.hit(point) is seat

    def test_absent_more_than_one_cell_away(self, a320_layout):
        """No seat is a candidate for a point over a cell width beyond any of its edges."""
        from seatmap.core.constants import GRID_CELL_SIZE_M
        from seatmap.geometry.primitives import CabinCoordinate
        from seatmap.spatial.hit_test import SeatHitTester

        index = SeatHitTester(a320_layout).index
        reach = GRID_CELL_SIZE_M + 0.01
        for i, seat in enumerate(a320_layout.seats):
            rect = seat.rect
            cx, cy = rect.center
            far_points = [
                CabinCoordinate(rect.min_x - reach, cy),
                CabinCoordinate(rect.max_x + reach, cy),
                CabinCoordinate(cx, rect.min_y - reach),
                CabinCoordinate(cx, rect.max_y + reach),
                CabinCoordinate(rect.max_x + reach, rect.max_y + reach),
            ]
            for point in far_points:
                assert i not in index.query(point), f"{seat.id} listed at {point}"


class TestSeatHitTester:
    """Tests for candidate lookup versus precise hits."""

    def test_candidates_are_over_inclusive(self, a320_layout):
        """A point in 1A's cell but outside 1A still lists 1A as a candidate."""
        from seatmap.geometry.primitives import CabinCoordinate
        from seatmap.spatial.hit_test import SeatHitTester

        tester = SeatHitTester(a320_layout)
        point = CabinCoordinate(-1.9, 1.5)

        assert a320_layout.seat_index("1A") in tester.candidates(point)
        assert tester.hit(point) is None

    def test_hit_between_seats_is_none(self, a320_layout):
        """The gap between 1A and 1C is in a shared cell but hits nothing."""
        from seatmap.geometry.primitives import CabinCoordinate
        from seatmap.spatial.hit_test import SeatHitTester

        tester = SeatHitTester(a320_layout)
        point = CabinCoordinate(-1.295, 2.0)

        assert len(tester.candidates(point)) >= 2
        assert tester.hit(point) is None

    def test_aisle_is_empty(self, a320_layout):
        from seatmap.geometry.primitives import CabinCoordinate
        from seatmap.spatial.hit_test import SeatHitTester

        assert SeatHitTester(a320_layout).hit(CabinCoordinate(0.0, 20.0)) is None

    def test_hit_amenity(self, a320_layout):
        from seatmap.geometry.primitives import CabinCoordinate
        from seatmap.spatial.hit_test import SeatHitTester

        tester = SeatHitTester(a320_layout)

        assert tester.hit_amenity(CabinCoordinate(-1.2, 1.0)).id == "lav-front-left"
        assert tester.hit_amenity(CabinCoordinate(0.0, 20.0)) is None

    def test_hit_view_point_without_context(self, a320_layout):
        from seatmap.geometry.primitives import ViewPoint
        from seatmap.spatial.hit_test import SeatHitTester

        assert SeatHitTester(a320_layout).hit_view_point(ViewPoint(10.0, 10.0), None) is None

    def test_hit_view_point(self, a320_layout, phone_viewport):
        from seatmap.geometry.primitives import ViewPoint
        from seatmap.spatial.hit_test import SeatHitTester
        from seatmap.transform.context import RenderingContext

        context = RenderingContext.create(a320_layout.bounds, phone_viewport, 2.0, ViewPoint(-20.0, 35.0))
        seat = a320_layout.seat_by_id("20E")

        found = SeatHitTester(a320_layout).hit_view_point(context.to_view(seat.geometry.center), context)

        assert found is seat

    def test_rebuild(self, a320_layout):
        from seatmap.geometry.primitives import CabinCoordinate
        from seatmap.layout.availability import MappedAvailability
        from seatmap.layout.generator import build_layout
        from seatmap.spatial.hit_test import SeatHitTester

        tester = SeatHitTester(a320_layout)
        replacement = build_layout("A320", MappedAvailability({}, default=False))
        tester.rebuild(replacement)

        seat = tester.hit(CabinCoordinate(-1.55, 2.0))
        assert tester.layout is replacement
        assert seat is replacement.seat_by_id("1A")
