"""Tests for circle and polygon containment."""
import math

from recyclepro.matching.geo import EARTH_RADIUS_M, haversine_m, point_in_polygon, within_boundary
from recyclepro.models import CircleBoundary, Coordinates, PolygonBoundary

CENTER = Coordinates(lat=40.9545, lng=-74.0354)


def _north_of(origin: Coordinates, meters: float) -> Coordinates:
    return Coordinates(lat=origin.lat + math.degrees(meters / EARTH_RADIUS_M), lng=origin.lng)


SQUARE = (
    Coordinates(lat=0.0, lng=0.0),
    Coordinates(lat=0.0, lng=10.0),
    Coordinates(lat=10.0, lng=10.0),
    Coordinates(lat=10.0, lng=0.0),
)


class TestHaversine:
    def test_same_point_is_zero(self):
        assert haversine_m(CENTER, CENTER) == 0.0

    def test_one_degree_latitude(self):
        d = haversine_m(Coordinates(0.0, 0.0), Coordinates(1.0, 0.0))
        assert abs(d - 111_194.9) < 1.0


class TestCircle:
    def test_center_matches_zero_radius(self):
        assert within_boundary(CENTER, CircleBoundary(center=CENTER, radius_m=0))

    def test_one_meter_beyond_radius_does_not_match(self):
        boundary = CircleBoundary(center=CENTER, radius_m=100)
        assert not within_boundary(_north_of(CENTER, 101), boundary)

    def test_inside_radius_matches(self):
        boundary = CircleBoundary(center=CENTER, radius_m=100)
        assert within_boundary(_north_of(CENTER, 99), boundary)


class TestPolygon:
    def test_inside(self):
        assert point_in_polygon(Coordinates(5.0, 5.0), SQUARE)

    def test_outside(self):
        assert not point_in_polygon(Coordinates(15.0, 5.0), SQUARE)
        assert not point_in_polygon(Coordinates(5.0, -1.0), SQUARE)

    def test_explicitly_closed_ring_gives_same_answer(self):
        closed = SQUARE + (SQUARE[0],)
        assert point_in_polygon(Coordinates(5.0, 5.0), closed)
        assert not point_in_polygon(Coordinates(15.0, 5.0), closed)

    def test_concave_notch_is_outside(self):
        # U shape: notch between lng 4 and 6 above lat 5
        ring = (
            Coordinates(0, 0), Coordinates(0, 10), Coordinates(10, 10), Coordinates(10, 6),
            Coordinates(5, 6), Coordinates(5, 4), Coordinates(10, 4), Coordinates(10, 0),
        )
        assert not point_in_polygon(Coordinates(8, 5), ring)
        assert point_in_polygon(Coordinates(8, 2), ring)

    def test_empty_ring(self):
        assert not point_in_polygon(Coordinates(0, 0), ())

    def test_boundary_dispatch(self):
        assert within_boundary(Coordinates(5.0, 5.0), PolygonBoundary(vertices=SQUARE))
