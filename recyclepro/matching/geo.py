"""Point-in-boundary predicates for zone matching.

Coordinates are decimal degrees. Distances are great-circle meters.
"""

from __future__ import annotations

from math import atan2, cos, radians, sin, sqrt
from typing import Sequence

from recyclepro.models import Boundary, CircleBoundary, Coordinates, PolygonBoundary

EARTH_RADIUS_M = 6_371_000.0


def haversine_m(a: Coordinates, b: Coordinates) -> float:
    phi1, phi2 = radians(a.lat), radians(b.lat)
    dphi = radians(b.lat - a.lat)
    dlambda = radians(b.lng - a.lng)
    h = sin(dphi / 2) ** 2 + cos(phi1) * cos(phi2) * sin(dlambda / 2) ** 2
    return EARTH_RADIUS_M * 2 * atan2(sqrt(h), sqrt(1 - h))


def point_in_circle(point: Coordinates, boundary: CircleBoundary) -> bool:
    return haversine_m(point, boundary.center) <= boundary.radius_m


def point_in_polygon(point: Coordinates, vertices: Sequence[Coordinates]) -> bool:
    """Even-odd ray casting with lng as x and lat as y.

    The ring does not need to repeat its first vertex; the edge from the last
    vertex back to the first is always tested.
    """
    inside = False
    n = len(vertices)
    j = n - 1
    for i in range(n):
        xi, yi = vertices[i].lng, vertices[i].lat
        xj, yj = vertices[j].lng, vertices[j].lat
        if (yi > point.lat) != (yj > point.lat):
            x_cross = (xj - xi) * (point.lat - yi) / (yj - yi) + xi
            if point.lng < x_cross:
                inside = not inside
        j = i
    return inside


def within_boundary(point: Coordinates, boundary: Boundary) -> bool:
    if isinstance(boundary, CircleBoundary):
        return point_in_circle(point, boundary)
    if isinstance(boundary, PolygonBoundary):
        return point_in_polygon(point, boundary.vertices)
    return False
