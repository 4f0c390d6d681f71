"""Geo utility helpers: GeoJSON import/export for zone boundaries.

Containment checks during matching live in ``recyclepro.matching.geo``; this
module only converts between GeoJSON and boundary models.
"""

from __future__ import annotations

from shapely.geometry import MultiPolygon, Point, Polygon, mapping, shape

from recyclepro.models import Boundary, CircleBoundary, Coordinates, PolygonBoundary


def boundary_from_geojson(geometry: dict) -> PolygonBoundary:
    """Build a polygon boundary from a GeoJSON Polygon geometry.

    GeoJSON positions are ``[lng, lat]`` and rings repeat their first vertex;
    the repeated closing vertex is dropped because boundary rings close
    implicitly. For a MultiPolygon the largest member is used.
    """
    geom = shape(geometry)
    if isinstance(geom, MultiPolygon):
        geom = max(geom.geoms, key=lambda g: g.area)
    if not isinstance(geom, Polygon):
        raise ValueError(f"expected Polygon geometry, got {geom.geom_type}")
    if geom.is_empty:
        raise ValueError("empty polygon geometry")

    coords = list(geom.exterior.coords)
    if len(coords) > 1 and coords[0] == coords[-1]:
        coords = coords[:-1]
    return PolygonBoundary(vertices=tuple(Coordinates(lat=y, lng=x) for x, y in coords))


def boundary_to_geojson(boundary: Boundary) -> dict:
    """GeoJSON geometry for a boundary. Circles export as their center point."""
    if isinstance(boundary, CircleBoundary):
        return mapping(Point(boundary.center.lng, boundary.center.lat))
    ring = [(v.lng, v.lat) for v in boundary.vertices]
    return mapping(Polygon(ring))
