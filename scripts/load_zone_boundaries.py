#!/usr/bin/env python3
"""Convert a GeoJSON FeatureCollection of zone polygons into boundary data.

Each feature needs a ``zone_id`` property (override with --id-field). Output
is JSON keyed by zone id with the implicitly-closed vertex ring, ready to be
pasted into town reference data. With --geojson the normalized rings are
written back out as a FeatureCollection instead.

Usage: python load_zone_boundaries.py <geojson_path> [--id-field zone_id] [--check LAT,LNG] [--geojson]
Example: python load_zone_boundaries.py /data/paramus_zones.geojson --check 40.945,-74.07
"""
import argparse
import json
import logging
import sys

from recyclepro.matching.geo import point_in_polygon
from recyclepro.models import Coordinates
from recyclepro.utils.geo import boundary_from_geojson, boundary_to_geojson

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)


def load_boundaries(path: str, id_field: str = "zone_id") -> dict:
    logger.info(f"Loading {path}")
    with open(path, "r") as f:
        data = json.load(f)

    features = data.get("features", [])
    logger.info(f"Total features in file: {len(features)}")

    boundaries = {}
    skipped = 0
    for feat in features:
        zone_id = (feat.get("properties") or {}).get(id_field)
        geom = feat.get("geometry")
        if not zone_id or not geom:
            skipped += 1
            continue
        try:
            boundaries[zone_id] = boundary_from_geojson(geom)
        except ValueError as e:
            logger.warning(f"Skipping {zone_id}: {e}")
            skipped += 1

    logger.info(f"Done. Loaded {len(boundaries)} boundaries, skipped {skipped}")
    return boundaries


def main():
    parser = argparse.ArgumentParser(description="Convert zone polygons from GeoJSON")
    parser.add_argument("path")
    parser.add_argument("--id-field", default="zone_id")
    parser.add_argument("--check", help="LAT,LNG point to test against every boundary")
    parser.add_argument("--geojson", action="store_true", help="Write a normalized FeatureCollection")
    args = parser.parse_args()

    boundaries = load_boundaries(args.path, args.id_field)

    if args.check:
        lat, lng = (float(v) for v in args.check.split(","))
        point = Coordinates(lat=lat, lng=lng)
        for zone_id, boundary in boundaries.items():
            inside = point_in_polygon(point, boundary.vertices)
            logger.info(f"  {zone_id}: {'inside' if inside else 'outside'}")

    if args.geojson:
        out = {
            "type": "FeatureCollection",
            "features": [
                {"type": "Feature", "properties": {args.id_field: zone_id}, "geometry": boundary_to_geojson(b)}
                for zone_id, b in boundaries.items()
            ],
        }
    else:
        out = {
            zone_id: [{"lat": v.lat, "lng": v.lng} for v in b.vertices]
            for zone_id, b in boundaries.items()
        }
    json.dump(out, sys.stdout, indent=2)
    print()


if __name__ == "__main__":
    main()
