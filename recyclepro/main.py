"""Recycle Pro command line entry point.

Commands:
  find-zone  Match a street address to a collection zone in a town
  disposal   Resolve how to dispose of an item at a location
  serve      Run the HTTP API with uvicorn

CLI: python -m recyclepro.main find-zone --town oradell-nj "650 Oradell Ave"
"""

import argparse
import json
import logging
import sys

from recyclepro.config import settings
from recyclepro.data import ItemNotFoundError, TownNotFoundError, require_item, require_town
from recyclepro.logging_utils import configure_logging
from recyclepro.matching import match_zone
from recyclepro.models import Coordinates, SavedLocation
from recyclepro.rules import describe_disposal_method, describe_rule_scope, resolve_disposal

logger = logging.getLogger("recyclepro.main")


def _coordinates(args) -> Coordinates | None:
    if args.lat is None and args.lng is None:
        return None
    if args.lat is None or args.lng is None:
        raise SystemExit("--lat and --lng must be given together")
    return Coordinates(lat=args.lat, lng=args.lng)


def cmd_find_zone(args) -> int:
    town = require_town(args.town)
    match = match_zone(args.address, town.zones, _coordinates(args))
    if match is None:
        print(json.dumps({"zone": None, "strategy": None}))
        return 1
    print(json.dumps({"zone": match.zone.id, "name": match.zone.name, "strategy": match.strategy}))
    return 0


def _location(args) -> SavedLocation | None:
    if not args.town:
        return None
    town = require_town(args.town)
    zone_id = args.zone
    if zone_id is None and args.address:
        match = match_zone(args.address, town.zones, _coordinates(args))
        zone_id = match.zone.id if match else None
    return SavedLocation(
        town_id=town.id,
        zone_id=zone_id,
        county=town.county,
        state=town.state,
        state_code=town.state,
        town=town.name,
        street_address=args.address,
    )


def cmd_disposal(args) -> int:
    item = require_item(args.item_id)
    info = resolve_disposal(item, _location(args))
    rule = info.applied_rule
    print(json.dumps({
        "item": item.id,
        "disposal": info.disposal.value,
        "label": describe_disposal_method(info.disposal),
        "instructions": info.instructions,
        "special_notes": info.special_notes,
        "applied_rule": rule.id if rule else None,
        "applies_to": describe_rule_scope(rule) if rule else None,
    }))
    return 0


def cmd_serve(args) -> int:
    import uvicorn

    uvicorn.run("recyclepro.web.app:app", host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Recycle Pro")
    sub = parser.add_subparsers(dest="command", required=True)

    fz = sub.add_parser("find-zone", help="Match an address to a collection zone")
    fz.add_argument("address")
    fz.add_argument("--town", required=True, help="Town id, e.g. oradell-nj")
    fz.add_argument("--lat", type=float)
    fz.add_argument("--lng", type=float)
    fz.set_defaults(func=cmd_find_zone)

    dp = sub.add_parser("disposal", help="Resolve disposal for an item")
    dp.add_argument("item_id")
    dp.add_argument("--town", help="Town id; omit for national guidance")
    dp.add_argument("--zone", help="Zone id; matched from --address when omitted")
    dp.add_argument("--address")
    dp.add_argument("--lat", type=float)
    dp.add_argument("--lng", type=float)
    dp.set_defaults(func=cmd_disposal)

    sv = sub.add_parser("serve", help="Run the HTTP API")
    sv.add_argument("--host", default=settings.HOST)
    sv.add_argument("--port", type=int, default=settings.PORT)
    sv.set_defaults(func=cmd_serve)
    return parser


def main(argv=None) -> int:
    configure_logging()
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except (TownNotFoundError, ItemNotFoundError) as e:
        logger.error(f"Not found: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
