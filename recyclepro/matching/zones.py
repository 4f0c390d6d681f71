"""Pick the collection zone for an address.

Zones are tried in list order (the town's precedence order) and, within a
zone, strategies in ``STRATEGIES`` order. The first hit wins. No match is a
normal result (``None``), never an exception.
"""

from __future__ import annotations

import logging
from collections import namedtuple
from typing import Sequence

from recyclepro.config import settings
from recyclepro.logging_utils import log_event, truncate_text
from recyclepro.matching.address import ParsedAddress, parse_address
from recyclepro.matching.strategies import STRATEGIES
from recyclepro.models import Coordinates, Zone

logger = logging.getLogger(__name__)

ZoneMatch = namedtuple("ZoneMatch", ["zone", "strategy"])


def _first_strategy(parsed: ParsedAddress, zone: Zone, coordinates: Coordinates | None) -> str | None:
    for name, predicate in STRATEGIES:
        if predicate(parsed, zone, coordinates):
            return name
    return None


def match_zone(
    address: str,
    zones: Sequence[Zone],
    coordinates: Coordinates | None = None,
) -> ZoneMatch | None:
    """Return the first matching zone together with the strategy that hit."""
    if not address or not zones:
        return None

    parsed = parse_address(address)
    for zone in zones:
        strategy = _first_strategy(parsed, zone, coordinates)
        if strategy:
            log_event(
                logger,
                "zone_matched",
                level=logging.DEBUG,
                address=truncate_text(address, settings.LOG_ADDRESS_MAX_LEN),
                zone_id=zone.id,
                strategy=strategy,
            )
            return ZoneMatch(zone, strategy)

    log_event(
        logger,
        "zone_not_matched",
        level=logging.DEBUG,
        address=truncate_text(address, settings.LOG_ADDRESS_MAX_LEN),
        zones_checked=len(zones),
        has_coordinates=coordinates is not None,
    )
    return None


def find_zone(
    address: str,
    zones: Sequence[Zone],
    coordinates: Coordinates | None = None,
) -> Zone | None:
    match = match_zone(address, zones, coordinates)
    return match.zone if match else None


def find_all_possible_zones(
    address: str,
    zones: Sequence[Zone],
    coordinates: Coordinates | None = None,
) -> list[Zone]:
    """Every zone matched by any strategy, in list order (for disambiguation)."""
    if not address or not zones:
        return []
    parsed = parse_address(address)
    return [z for z in zones if _first_strategy(parsed, z, coordinates)]
