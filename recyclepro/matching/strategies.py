"""Zone matching strategies.

Each strategy is a plain predicate ``(parsed, zone, coordinates) -> bool``.
``STRATEGIES`` fixes the order they are tried in for every zone: curated
address ranges first, then street lists, then the GPS boundary.
"""

from __future__ import annotations

from recyclepro.matching.address import ParsedAddress, normalize_street_name
from recyclepro.matching.geo import within_boundary
from recyclepro.models import AddressRange, Coordinates, Parity, Zone


def _parity_ok(number: int, parity: Parity) -> bool:
    if parity is Parity.odd:
        return number % 2 == 1
    if parity is Parity.even:
        return number % 2 == 0
    return True


def _range_matches(parsed: ParsedAddress, entry: AddressRange) -> bool:
    if parsed.number is None:
        return False
    if entry.from_number is not None and parsed.number < entry.from_number:
        return False
    if entry.to_number is not None and parsed.number > entry.to_number:
        return False
    return _parity_ok(parsed.number, entry.parity)


def matches_address_ranges(parsed: ParsedAddress, zone: Zone, coordinates: Coordinates | None = None) -> bool:
    for entry in zone.address_ranges:
        if normalize_street_name(entry.street) != parsed.street:
            continue
        if _range_matches(parsed, entry):
            return True
    return False


def matches_street_list(parsed: ParsedAddress, zone: Zone, coordinates: Coordinates | None = None) -> bool:
    for street in zone.streets:
        if normalize_street_name(street.name) != parsed.street:
            continue
        if not street.has_range:
            return True
        # a sub-range needs both ends and a house number
        if parsed.number is None or street.range_start is None or street.range_end is None:
            continue
        if street.range_start <= parsed.number <= street.range_end:
            return True
    return False


def matches_geo_boundary(parsed: ParsedAddress, zone: Zone, coordinates: Coordinates | None = None) -> bool:
    if coordinates is None or zone.boundary is None:
        return False
    return within_boundary(coordinates, zone.boundary)


STRATEGIES = [
    ("address_range", matches_address_ranges),
    ("street_list", matches_street_list),
    ("geo_boundary", matches_geo_boundary),
]
