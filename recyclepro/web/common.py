"""Shared web-layer dependencies and JSON serializers."""

from __future__ import annotations

from recyclepro.models import (
    CircleBoundary,
    Coordinates,
    DisposalInfo,
    RecyclableItem,
    RecyclingRule,
    SavedLocation,
    Town,
    Zone,
)
from recyclepro.rules import describe_disposal_method, describe_rule_scope
from recyclepro.store import LocationStore, location_store


def get_location_store() -> LocationStore:
    return location_store


def body_text(body: dict, key: str) -> str | None:
    """Stripped string field from a request body, None when absent or blank.

    Raises ValueError for a non-string value.
    """
    value = body.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string")
    return value.strip() or None


def parse_coordinates(body: dict) -> Coordinates | None:
    """``lat``/``lng`` from a request body; both or neither. Raises ValueError."""
    lat, lng = body.get("lat"), body.get("lng")
    if lat is None and lng is None:
        return None
    if lat is None or lng is None:
        raise ValueError("lat and lng must be given together")
    return Coordinates(lat=float(lat), lng=float(lng))


def coords_json(c: Coordinates | None):
    return {"lat": c.lat, "lng": c.lng} if c else None


def zone_json(zone: Zone, detail: bool = True) -> dict:
    data = {"id": zone.id, "name": zone.name, "description": zone.description}
    if not detail:
        return data

    data["streets"] = [
        {
            "name": s.name,
            "range_start": s.range_start,
            "range_end": s.range_end,
            "cross_streets": list(s.cross_streets),
        }
        for s in zone.streets
    ]
    data["address_ranges"] = [
        {
            "street": r.street,
            "from_number": r.from_number,
            "to_number": r.to_number,
            "parity": r.parity.value,
        }
        for r in zone.address_ranges
    ]
    if isinstance(zone.boundary, CircleBoundary):
        data["boundary"] = {
            "type": "circle",
            "center": coords_json(zone.boundary.center),
            "radius_m": zone.boundary.radius_m,
        }
    elif zone.boundary is not None:
        data["boundary"] = {
            "type": "polygon",
            "coordinates": [coords_json(v) for v in zone.boundary.vertices],
        }
    else:
        data["boundary"] = None
    return data


def town_json(town: Town, detail: bool = False) -> dict:
    data = {"id": town.id, "name": town.name, "state": town.state, "county": town.county}
    if not detail:
        return data

    data["zones"] = [zone_json(z) for z in town.zones]
    data["special_instructions"] = list(town.special_instructions)
    center = town.recycling_center
    data["recycling_center"] = (
        {
            "name": center.name,
            "address": center.address,
            "hours": dict(center.hours),
            "coordinates": coords_json(center.coordinates),
            "phone": center.phone,
        }
        if center
        else None
    )
    return data


def location_json(loc: SavedLocation) -> dict:
    return {
        "town_id": loc.town_id,
        "zone_id": loc.zone_id,
        "display_name": loc.display_name,
        "town": loc.town,
        "county": loc.county,
        "state": loc.state,
        "state_code": loc.state_code,
        "street_address": loc.street_address,
        "coordinates": coords_json(loc.coordinates),
    }


def rule_json(rule: RecyclingRule | None):
    if rule is None:
        return None
    return {
        "id": rule.id,
        "item_id": rule.item_id,
        "scope": rule.scope.value,
        "scope_description": describe_rule_scope(rule),
        "disposal": rule.disposal.value,
        "source": rule.source,
        "reason": rule.reason,
    }


def item_json(item: RecyclableItem) -> dict:
    return {
        "id": item.id,
        "name": item.name,
        "category": item.category.value,
        "subcategory": item.subcategory,
        "aliases": list(item.aliases),
    }


def disposal_json(item: RecyclableItem, info: DisposalInfo) -> dict:
    return {
        "item": item_json(item),
        "disposal": info.disposal.value,
        "disposal_label": describe_disposal_method(info.disposal),
        "instructions": info.instructions,
        "special_notes": info.special_notes,
        "applied_rule": rule_json(info.applied_rule),
    }
