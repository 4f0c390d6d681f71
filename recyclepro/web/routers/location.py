"""Saved location routes.

PUT replaces the whole record. When a street address is supplied the zone
is matched here and stored with the location; otherwise the zone id is left
unset.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from recyclepro.data import get_town_by_id
from recyclepro.logging_utils import log_event
from recyclepro.matching import match_zone
from recyclepro.models import SavedLocation
from recyclepro.store import LocationStore
from recyclepro.web.common import body_text, get_location_store, location_json, parse_coordinates

logger = logging.getLogger(__name__)

_TEXT_FIELDS = ("town_id", "street_address", "county", "state", "state_code", "display_name")

router = APIRouter()


@router.get("/api/location")
def get_location(store: LocationStore = Depends(get_location_store)):
    loc = store.get()
    if loc is None:
        return JSONResponse({"error": "no saved location"}, status_code=404)
    return location_json(loc)


@router.put("/api/location")
async def save_location(request: Request, store: LocationStore = Depends(get_location_store)):
    try:
        body = await request.json()
    except ValueError:
        return JSONResponse({"error": "invalid JSON body"}, status_code=400)
    if not isinstance(body, dict):
        return JSONResponse({"error": "expected a JSON object"}, status_code=400)

    try:
        fields = {key: body_text(body, key) for key in _TEXT_FIELDS}
        coordinates = parse_coordinates(body)
    except (ValueError, TypeError) as e:
        return JSONResponse({"error": str(e)}, status_code=400)

    if not fields["town_id"]:
        return JSONResponse({"error": "town_id is required"}, status_code=400)
    town = get_town_by_id(fields["town_id"])
    if not town:
        return JSONResponse({"error": "town not found"}, status_code=404)

    street_address = fields["street_address"]
    zone_id = None
    strategy = None
    if street_address:
        match = match_zone(street_address, town.zones, coordinates)
        if match:
            zone_id, strategy = match.zone.id, match.strategy
        else:
            log_event(logger, "location_zone_unassigned", town_id=town.id)

    loc = SavedLocation(
        town_id=town.id,
        zone_id=zone_id,
        county=fields["county"] or town.county,
        state=fields["state"] or town.state,
        state_code=fields["state_code"] or town.state,
        town=town.name,
        display_name=fields["display_name"] or f"{town.name}, {town.county} County, {town.state}",
        street_address=street_address,
        coordinates=coordinates,
    )
    store.save(loc)
    return {"location": location_json(loc), "zone_strategy": strategy}


@router.delete("/api/location")
def clear_location(store: LocationStore = Depends(get_location_store)):
    store.clear()
    return {"ok": True}
