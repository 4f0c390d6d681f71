"""Town, zone matching and collection schedule routes."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from recyclepro.data import get_town_by_id, search_towns
from recyclepro.matching import find_all_possible_zones, match_zone
from recyclepro.schedule import week_schedule
from recyclepro.web.common import body_text, parse_coordinates, town_json, zone_json

router = APIRouter()


@router.get("/api/towns")
def list_towns(q: str = Query("")):
    return {"towns": [town_json(t) for t in search_towns(q)]}


@router.get("/api/towns/{town_id}")
def town_detail(town_id: str):
    town = get_town_by_id(town_id)
    if not town:
        return JSONResponse({"error": "town not found"}, status_code=404)
    return town_json(town, detail=True)


async def _address_request(request: Request):
    body = await request.json()
    if not isinstance(body, dict):
        raise ValueError("expected a JSON object")
    address = body_text(body, "address")
    if not address:
        raise ValueError("address is required")
    return address, parse_coordinates(body)


@router.post("/api/towns/{town_id}/zones/match")
async def match_town_zone(town_id: str, request: Request):
    town = get_town_by_id(town_id)
    if not town:
        return JSONResponse({"error": "town not found"}, status_code=404)
    try:
        address, coordinates = await _address_request(request)
    except (ValueError, TypeError) as e:
        return JSONResponse({"error": str(e)}, status_code=400)

    match = match_zone(address, town.zones, coordinates)
    if match is None:
        return {"zone": None, "strategy": None}
    return {"zone": zone_json(match.zone), "strategy": match.strategy}


@router.post("/api/towns/{town_id}/zones/candidates")
async def candidate_zones(town_id: str, request: Request):
    town = get_town_by_id(town_id)
    if not town:
        return JSONResponse({"error": "town not found"}, status_code=404)
    try:
        address, coordinates = await _address_request(request)
    except (ValueError, TypeError) as e:
        return JSONResponse({"error": str(e)}, status_code=400)

    zones = find_all_possible_zones(address, town.zones, coordinates)
    return {"zones": [zone_json(z, detail=False) for z in zones]}


@router.get("/api/towns/{town_id}/zones/{zone_id}/schedule")
def zone_schedule(town_id: str, zone_id: str, start: str = Query("")):
    town = get_town_by_id(town_id)
    zone = town.get_zone(zone_id) if town else None
    if not zone:
        return JSONResponse({"error": "zone not found"}, status_code=404)
    try:
        start_date = date.fromisoformat(start) if start else date.today()
    except ValueError:
        return JSONResponse({"error": "start must be YYYY-MM-DD"}, status_code=400)

    days = week_schedule(zone, start_date)
    garbage_time = zone.schedule.garbage.time if zone.schedule else None
    return {
        "zone_id": zone.id,
        "garbage_time": garbage_time,
        "days": [{"date": d.date.isoformat(), "collection": d.collection} for d in days],
    }
