"""Item disposal, category listing and rule listing routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from recyclepro.catalog import items_by_category, popular_items
from recyclepro.data import (
    ItemNotFoundError,
    get_all_rules,
    get_categories,
    get_category_name,
    get_rules_by_scope,
    require_item,
)
from recyclepro.models import MaterialCategory, RuleScope
from recyclepro.rules import resolve_disposal
from recyclepro.store import LocationStore
from recyclepro.web.common import disposal_json, get_location_store, rule_json

router = APIRouter()


@router.get("/api/items/popular")
def list_popular(limit: int | None = Query(None, ge=1), store: LocationStore = Depends(get_location_store)):
    results = popular_items(store.get(), limit=limit)
    return {"items": [disposal_json(r.item, r.info) for r in results]}


@router.get("/api/items/{item_id}/disposal")
def item_disposal(item_id: str, store: LocationStore = Depends(get_location_store)):
    try:
        item = require_item(item_id)
    except ItemNotFoundError:
        return JSONResponse({"error": "item not found"}, status_code=404)
    return disposal_json(item, resolve_disposal(item, store.get()))


@router.get("/api/categories")
def list_categories():
    return {
        "categories": [
            {"id": c.id.value, "name": c.name, "icon": c.icon, "description": c.description}
            for c in get_categories()
        ]
    }


@router.get("/api/categories/{category}/items")
def category_items(category: str, store: LocationStore = Depends(get_location_store)):
    try:
        material = MaterialCategory(category)
    except ValueError:
        return JSONResponse({"error": "unknown category"}, status_code=404)
    results = items_by_category(material, store.get())
    return {
        "category": get_category_name(material),
        "items": [disposal_json(r.item, r.info) for r in results],
    }


@router.get("/api/rules")
def list_rules(scope: str = Query("")):
    if not scope:
        return {"rules": [rule_json(r) for r in get_all_rules()]}
    try:
        rule_scope = RuleScope(scope)
    except ValueError:
        return JSONResponse({"error": "unknown scope"}, status_code=400)
    return {"rules": [rule_json(r) for r in get_rules_by_scope(rule_scope)]}
