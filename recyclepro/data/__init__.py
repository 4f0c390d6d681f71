"""Reference data registry.

Towns, items, categories and rules are loaded once at import and are
read-only afterwards. Lookups that the caller must satisfy before calling
the matcher or resolver raise ``LookupError`` subclasses.
"""

from __future__ import annotations

from recyclepro.data.categories import MATERIAL_CATEGORIES
from recyclepro.data.items import ALL_ITEMS
from recyclepro.data.rules import ALL_RULES
from recyclepro.data.towns import ALL_TOWNS
from recyclepro.models import (
    ItemCategory,
    MaterialCategory,
    RecyclableItem,
    RecyclingRule,
    RuleScope,
    Town,
)


class TownNotFoundError(LookupError):
    pass


class ItemNotFoundError(LookupError):
    pass


_TOWNS_BY_ID = {t.id: t for t in ALL_TOWNS}
_ITEMS_BY_ID = {i.id: i for i in ALL_ITEMS}


def get_all_towns() -> list[Town]:
    return list(ALL_TOWNS)


def get_town_by_id(town_id: str) -> Town | None:
    return _TOWNS_BY_ID.get(town_id)


def require_town(town_id: str) -> Town:
    town = get_town_by_id(town_id)
    if town is None:
        raise TownNotFoundError(town_id)
    return town


def search_towns(query: str) -> list[Town]:
    """Towns whose name or county contains ``query`` (case-insensitive)."""
    q = (query or "").strip().lower()
    if not q:
        return get_all_towns()
    return [t for t in ALL_TOWNS if q in t.name.lower() or q in t.county.lower()]


def get_all_items() -> list[RecyclableItem]:
    return list(ALL_ITEMS)


def get_item_by_id(item_id: str) -> RecyclableItem | None:
    return _ITEMS_BY_ID.get(item_id)


def require_item(item_id: str) -> RecyclableItem:
    item = get_item_by_id(item_id)
    if item is None:
        raise ItemNotFoundError(item_id)
    return item


def get_items_by_category(category: MaterialCategory) -> list[RecyclableItem]:
    return [i for i in ALL_ITEMS if i.category is category]


def get_categories() -> list[ItemCategory]:
    return list(MATERIAL_CATEGORIES)


def get_category_name(category: MaterialCategory) -> str:
    return next((c.name for c in MATERIAL_CATEGORIES if c.id is category), "Unknown")


def get_all_rules() -> list[RecyclingRule]:
    return list(ALL_RULES)


def get_rules_for_item(item_id: str) -> list[RecyclingRule]:
    return [r for r in ALL_RULES if r.item_id == item_id]


def get_rules_by_scope(scope: RuleScope) -> list[RecyclingRule]:
    return [r for r in ALL_RULES if r.scope is scope]
