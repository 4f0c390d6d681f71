"""Location-aware item listings.

Free-text ranking is done by the search collaborator; these listings only
attach the resolved disposal info to items chosen by category or by a fixed
popular list.
"""

from __future__ import annotations

from collections import namedtuple

from recyclepro.config import settings
from recyclepro.data import get_all_items, get_items_by_category
from recyclepro.models import DisposalInfo, MaterialCategory, RecyclableItem, SavedLocation
from recyclepro.rules import resolve_disposal

ItemResult = namedtuple("ItemResult", ["item", "info", "match_score", "matched_term"])

POPULAR_ITEM_IDS = [
    "item-plastic-bottle",
    "item-cardboard-box",
    "item-aluminum-can",
    "item-glass-jar",
    "item-newspaper",
    "item-plastic-bag",
    "item-pizza-box",
    "item-milk-carton",
    "item-batteries",
    "item-electronics",
]


def item_result(
    item: RecyclableItem,
    location: SavedLocation | None,
    match_score: float = 1.0,
    matched_term: str | None = None,
) -> ItemResult:
    info: DisposalInfo = resolve_disposal(item, location)
    return ItemResult(item, info, match_score, matched_term)


def items_by_category(category: MaterialCategory, location: SavedLocation | None = None) -> list[ItemResult]:
    items = sorted(get_items_by_category(category), key=lambda i: i.name.lower())
    return [item_result(i, location) for i in items]


def popular_items(location: SavedLocation | None = None, limit: int | None = None) -> list[ItemResult]:
    if limit is None:
        limit = settings.POPULAR_ITEMS_LIMIT
    by_id = {i.id: i for i in get_all_items()}
    items = [by_id[i] for i in POPULAR_ITEM_IDS if i in by_id][:limit]
    return [item_result(i, location) for i in items]
