"""Disposal rule resolution for Recycle Pro.

Picks the single most specific rule for an item at the user's location and
falls back to the item's own defaults when nothing applies.

Resolution order:
1. No location -> the national rule, if any
2. Otherwise scopes are tried zone, municipal, county, state, national;
   the first scope with a matching rule wins, even if broader scopes
   also have rules
3. No matching rule -> item default disposal and instructions
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from recyclepro.logging_utils import log_event
from recyclepro.models import (
    DisposalInfo,
    DisposalMethod,
    RecyclableItem,
    RecyclingRule,
    RuleScope,
    SavedLocation,
)

logger = logging.getLogger(__name__)


def _zone_matches(rule: RecyclingRule, loc: SavedLocation) -> bool:
    return bool(loc.zone_id) and rule.zone_id == loc.zone_id


def _municipal_matches(rule: RecyclingRule, loc: SavedLocation) -> bool:
    return rule.town_id == loc.town_id


def _county_matches(rule: RecyclingRule, loc: SavedLocation) -> bool:
    # exact name, case-insensitive; no alias handling for counties
    if rule.county_name is None:
        return False
    return rule.county_name.lower() == (loc.county or "").lower() and rule.state_code == loc.state_code


def _state_matches(rule: RecyclingRule, loc: SavedLocation) -> bool:
    return rule.state_code == loc.state_code


def _national_matches(rule: RecyclingRule, loc: SavedLocation) -> bool:
    return True


# Most specific first.
SCOPE_PRECEDENCE: list[tuple[RuleScope, Callable[[RecyclingRule, SavedLocation], bool]]] = [
    (RuleScope.zone, _zone_matches),
    (RuleScope.municipal, _municipal_matches),
    (RuleScope.county, _county_matches),
    (RuleScope.state, _state_matches),
    (RuleScope.national, _national_matches),
]


def _rules_for(item_id: str, rules: Sequence[RecyclingRule] | None) -> list[RecyclingRule]:
    if rules is None:
        from recyclepro.data import get_rules_for_item

        return get_rules_for_item(item_id)
    return [r for r in rules if r.item_id == item_id]


def get_applicable_rule(
    item_id: str,
    location: SavedLocation | None,
    rules: Sequence[RecyclingRule] | None = None,
) -> RecyclingRule | None:
    """Return the most specific rule for ``item_id`` at ``location``.

    Args:
        item_id: id of the recyclable item
        location: the user's saved location, or None
        rules: rule set to search; defaults to the bundled reference rules

    Returns:
        The applicable RecyclingRule, or None when no rule applies
    """
    candidates = _rules_for(item_id, rules)
    if not candidates:
        return None

    if location is None:
        return next((r for r in candidates if r.scope is RuleScope.national), None)

    for scope, matches in SCOPE_PRECEDENCE:
        for rule in candidates:
            if rule.scope is scope and matches(rule, location):
                return rule
    return None


def resolve_disposal(
    item: RecyclableItem,
    location: SavedLocation | None,
    rules: Sequence[RecyclingRule] | None = None,
) -> DisposalInfo:
    """Disposal method, instructions and notes for ``item`` at ``location``.

    The item must exist; looking it up is the caller's job.
    """
    rule = get_applicable_rule(item.id, location, rules)

    if rule is None:
        log_event(logger, "disposal_default", level=logging.DEBUG, item_id=item.id)
        return DisposalInfo(
            disposal=item.default_disposal,
            instructions=item.default_instructions,
        )

    log_event(
        logger,
        "disposal_rule_applied",
        level=logging.DEBUG,
        item_id=item.id,
        rule_id=rule.id,
        scope=rule.scope.value,
    )
    return DisposalInfo(
        disposal=rule.disposal,
        instructions=rule.instructions or item.default_instructions,
        special_notes=rule.special_notes,
        applied_rule=rule,
    )


def describe_rule_scope(rule: RecyclingRule) -> str:
    """Human-readable description of where a rule applies."""
    if rule.scope is RuleScope.zone:
        return f"Zone {rule.zone_id}"
    if rule.scope is RuleScope.municipal:
        return rule.town_id or "Municipal"
    if rule.scope is RuleScope.county:
        return f"{rule.county_name} County"
    if rule.scope is RuleScope.state:
        return rule.state_code or "State"
    return "National"


DISPOSAL_METHOD_LABELS = {
    DisposalMethod.curbside_recycling: "Curbside Recycling",
    DisposalMethod.curbside_trash: "Curbside Trash",
    DisposalMethod.curbside_compost: "Curbside Compost",
    DisposalMethod.special_recycling_center: "Recycling Center Drop-off",
    DisposalMethod.hazardous_waste: "Hazardous Waste Facility",
    DisposalMethod.e_waste: "Electronics Recycling",
    DisposalMethod.donation: "Donate or Reuse",
    DisposalMethod.return_to_store: "Return to Store",
    DisposalMethod.mail_back: "Mail-in Recycling",
}


def describe_disposal_method(method: DisposalMethod) -> str:
    return DISPOSAL_METHOD_LABELS.get(method, method.value)
