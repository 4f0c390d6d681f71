"""Reference data and location models for Recycle Pro.

Towns, zones, items and rules are static reference data: they are built once
at import time and never mutated, so every model here is a frozen dataclass
and every collection field is a tuple.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Union


class Parity(enum.Enum):
    odd = "odd"
    even = "even"
    all = "all"


class RuleScope(enum.Enum):
    national = "national"
    state = "state"
    county = "county"
    municipal = "municipal"
    zone = "zone"


class DisposalMethod(enum.Enum):
    curbside_recycling = "curbside_recycling"
    curbside_trash = "curbside_trash"
    curbside_compost = "curbside_compost"
    special_recycling_center = "special_recycling_center"
    hazardous_waste = "hazardous_waste"
    e_waste = "e_waste"
    donation = "donation"
    return_to_store = "return_to_store"
    mail_back = "mail_back"


class MaterialCategory(enum.Enum):
    paper_cardboard = "paper_cardboard"
    plastic = "plastic"
    glass = "glass"
    metal = "metal"
    electronics = "electronics"
    organic = "organic"
    textiles = "textiles"
    batteries = "batteries"
    hazardous = "hazardous"
    mixed = "mixed"
    other = "other"


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lng: float


# ── Zone matching configuration ────────────────────────────────────────────


@dataclass(frozen=True)
class Street:
    """A plain street entry, optionally limited to an inclusive number range."""

    name: str
    range_start: int | None = None
    range_end: int | None = None
    cross_streets: tuple[str, ...] = ()

    @property
    def has_range(self) -> bool:
        return self.range_start is not None or self.range_end is not None


@dataclass(frozen=True)
class AddressRange:
    street: str
    from_number: int | None = None
    to_number: int | None = None
    parity: Parity = Parity.all


@dataclass(frozen=True)
class CircleBoundary:
    center: Coordinates
    radius_m: float


@dataclass(frozen=True)
class PolygonBoundary:
    """Vertex ring in order. The ring is closed implicitly (last -> first)."""

    vertices: tuple[Coordinates, ...]


Boundary = Union[CircleBoundary, PolygonBoundary]


# ── Collection schedule ────────────────────────────────────────────────────


@dataclass(frozen=True)
class GarbageSchedule:
    days: tuple[int, ...]  # 0=Sunday, 1=Monday, ... 6=Saturday
    time: str | None = None


@dataclass(frozen=True)
class AlternatingSchedule:
    day: int
    even_week: str
    odd_week: str


@dataclass(frozen=True)
class SeasonalSchedule:
    days: tuple[int, ...]
    season_start: str  # "MM-DD"
    season_end: str  # "MM-DD"


@dataclass(frozen=True)
class ZoneSchedule:
    garbage: GarbageSchedule
    recycling: AlternatingSchedule
    yard_waste: SeasonalSchedule | None = None


@dataclass(frozen=True)
class Zone:
    id: str
    name: str
    description: str | None = None
    streets: tuple[Street, ...] = ()
    address_ranges: tuple[AddressRange, ...] = ()
    boundary: Boundary | None = None
    schedule: ZoneSchedule | None = None


@dataclass(frozen=True)
class RecyclingCenter:
    name: str
    address: str
    hours: dict[str, str] = field(default_factory=dict, hash=False, compare=False)
    coordinates: Coordinates | None = None
    phone: str | None = None


@dataclass(frozen=True)
class Town:
    id: str
    name: str
    state: str
    county: str
    zones: tuple[Zone, ...] = ()
    recycling_center: RecyclingCenter | None = None
    special_instructions: tuple[str, ...] = ()

    def get_zone(self, zone_id: str) -> Zone | None:
        return next((z for z in self.zones if z.id == zone_id), None)


# ── Items and rules ────────────────────────────────────────────────────────


@dataclass(frozen=True)
class RecyclableItem:
    id: str
    name: str
    category: MaterialCategory
    default_disposal: DisposalMethod
    default_instructions: str | None = None
    aliases: tuple[str, ...] = ()
    subcategory: str | None = None
    # consumed by the text-search collaborator, not by rule resolution
    search_terms: tuple[str, ...] = ()
    common_misspellings: tuple[str, ...] = ()


@dataclass(frozen=True)
class ItemCategory:
    id: MaterialCategory
    name: str
    icon: str
    description: str | None = None


@dataclass(frozen=True)
class RecyclingRule:
    """A location-specific override for one item.

    Only the qualifying field(s) matching ``scope`` are meaningful: ``zone_id``
    for zone, ``town_id`` for municipal, ``county_name`` + ``state_code`` for
    county, ``state_code`` for state, nothing for national.
    """

    id: str
    item_id: str
    scope: RuleScope
    disposal: DisposalMethod
    state_code: str | None = None
    county_name: str | None = None
    town_id: str | None = None
    zone_id: str | None = None
    instructions: str | None = None
    special_notes: str | None = None
    effective_date: str | None = None
    expiration_date: str | None = None
    reason: str | None = None
    source: str | None = None


# ── User location ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SavedLocation:
    town_id: str
    county: str
    state_code: str
    state: str = ""
    town: str = ""
    display_name: str = ""
    zone_id: str | None = None
    street_address: str | None = None
    coordinates: Coordinates | None = None


@dataclass(frozen=True)
class DisposalInfo:
    disposal: DisposalMethod
    instructions: str | None = None
    special_notes: str | None = None
    applied_rule: RecyclingRule | None = None
