"""Tests for address-to-zone matching."""
import pytest

from recyclepro.data.towns import ORADELL, PARAMUS
from recyclepro.matching import find_all_possible_zones, find_zone, match_zone
from recyclepro.models import (
    AddressRange,
    CircleBoundary,
    Coordinates,
    Parity,
    PolygonBoundary,
    Street,
    Zone,
)

INSIDE_PARAMUS = Coordinates(lat=40.945, lng=-74.070)
OUTSIDE_PARAMUS = Coordinates(lat=41.5, lng=-74.070)


def make_zone(zone_id="z", **kwargs):
    return Zone(id=zone_id, name=zone_id, **kwargs)


def oradell_scenario_zones():
    return [
        make_zone("range-zone", address_ranges=(AddressRange(street="Oradell Ave", from_number=1, to_number=700),)),
        make_zone("street-zone", streets=(Street(name="Oradell Ave", range_start=701, range_end=1200),)),
    ]


class TestEndToEndScenario:
    def test_inside_first_range_matches_first_zone(self):
        match = match_zone("650 Oradell Ave", oradell_scenario_zones())
        assert match.zone.id == "range-zone"
        assert match.strategy == "address_range"

    def test_outside_first_range_falls_to_second_zone_street_list(self):
        match = match_zone("900 Oradell Ave", oradell_scenario_zones())
        assert match.zone.id == "street-zone"
        assert match.strategy == "street_list"

    def test_beyond_both_ranges(self):
        assert find_zone("1500 Oradell Ave", oradell_scenario_zones()) is None


class TestAddressRanges:
    def test_parity_odd_rejects_even_number(self):
        zone = make_zone(address_ranges=(
            AddressRange(street="Main Street", from_number=1, to_number=500, parity=Parity.odd),
        ))
        assert find_zone("123 Main Street", [zone]) is zone
        assert find_zone("124 Main Street", [zone]) is None

    def test_parity_even(self):
        zone = make_zone(address_ranges=(
            AddressRange(street="Main Street", from_number=2, to_number=500, parity=Parity.even),
        ))
        assert find_zone("124 Main St", [zone]) is zone
        assert find_zone("125 Main St", [zone]) is None

    def test_missing_bounds_are_unbounded(self):
        zone = make_zone(address_ranges=(AddressRange(street="Elm Rd", from_number=100),))
        assert find_zone("99999 Elm Road", [zone]) is zone
        assert find_zone("99 Elm Road", [zone]) is None

    def test_range_bounds_inclusive(self):
        zone = make_zone(address_ranges=(AddressRange(street="Elm", from_number=10, to_number=20),))
        assert find_zone("10 Elm", [zone]) is zone
        assert find_zone("20 Elm", [zone]) is zone
        assert find_zone("21 Elm", [zone]) is None

    def test_no_house_number_cannot_match_range(self):
        zone = make_zone(address_ranges=(AddressRange(street="Elm"),))
        assert find_zone("Elm Street", [zone]) is None

    def test_second_range_on_zone_can_match(self):
        zone = make_zone(address_ranges=(
            AddressRange(street="Main", from_number=1, to_number=10),
            AddressRange(street="Main", from_number=100, to_number=200),
        ))
        assert find_zone("150 Main", [zone]) is zone


class TestStreetList:
    def test_street_without_range_matches_any_number(self):
        zone = make_zone(streets=(Street(name="Forest Ave"),))
        assert find_zone("12 Forest Avenue", [zone]) is zone
        assert find_zone("Forest Ave", [zone]) is zone

    def test_street_with_range_requires_number(self):
        zone = make_zone(streets=(Street(name="Oradell Ave", range_start=1, range_end=700),))
        assert find_zone("Oradell Ave", [zone]) is None
        assert find_zone("700 Oradell Ave", [zone]) is zone

    def test_half_open_sub_range_never_matches(self):
        zone = make_zone(streets=(Street(name="Oradell Ave", range_start=1),))
        assert find_zone("50 Oradell Ave", [zone]) is None

    def test_different_street_no_match(self):
        zone = make_zone(streets=(Street(name="Forest Ave"),))
        assert find_zone("12 Demarest Ave", [zone]) is None


class TestGeoBoundary:
    def test_requires_coordinates(self):
        zone = make_zone(boundary=CircleBoundary(center=INSIDE_PARAMUS, radius_m=50))
        assert find_zone("1 Nowhere Ln", [zone]) is None
        assert find_zone("1 Nowhere Ln", [zone], INSIDE_PARAMUS) is zone

    def test_polygon_fallback(self):
        match = match_zone("999 Unknown Street", PARAMUS.zones, INSIDE_PARAMUS)
        assert match.zone.id == "paramus-zone-default"
        assert match.strategy == "geo_boundary"

    def test_outside_polygon(self):
        assert find_zone("999 Unknown Street", PARAMUS.zones, OUTSIDE_PARAMUS) is None


class TestPrecedence:
    def test_range_beats_street_beats_geo_within_zone(self):
        zone = make_zone(
            address_ranges=(AddressRange(street="Main", from_number=1, to_number=10),),
            streets=(Street(name="Main"),),
            boundary=PolygonBoundary(vertices=PARAMUS.zones[3].boundary.vertices),
        )
        assert match_zone("5 Main", [zone], INSIDE_PARAMUS).strategy == "address_range"
        assert match_zone("50 Main", [zone], INSIDE_PARAMUS).strategy == "street_list"
        assert match_zone("50 Oak", [zone], INSIDE_PARAMUS).strategy == "geo_boundary"

    def test_zone_list_order_wins_over_strategy_strength(self):
        street_zone = make_zone("first", streets=(Street(name="Main"),))
        range_zone = make_zone("second", address_ranges=(AddressRange(street="Main"),))
        assert find_zone("5 Main", [street_zone, range_zone]) is street_zone

    def test_empty_zone_matches_nothing(self):
        assert find_zone("5 Main", [make_zone()], INSIDE_PARAMUS) is None


class TestBundledTowns:
    @pytest.mark.parametrize("address,expected", [
        ("123 Main Street", "paramus-zone-1"),
        ("124 Main Street", "paramus-zone-2"),
        ("200 Oak Avenue", "paramus-zone-1"),
        ("5 Maple Dr", "paramus-zone-2"),
        ("10 Route 17", "paramus-zone-3"),
        ("Bergen Blvd", "paramus-zone-3"),
    ])
    def test_paramus(self, address, expected):
        assert find_zone(address, PARAMUS.zones).id == expected

    @pytest.mark.parametrize("address,expected", [
        ("650 Oradell Ave", "oradell-zone-1"),
        ("900 Oradell Avenue", "oradell-zone-2"),
        ("12 Forest Ave", "oradell-zone-3"),
    ])
    def test_oradell(self, address, expected):
        assert find_zone(address, ORADELL.zones).id == expected

    def test_result_is_drawn_from_input(self):
        zone = find_zone("12 Forest Ave", ORADELL.zones)
        assert any(zone is z for z in ORADELL.zones)


class TestDegenerateInput:
    def test_empty_address(self):
        assert find_zone("", ORADELL.zones) is None
        assert find_all_possible_zones("", ORADELL.zones) == []

    def test_empty_zone_list(self):
        assert find_zone("650 Oradell Ave", []) is None


class TestAllPossibleZones:
    def test_returns_every_match_in_order(self):
        zones = find_all_possible_zones("123 Main Street", PARAMUS.zones, INSIDE_PARAMUS)
        assert [z.id for z in zones] == ["paramus-zone-1", "paramus-zone-default"]

    def test_no_match(self):
        assert find_all_possible_zones("1 Nowhere Ln", PARAMUS.zones) == []


def test_find_zone_is_idempotent():
    first = find_zone("124 Main Street", PARAMUS.zones, INSIDE_PARAMUS)
    for _ in range(5):
        assert find_zone("124 Main Street", PARAMUS.zones, INSIDE_PARAMUS) is first
