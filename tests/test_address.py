"""Tests for street address parsing and normalization."""
import pytest

from recyclepro.matching.address import normalize_street_name, parse_address


class TestParseAddress:
    def test_street_and_st_abbreviation_are_equal(self):
        assert parse_address("123 Main Street") == parse_address("123 Main St.")

    def test_extracts_leading_house_number(self):
        parsed = parse_address("  650 Oradell Ave ")
        assert parsed.number == 650
        assert parsed.street == "oradell"

    def test_no_leading_digits_means_no_number(self):
        parsed = parse_address("Forest Avenue")
        assert parsed.number is None
        assert parsed.street == "forest"

    def test_digits_inside_street_name_are_kept(self):
        parsed = parse_address("10 Route 17")
        assert parsed.number == 10
        assert parsed.street == "route 17"

    def test_empty_string(self):
        parsed = parse_address("")
        assert parsed.number is None
        assert parsed.street == ""


class TestNormalizeStreetName:
    @pytest.mark.parametrize("raw", [
        "Main Street", "Main St", "Main St.", "MAIN STREET", "main   st",
    ])
    def test_suffix_variants_collapse(self, raw):
        assert normalize_street_name(raw) == "main"

    def test_all_suffix_words_removed(self):
        for suffix in ["Avenue", "Ave", "Road", "Rd", "Drive", "Dr", "Lane", "Ln",
                       "Circle", "Cir", "Court", "Ct", "Place", "Pl", "Boulevard",
                       "Blvd", "Parkway", "Pkwy", "Terrace", "Ter", "Way"]:
            assert normalize_street_name(f"Elm {suffix}") == "elm", suffix

    def test_suffix_letters_inside_words_survive(self):
        assert normalize_street_name("Stone Street") == "stone"
        assert normalize_street_name("Waverly Place") == "waverly"

    def test_suffix_removed_wherever_it_appears(self):
        assert normalize_street_name("St. Mary Court") == "mary"
