"""Tests for postal code, city and street address heuristics."""

import pytest

from job_extractor.location import (
    find_city_name,
    find_postal_code,
    find_street_address,
    is_plausible_street_address,
    parse_location_text,
)


class TestParseLocationText:
    def test_postal_code_and_city(self):
        parsed = parse_location_text("80331 München, Deutschland")
        assert parsed.plz == "80331"
        assert parsed.ort == "München"

    def test_label_is_dropped(self):
        parsed = parse_location_text("Standort: Hamburg")
        assert parsed.ort == "Hamburg"
        assert parsed.plz == ""

    def test_postal_code_after_city(self):
        parsed = parse_location_text("Berlin (10115)")
        assert parsed.ort == "Berlin"
        assert parsed.plz == "10115"


class TestStreetAddress:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Muster Software GmbH, Musterstraße 12, 80331 München", "Musterstraße 12"),
            ("Anschrift: Karl-Marx-Allee 10, 10243 Berlin", "Karl-Marx-Allee 10"),
            ("Hauptstr. 5a, 10115 Berlin", "Hauptstr. 5a"),
            ("Besuchen Sie uns Am Ring 3 in Köln", "Am Ring 3"),
            ("Berliner Straße 101-103, 60311 Frankfurt", "Berliner Straße 101-103"),
        ],
    )
    def test_finds_german_street_addresses(self, text, expected):
        assert find_street_address(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["Wir bieten 30 Tage Urlaub", "Nürnberg 90402", "Musterstraße ohne Nummer", ""],
    )
    def test_rejects_non_addresses(self, text):
        assert find_street_address(text) is None

    def test_plausibility_gate(self):
        assert is_plausible_street_address("Musterweg 1")
        assert not is_plausible_street_address("Musterweg")
        assert not is_plausible_street_address("Hausnummer 12")
        assert not is_plausible_street_address("Musterweg 1" + " x" * 60)


class TestPostalCodeAndCity:
    def test_postal_code(self):
        assert find_postal_code("PLZ 12345 Ort") == "12345"

    def test_longer_digit_runs_are_not_postal_codes(self):
        assert find_postal_code("Tel. 0891234567") is None

    def test_city_name(self):
        assert find_city_name("Arbeitsort ist Köln-Ehrenfeld") == "Köln"
        assert find_city_name("Vollständig remote") is None
