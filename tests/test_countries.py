"""
Unit tests for the countries reference data module.
"""

import logging

import pytest

from countries import (
    AFRICA,
    ASIA,
    CODES,
    COUNTRIES,
    EUROPE,
    NORTH_AMERICA,
    OCEANIA,
    REGION_CODES,
    REGIONS,
    SOUTH_AMERICA,
    CountryEntry,
    UnknownCodeError,
    audit_region_membership,
    country_codes,
    find_non_iso_codes,
    is_region_code,
    lookup_country,
    region_for_country,
    region_members,
)


class TestCountryTable:
    """Tests for the bundled country table."""

    def test_codes_are_two_uppercase_letters(self):
        for code in COUNTRIES:
            assert len(code) == 2
            assert code.isupper()

    def test_every_entry_has_an_english_name(self):
        for code, entry in COUNTRIES.items():
            assert isinstance(entry, CountryEntry)
            assert entry.english_name, code

    def test_native_names_are_optional(self):
        assert COUNTRIES["JP"] == CountryEntry("Japan", "日本")
        assert COUNTRIES["US"] == CountryEntry("United States", None)
        assert COUNTRIES["AU"].native_name is None

    def test_no_stray_whitespace_in_names(self):
        for entry in COUNTRIES.values():
            assert entry.english_name == entry.english_name.strip()

    def test_table_size(self):
        assert len(COUNTRIES) == 243
        assert country_codes() == CODES == frozenset(COUNTRIES)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            COUNTRIES["XX"] = CountryEntry("Nowhere", None)

    def test_lookup_known_and_unknown(self):
        assert lookup_country("PL").native_name == "Polska"
        assert lookup_country("ZZ") is None
        assert lookup_country("pl") is None


class TestRegions:
    """Tests for the continent groupings."""

    def test_region_order(self):
        assert REGION_CODES == ("EUC", "NAC", "SAC", "ASC", "AFC", "OCC")
        assert set(REGIONS) == set(REGION_CODES)

    def test_region_sets(self):
        assert REGIONS["EUC"] is EUROPE
        assert REGIONS["NAC"] is NORTH_AMERICA
        assert REGIONS["SAC"] is SOUTH_AMERICA
        assert REGIONS["ASC"] is ASIA
        assert REGIONS["AFC"] is AFRICA
        assert REGIONS["OCC"] is OCEANIA
        assert "PL" in EUROPE
        assert "BR" in SOUTH_AMERICA
        assert isinstance(EUROPE, frozenset)

    def test_regions_are_disjoint(self):
        seen = set()
        for region_code in REGION_CODES:
            assert not seen & REGIONS[region_code], region_code
            seen |= REGIONS[region_code]

    def test_region_members(self):
        assert region_members("OCC") is OCEANIA

    def test_region_members_unknown(self):
        with pytest.raises(UnknownCodeError):
            region_members("ROW")
        with pytest.raises(LookupError):
            region_members("XYZ")

    def test_region_for_country(self):
        assert region_for_country("UA") == "EUC"
        assert region_for_country("JP") == "ASC"
        assert region_for_country("AQ") is None

    def test_is_region_code(self):
        assert is_region_code("EUC")
        assert is_region_code("ROW")
        assert not is_region_code("PL")


class TestAudits:
    """Tests for the reference data audits."""

    def test_region_members_missing_from_table(self, caplog):
        with caplog.at_level(logging.WARNING, logger="countries"):
            gaps = audit_region_membership()

        assert gaps["EUC"] == ["ME", "RS"]
        assert gaps["NAC"] == ["BL", "MF"]
        assert "SAC" not in gaps
        assert "Region EUC" in caplog.text

    def test_retired_codes_are_reported(self):
        stale = find_non_iso_codes()

        assert "AN" in stale
        assert "CS" in stale
        assert "PL" not in stale
        assert stale == sorted(stale)
