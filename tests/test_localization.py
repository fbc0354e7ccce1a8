"""
Unit tests for the region label localization helpers.
"""

import json
import logging

import pytest

from localization import (
    DEFAULT_CATALOG,
    REGION_LABEL_KEYS,
    Localizer,
    load_localizer_json,
    localize,
    region_label_key,
)


class TestLocalize:
    """Tests for the default English lookup."""

    def test_every_region_has_a_default_label(self):
        for key in REGION_LABEL_KEYS.values():
            assert localize(key) == DEFAULT_CATALOG[key]

    def test_rest_of_world_label_is_distinct(self):
        continent_labels = {localize(REGION_LABEL_KEYS[code]) for code in ("EUC", "NAC", "SAC", "ASC", "AFC", "OCC")}

        assert localize("helpers.rest_of_world") not in continent_labels

    def test_region_label_key(self):
        assert region_label_key("ROW") == "helpers.rest_of_world"
        assert region_label_key("EUC") == "helpers.world_regions.european"
        assert region_label_key("PL") is None


class TestLocalizer:
    """Tests for the Localizer class."""

    def test_fallback_to_english(self, polish_localizer):
        assert polish_localizer("helpers.rest_of_world") == "Reszta świata"
        assert polish_localizer("helpers.world_regions.oceania") == "Oceania"

    def test_unknown_key_is_returned_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="localization"):
            assert Localizer("de")("helpers.unknown") == "helpers.unknown"

        assert "Translation missing: de.helpers.unknown" in caplog.text

    def test_catalog_is_copied(self):
        catalog = {"helpers.rest_of_world": "Resto del mundo"}
        localizer = Localizer("es", catalog)
        catalog["helpers.rest_of_world"] = "changed"

        assert localizer("helpers.rest_of_world") == "Resto del mundo"


class TestLoadLocalizerJson:
    """Tests for load_localizer_json."""

    def test_valid_catalog(self):
        localizer = load_localizer_json(json.dumps({
            "locale": "uk",
            "labels": {"helpers.world_regions.european": "Європейські"},
        }))

        assert localizer.locale == "uk"
        assert localizer("helpers.world_regions.european") == "Європейські"

    @pytest.mark.parametrize("raw, message", [
        ("{oops", "Invalid JSON"),
        ('"pl"', "JSON object"),
        ('{"labels": {}}', "locale"),
        ('{"locale": "pl", "labels": []}', "labels"),
        ('{"locale": "pl", "labels": {"helpers.rest_of_world": 1}}', "labels"),
    ])
    def test_invalid_catalogs(self, raw, message):
        with pytest.raises(ValueError, match=message):
            load_localizer_json(raw)
