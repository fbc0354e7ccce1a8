"""
Labels for the synthetic region options.

Country names come from the reference table, but "Rest of World" and the
continent aggregates are plain UI strings and go through a translation
lookup. The assembler only needs a callable ``localize(key) -> str``;
this module supplies the default English catalog and a small per-locale
Localizer that can be loaded from JSON.
"""

import json
import logging

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"

# Translation keys for the region options, keyed by region code
REGION_LABEL_KEYS = {
    "EUC": "helpers.world_regions.european",
    "NAC": "helpers.world_regions.north_american",
    "SAC": "helpers.world_regions.south_american",
    "ASC": "helpers.world_regions.asian",
    "AFC": "helpers.world_regions.african",
    "OCC": "helpers.world_regions.oceania",
    "ROW": "helpers.rest_of_world",
}

DEFAULT_CATALOG = {
    "helpers.world_regions.european": "European",
    "helpers.world_regions.north_american": "North American",
    "helpers.world_regions.south_american": "South American",
    "helpers.world_regions.asian": "Asian",
    "helpers.world_regions.african": "African",
    "helpers.world_regions.oceania": "Oceania",
    "helpers.rest_of_world": "Rest of World",
}


class Localizer:
    """
    Callable translation lookup for a single locale.

    Keys missing from the locale's catalog fall back to the English
    defaults; a key unknown to both is returned unchanged so the page
    still renders.

    Attributes:
        locale (str): Locale name, e.g. "pl".
        catalog (dict): key -> translated string.
    """

    def __init__(self, locale=DEFAULT_LOCALE, catalog=None):
        self.locale = locale
        self.catalog = dict(catalog or {})
    # End of __init__

    def __call__(self, key):
        if key in self.catalog:
            return self.catalog[key]
        if key in DEFAULT_CATALOG:
            if self.locale != DEFAULT_LOCALE:
                logger.debug("No %s translation for %s, using English", self.locale, key)
            return DEFAULT_CATALOG[key]
        logger.warning("Translation missing: %s.%s", self.locale, key)
        return key
    # End of __call__

    def __repr__(self):
        return f"Localizer(locale={self.locale!r}, keys={len(self.catalog)})"
# End of class Localizer


def localize(key):
    """Default English lookup used when callers do not inject their own."""
    return _default_localizer(key)


_default_localizer = Localizer(DEFAULT_LOCALE, DEFAULT_CATALOG)


def region_label_key(code):
    """
    Return the translation key for a region or rest-of-world code.

    Args:
        code (str): One of the keys of REGION_LABEL_KEYS.

    Returns:
        str or None: The key, or None when code is not a region code.
    """
    return REGION_LABEL_KEYS.get(code)
# End of function region_label_key()


def load_localizer_json(json_string):
    """
    Builds a Localizer from a JSON catalog.

    The expected shape is ``{"locale": "pl", "labels": {key: text, ...}}``.

    Args:
        json_string (str): JSON document.

    Returns:
        Localizer: Lookup for the given locale.

    Raises:
        ValueError: if the JSON is invalid or does not have the expected shape.
    """
    try:
        data = json.loads(json_string)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ValueError(
            f"Expected a JSON object at the top level, got {type(data).__name__}"
        )

    locale = data.get("locale")
    labels = data.get("labels")
    if not isinstance(locale, str) or not locale:
        raise ValueError("'locale' must be a non-empty string")
    if not isinstance(labels, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in labels.items()
    ):
        raise ValueError("'labels' must map strings to strings")

    unknown = set(labels) - set(DEFAULT_CATALOG)
    if unknown:
        logger.info("Catalog %s defines extra keys: %s", locale, ", ".join(sorted(unknown)))

    return Localizer(locale, labels)
# End of function load_localizer_json()
