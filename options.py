"""
options.py - Name resolution and option-list assembly for the country select.

Turns the reference data from countries.py into the ordered (label, value)
entries a form renders: priority entries first, then an optional block of
"Rest of World" and continent options behind a disabled separator, then
every remaining country sorted by label.
"""

import logging
from collections import namedtuple
from enum import Enum

import localization
from countries import (
    CODES,
    REGION_CODES,
    REGIONS,
    REST_OF_WORLD,
    UnknownCodeError,
    is_region_code,
    lookup_country,
)

logger = logging.getLogger(__name__)

SEPARATOR_LABEL = "-------------"


class LabelMode(str, Enum):
    """How country names are displayed in the option labels."""

    ENGLISH = "english"
    NATIVE = "native"
    BOTH = "both"
# End of class LabelMode


OptionEntry = namedtuple("OptionEntry", ["label", "value", "disabled"], defaults=(False,))

SEPARATOR = OptionEntry(SEPARATOR_LABEL, "", True)


def _label_mode(labels):
    if labels is None:
        return LabelMode.ENGLISH
    try:
        return LabelMode(labels)
    except ValueError:
        raise ValueError(
            f"Unknown label mode {labels!r}; expected one of "
            f"{', '.join(mode.value for mode in LabelMode)}"
        ) from None
# End of function _label_mode()


def resolve_display_name(code, labels=LabelMode.ENGLISH, localize=None):
    """
    Return the display string for a country or region code.

    Region codes (anything longer than two characters) ignore the label
    mode and are looked up through ``localize``. Country codes are looked
    up in the reference table:

        english -> English name
        native  -> native name, or the English name when there is none
        both    -> "English / Native", or just the English name

    Args:
        code (str): Country code ("PL") or region code ("EUC", "ROW").
        labels (LabelMode or str): "english" (default), "native" or "both".
        localize (callable or None): key -> label for region codes.
            Defaults to localization.localize.

    Returns:
        str: The label, never empty for codes in the table.

    Raises:
        UnknownCodeError: if the code is in neither the country table nor
            the set of region codes.
        ValueError: if labels is not a known label mode.
    """
    if not isinstance(code, str):
        raise TypeError(f"Country code must be a string, got {type(code).__name__}")

    if is_region_code(code):
        key = localization.region_label_key(code)
        if key is None:
            raise UnknownCodeError(f"Unknown region code: {code!r}")
        return (localize or localization.localize)(key)

    entry = lookup_country(code)
    if entry is None:
        raise UnknownCodeError(f"Unknown country code: {code!r}")

    mode = _label_mode(labels)
    if mode is LabelMode.NATIVE:
        return entry.native_name or entry.english_name
    if mode is LabelMode.BOTH and entry.native_name:
        return f"{entry.english_name} / {entry.native_name}"
    return entry.english_name
# End of function resolve_display_name()


def removed_set(removed_countries):
    """Normalise the removed codes to a frozenset for O(1) membership tests."""
    if removed_countries is None:
        return frozenset()
    if isinstance(removed_countries, str):
        raise TypeError(
            "removed_countries must be a collection of codes, not a single string"
        )
    try:
        return frozenset(removed_countries)
    except TypeError:
        raise TypeError(
            f"removed_countries must be iterable, got {type(removed_countries).__name__}"
        ) from None
# End of function removed_set()


def _priority_entries(priority_countries):
    """Validate the caller's (label, code) pairs and wrap them as OptionEntry."""
    if priority_countries is None:
        return []
    if not isinstance(priority_countries, (list, tuple)):
        raise TypeError(
            "priority_countries must be a list of (label, code) pairs, "
            f"got {type(priority_countries).__name__}"
        )

    entries = []
    for index, pair in enumerate(priority_countries):
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise TypeError(
                f"priority_countries[{index}] must be a (label, code) pair, got {pair!r}"
            )
        label, code = pair
        entries.append(OptionEntry(label, code))
    # End of the loop that checks each priority pair
    return entries
# End of function _priority_entries()


def rest_of_world_option(removed_countries=None, localize=None):
    """
    Return the "Rest of World" option, or None when "ROW" was removed.

    Args:
        removed_countries (iterable[str] or None): Codes excluded from the list.
        localize (callable or None): Label lookup, see resolve_display_name.

    Returns:
        OptionEntry or None
    """
    removed = removed_set(removed_countries)
    if REST_OF_WORLD in removed:
        return None
    return OptionEntry(resolve_display_name(REST_OF_WORLD, localize=localize), REST_OF_WORLD)
# End of function rest_of_world_option()


def world_region_options(removed_countries=None, localize=None):
    """
    Return one option per continent, in the fixed region order.

    A region is skipped when its own code was removed, or when every one
    of its member countries was removed, since it would have nothing
    under it.

    Args:
        removed_countries (iterable[str] or None): Codes excluded from the list.
        localize (callable or None): Label lookup, see resolve_display_name.

    Returns:
        list[OptionEntry]: Zero to six region options.
    """
    removed = removed_set(removed_countries)
    entries = []

    for region_code in REGION_CODES:
        if region_code in removed:
            continue
        if not REGIONS[region_code] - removed:
            logger.debug("Skipping region %s: every member was removed", region_code)
            continue
        entries.append(OptionEntry(resolve_display_name(region_code, localize=localize), region_code))
    # End of the loop over world regions

    return entries
# End of function world_region_options()


def build_country_options(
    selected=None,
    priority_countries=None,
    removed_countries=None,
    include_rest_of_world=False,
    include_world_regions=False,
    labels=LabelMode.ENGLISH,
    localize=None,
):
    """
    Assemble the ordered option list for a country select.

    Order of the result:
        1. priority_countries, as given, minus removed codes
        2. a disabled separator, only when step 3 produces anything
        3. "Rest of World" and/or the world region options
        4. every remaining country, sorted by label (then by code)

    Priority entries are trusted verbatim: their labels are not resolved and
    their codes are not checked against the table. Removed codes that match
    nothing are ignored.

    Args:
        selected (str or None): The bound value. It has no effect on ordering;
            it is accepted so callers can pass their form state through, and
            marking the option is left to the rendering layer.
        priority_countries (list[tuple[str, str]] or None): (label, code)
            pairs to show first.
        removed_countries (iterable[str] or None): Codes to leave out of every
            part of the list, including region and "ROW" codes.
        include_rest_of_world (bool): Add the "Rest of World" option.
        include_world_regions (bool): Add one option per continent.
        labels (LabelMode or str): "english", "native" or "both".
        localize (callable or None): Label lookup for region options.

    Returns:
        list[OptionEntry]: The assembled options.

    Raises:
        UnknownCodeError: if a code the assembler resolves itself is unknown.
        TypeError: if priority_countries or removed_countries are malformed.
        ValueError: if labels is not a known label mode.
    """
    mode = _label_mode(labels)
    removed = removed_set(removed_countries)
    priority = [entry for entry in _priority_entries(priority_countries) if entry.value not in removed]

    countries = [
        OptionEntry(resolve_display_name(code, mode), code)
        for code in CODES - removed
    ]
    countries.sort(key=lambda entry: (entry.label, entry.value))

    extra = []
    if include_rest_of_world:
        row = rest_of_world_option(removed, localize=localize)
        if row is not None:
            extra.append(row)
    if include_world_regions:
        extra.extend(world_region_options(removed, localize=localize))

    result = list(priority)
    if extra:
        result.append(SEPARATOR)
        result.extend(extra)
    result.extend(countries)

    logger.debug(
        "Built %d options (priority=%d, extra=%d, countries=%d, selected=%r)",
        len(result), len(priority), len(extra), len(countries), selected,
    )
    return result
# End of function build_country_options()
