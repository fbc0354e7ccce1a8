"""
CSV and JSON export/import utilities for the country select.

Provides functions to save and load a select configuration as JSON, and to
turn option lists, the reference table and per-region coverage into pandas
DataFrames / CSV strings suitable for Streamlit download buttons.
"""

import json

import pandas as pd

from countries import COUNTRIES, REGION_CODES, REGIONS, region_for_country
from options import LabelMode, removed_set, resolve_display_name, world_region_options


def build_options_dataframe(entries):
    """
    Builds a DataFrame from assembled option entries.

    Args:
        entries (list[OptionEntry]): Output of build_country_options.

    Returns:
        pd.DataFrame: Columns position, label, value, disabled, in list order.
    """
    rows = [
        {
            "position": position,
            "label": entry.label,
            "value": entry.value,
            "disabled": bool(entry.disabled),
        }
        for position, entry in enumerate(entries)
    ]
    return pd.DataFrame(rows, columns=["position", "label", "value", "disabled"])
# End of function build_options_dataframe()


def export_options_csv(entries):
    """
    Exports an option list to CSV string (for Streamlit download).

    Args:
        entries (list[OptionEntry]): Output of build_country_options.

    Returns:
        str: CSV content without the DataFrame index.
    """
    return build_options_dataframe(entries).to_csv(index=False)


def build_reference_dataframe():
    """
    Builds a DataFrame of the bundled country table.

    Returns:
        pd.DataFrame: Columns code, english_name, native_name, region, sorted
            by code. native_name and region are None where not available.
    """
    rows = []
    for code in sorted(COUNTRIES):
        entry = COUNTRIES[code]
        rows.append({
            "code": code,
            "english_name": entry.english_name,
            "native_name": entry.native_name,
            "region": region_for_country(code),
        })
    # End of the loop that builds reference rows

    return pd.DataFrame(rows, columns=["code", "english_name", "native_name", "region"])
# End of function build_reference_dataframe()


def export_reference_csv():
    """Exports the bundled country table to CSV string."""
    return build_reference_dataframe().to_csv(index=False)


def build_region_summary(removed_countries=None, localize=None):
    """
    Summarises how much of each world region survives a removal list.

    A region is only rendered as an option when its own code is not removed
    and at least one member country remains; the "rendered" column is taken
    from world_region_options() so both agree.

    Args:
        removed_countries (iterable[str] or None): Codes excluded from the list.
        localize (callable or None): Label lookup for the region names.

    Returns:
        pd.DataFrame: Columns region, label, total, remaining, rendered, in
            the fixed region order.

    Raises:
        TypeError: if removed_countries is a bare string or not iterable.
    """
    removed = removed_set(removed_countries)
    rendered_codes = {entry.value for entry in world_region_options(removed, localize=localize)}
    rows = []

    for region_code in REGION_CODES:
        members = REGIONS[region_code]
        remaining = len(members - removed)
        rows.append({
            "region": region_code,
            "label": resolve_display_name(region_code, localize=localize),
            "total": len(members),
            "remaining": remaining,
            "rendered": region_code in rendered_codes,
        })
    # End of the loop over regions

    return pd.DataFrame(rows, columns=["region", "label", "total", "remaining", "rendered"])
# End of function build_region_summary()


def export_config_json(priority_countries, removed_countries, rest_of_world, world_regions, labels):
    """
    Exports the current select configuration as a JSON string for save/load.

    Args:
        priority_countries: list of country codes shown first.
        removed_countries: list of codes left out of the list.
        rest_of_world: whether the "Rest of World" option is shown.
        world_regions: whether the continent options are shown.
        labels: label mode ("english", "native" or "both").

    Returns:
        str: Pretty-printed JSON string.
    """
    config = {
        "priority_countries": list(priority_countries),
        "removed_countries": list(removed_countries),
        "rest_of_world": bool(rest_of_world),
        "world_regions": bool(world_regions),
        "labels": LabelMode(labels).value,
    }
    return json.dumps(config, indent=2, ensure_ascii=False)
# End of function export_config_json()


_REQUIRED_CONFIG_FIELDS = {
    "priority_countries", "removed_countries", "rest_of_world", "world_regions", "labels",
}


def import_config_json(json_string):
    """
    Parses a configuration JSON string.

    Validates that the JSON is well-formed and contains every required field
    before returning the configuration dictionary. Codes are not checked
    against the country table.

    Args:
        json_string: JSON string previously produced by export_config_json.

    Returns:
        dict with keys: priority_countries, removed_countries, rest_of_world,
            world_regions, labels.

    Raises:
        ValueError: if the JSON is invalid or missing required fields.
    """
    try:
        config = json.loads(json_string)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON: {exc}") from exc

    if not isinstance(config, dict):
        raise ValueError(
            f"Expected a JSON object at the top level, got {type(config).__name__}"
        )

    missing_fields = _REQUIRED_CONFIG_FIELDS - set(config.keys())
    if missing_fields:
        raise ValueError(
            f"Missing required configuration fields: {', '.join(sorted(missing_fields))}"
        )

    # Validate types of required fields
    for field in ("priority_countries", "removed_countries"):
        if not isinstance(config[field], list) or not all(isinstance(c, str) for c in config[field]):
            raise ValueError(f"'{field}' must be a list of strings")
    for field in ("rest_of_world", "world_regions"):
        if not isinstance(config[field], bool):
            raise ValueError(f"'{field}' must be true or false")
    if config["labels"] not in {mode.value for mode in LabelMode}:
        raise ValueError("'labels' must be one of: english, native, both")
    # End of the type-validation block

    return {field: config[field] for field in _REQUIRED_CONFIG_FIELDS}
# End of function import_config_json()
