"""
HTML rendering for the country select.

Turns the entries from options.py into <option> tags and wraps them in a
<select> bound to a form field. Field naming follows the usual
"object[method]" / "object_method" convention of server-side form helpers.
"""

import html
from collections.abc import Mapping

from options import LabelMode, build_country_options


def _attribute(name, value):
    return f'{name}="{html.escape(str(value), quote=True)}"'


def _selected_values(selected):
    """Accept a single value or a collection of values; always return a set of strings."""
    if selected is None:
        return set()
    if isinstance(selected, str):
        return {selected}
    if isinstance(selected, (list, tuple, set, frozenset)):
        return {str(value) for value in selected}
    return {str(selected)}
# End of function _selected_values()


def options_for_select(entries, selected=None):
    """
    Render option entries as <option> tags, one per line.

    Args:
        entries (iterable): OptionEntry items, or plain (label, value) pairs.
        selected (str or collection or None): Value(s) to mark as selected.
            Disabled entries are never marked.

    Returns:
        str: The concatenated option tags.
    """
    selected_values = _selected_values(selected)
    lines = []

    for entry in entries:
        label, value = entry[0], entry[1]
        disabled = len(entry) > 2 and bool(entry[2])

        attributes = [_attribute("value", value)]
        if not disabled and str(value) in selected_values:
            attributes.append(_attribute("selected", "selected"))
        if disabled:
            attributes.append(_attribute("disabled", "disabled"))

        lines.append(f"<option {' '.join(attributes)}>{html.escape(str(label))}</option>\n")
    # End of the loop that renders each option

    return "".join(lines)
# End of function options_for_select()


def country_options_for_select(
    selected=None,
    priority_countries=None,
    removed_countries=None,
    world_regions=False,
    rest_of_world=False,
    labels=LabelMode.ENGLISH,
    localize=None,
):
    """
    Return the option tags for a full country list.

    Only the options are produced; wrap them in a <select> yourself or use
    country_select(). Arguments are passed to build_country_options().

    Example:
        >>> html_options = country_options_for_select("PL", removed_countries=["UA"])
    """
    entries = build_country_options(
        selected=selected,
        priority_countries=priority_countries,
        removed_countries=removed_countries,
        include_rest_of_world=rest_of_world,
        include_world_regions=world_regions,
        labels=labels,
        localize=localize,
    )
    return options_for_select(entries, selected)
# End of function country_options_for_select()


def field_name(object_name, method):
    return f"{object_name}[{method}]"


def field_id(object_name, method):
    """Derive an HTML id from the field name, e.g. "user[country]" -> "user_country"."""
    raw = f"{object_name}_{method}"
    return raw.replace("[", "_").replace("]", "").replace("__", "_")


def bound_value(obj, method):
    """Read the current field value from an object attribute or a mapping key."""
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(method)
    return getattr(obj, method, None)
# End of function bound_value()


def country_select(
    object_name,
    method,
    obj=None,
    priority_countries=None,
    removed_countries=None,
    options=None,
    html_options=None,
):
    """
    Render a complete <select> tag for a country field.

    Examples:
        Simple country select:
            country_select("user", "country", user)

        Additional countries at the top:
            country_select("user", "country", user, [("My country", "XX")])

        Removed codes (e.g. already used elsewhere on the page):
            country_select("user", "country", user, None, ["GB", "PL", "DK"])

        "Rest of World" and continent options, native labels:
            country_select("user", "country", user, options={
                "rest_of_world": True, "world_regions": True, "labels": "native",
            })

    Args:
        object_name (str): Form object name, used for the name/id attributes.
        method (str): Attribute holding the selected code.
        obj (object or Mapping or None): Source of the bound value.
        priority_countries (list[tuple[str, str]] or None): See build_country_options.
        removed_countries (iterable[str] or None): See build_country_options.
        options (dict or None): rest_of_world, world_regions, labels,
            include_blank (True or a label), prompt, localize.
        html_options (dict or None): Extra attributes for the <select> tag.
            "name" and "id" override the derived ones.

    Returns:
        str: The <select> markup.
    """
    options = dict(options or {})
    html_options = {str(k): v for k, v in (html_options or {}).items()}
    html_options.setdefault("name", field_name(object_name, method))
    html_options.setdefault("id", field_id(object_name, method))

    value = bound_value(obj, method)

    body = country_options_for_select(
        value,
        priority_countries,
        removed_countries,
        world_regions=options.get("world_regions", False),
        rest_of_world=options.get("rest_of_world", False),
        labels=options.get("labels", LabelMode.ENGLISH),
        localize=options.get("localize"),
    )

    # blank/prompt go above everything else
    include_blank = options.get("include_blank")
    prompt = options.get("prompt")
    if include_blank:
        blank_label = include_blank if isinstance(include_blank, str) else ""
        body = options_for_select([(blank_label, "")]) + body
    elif prompt and not value:
        prompt_label = prompt if isinstance(prompt, str) else "Please select"
        body = options_for_select([(prompt_label, "")]) + body

    # boolean attributes: True renders as disabled="disabled", False/None are dropped
    attributes = " ".join(
        _attribute(name, name if attr_value is True else attr_value)
        for name, attr_value in html_options.items()
        if attr_value is not None and attr_value is not False
    )
    return f"<select {attributes}>\n{body}</select>"
# End of function country_select()
