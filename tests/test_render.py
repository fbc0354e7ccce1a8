"""
Unit tests for the HTML rendering helpers.
"""

from types import SimpleNamespace

import pytest

from options import OptionEntry, SEPARATOR
from render import (
    bound_value,
    country_options_for_select,
    country_select,
    field_id,
    field_name,
    options_for_select,
)


class TestOptionsForSelect:
    """Tests for options_for_select."""

    def test_plain_pairs(self):
        html = options_for_select([("Poland", "PL"), ("Ukraine", "UA")])

        assert html == (
            '<option value="PL">Poland</option>\n'
            '<option value="UA">Ukraine</option>\n'
        )

    def test_selected_single_value(self):
        html = options_for_select([OptionEntry("Poland", "PL"), OptionEntry("Ukraine", "UA")], "UA")

        assert '<option value="UA" selected="selected">Ukraine</option>' in html
        assert '<option value="PL">Poland</option>' in html

    def test_selected_multiple_values(self):
        html = options_for_select([("Poland", "PL"), ("Ukraine", "UA")], ["PL", "UA"])

        assert html.count('selected="selected"') == 2

    def test_separator_is_disabled_and_never_selected(self):
        html = options_for_select([SEPARATOR], "")

        assert html == '<option value="" disabled="disabled">-------------</option>\n'

    def test_escaping(self):
        html = options_for_select([("Cote D'ivoire & <Co>", 'C"I')])

        assert 'value="C&quot;I"' in html
        assert "Cote D&#x27;ivoire &amp; &lt;Co&gt;" in html


class TestCountryOptionsForSelect:
    """Tests for country_options_for_select."""

    def test_selected_country_is_marked(self):
        html = country_options_for_select("PL")

        assert '<option value="PL" selected="selected">Poland</option>' in html
        assert html.count('selected="selected"') == 1

    def test_separator_and_regions(self):
        html = country_options_for_select(
            priority_countries=[("Poland", "PL")],
            world_regions=True,
            rest_of_world=True,
        )
        lines = html.splitlines()

        assert lines[0] == '<option value="PL">Poland</option>'
        assert lines[1] == '<option value="" disabled="disabled">-------------</option>'
        assert lines[2] == '<option value="ROW">Rest of World</option>'
        assert lines[3] == '<option value="EUC">European</option>'

    def test_native_labels(self):
        html = country_options_for_select(labels="native")

        assert '<option value="UA">Україна</option>' in html

    def test_removed(self):
        html = country_options_for_select(removed_countries=["PL"])

        assert 'value="PL"' not in html


class TestFieldNaming:
    """Tests for field name/id derivation and bound values."""

    def test_name_and_id(self):
        assert field_name("user", "country") == "user[country]"
        assert field_id("user", "country") == "user_country"
        assert field_id("user[address]", "country") == "user_address_country"

    def test_bound_value_from_object(self):
        assert bound_value(SimpleNamespace(country="PL"), "country") == "PL"
        assert bound_value(SimpleNamespace(), "country") is None

    def test_bound_value_from_mapping(self):
        assert bound_value({"country": "UA"}, "country") == "UA"
        assert bound_value(None, "country") is None


class TestCountrySelect:
    """Tests for country_select."""

    def test_wrapping_select(self):
        html = country_select("user", "country", SimpleNamespace(country="PL"))

        assert html.startswith('<select name="user[country]" id="user_country">\n')
        assert html.endswith("</select>")
        assert '<option value="PL" selected="selected">Poland</option>' in html

    def test_html_options(self):
        html = country_select(
            "user", "country",
            html_options={"class": "form-select", "disabled": True, "id": "custom", "title": None},
        )

        assert 'class="form-select"' in html
        assert 'disabled="disabled"' in html
        assert 'id="custom"' in html
        assert "title=" not in html

    def test_options_are_passed_through(self):
        html = country_select(
            "user", "country",
            priority_countries=[("Home", "PL")],
            removed_countries=["UA"],
            options={"rest_of_world": True, "world_regions": True, "labels": "both"},
        )

        assert '<option value="ROW">Rest of World</option>' in html
        assert '<option value="OCC">Oceania</option>' in html
        assert 'value="UA"' not in html
        assert "Japan / 日本" in html

    def test_include_blank(self):
        html = country_select("user", "country", options={"include_blank": True})

        assert html.splitlines()[1] == '<option value=""></option>'

    def test_prompt_only_without_value(self):
        empty = country_select("user", "country", {}, options={"prompt": "Choose a country"})
        bound = country_select("user", "country", {"country": "PL"}, options={"prompt": True})

        assert empty.splitlines()[1] == '<option value="">Choose a country</option>'
        assert "Please select" not in bound

    def test_unknown_label_mode(self):
        with pytest.raises(ValueError):
            country_select("user", "country", options={"labels": "latin"})
