"""
Pytest configuration and shared fixtures.

Adds the project root to the Python path so the flat modules
(countries, options, render, ...) import without installation.
"""

import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from localization import Localizer  # noqa: E402


@pytest.fixture
def polish_localizer():
    """Localizer with a partial Polish catalog (no Oceania entry)."""
    return Localizer("pl", {
        "helpers.world_regions.european": "Europejskie",
        "helpers.world_regions.north_american": "Północnoamerykańskie",
        "helpers.world_regions.south_american": "Południowoamerykańskie",
        "helpers.world_regions.asian": "Azjatyckie",
        "helpers.world_regions.african": "Afrykańskie",
        "helpers.rest_of_world": "Reszta świata",
    })


@pytest.fixture
def europe_codes():
    from countries import EUROPE
    return list(EUROPE)
