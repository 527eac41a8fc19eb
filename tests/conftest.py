"""
Shared pytest fixtures for all tests.

Provides reusable fixtures for:
- Well-formed CONFIG.toml text
- Writing CONFIG.toml files into a temporary meet archive
"""

import textwrap
from pathlib import Path

import pytest


VALID_CONFIG_TOML = textwrap.dedent("""\
    [divisions.open]
    name = "Open"
    min = 0
    max = 99.5

    [divisions.juniors]
    name = "Juniors"
    min = 20
    max = 23
    tested = "Yes"

    [divisions.masters1]
    name = "Masters 40-44"
    min = 40
    max = 44
    sex = "M"
    equipment = ["Raw", "Wraps"]

    [weightclasses.default_M]
    classes = ["52", "56", "60", "67.5", "75", "82.5", "90", "90+"]
    date_range = ["1980-01-01", "9999-01-01"]
    sex = "M"

    [weightclasses.juniors_F]
    classes = ["47", "52", "57", "57+"]
    date_range = ["2019-01-01", "9999-01-01"]
    sex = "F"
    divisions = ["Juniors"]

    [exemptions]
    1901 = ["ExemptLiftOrder"]
    "1902" = ["ExemptDivision", "ExemptWeightClassConsistency"]
""")


@pytest.fixture
def valid_config_text():
    """Well-formed CONFIG.toml contents."""
    return VALID_CONFIG_TOML


@pytest.fixture
def write_config(tmp_path):
    """
    Write CONFIG.toml files below a temporary archive directory.

    Returns a function taking the file contents and an optional
    sub-directory, returning the written path.
    """
    def _write_config(text: str, subdir: str = '') -> Path:
        directory = tmp_path / subdir
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / 'CONFIG.toml'
        path.write_text(text, encoding='utf-8')
        return path

    return _write_config
