"""
Smoke tests for check_config.

Validates that CONFIG.toml files can be read, parsed and checked end to end.
"""

import datetime

import pytest

from meetcheck.config import CheckResult, ConfigError, ConfigLoader, Exemption, check_config
from meetcheck.primitives import Age, Equipment, WeightClassKg


@pytest.mark.smoke
def test_check_valid_file(write_config, valid_config_text):
    """Test a well-formed file produces a config and no errors."""
    path = write_config(valid_config_text)

    result = check_config(path)

    assert isinstance(result, CheckResult)
    assert result.report.path == path
    assert result.report.errors == []
    assert result.config is not None
    assert [d.name for d in result.config.divisions] == ['Open', 'Juniors', 'Masters 40-44']
    assert result.config.divisions[0].max == Age.approximate(99)
    assert result.config.divisions[2].equipment == [Equipment.RAW, Equipment.WRAPS]
    assert result.config.weightclasses[1].divisions == [1]


@pytest.mark.smoke
def test_bare_and_quoted_meet_folders(write_config, valid_config_text):
    """Test exemption keys written bare or quoted are both strings."""
    result = check_config(write_config(valid_config_text))

    assert result.config.exemptions_for('1901') == (Exemption.EXEMPT_LIFT_ORDER,)
    assert len(result.config.exemptions_for('1902')) == 2
    assert result.config.exemptions_for('9999') is None


@pytest.mark.smoke
def test_missing_weightclasses_withholds_config(write_config):
    """Test a missing section is reported, not raised."""
    path = write_config('[divisions]\n[exemptions]\n')

    result = check_config(path)

    assert result.config is None
    assert "Missing the 'weightclasses' table" in result.report.errors


@pytest.mark.smoke
def test_unknown_section(write_config, valid_config_text):
    """Test an extra section is reported but the config is kept."""
    result = check_config(write_config(valid_config_text + '\n[foo]\nbar = 1\n'))

    assert result.config is not None
    assert result.report.errors == ["Unknown section 'foo'"]


@pytest.mark.smoke
def test_missing_file_raises(tmp_path):
    """Test an unreadable file is a fatal error."""
    with pytest.raises(ConfigError, match='Error reading configuration file'):
        check_config(tmp_path / 'CONFIG.toml')


@pytest.mark.smoke
def test_syntax_error_raises(write_config):
    """Test invalid TOML is a fatal error."""
    path = write_config('this is not toml\n')

    with pytest.raises(ConfigError, match='Error parsing TOML file'):
        check_config(path)


@pytest.mark.smoke
def test_loader_loads_text():
    """Test ConfigLoader parses TOML text into plain dictionaries."""
    root = ConfigLoader().loads('[exemptions]\n1901 = ["ExemptLiftOrder"]\n')

    assert root == {'exemptions': {'1901': ['ExemptLiftOrder']}}


def _weightclass_file(classes: str, date_range: str = '["2000-01-01", "2010-12-31"]') -> str:
    return (
        '[divisions]\n'
        '[exemptions]\n'
        '[weightclasses.wc]\n'
        f'classes = {classes}\n'
        f'date_range = {date_range}\n'
        'sex = "M"\n'
    )


@pytest.mark.smoke
def test_descending_numeric_classes_from_file(write_config):
    """Test mixed integer/float classes are read and only the ordering is reported."""
    result = check_config(write_config(_weightclass_file('[90, 82.5]')))

    assert result.config is not None
    assert [e for e in result.report.errors if 'occurs before' in e] == [
        "WeightClassKg '90' occurs before '82.5' in [weightclasses.wc]"
    ]
    assert result.report.count_messages() == (1, 0)
    assert result.config.weightclasses[0].classes == [
        WeightClassKg.under_or_equal(90),
        WeightClassKg.under_or_equal(82.5),
    ]


@pytest.mark.smoke
def test_mixed_number_and_string_classes_from_file(write_config):
    """Test classes mixing numbers and strings such as "90+"."""
    result = check_config(write_config(_weightclass_file('[52, "90+"]')))

    assert result.report.errors == []
    assert result.config.weightclasses[0].classes == [
        WeightClassKg.under_or_equal(52),
        WeightClassKg.over(90),
    ]


@pytest.mark.smoke
def test_native_toml_dates_from_file(write_config):
    """Test TOML local date literals in date_range."""
    text = _weightclass_file('["60", "60+"]', date_range='[2000-01-01, 2010-12-31]')
    result = check_config(write_config(text))

    assert result.report.errors == []
    assert result.config.weightclasses[0].date_min == datetime.date(2000, 1, 1)
    assert result.config.weightclasses[0].date_max == datetime.date(2010, 12, 31)
