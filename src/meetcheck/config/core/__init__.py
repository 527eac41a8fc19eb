"""
Configuration core modules.

Contains the CONFIG.toml checking components:
- ConfigLoader: Reads and parses TOML files
- ConfigValidator: Validates the parsed tree section by section
- Config: Typed result used by the per-meet checks
- check_config: Entry point tying them together
"""

from meetcheck.config.core.exceptions import ConfigError
from meetcheck.config.core.loader import ConfigLoader
from meetcheck.config.core.accessor import (
    Config,
    DivisionConfig,
    Exemption,
    ExemptionConfig,
    WeightClassConfig,
)
from meetcheck.config.core.validator import ConfigValidator
from meetcheck.config.core.checker import CheckResult, check_config

__all__ = [
    'ConfigError',
    'ConfigLoader',
    'Config',
    'DivisionConfig',
    'Exemption',
    'ExemptionConfig',
    'WeightClassConfig',
    'ConfigValidator',
    'CheckResult',
    'check_config',
]
