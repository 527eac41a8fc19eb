"""
Configuration package.

Checks the CONFIG.toml of a meet archive.

Main entry point:
    from meetcheck.config import check_config

    result = check_config('CONFIG.toml')
    print(result.report.render())
"""

# Re-export main components for convenience
from meetcheck.config.core import (
    ConfigError,
    ConfigLoader,
    Config,
    DivisionConfig,
    Exemption,
    ExemptionConfig,
    WeightClassConfig,
    ConfigValidator,
    CheckResult,
    check_config,
)

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
