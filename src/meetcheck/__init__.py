"""
Meet archive checker.

Validates the CONFIG.toml that customizes per-meet checks for a results archive.

Main entry point:
    from meetcheck.config import check_config

    result = check_config('meet-data/uspa/CONFIG.toml')
    if result.config:
        exemptions = result.config.exemptions_for('1901')
"""

__version__ = '0.1.0'
