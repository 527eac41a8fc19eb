"""
Custom exceptions for configuration checking.
"""


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or parsed at all."""
    pass
