"""
Custom exceptions for domain primitives.
"""


class PrimitiveParseError(ValueError):
    """Raised when a raw value cannot be parsed into a domain primitive."""
    pass
