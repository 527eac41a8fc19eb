"""
Equipment primitive.
"""

from enum import Enum
from typing import Any

from meetcheck.primitives.exceptions import PrimitiveParseError


class Equipment(Enum):
    """Gear category a lifter competed in."""
    RAW = 'Raw'
    WRAPS = 'Wraps'
    SINGLE_PLY = 'Single-ply'
    MULTI_PLY = 'Multi-ply'
    UNLIMITED = 'Unlimited'
    STRAPS = 'Straps'

    @classmethod
    def parse(cls, raw: Any) -> 'Equipment':
        """
        Parse Equipment from its exact string form.

        Raises:
            PrimitiveParseError: If the value is not a known category
        """
        if not isinstance(raw, str):
            raise PrimitiveParseError(f"invalid type {type(raw).__name__}, expected a String")
        try:
            return cls(raw)
        except ValueError:
            raise PrimitiveParseError(f"invalid Equipment '{raw}'") from None

    def __str__(self) -> str:
        return self.value
