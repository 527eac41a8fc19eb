"""
Sex primitive.
"""

from enum import Enum
from typing import Any

from meetcheck.primitives.exceptions import PrimitiveParseError


class Sex(Enum):
    """Competitor sex category."""
    M = 'M'
    F = 'F'
    MX = 'Mx'

    @classmethod
    def parse(cls, raw: Any) -> 'Sex':
        """
        Parse a Sex from its exact string form.

        Raises:
            PrimitiveParseError: If the value is not a known category
        """
        if not isinstance(raw, str):
            raise PrimitiveParseError(f"invalid type {type(raw).__name__}, expected a String")
        try:
            return cls(raw)
        except ValueError:
            raise PrimitiveParseError(f"invalid Sex '{raw}'") from None

    def __str__(self) -> str:
        return self.value
