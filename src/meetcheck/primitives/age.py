"""
Age primitive.

An age is either exact, approximate (the lifter was one of two consecutive
ages, written with a trailing ``.5``), or unknown.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from meetcheck.primitives.exceptions import PrimitiveParseError

MAX_AGE = 255

_AGE_PATTERN = re.compile(r'^(\d+)(\.5)?$')


class AgeKind(Enum):
    EXACT = 'exact'
    APPROXIMATE = 'approximate'
    NONE = 'none'


@dataclass(frozen=True)
class Age:
    """
    Age at the time of competition.

    ``Age.approximate(23)`` is written ``23.5`` and means "23 or 24".
    """
    kind: AgeKind
    value: int = 0

    @classmethod
    def exact(cls, value: int) -> 'Age':
        return cls(AgeKind.EXACT, value)

    @classmethod
    def approximate(cls, value: int) -> 'Age':
        return cls(AgeKind.APPROXIMATE, value)

    @property
    def is_exact(self) -> bool:
        return self.kind is AgeKind.EXACT

    @property
    def is_approximate(self) -> bool:
        return self.kind is AgeKind.APPROXIMATE

    def is_definitely_less_than(self, other: 'Age') -> bool:
        """
        Check whether this age is certainly lower than another.

        Approximate ages are treated conservatively: ``n.5`` may be as high
        as ``n + 1`` on the left side and as low as ``n`` on the right side.
        Unknown ages are never definitely less than anything.

        Args:
            other: Age to compare against

        Returns:
            True only if every reading of both ages has this one lower
        """
        if self.kind is AgeKind.NONE or other.kind is AgeKind.NONE:
            return False
        upper = self.value + 1 if self.is_approximate else self.value
        return upper < other.value

    @classmethod
    def parse(cls, raw: Any) -> 'Age':
        """
        Parse an age from a TOML value.

        Accepts integers, floats that are whole or end in ``.5``, and strings
        of the same forms. The empty string is an unknown age.

        Args:
            raw: Integer, float or string value

        Returns:
            Parsed Age

        Raises:
            PrimitiveParseError: If the value is not a valid age
        """
        # bool is a subclass of int
        if isinstance(raw, bool):
            raise PrimitiveParseError(f"invalid Age '{raw}'")

        if isinstance(raw, int):
            return cls._checked(cls.exact(raw), raw)

        if isinstance(raw, float):
            if not math.isfinite(raw) or raw < 0:
                raise PrimitiveParseError(f"invalid Age '{raw}'")
            whole = math.floor(raw)
            if raw == whole:
                return cls._checked(cls.exact(int(whole)), raw)
            if raw - whole == 0.5:
                return cls._checked(cls.approximate(int(whole)), raw)
            raise PrimitiveParseError(f"invalid Age '{raw}'")

        if isinstance(raw, str):
            if raw == '':
                return AGE_NONE
            match = _AGE_PATTERN.match(raw)
            if not match:
                raise PrimitiveParseError(f"invalid Age '{raw}'")
            value = int(match.group(1))
            if match.group(2):
                return cls._checked(cls.approximate(value), raw)
            return cls._checked(cls.exact(value), raw)

        raise PrimitiveParseError(
            f"invalid type {type(raw).__name__}, expected an Integer, Float or String"
        )

    @staticmethod
    def _checked(age: 'Age', raw: Any) -> 'Age':
        if age.value < 0 or age.value > MAX_AGE:
            raise PrimitiveParseError(f"Age '{raw}' is out of range")
        return age

    def __str__(self) -> str:
        if self.kind is AgeKind.EXACT:
            return str(self.value)
        if self.kind is AgeKind.APPROXIMATE:
            return f"{self.value}.5"
        return ''


AGE_NONE = Age(AgeKind.NONE)
