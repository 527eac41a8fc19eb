"""
Weight class primitive.

A weight class is named by its upper bound in kilograms (``"90"``), or by
its lower bound with a trailing plus for the unbounded top class (``"90+"``).
"""

import functools
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple

from meetcheck.primitives.exceptions import PrimitiveParseError

_WEIGHTCLASS_PATTERN = re.compile(r'^(\d+(?:\.\d+)?)(\+?)$')


class WeightClassKind(Enum):
    UNDER_OR_EQUAL = 'under_or_equal'
    OVER = 'over'
    NONE = 'none'


@functools.total_ordering
@dataclass(frozen=True, eq=True)
class WeightClassKg:
    """Weight class threshold in kilograms."""
    kind: WeightClassKind
    kg: float = 0.0

    @classmethod
    def under_or_equal(cls, kg: float) -> 'WeightClassKg':
        return cls(WeightClassKind.UNDER_OR_EQUAL, float(kg))

    @classmethod
    def over(cls, kg: float) -> 'WeightClassKg':
        return cls(WeightClassKind.OVER, float(kg))

    def _sort_key(self) -> Tuple[int, float, int]:
        # Unknown first, then by weight; "90+" sorts after "90".
        if self.kind is WeightClassKind.NONE:
            return (0, 0.0, 0)
        return (1, self.kg, 1 if self.kind is WeightClassKind.OVER else 0)

    def __lt__(self, other: 'WeightClassKg') -> bool:
        if not isinstance(other, WeightClassKg):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    @classmethod
    def parse(cls, raw: Any) -> 'WeightClassKg':
        """
        Parse a weight class from a TOML value.

        Args:
            raw: String such as ``"82.5"`` or ``"120+"``, or a number

        Returns:
            Parsed WeightClassKg

        Raises:
            PrimitiveParseError: If the value is not a valid weight class
        """
        if isinstance(raw, bool):
            raise PrimitiveParseError(f"invalid WeightClassKg '{raw}'")

        if isinstance(raw, (int, float)):
            if not math.isfinite(raw) or raw <= 0:
                raise PrimitiveParseError(f"invalid WeightClassKg '{raw}'")
            return cls.under_or_equal(raw)

        if isinstance(raw, str):
            if raw == '':
                return WEIGHTCLASS_NONE
            match = _WEIGHTCLASS_PATTERN.match(raw)
            if not match or float(match.group(1)) <= 0:
                raise PrimitiveParseError(f"invalid WeightClassKg '{raw}'")
            kg = float(match.group(1))
            if match.group(2):
                return cls.over(kg)
            return cls.under_or_equal(kg)

        raise PrimitiveParseError(
            f"invalid type {type(raw).__name__}, expected a String or Number"
        )

    def __str__(self) -> str:
        if self.kind is WeightClassKind.NONE:
            return ''
        text = f"{self.kg:g}"
        return text + '+' if self.kind is WeightClassKind.OVER else text


WEIGHTCLASS_NONE = WeightClassKg(WeightClassKind.NONE)
