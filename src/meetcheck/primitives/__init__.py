"""
Domain primitives used by the checks.

Each primitive parses raw configuration values and raises
PrimitiveParseError when a value is invalid.
"""

from meetcheck.primitives.exceptions import PrimitiveParseError
from meetcheck.primitives.age import Age, AgeKind, AGE_NONE
from meetcheck.primitives.sex import Sex
from meetcheck.primitives.equipment import Equipment
from meetcheck.primitives.weightclass import WeightClassKg, WeightClassKind, WEIGHTCLASS_NONE
from meetcheck.primitives.dates import parse_date

__all__ = [
    'PrimitiveParseError',
    'Age',
    'AgeKind',
    'AGE_NONE',
    'Sex',
    'Equipment',
    'WeightClassKg',
    'WeightClassKind',
    'WEIGHTCLASS_NONE',
    'parse_date',
]
