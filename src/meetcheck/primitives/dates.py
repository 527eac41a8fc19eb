"""
Calendar date parsing.
"""

import datetime
import re
from typing import Any

from meetcheck.primitives.exceptions import PrimitiveParseError

_DATE_PATTERN = re.compile(r'^(\d{4})-(\d{2})-(\d{2})$')


def parse_date(raw: Any) -> datetime.date:
    """
    Parse a calendar date.

    Args:
        raw: ``YYYY-MM-DD`` string or a TOML local date literal

    Returns:
        The parsed date

    Raises:
        PrimitiveParseError: If the value is not a valid date
    """
    # datetime is a subclass of date, and a time component is not a date
    if isinstance(raw, datetime.datetime):
        raise PrimitiveParseError(f"invalid Date '{raw}': unexpected time component")

    if isinstance(raw, datetime.date):
        return raw

    if not isinstance(raw, str):
        raise PrimitiveParseError(f"invalid type {type(raw).__name__}, expected a String")

    match = _DATE_PATTERN.match(raw)
    if not match:
        raise PrimitiveParseError(f"invalid Date '{raw}'")
    try:
        return datetime.date(int(match.group(1)), int(match.group(2)), int(match.group(3)))
    except ValueError as e:
        raise PrimitiveParseError(f"invalid Date '{raw}': {e}") from None
