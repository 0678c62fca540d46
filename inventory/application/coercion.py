"""Lenient parsing of form input.

Numbers follow the ``parseFloat(x) || 0`` rule the shop's forms have always
used: a leading numeric prefix is read and anything else becomes 0. Stock
adjustments follow ``parseInt(x, 10)`` and report failure with ``None``.
"""

import math
import re
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any, Optional

_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")

# Range of the integer columns
INT_MIN = -2**31
INT_MAX = 2**31 - 1
# Numeric(10, 2) holds eight digits before the point
PRICE_LIMIT = 10**8


def parse_number(value: Any) -> float:
    """Parse ``value`` as a number, defaulting to 0."""
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float, Decimal)):
        try:
            number = float(value)
        except OverflowError:
            return 0.0
    elif isinstance(value, str):
        match = _FLOAT_PREFIX.match(value)
        if not match:
            return 0.0
        number = float(match.group(1))
    else:
        return 0.0
    return number if math.isfinite(number) else 0.0


def parse_whole_number(value: Any) -> int:
    """Same as ``parse_number`` but truncated to an integer.

    Values outside the integer column range become 0, like non-finite ones.
    """
    number = int(parse_number(value))
    return number if in_int_range(number) else 0


def in_int_range(value: int) -> bool:
    return INT_MIN <= value <= INT_MAX


def parse_price(value: Any) -> float:
    number = parse_number(value)
    return number if abs(number) < PRICE_LIMIT else 0.0


def parse_adjustment(value: Any) -> Optional[int]:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, (float, Decimal)):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _INT_PREFIX.match(value)
        return int(match.group(1)) if match else None
    return None


def parse_date(value: Any) -> Optional[date]:
    """Return a date, or None for blank and unparseable input."""
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return parse_date(datetime.fromisoformat(text))
    except ValueError:
        return None
