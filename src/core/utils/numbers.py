"""Lenient numeric parsing for query parameters and stored values.

Query strings and catalog records carry numbers as loosely formatted text.
These helpers read the longest numeric prefix of a value and return ``None``
when there is none, so callers can apply their own defaults instead of
failing the request.
"""

import math
import re
from decimal import Decimal
from typing import Any

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


def parse_int_prefix(value: Any) -> int | None:
    """Parse the leading integer of a value.

    Examples:
        "12"    -> 12
        " 3abc" -> 3
        "2.9"   -> 2
        "abc"   -> None
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, int):
        return value

    if isinstance(value, (float, Decimal)):
        if not math.isfinite(value):
            return None
        return int(value)

    match = _INT_PREFIX.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def parse_decimal_prefix(value: Any) -> float | None:
    """Parse the leading decimal number of a value.

    Numbers stored natively (including ``Decimal`` values returned by
    DynamoDB) are converted directly. Text is read up to the first character
    that cannot continue a number, so ``"19.99 USD"`` gives ``19.99``.
    Returns ``None`` when no number can be read.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float, Decimal)):
        parsed = float(value)
        return None if math.isnan(parsed) else parsed

    match = _FLOAT_PREFIX.match(str(value))
    if not match:
        return None
    return float(match.group(1).replace("Infinity", "inf"))
