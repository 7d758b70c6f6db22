"""Runtime values and their coercions.

FlowLang values are plain Python objects: ``str`` (time values are ``HH:MM``
strings), ``float`` and ``bool``. Variables seeded by the caller may also hold
``int`` or ``None``. The helpers below are total: they never raise, and
anything that cannot be coerced becomes NaN.
"""

from __future__ import annotations

import math
import re
from datetime import datetime
from typing import Any, Optional, Union

Value = Union[str, float, bool]

NAN = float("nan")

# The literal text that stands for the current clock in time comparisons.
CURRENT_TIME_TOKEN = "time"

_CLOCK_RE = re.compile(r"^([0-9]{2}):([0-9]{2})$")
_DECIMAL_RE = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")


def _format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def to_string_repr(value: Any) -> str:
    """Render a value the way comparisons and display see it.

    >>> to_string_repr(5.0)
    '5'
    >>> to_string_repr(True)
    'true'
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return _format_number(value)
    return str(value)


def to_number(value: Any) -> float:
    """Coerce a value to a float; non-numeric text becomes NaN."""
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return float(value)
    text = str(value).strip()
    if not text:
        return 0.0
    if text in ("Infinity", "+Infinity"):
        return math.inf
    if text == "-Infinity":
        return -math.inf
    if _DECIMAL_RE.match(text):
        return float(text)
    return NAN


def to_minutes(value: Any, now: Optional[datetime] = None) -> float:
    """Minutes since midnight for a ``HH:MM`` value.

    The bare word ``time`` reads the clock: *now* when given, the local wall
    clock otherwise. Anything that is not strictly ``HH:MM`` yields NaN.
    """
    text = to_string_repr(value)
    if text == CURRENT_TIME_TOKEN:
        clock = now if now is not None else datetime.now()
        return float(clock.hour * 60 + clock.minute)
    match = _CLOCK_RE.match(text)
    if not match:
        return NAN
    return float(int(match.group(1)) * 60 + int(match.group(2)))


def is_truthy(value: Any) -> bool:
    """False, zero, NaN, the empty string and None are falsy; all else is truthy."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ""
    return bool(value)


__all__ = [
    "Value",
    "NAN",
    "CURRENT_TIME_TOKEN",
    "to_string_repr",
    "to_number",
    "to_minutes",
    "is_truthy",
]
