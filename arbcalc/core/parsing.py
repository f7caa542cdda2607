"""Defensive parsing of loosely-typed numeric inputs.

Odds and stakes arrive from forms and JSON payloads as numbers, numeric
strings, empty strings or nothing at all. None of these readers raise:
anything that is not a usable number degrades to 0 (or None for optional
values) so the downstream math can short-circuit instead of failing.
"""

import math
from typing import Any

TRUE_STRINGS = {"true", "1", "yes", "y", "on"}


def _to_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(number):
        return None
    return number


def parse_numeric_or_zero(value: Any) -> float:
    """
    Parse a number, returning 0 for anything unusable.

    Examples:
        "2.10" → 2.1
        ""     → 0.0
        None   → 0.0
        "abc"  → 0.0
    """
    number = _to_float(value)
    return 0.0 if number is None else number


def parse_optional_numeric(value: Any) -> float | None:
    """Parse a number, returning None when the value is absent or unreadable."""
    return _to_float(value)


def parse_index(value: Any) -> int | None:
    """Parse a list index; None unless the value is a whole number."""
    number = _to_float(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def parse_flag(value: Any) -> bool:
    """Parse a boolean flag from a bool, number or string."""
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    if value is None:
        return False
    return bool(value)


def finite_or_zero(value: float) -> float:
    """Coerce NaN and infinities to 0."""
    return value if math.isfinite(value) else 0.0


def round_money(value: float) -> float:
    """Round a monetary amount to cents, coercing non-finite values to 0."""
    return round(finite_or_zero(value), 2)
