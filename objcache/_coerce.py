"""
Value coercion — permissive parsing of loosely typed config and results.
"""

from __future__ import annotations

import math
import re
import sys
from typing import Any

_TRUTHY = frozenset({"1", "true", "on", "yes"})

_NUMERIC = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$", re.ASCII)
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)", re.ASCII)


# ═══════════════════════════════════════════════════════════════════════════════
# to_bool() — "yes"/"on"/"1"/"true" are true, everything else is false
# ═══════════════════════════════════════════════════════════════════════════════


def to_bool(value: Any) -> bool:
    """
    Permissive boolean parsing.

    Example:
        to_bool("Yes")    # True
        to_bool(" on ")   # True
        to_bool("nope")   # False
        to_bool(None)     # False
    """
    match value:
        case bool():
            return value
        case int() | float():
            return value == 1
        case str():
            return value.strip().lower() in _TRUTHY
        case _:
            return False


# ═══════════════════════════════════════════════════════════════════════════════
# to_int() — leading integer of a string, truncation of floats
# ═══════════════════════════════════════════════════════════════════════════════


def to_int(value: Any) -> int:
    """
    Integer coercion that never raises.

    Example:
        to_int("120")    # 120
        to_int("90sec")  # 90
        to_int(7.9)      # 7
        to_int("abc")    # 0
    """
    match value:
        case bool():
            return int(value)
        case int():
            return value
        case float():
            return int(value) if math.isfinite(value) else 0
        case str():
            if _NUMERIC.match(value):
                number = normalize_numeric(value)
                if isinstance(number, float) and math.isinf(number):
                    return _saturate(number < 0)
                return to_int(number)
            m = _LEADING_INT.match(value)
            return _parse_int(m.group(1)) if m else 0
        case _:
            return 0


def _saturate(negative: bool) -> int:
    return -sys.maxsize - 1 if negative else sys.maxsize


def _parse_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        # Longer than the interpreter's int string conversion limit
        return _saturate(text.lstrip().startswith("-"))


# ═══════════════════════════════════════════════════════════════════════════════
# Numeric normalization — "42" → 42, "3.14" → 3.14
# ═══════════════════════════════════════════════════════════════════════════════


def is_numeric(value: Any) -> bool:
    """Numbers and numeric strings. Booleans are not numeric."""
    match value:
        case bool():
            return False
        case int():
            return True
        case float():
            return math.isfinite(value)
        case str():
            return _NUMERIC.match(value) is not None
        case _:
            return False


def normalize_numeric(value: Any) -> Any:
    """
    Convert numeric values to int when integral, else float.

    Non-numeric values are returned unchanged.

    Example:
        normalize_numeric("42")     # 42
        normalize_numeric("3.14")   # 3.14
        normalize_numeric("1e3")    # 1000
        normalize_numeric("hello")  # "hello"
    """
    if not is_numeric(value):
        return value
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.lstrip("+-").isdigit():
            try:
                return int(text)
            except ValueError:
                # Longer than the interpreter's int string conversion limit
                return float(text)
        value = float(text)
    if value.is_integer():
        return int(value)
    return value


__all__ = ("to_bool", "to_int", "is_numeric", "normalize_numeric")
