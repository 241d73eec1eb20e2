"""Fail-soft coercion of form text into engine inputs.

Form fields arrive as text. A value that cannot be read as a finite,
non-negative number becomes ``0.0``; nothing here raises.
"""

from __future__ import annotations

import math
import re
from typing import Any

# Leading numeric prefix, the way a browser's parseFloat reads "12abc" as 12.
_NUMBER_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_TRUE_WORDS = {"true", "yes", "on", "1"}


def parse_value(value: Any) -> float:
    """Return ``value`` as a finite non-negative float, or ``0.0``."""
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, str):
        match = _NUMBER_PREFIX.match(value)
        if match is None:
            return 0.0
        value = match.group(0)
    elif not isinstance(value, (int, float)):
        return 0.0

    try:
        number = float(value)
    except (OverflowError, ValueError):
        return 0.0

    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def parse_flag(value: Any) -> bool:
    """Interpret a checkbox/toggle value."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_WORDS
    return False


__all__ = ["parse_value", "parse_flag"]
