"""Input Coercion: lenient scalar parsing for form and query values.

Invariants:
    - parse_leading_int truncates, never rounds ("3.9" -> 3, 30.7 -> 30)
    - Booleans are never treated as integers
    - Blank means None or whitespace-only text; 0 is not blank

Design Decisions:
    - Leading-integer parsing ("45min" -> 45): form clients send free text and
      the API historically accepted anything that starts with digits
"""

import math
import re

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def is_blank(value: object) -> bool:
    """True for None and for strings that are empty after stripping."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def parse_leading_int(value: object) -> int | None:
    """Parse the integer at the start of value, or None if there is none."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else None
    return None
