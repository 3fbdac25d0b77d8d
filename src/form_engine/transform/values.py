"""
JSON value helpers.

Form data arrives as JSON, so comparisons and emptiness checks follow
JSON typing: a boolean is never a number, and ``1`` never equals ``True``.
"""

import math
import re
from typing import Any

_FLOAT_PREFIX = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def is_number(value: Any) -> bool:
    """True for int/float values, excluding booleans."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_mapping(value: Any) -> bool:
    return isinstance(value, dict)


def is_blank(value: Any) -> bool:
    """A value the user has not filled in: None or the empty string."""
    return value is None or value == ""


def strict_equals(left: Any, right: Any) -> bool:
    """
    Type-strict equality.

    Scalars compare by value only when both sides share a JSON type.
    Lists and dicts compare by identity.
    """
    if left is None or right is None:
        return left is right
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if is_number(left) or is_number(right):
        return is_number(left) and is_number(right) and left == right
    if is_string(left) or is_string(right):
        return is_string(left) and is_string(right) and left == right
    return left is right


def contains_strict(items: list[Any], value: Any) -> bool:
    """Membership test using :func:`strict_equals`."""
    return any(strict_equals(item, value) for item in items)


def to_text(value: Any) -> str:
    """Render a JSON value as display text."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_float(value: str) -> float:
    """Parse the leading numeric part of a string, NaN when there is none."""
    match = _FLOAT_PREFIX.match(value)
    if not match:
        return math.nan
    return float(match.group(0))


def is_truthy(value: Any) -> bool:
    """Truthiness where containers always count as present."""
    if isinstance(value, (list, dict)):
        return True
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)
