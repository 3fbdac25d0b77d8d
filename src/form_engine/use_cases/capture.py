"""
Input capture.

Normalizes a single raw UI edit before it is written to working data.
"""

import math
from typing import Any

from form_engine.logger import get_engine_logger
from form_engine.models.results import CaptureResult
from form_engine.models.schema import FieldDefinition
from form_engine.transform.values import is_number, is_truthy


def _to_number(value: Any) -> float | int | None:
    if value == "" or value is None:
        return None
    if is_number(value):
        return value
    if isinstance(value, bool):
        return int(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(number) else number


def capture_input(
    key: str,
    raw_value: Any,
    old_value: Any,
    field: FieldDefinition,
    options: dict[str, Any] | None = None,
) -> CaptureResult:
    """
    Normalize one UI edit.

    Strings are stripped, then the value is coerced for the widget:
    numbers (None when empty or unparseable), strict booleans, or lists.
    """
    options = options or {}
    value = raw_value.strip() if isinstance(raw_value, str) else raw_value

    if field.widget in ("number", "slider"):
        value = _to_number(value)
    elif field.widget in ("checkbox", "switch"):
        value = is_truthy(value)
    elif field.widget in ("multi-select", "tags"):
        value = value if isinstance(value, list) else []

    logger = get_engine_logger("capture_input", options.get("isDebug"))
    if value != old_value:
        logger.debug(f"input change {key}: previous={old_value!r} current={value!r}")

    return CaptureResult(key=key, value=value)
