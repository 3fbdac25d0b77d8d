"""
Sanitizer: filters, coerces and unflattens raw form input.

Only keys declared at the top level of the schema survive. Each key is
read as a dotted path, coerced for its widget and written into a fresh
nested dict. Nested item schemas are not visited here; the orchestrator
handles them.
"""

import math
from typing import Any

from form_engine.models.schema import FormSchema
from form_engine.transform import path_resolver
from form_engine.transform.values import is_number, is_truthy, parse_float

BOOLEAN_WIDGETS = {"checkbox", "switch"}
NUMERIC_INPUT_WIDGETS = {"number-input", "slider"}


def coerce_value(value: Any, widget: str) -> Any:
    """Coerce a raw value to the primitive its widget expects."""
    if value is None:
        return None

    if widget in BOOLEAN_WIDGETS:
        if isinstance(value, str):
            return value == "true"
        return is_truthy(value)

    if widget in NUMERIC_INPUT_WIDGETS:
        if isinstance(value, str):
            parsed = parse_float(value)
        elif isinstance(value, bool):
            parsed = float(value)
        elif is_number(value):
            parsed = value
        else:
            return 0
        return 0 if math.isnan(parsed) else parsed

    return value


def _write(target: dict[str, Any], path: str, value: Any) -> None:
    """Write into ``target`` in place, creating intermediate dicts."""
    keys = path.split(".")
    current = target
    for key in keys[:-1]:
        if not isinstance(current.get(key), dict):
            current[key] = {}
        current = current[key]
    current[keys[-1]] = value


def sanitize_form_data(schema: FormSchema, raw_data: dict[str, Any]) -> dict[str, Any]:
    """
    Build a clean, schema-shaped copy of ``raw_data``.

    Args:
        schema: The form schema; only its top-level keys are considered.
        raw_data: Untrusted input. Never mutated.

    Returns:
        A new dict holding one coerced value per declared key (None when
        the key was absent).
    """
    sanitized: dict[str, Any] = {}
    for key, field in schema.fields.items():
        raw_value = path_resolver.get(raw_data, key)
        _write(sanitized, key, coerce_value(raw_value, field.widget))
    return sanitized
