"""
Submission finalizer.

This is the exit gate before persistence. It re-derives the form state,
refuses invalid data, and builds the payload from visible, non-excluded
fields only, casting each leaf value to its declared data type.
"""

import math
from typing import Any

from form_engine.logger import get_engine_logger
from form_engine.models.results import SubmissionResult
from form_engine.models.schema import FieldDefinition, FormSchema, load_schema
from form_engine.models.state import FieldState
from form_engine.orchestrator import (
    collect_visible_errors,
    compute_form_state,
    get_default_data_type,
)
from form_engine.transform.values import is_number, is_truthy, to_text

_SCALAR_TYPES = (str, int, float, bool)


def _to_number(value: Any) -> int | float | None:
    if isinstance(value, bool):
        return int(value)
    if is_number(value):
        return value
    try:
        number = float(value.strip())
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return int(number) if number.is_integer() else number


def cast_value(value: Any, data_type: str) -> Any:
    """
    Cast a scalar to ``data_type``.

    None and non-scalar values (lists, dicts) are returned unchanged.
    """
    if value is None or not isinstance(value, _SCALAR_TYPES):
        return value
    if data_type == "number":
        return _to_number(value)
    if data_type == "boolean":
        if isinstance(value, str):
            return value == "true"
        return is_truthy(value)
    if isinstance(value, str):
        return value
    return to_text(value)


def _resolve_data_type(field: FieldDefinition) -> str:
    return field.primary_data_type or get_default_data_type(field.widget)


def extract_clean_data(
    definitions: dict[str, FieldDefinition],
    states: dict[str, FieldState],
    exclude: set[str],
) -> dict[str, Any]:
    """Recursively extract values of visible, non-excluded fields."""
    result: dict[str, Any] = {}
    for key, state in states.items():
        # Hidden or excluded data never enters the persistence layer.
        if not state.is_visible or key in exclude:
            continue

        field = definitions[key]
        if isinstance(state.children, list):
            result[key] = [
                extract_clean_data(field.item_schema or {}, group, exclude)
                for group in state.children
            ]
        elif state.children is not None:
            result[key] = extract_clean_data(field.item_schema or {}, state.children, exclude)
        else:
            result[key] = cast_value(state.value, _resolve_data_type(field))
    return result


def process_submission(
    schema: FormSchema | dict[str, Any],
    raw_data: dict[str, Any],
    config_data: dict[str, Any] | None = None,
    options: dict[str, Any] | None = None,
) -> SubmissionResult:
    """
    Prepare form data for persistence.

    Args:
        schema: Form schema, or its JSON mapping.
        raw_data: Data to submit.
        config_data: Fallback value source.
        options: ``{"isDebug": bool}``.

    Returns:
        SubmissionResult. On failure ``errors`` maps the dotted path of each
        visible field with an error to its message and ``data`` is None.
    """
    schema = load_schema(schema)
    options = options or {}
    logger = get_engine_logger("process_submission", options.get("isDebug"))

    state = compute_form_state(schema, raw_data, config_data, options)

    if not state.is_valid:
        errors = collect_visible_errors(state.fields)
        logger.debug(f"submission rejected: {sorted(errors)}")
        return SubmissionResult(success=False, data=None, errors=errors)

    data = extract_clean_data(schema.fields, state.fields, set(schema.exclude))
    logger.debug(f"submission accepted: {sorted(data)}")
    return SubmissionResult(success=True, data=data, errors=None)
