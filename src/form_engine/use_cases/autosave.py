"""
AutoSave extractor.

Determines which data is safe and complete enough for a draft save.
"""

from typing import Any

from form_engine.logger import get_engine_logger
from form_engine.models.results import AutoSaveResult
from form_engine.models.schema import FieldDefinition, FormSchema, load_schema
from form_engine.models.state import FieldState
from form_engine.orchestrator import compute_form_state
from form_engine.transform.values import is_blank


def is_ready_for_save(field: FieldDefinition, state: FieldState) -> bool:
    """
    Auto-save decision for one field.

    A field is skipped when:
    - autoSave is not enabled in the schema
    - it is hidden or disabled
    - it has a validation error
    - it is required but currently empty
    """
    satisfies_requirement = not (state.is_required and is_blank(state.value))
    return (
        field.auto_save
        and state.is_visible
        and not state.is_disabled
        and state.error is None
        and satisfies_requirement
    )


def extract_auto_save(
    definitions: dict[str, FieldDefinition],
    states: dict[str, FieldState],
) -> dict[str, Any]:
    """Collect eligible values at one level, recursing into containers."""
    payload: dict[str, Any] = {}
    for key, state in states.items():
        field = definitions.get(key)
        if field is None or not is_ready_for_save(field, state):
            continue

        item_schema = field.item_schema or {}
        if isinstance(state.children, list):
            payload[key] = [
                extract_auto_save(item_schema, group) for group in state.children
            ]
        elif state.children is not None:
            payload[key] = extract_auto_save(item_schema, state.children)
        else:
            payload[key] = state.value
    return payload


def handle_auto_save(
    schema: FormSchema | dict[str, Any],
    raw_data: dict[str, Any],
    options: dict[str, Any] | None = None,
) -> AutoSaveResult:
    """
    Select the draft payload for an auto-save.

    Returns:
        AutoSaveResult with ``should_save`` True when at least one
        top-level field was included.
    """
    schema = load_schema(schema)
    options = options or {}
    logger = get_engine_logger("handle_auto_save", options.get("isDebug"))

    state = compute_form_state(schema, raw_data, options=options)
    payload = extract_auto_save(schema.fields, state.fields)

    logger.debug(f"auto-save fields: {sorted(payload)}")
    return AutoSaveResult(should_save=bool(payload), payload=payload)
