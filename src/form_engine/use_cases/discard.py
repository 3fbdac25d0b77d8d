"""
Discard changes.

Returns data to its last known good state. For each field the restored
value is, in order: the committed value, the schema default, then the
widget's empty fallback.
"""

from typing import Any

from form_engine.models.results import DiscardResult
from form_engine.models.schema import FormSchema, load_schema
from form_engine.orchestrator import get_fallback_value


def _safe_value(schema: FormSchema, committed_data: dict[str, Any], key: str) -> Any:
    if key in committed_data:
        return committed_data[key]

    field = schema.fields.get(key)
    if field is None:
        return get_fallback_value("text")
    if field.default_value is not None:
        return field.default_value
    return get_fallback_value(field.widget)


def discard_changes(
    schema: FormSchema | dict[str, Any],
    current_data: dict[str, Any],
    committed_data: dict[str, Any],
    target_key: str | None = None,
) -> DiscardResult:
    """
    Revert one field, or the whole form, to its baseline.

    Args:
        schema: Form schema, or its JSON mapping.
        current_data: Working data. Never mutated.
        committed_data: Last persisted values.
        target_key: When given, only this key is reverted and all other
            working values are kept.
    """
    schema = load_schema(schema)

    if target_key:
        data = dict(current_data)
        data[target_key] = _safe_value(schema, committed_data, target_key)
        return DiscardResult(data=data)

    return DiscardResult(
        data={key: _safe_value(schema, committed_data, key) for key in schema.fields}
    )
