"""
Sensitive field discovery for compliance tooling.
"""

from collections.abc import Iterable
from typing import Any

from form_engine.guardrails.constants import DEFAULT_SENSITIVE_CLASSIFICATIONS
from form_engine.models.schema import FieldDefinition, FormSchema, load_schema


def _walk(
    fields: dict[str, FieldDefinition],
    prefix: str,
    classifications: set[str],
) -> list[str]:
    paths: list[str] = []
    for key, field in fields.items():
        path = f"{prefix}.{key}" if prefix else key
        if field.sensitivity in classifications:
            paths.append(path)
        if field.item_schema:
            paths.extend(_walk(field.item_schema, path, classifications))
    return paths


def get_sensitive_fields(
    schema: FormSchema | dict[str, Any],
    classifications: Iterable[str] = DEFAULT_SENSITIVE_CLASSIFICATIONS,
) -> list[str]:
    """
    Return dotted paths of fields with a matching sensitivity.

    Example:
        >>> get_sensitive_fields(schema)
        ['ssn', 'address.zip']
    """
    return _walk(load_schema(schema).fields, "", set(classifications))
