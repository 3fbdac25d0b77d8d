"""
Rule-only validation of form data and wizard sections.

These checks run each field's validation tree directly, without
visibility rules or value resolution. Fields without a validation tree
are treated as optional.
"""

from typing import Any

from form_engine.models.results import SectionValidationResult
from form_engine.models.schema import FieldDefinition, FormSchema, load_schema
from form_engine.rules.validator import evaluate_validation


def _validate_fields(
    fields: dict[str, FieldDefinition],
    data: dict[str, Any],
) -> SectionValidationResult:
    errors: dict[str, str] = {}
    for key, field in fields.items():
        if field.validation is None:
            continue
        error = evaluate_validation(field.validation, data.get(key))
        if error is not None:
            errors[key] = error
    return SectionValidationResult(is_valid=not errors, errors=errors)


def validate_form_data(
    schema: FormSchema | dict[str, Any],
    data: dict[str, Any],
) -> SectionValidationResult:
    """Validate every top-level field against ``data[key]``."""
    return _validate_fields(load_schema(schema).fields, data)


def validate_section(
    schema: FormSchema | dict[str, Any],
    section_key: str,
    data: dict[str, Any],
) -> SectionValidationResult:
    """
    Validate only the children of one section field.

    Useful for wizard-form step validation. An unknown key, or a field
    without an item schema, is always valid.
    """
    section = load_schema(schema).fields.get(section_key)
    if section is None or section.item_schema is None:
        return SectionValidationResult(is_valid=True, errors={})

    section_data = data.get(section_key)
    if not isinstance(section_data, dict):
        section_data = {}
    return _validate_fields(section.item_schema, section_data)
