"""
Static schema checks.

Catches common schema misconfigurations before a form is served.
"""

from typing import Any

from form_engine.guardrails.constants import (
    DATA_CLASSIFICATIONS,
    DATA_TYPES,
    KNOWN_WIDGETS,
    RULE_EFFECTS,
    SELECT_WIDGETS,
    TRANSFORMS,
)
from form_engine.models.results import SchemaIssue
from form_engine.models.schema import (
    FieldDefinition,
    FormSchema,
    ValidationGroup,
    ValidationRule,
    inspect_schema,
)
from form_engine.transform.values import is_number


def _check_min_max(field: FieldDefinition, path: str) -> list[SchemaIssue]:
    """Flag min > max among the direct rules of a validation group."""
    if not isinstance(field.validation, ValidationGroup):
        return []

    min_value = max_value = None
    for rule in field.validation.rules:
        if not isinstance(rule, ValidationRule) or not is_number(rule.value):
            continue
        if rule.type == "min":
            min_value = rule.value
        elif rule.type == "max":
            max_value = rule.value

    if min_value is not None and max_value is not None and min_value > max_value:
        return [
            SchemaIssue(
                path=path,
                severity="error",
                message=f'Field "{path}" has min ({min_value}) greater than max ({max_value}).',
            )
        ]
    return []


def _check_keywords(field: FieldDefinition, path: str) -> list[SchemaIssue]:
    """Flag keyword values the engine ignores."""
    unknown: list[str] = []
    for rule in field.normalized_rules():
        if rule.effect not in RULE_EFFECTS:
            unknown.append(f'rule effect "{rule.effect}"')

    declared_types = field.data_type if isinstance(field.data_type, list) else [field.data_type]
    unknown.extend(
        f'dataType "{data_type}"'
        for data_type in declared_types
        if data_type is not None and data_type not in DATA_TYPES
    )

    if field.sensitivity is not None and field.sensitivity not in DATA_CLASSIFICATIONS:
        unknown.append(f'sensitivity "{field.sensitivity}"')
    if field.transform is not None and field.transform not in TRANSFORMS:
        unknown.append(f'transform "{field.transform}"')

    return [
        SchemaIssue(path=path, severity="warning", message=f"Unknown {keyword}; it is ignored.")
        for keyword in unknown
    ]


def _walk(fields: dict[str, FieldDefinition], prefix: str) -> list[SchemaIssue]:
    issues: list[SchemaIssue] = []

    for key, field in fields.items():
        path = f"{prefix}.{key}" if prefix else key

        if not field.label.strip():
            issues.append(
                SchemaIssue(path=path, severity="warning", message="Field is missing a label.")
            )

        options_key = (field.ui_props or {}).get("optionsKey")
        if field.widget in SELECT_WIDGETS and not field.options and not options_key:
            issues.append(
                SchemaIssue(
                    path=path,
                    severity="warning",
                    message=f'Select field "{path}" has no options and no optionsKey.',
                )
            )

        issues.extend(_check_min_max(field, path))
        issues.extend(_check_keywords(field, path))

        if field.widget not in KNOWN_WIDGETS:
            issues.append(
                SchemaIssue(
                    path=path,
                    severity="warning",
                    message=f'Unknown widget type "{field.widget}". Ensure a custom widget is registered.',
                )
            )

        if field.item_schema is not None:
            if not field.item_schema:
                issues.append(
                    SchemaIssue(
                        path=path,
                        severity="error",
                        message=f'Field "{path}" has an empty itemSchema.',
                    )
                )
            else:
                issues.extend(_walk(field.item_schema, path))

    return issues


def lint_schema(schema: FormSchema | dict[str, Any]) -> list[SchemaIssue]:
    """
    Perform static validation on a schema.

    Checks for:
    1. Fields that cannot be loaded at all (skipped by the engine)
    2. Missing labels
    3. Select fields without options (and no optionsKey)
    4. min > max in validation rules
    5. Unknown rule effects, data types, sensitivities and transforms
    6. Unknown widget types (warning only)
    7. Empty itemSchema

    Returns:
        Issues found. Unloadable fields come first, the rest follow schema
        order. Empty means the schema looks sound.
    """
    loaded, rejected = inspect_schema(schema)
    issues = [
        SchemaIssue(path=path, severity="error", message=f"Field could not be loaded and is skipped: {reason}")
        for path, reason in rejected.items()
    ]
    return issues + _walk(loaded.fields, "")
