"""
Form Engine: schema-driven form state evaluation.

Compute, from a declarative schema and the current form data, the full
derived state of a form: visibility, enablement, required-ness, resolved
values, validation errors, and the sanitized payload safe to persist.

Simple Usage:
    from form_engine import compute_form_state

    schema = {
        "fields": {
            "firstName": {
                "label": "First name",
                "widget": "text",
                "validation": {"type": "required"},
            },
            "showSecret": {"label": "Show secret", "widget": "checkbox"},
            "secretCode": {
                "label": "Secret",
                "widget": "text",
                "rules": {
                    "effect": "SHOW",
                    "condition": {"field": "showSecret", "operator": "===", "value": True},
                },
            },
        }
    }

    state = compute_form_state(schema, {"firstName": "Ada"})
    state.is_valid                          # True
    state.fields["secretCode"].is_visible   # False

Persisting:
    from form_engine import process_submission, handle_auto_save

    result = process_submission(schema, data)
    if result.success:
        save(result.data)          # hidden and excluded fields are gone

    draft = handle_auto_save(schema, data)
    if draft.should_save:
        save_draft(draft.payload)
"""

from form_engine.guardrails import get_sensitive_fields, lint_schema
from form_engine.models import (
    AutoSaveResult,
    CaptureResult,
    Condition,
    DiscardResult,
    FieldDefinition,
    FieldRule,
    FieldState,
    FormSchema,
    FormState,
    LogicGroup,
    SchemaError,
    SchemaIssue,
    SectionValidationResult,
    SubmissionResult,
    ValidationGroup,
    ValidationRule,
    freeze_schema,
    load_schema,
)
from form_engine.orchestrator import compute_form_state
from form_engine.rules import evaluate_logic, evaluate_validation
from form_engine.transform import path_resolver, sanitize_form_data
from form_engine.use_cases import (
    capture_input,
    discard_changes,
    handle_auto_save,
    process_submission,
    validate_form_data,
    validate_section,
)

__version__ = "0.1.0"

__all__ = [
    # Main API
    "compute_form_state",
    "process_submission",
    "handle_auto_save",
    # Evaluators and transforms
    "evaluate_logic",
    "evaluate_validation",
    "path_resolver",
    "sanitize_form_data",
    # Supporting use cases
    "capture_input",
    "discard_changes",
    "validate_form_data",
    "validate_section",
    # Guardrails
    "lint_schema",
    "get_sensitive_fields",
    # Models
    "FormSchema",
    "FieldDefinition",
    "FieldRule",
    "Condition",
    "LogicGroup",
    "ValidationRule",
    "ValidationGroup",
    "FieldState",
    "FormState",
    "SubmissionResult",
    "AutoSaveResult",
    "CaptureResult",
    "DiscardResult",
    "SectionValidationResult",
    "SchemaIssue",
    "SchemaError",
    "load_schema",
    "freeze_schema",
]
