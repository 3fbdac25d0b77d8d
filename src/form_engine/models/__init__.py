"""
Data models for the form engine.

This module contains Pydantic models for:
- Form schemas (fields, rules, logic and validation trees)
- Computed field and form state
- Use-case results (submission, auto-save, validation)
"""

from form_engine.models.results import (
    AutoSaveResult,
    CaptureResult,
    DiscardResult,
    SchemaIssue,
    SectionValidationResult,
    SubmissionResult,
)
from form_engine.models.schema import (
    Condition,
    FieldDefinition,
    FieldRule,
    FormSchema,
    LogicGroup,
    LogicNode,
    SchemaError,
    SchemaMeta,
    SchemaSettings,
    SelectOption,
    ValidationGroup,
    ValidationNode,
    ValidationRule,
    freeze_schema,
    inspect_schema,
    load_schema,
)
from form_engine.models.state import FieldState, FormState

__all__ = [
    # Schema
    "Condition",
    "LogicGroup",
    "LogicNode",
    "FieldRule",
    "ValidationRule",
    "ValidationGroup",
    "ValidationNode",
    "SelectOption",
    "FieldDefinition",
    "SchemaMeta",
    "SchemaSettings",
    "FormSchema",
    "SchemaError",
    "load_schema",
    "freeze_schema",
    "inspect_schema",
    # State
    "FieldState",
    "FormState",
    # Results
    "SubmissionResult",
    "AutoSaveResult",
    "CaptureResult",
    "DiscardResult",
    "SectionValidationResult",
    "SchemaIssue",
]
