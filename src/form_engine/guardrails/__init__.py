"""
Guardrails for form schemas.

Static checks run on schemas before they are served.
"""

from form_engine.guardrails.schema_checks import lint_schema
from form_engine.guardrails.sensitivity import get_sensitive_fields

__all__ = [
    "lint_schema",
    "get_sensitive_fields",
]
