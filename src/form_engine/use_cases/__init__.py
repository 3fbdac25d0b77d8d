"""
Use cases built on the field-state orchestrator.
"""

from form_engine.use_cases.autosave import handle_auto_save
from form_engine.use_cases.capture import capture_input
from form_engine.use_cases.discard import discard_changes
from form_engine.use_cases.submission import cast_value, process_submission
from form_engine.use_cases.validation import validate_form_data, validate_section

__all__ = [
    "process_submission",
    "cast_value",
    "handle_auto_save",
    "capture_input",
    "discard_changes",
    "validate_form_data",
    "validate_section",
]
