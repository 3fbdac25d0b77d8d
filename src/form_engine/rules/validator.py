"""
Validation evaluator.

Walks a validation tree and returns the first applicable error message,
or None when the value is valid. Never raises on malformed rules.
"""

import re
from typing import Any

from form_engine.models.schema import ValidationNode, ValidationRule
from form_engine.rules.constants import (
    DEFAULT_VALIDATION_MESSAGES,
    DISALLOWED_VALUE_MESSAGE,
    GENERIC_INVALID_MESSAGE,
    NO_CONDITION_MET_MESSAGE,
)
from form_engine.transform.values import (
    contains_strict,
    is_blank,
    is_number,
    is_string,
    to_text,
)


def _matches_pattern(pattern: Any, value: str) -> bool:
    source = "" if pattern is None else to_text(pattern)
    try:
        return re.search(source, value) is not None
    except re.error:
        return False


def check_rule(rule: ValidationRule, value: Any) -> bool:
    """Return True when ``value`` satisfies a single rule."""
    expected = rule.value

    if rule.type == "required":
        return not is_blank(value)
    if rule.type == "regex":
        return is_string(value) and _matches_pattern(expected, value)
    if rule.type == "startsWith":
        return is_string(value) and is_string(expected) and value.startswith(expected)
    if rule.type == "endsWith":
        return is_string(value) and is_string(expected) and value.endswith(expected)
    if rule.type == "in":
        return isinstance(expected, list) and contains_strict(expected, value)
    if rule.type == "min":
        return is_number(value) and is_number(expected) and value >= expected
    if rule.type == "max":
        return is_number(value) and is_number(expected) and value <= expected
    if rule.type == "contains":
        if isinstance(value, list):
            return contains_strict(value, expected)
        if is_string(value):
            return to_text(expected) in value
        return False
    return True


def get_error_message(rule: ValidationRule) -> str:
    """Rule message, else the per-type default, else a generic message."""
    return (
        rule.error_message
        or DEFAULT_VALIDATION_MESSAGES.get(rule.type)
        or GENERIC_INVALID_MESSAGE
    )


def evaluate_validation(node: ValidationNode, value: Any) -> str | None:
    """
    Evaluate a validation tree against a value.

    ``and`` reports the first failing rule in order. ``or`` passes when any
    rule passes. ``not`` inspects only its first rule and fails with a fixed
    message when that rule passes. Unknown group operators are valid.
    """
    if isinstance(node, ValidationRule):
        return None if check_rule(node, value) else get_error_message(node)

    results = [evaluate_validation(rule, value) for rule in node.rules]

    if node.operator == "and":
        return next((error for error in results if error is not None), None)

    if node.operator == "or":
        if any(error is None for error in results):
            return None
        first_error = next((error for error in results if error), None)
        return first_error or NO_CONDITION_MET_MESSAGE

    if node.operator == "not":
        if not results:
            return None
        return None if results[0] is not None else DISALLOWED_VALUE_MESSAGE

    return None
