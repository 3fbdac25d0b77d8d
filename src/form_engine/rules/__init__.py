"""
Logic and validation evaluators.
"""

from form_engine.rules.evaluator import evaluate_condition, evaluate_logic
from form_engine.rules.validator import (
    check_rule,
    evaluate_validation,
    get_error_message,
)

__all__ = [
    "evaluate_logic",
    "evaluate_condition",
    "evaluate_validation",
    "check_rule",
    "get_error_message",
]
