"""
Logic evaluator.

Resolves condition trees against a flat data record. Comparisons are
type-strict: numeric operators only succeed on two numbers, string
operators on two strings. Evaluation never raises.
"""

import operator
from typing import Any

from form_engine.models.schema import Condition, LogicNode
from form_engine.transform.values import (
    contains_strict,
    is_number,
    is_string,
    strict_equals,
)

_NUMERIC_COMPARISONS = {
    ">": operator.gt,
    "<": operator.lt,
    ">=": operator.ge,
    "<=": operator.le,
}


def _is_empty(value: Any) -> bool:
    # Booleans are real answers, so False is never empty.
    if isinstance(value, bool):
        return False
    return value is None or value == "" or (isinstance(value, list) and not value)


def evaluate_condition(condition: Condition, data: dict[str, Any]) -> bool:
    """Evaluate a single leaf condition."""
    value = data.get(condition.field)
    compare = condition.value
    op = condition.operator

    if op == "===":
        return strict_equals(value, compare)
    if op == "!==":
        return not strict_equals(value, compare)
    if op in _NUMERIC_COMPARISONS:
        return (
            is_number(value)
            and is_number(compare)
            and _NUMERIC_COMPARISONS[op](value, compare)
        )
    if op == "startsWith":
        return is_string(value) and is_string(compare) and value.startswith(compare)
    if op == "endsWith":
        return is_string(value) and is_string(compare) and value.endswith(compare)
    if op == "contains":
        return isinstance(value, list) and contains_strict(value, compare)
    if op == "in":
        return isinstance(compare, list) and contains_strict(compare, value)
    if op == "empty":
        return _is_empty(value)
    return False


def evaluate_logic(node: LogicNode, data: dict[str, Any]) -> bool:
    """
    Evaluate a logic tree.

    Args:
        node: A Condition (leaf) or LogicGroup (branch).
        data: Flat record the conditions read from.

    Returns:
        The boolean result. ``not`` negates only its first condition, and
        an unknown group operator evaluates to True.
    """
    if isinstance(node, Condition):
        return evaluate_condition(node, data)

    results = [evaluate_logic(child, data) for child in node.conditions]
    if node.operator == "and":
        return all(results)
    if node.operator == "or":
        return any(results)
    if node.operator == "not":
        # TODO: report empty NOT groups from lint_schema; they always yield True.
        return not (results[0] if results else False)
    return True
