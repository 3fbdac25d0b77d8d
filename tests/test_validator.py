"""Tests for the validation evaluator."""

import pytest

from form_engine.models.schema import ValidationGroup, ValidationRule
from form_engine.rules.constants import (
    DISALLOWED_VALUE_MESSAGE,
    NO_CONDITION_MET_MESSAGE,
)
from form_engine.rules.validator import check_rule, evaluate_validation


def rule(type_, value=None, message=None):
    return ValidationRule(type=type_, value=value, error_message=message)


class TestLeafRules:
    """Tests for single validation rules."""

    @pytest.mark.parametrize("value", [None, ""])
    def test_required_fails_on_blank(self, value):
        """Test that required rejects None and empty strings."""
        assert evaluate_validation(rule("required"), value) == "This field is required"

    @pytest.mark.parametrize("value", [0, False, "x", []])
    def test_required_accepts_values(self, value):
        """Test that required accepts falsy but present values."""
        assert evaluate_validation(rule("required"), value) is None

    def test_regex(self):
        """Test regex matching."""
        zip_rule = rule("regex", r"^\d{5}$", "Bad zip")
        assert evaluate_validation(zip_rule, "02101") is None
        assert evaluate_validation(zip_rule, "abc") == "Bad zip"
        assert evaluate_validation(zip_rule, 2101) == "Bad zip"

    def test_invalid_regex_does_not_raise(self):
        """Test that a broken pattern fails the rule instead of raising."""
        assert evaluate_validation(rule("regex", "("), "(") == "Invalid format"

    def test_min_max(self):
        """Test numeric bounds."""
        assert evaluate_validation(rule("min", 18), 18) is None
        assert evaluate_validation(rule("min", 18), 17) == "Value is too low"
        assert evaluate_validation(rule("max", 10), 11) == "Value is too high"

    def test_min_rejects_numeric_strings(self):
        """Test that numeric-looking strings fail numeric rules."""
        assert evaluate_validation(rule("min", 18), "20") == "Value is too low"
        assert evaluate_validation(rule("max", 100), "20") == "Value is too high"

    def test_in(self):
        """Test membership rule."""
        assert evaluate_validation(rule("in", ["a", "b"]), "a") is None
        assert evaluate_validation(rule("in", ["a", "b"]), "c") == "Value not allowed"
        assert evaluate_validation(rule("in", "ab"), "a") == "Value not allowed"

    def test_contains(self):
        """Test array and substring containment."""
        assert evaluate_validation(rule("contains", "x"), ["x", "y"]) is None
        assert evaluate_validation(rule("contains", "@"), "a@b") is None
        assert evaluate_validation(rule("contains", "@"), "ab") == "Required value missing"
        assert evaluate_validation(rule("contains", "1"), 1) == "Required value missing"

    def test_starts_and_ends_with(self):
        """Test prefix and suffix rules."""
        assert check_rule(rule("startsWith", "AB"), "ABC") is True
        assert check_rule(rule("endsWith", "C"), "ABC") is True
        assert check_rule(rule("endsWith", 1), "AB1") is False

    def test_unknown_type_passes(self):
        """Test that unknown rule types are treated as valid."""
        assert evaluate_validation(rule("luhn"), "123") is None

    def test_message_fallback_order(self):
        """Test custom message, then default table, then generic message."""
        assert evaluate_validation(rule("min", 5, "Too small"), 1) == "Too small"
        assert evaluate_validation(rule("min", 5), 1) == "Value is too low"


class TestGroups:
    """Tests for validation groups."""

    def test_and_returns_first_error(self):
        """Test that and reports errors in rule order."""
        r1 = rule("required", message="R1")
        r2 = rule("regex", "^a", "R2")
        group = ValidationGroup(operator="and", rules=[r1, r2])
        assert evaluate_validation(group, "") == "R1"
        assert evaluate_validation(group, "b") == "R2"
        assert evaluate_validation(group, "a") is None

    def test_or_passes_when_any_rule_passes(self):
        """Test or semantics."""
        group = ValidationGroup(
            operator="or",
            rules=[rule("regex", "^a", "A"), rule("regex", "^b", "B")],
        )
        assert evaluate_validation(group, "b") is None
        assert evaluate_validation(group, "c") == "A"

    def test_empty_or(self):
        """Test that an empty or group fails with the fixed message."""
        group = ValidationGroup(operator="or", rules=[])
        assert evaluate_validation(group, "x") == NO_CONDITION_MET_MESSAGE

    def test_not(self):
        """Test that not fails when its first rule passes."""
        group = ValidationGroup(
            operator="not",
            rules=[rule("in", ["admin", "root"], "ignored")],
        )
        assert evaluate_validation(group, "admin") == DISALLOWED_VALUE_MESSAGE
        assert evaluate_validation(group, "jane") is None

    def test_not_uses_only_first_rule(self):
        """Test that rules after the first do not affect not."""
        group = ValidationGroup(
            operator="not",
            rules=[rule("regex", "^x"), rule("required")],
        )
        assert evaluate_validation(group, "y") is None

    def test_unknown_group_operator_is_valid(self):
        """Test that unknown group operators pass."""
        group = ValidationGroup(operator="xor", rules=[rule("required")])
        assert evaluate_validation(group, "") is None

    def test_nested_groups(self):
        """Test recursive validation trees."""
        group = ValidationGroup(
            operator="and",
            rules=[
                rule("required"),
                ValidationGroup(
                    operator="or",
                    rules=[rule("endsWith", ".com", "Use .com"), rule("endsWith", ".org")],
                ),
            ],
        )
        assert evaluate_validation(group, "a.org") is None
        assert evaluate_validation(group, "a.net") == "Use .com"
