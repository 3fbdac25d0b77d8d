"""Tests for the sanitizer."""

import pytest

from form_engine.models.schema import load_schema
from form_engine.transform.sanitizer import coerce_value, sanitize_form_data


class TestCoerceValue:
    """Tests for widget coercion."""

    @pytest.mark.parametrize(
        "value,expected",
        [("true", True), ("false", False), ("yes", False), (1, True), (0, False), ([], True)],
    )
    def test_boolean_widgets(self, value, expected):
        """Test strict boolean coercion."""
        assert coerce_value(value, "checkbox") is expected
        assert coerce_value(value, "switch") is expected

    @pytest.mark.parametrize(
        "value,expected",
        [("25", 25), ("2.5kg", 2.5), ("abc", 0), (7, 7), (True, 1), (False, 0), ([1], 0)],
    )
    def test_numeric_widgets(self, value, expected):
        """Test float parsing, booleans as 1 and 0, and NaN mapped to zero."""
        assert coerce_value(value, "number-input") == expected
        assert coerce_value(value, "slider") == expected

    def test_none_stays_none(self):
        """Test that missing values are not coerced."""
        assert coerce_value(None, "checkbox") is None

    def test_other_widgets_pass_through(self):
        """Test pass-through for other widgets."""
        assert coerce_value(" x ", "text") == " x "
        assert coerce_value("5", "number") == "5"


class TestSanitizeFormData:
    """Tests for schema-shaped sanitizing."""

    def test_nested_keys_and_coercion(self):
        """Test dotted keys, coercion and dropping undeclared data."""
        schema = load_schema(
            {
                "fields": {
                    "profile.age": {"label": "Age", "widget": "number-input"},
                    "settings.active": {"label": "Active", "widget": "checkbox"},
                }
            }
        )
        dirty = {
            "profile": {"age": "25", "junk": "ignore_me"},
            "settings": {"active": "true"},
            "malicious": "attack",
        }
        clean = sanitize_form_data(schema, dirty)
        assert clean == {"profile": {"age": 25}, "settings": {"active": True}}
        assert "malicious" not in clean

    def test_missing_keys_become_none(self):
        """Test that declared but absent keys are present as None."""
        schema = load_schema({"fields": {"name": {"label": "Name", "widget": "text"}}})
        assert sanitize_form_data(schema, {}) == {"name": None}

    def test_input_is_not_mutated(self):
        """Test that the raw input is left untouched."""
        schema = load_schema({"fields": {"agree": {"label": "Agree", "widget": "checkbox"}}})
        raw = {"agree": "true", "extra": 1}
        sanitize_form_data(schema, raw)
        assert raw == {"agree": "true", "extra": 1}

    def test_item_schema_is_not_visited(self):
        """Test that container values pass through unchanged."""
        schema = load_schema(
            {
                "fields": {
                    "contacts": {
                        "label": "Contacts",
                        "widget": "array",
                        "itemSchema": {"age": {"label": "Age", "widget": "number-input"}},
                    }
                }
            }
        )
        raw = {"contacts": [{"age": "5", "junk": 1}]}
        assert sanitize_form_data(schema, raw) == {"contacts": [{"age": "5", "junk": 1}]}
