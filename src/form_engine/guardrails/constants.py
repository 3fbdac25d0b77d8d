"""
Constants for schema guardrails.

Centralizing these makes them easier to maintain and update.
"""

# Widgets the engine knows how to coerce and render by default
KNOWN_WIDGETS = {
    "text",
    "number",
    "select",
    "multi-select",
    "checkbox",
    "switch",
    "slider",
    "date",
    "date-picker",
    "section",
    "array",
}

SELECT_WIDGETS = {"select", "multi-select"}

# Classifications reported as sensitive by default
DEFAULT_SENSITIVE_CLASSIFICATIONS = ("pii", "confidential")

# Keyword values the engine acts on; anything else loads but is ignored
RULE_EFFECTS = {"SHOW", "HIDE", "DISABLE", "ENABLE", "REQUIRE", "OPTIONAL"}
DATA_TYPES = {"string", "number", "boolean", "date", "code"}
DATA_CLASSIFICATIONS = {"public", "internal", "confidential", "pii"}
TRANSFORMS = {"unix", "number", "boolean", "trim", "template", "uppercase", "lowercase"}
