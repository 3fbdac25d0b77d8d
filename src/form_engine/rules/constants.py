"""
Constants for logic and validation evaluation.

Default error messages live here so they are easy to maintain and update.
"""

# Fallback messages per validation rule type
DEFAULT_VALIDATION_MESSAGES = {
    "required": "This field is required",
    "regex": "Invalid format",
    "startsWith": "Must start with a specific value",
    "endsWith": "Must end with a specific value",
    "in": "Value not allowed",
    "min": "Value is too low",
    "max": "Value is too high",
    "contains": "Required value missing",
}

GENERIC_INVALID_MESSAGE = "Invalid value"

# Returned by an OR group when no rule produced a message (empty group)
NO_CONDITION_MET_MESSAGE = "None of the required conditions were met"

# Returned by a NOT group when its rule passes
DISALLOWED_VALUE_MESSAGE = "This value is specifically disallowed"

REQUIRED_MESSAGE = DEFAULT_VALIDATION_MESSAGES["required"]
