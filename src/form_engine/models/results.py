"""
Result models for submission, auto-save and validation use cases.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class SubmissionResult(BaseModel):
    """Outcome of finalizing a form for persistence."""

    success: bool = Field(..., description="Whether the data may be persisted")
    data: dict[str, Any] | None = Field(
        default=None, description="Sanitized, cast payload when successful"
    )
    errors: dict[str, str] | None = Field(
        default=None, description="Visible field errors when unsuccessful"
    )

    @property
    def error_count(self) -> int:
        """Get the number of field errors."""
        return len(self.errors or {})


class AutoSaveResult(BaseModel):
    """Draft payload selected for an auto-save."""

    model_config = ConfigDict(populate_by_name=True)

    should_save: bool = Field(..., alias="shouldSave")
    payload: dict[str, Any] = Field(default_factory=dict)


class CaptureResult(BaseModel):
    """A normalized UI edit."""

    key: str
    value: Any = None


class DiscardResult(BaseModel):
    """Data restored by discarding changes."""

    data: dict[str, Any] = Field(default_factory=dict)


class SectionValidationResult(BaseModel):
    """Validation outcome for a set of fields."""

    model_config = ConfigDict(populate_by_name=True)

    is_valid: bool = Field(..., alias="isValid")
    errors: dict[str, str] = Field(default_factory=dict)

    def get_field_error(self, field_name: str) -> str | None:
        return self.errors.get(field_name)


class SchemaIssue(BaseModel):
    """A static problem found in a schema definition."""

    path: str = Field(..., description="Dotted field path, e.g. address.city")
    severity: Literal["error", "warning"]
    message: str
