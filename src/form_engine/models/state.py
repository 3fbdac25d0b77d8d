"""
Computed form state models.

A ``FieldState`` is the projection of one field definition against the
current data. Its tree mirrors the schema tree: container fields carry
``children`` (one map, or one map per array element).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FieldState(BaseModel):
    """Computed state of a single field."""

    model_config = ConfigDict(populate_by_name=True)

    value: Any = Field(default=None, description="Resolved value")
    is_visible: bool = Field(..., alias="isVisible")
    is_disabled: bool = Field(..., alias="isDisabled")
    is_required: bool = Field(..., alias="isRequired")
    error: str | None = Field(default=None, description="Validation error, None when valid")

    # Display metadata
    label: str | None = Field(default=None)
    widget: str = Field(..., description="Widget identifier")
    placeholder: str = Field(default="")
    description: str | None = Field(default=None)
    data_type: str | None = Field(default=None, alias="dataType")
    data_types: list[str] | None = Field(default=None, alias="dataTypes")
    multiple: bool = Field(default=False)
    auto_save: bool = Field(default=False, alias="autoSave")
    max_items: int | None = Field(default=None, alias="maxItems")
    options: list[dict[str, Any]] = Field(default_factory=list)
    ui_props: dict[str, Any] = Field(default_factory=dict, alias="uiProps")

    children: "dict[str, FieldState] | list[dict[str, FieldState]] | None" = Field(
        default=None, description="Child states for fields with an item schema"
    )

    @property
    def is_container(self) -> bool:
        return self.children is not None

    def to_dict(self) -> dict[str, Any]:
        """Export in the camelCase JSON shape."""
        return self.model_dump(by_alias=True)


class FormState(BaseModel):
    """Top-level result of computing a form's field states."""

    model_config = ConfigDict(populate_by_name=True)

    fields: dict[str, FieldState] = Field(default_factory=dict)
    is_valid: bool = Field(..., alias="isValid")
    data: dict[str, Any] = Field(
        default_factory=dict, description="Sanitized working data"
    )

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


FieldState.model_rebuild()
