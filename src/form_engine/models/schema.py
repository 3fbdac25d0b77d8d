"""
Form schema models.

These models describe the declarative form blueprint: fields, behavioral
rules, validation trees and nested item schemas. They accept the camelCase
JSON shape (``itemSchema``, ``bindPath``...) as well as snake_case names,
and are frozen once constructed.

Loading is lenient. Operators, effects and type keywords are plain strings
so unknown values load and degrade at evaluation time, and a field that
still cannot be loaded is dropped without affecting its siblings.
"""

from typing import Annotated, Any, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    WrapValidator,
    field_validator,
)

from form_engine.logger import get_engine_logger

_SCHEMA_CONFIG = ConfigDict(populate_by_name=True, frozen=True)


class SchemaError(ValueError):
    """Raised when a schema mapping cannot be loaded."""


class SchemaModel(BaseModel):
    """Base for immutable schema models."""

    model_config = _SCHEMA_CONFIG


# --- Logic trees ---


class Condition(SchemaModel):
    """Leaf logic node: compare ``data[field]`` with ``value``."""

    field: str = Field(default="", description="Key of the value to inspect")
    operator: str = Field(default="", description="===, !==, >, <, >=, <=, contains, in, empty, startsWith, endsWith")
    value: Any = Field(default=None, description="Comparison value")


class LogicGroup(SchemaModel):
    """Branch logic node combining child nodes with and/or/not."""

    operator: str = Field(default="", description="and, or, not")
    conditions: list["LogicNode"] = Field(default_factory=list)


def _logic_node_kind(node: Any) -> str:
    if isinstance(node, dict):
        return "group" if "conditions" in node else "condition"
    return "group" if isinstance(node, LogicGroup) else "condition"


LogicNode = Annotated[
    Union[
        Annotated[Condition, Tag("condition")],
        Annotated[LogicGroup, Tag("group")],
    ],
    Discriminator(_logic_node_kind),
]


class FieldRule(SchemaModel):
    """A behavioral effect applied while its condition holds."""

    effect: str = Field(..., description="SHOW, HIDE, DISABLE, ENABLE, REQUIRE, OPTIONAL")
    condition: LogicNode | None = Field(default=None, description="A rule without a condition never fires")


# --- Validation trees ---


class ValidationRule(SchemaModel):
    """Leaf validation node."""

    type: str = Field(default="", description="required, regex, min, max, in, contains, startsWith, endsWith")
    value: Any = Field(default=None)
    error_message: str | None = Field(default=None, alias="errorMessage")


class ValidationGroup(SchemaModel):
    """Branch validation node combining child rules with and/or/not."""

    operator: str = Field(default="", description="and, or, not")
    rules: list["ValidationNode"] = Field(default_factory=list)


def _validation_node_kind(node: Any) -> str:
    if isinstance(node, dict):
        return "group" if "rules" in node else "rule"
    return "group" if isinstance(node, ValidationGroup) else "rule"


ValidationNode = Annotated[
    Union[
        Annotated[ValidationRule, Tag("rule")],
        Annotated[ValidationGroup, Tag("group")],
    ],
    Discriminator(_validation_node_kind),
]


# --- Fields ---


def _summarize(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in detail['loc']) or '<field>'}: {detail['msg']}"
        for detail in error.errors()
    )


def _load_field_map(
    value: Any,
    handler: ValidatorFunctionWrapHandler,
    info: ValidationInfo,
) -> Any:
    """
    Validate a field map entry by entry.

    Entries that fail validation are left out. Their dotted paths and error
    summaries are recorded in the ``rejected`` dict of the validation
    context when one is given.
    """
    if not isinstance(value, dict):
        return handler(value)

    context = info.context or {}
    prefix = context.get("prefix", "")
    rejected = context.get("rejected")

    fields: dict[str, FieldDefinition] = {}
    for key, entry in value.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        try:
            fields[key] = FieldDefinition.model_validate(
                entry, context={**context, "prefix": path}
            )
        except ValidationError as e:
            if rejected is not None:
                rejected[path] = _summarize(e)
    return fields


class SelectOption(SchemaModel):
    """Option for select, radio and multi-select widgets."""

    label: str
    value: Any = None


class FieldDefinition(SchemaModel):
    """Blueprint of a single form field."""

    label: str = Field(default="", description="Display label")
    widget: str = Field(default="text", description="Widget identifier")
    data_type: str | list[str] | None = Field(
        default=None,
        alias="dataType",
        description="Declared type, or list of allowed types (first is the default)",
    )
    default_value: Any = Field(default=None, alias="defaultValue")
    placeholder: str | None = Field(default=None)
    description: str | None = Field(default=None)
    auto_save: bool = Field(default=False, alias="autoSave")
    bind_path: str | None = Field(
        default=None,
        alias="bindPath",
        description="Path into config data; defaults to the field key",
    )
    multiple: bool | None = Field(default=None)
    sensitivity: str | None = Field(default=None, description="public, internal, confidential, pii")
    transform: str | None = Field(
        default=None, description="unix, number, boolean, trim, template, uppercase, lowercase"
    )
    template: str | None = Field(
        default=None, description="Value template with {{dot.path}} tokens"
    )
    rules: FieldRule | list[FieldRule] | None = Field(default=None)
    validation: ValidationNode | None = Field(default=None)
    item_schema: Annotated[
        dict[str, "FieldDefinition"] | None, WrapValidator(_load_field_map)
    ] = Field(default=None, alias="itemSchema")
    options: list[SelectOption] | None = Field(default=None)
    ui_props: dict[str, Any] | None = Field(default=None, alias="uiProps")

    def normalized_rules(self) -> tuple[FieldRule, ...]:
        """Rules as a tuple, whether one rule or a list was declared."""
        if self.rules is None:
            return ()
        if isinstance(self.rules, FieldRule):
            return (self.rules,)
        return tuple(self.rules)

    @property
    def primary_data_type(self) -> str | None:
        if isinstance(self.data_type, list):
            return self.data_type[0] if self.data_type else None
        return self.data_type


# --- Schema ---


class SchemaMeta(SchemaModel):
    """Versioning and audit metadata."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="allow")

    version: str | None = None
    id: str | None = None
    name: str | None = None
    description: str | None = None
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")
    author: str | None = None


class SchemaSettings(SchemaModel):
    """Free-form schema settings."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="allow")

    debug: bool | None = None
    submit_label: str | None = Field(default=None, alias="submitLabel")


class FormSchema(SchemaModel):
    """
    A complete form schema.

    ``fields`` keeps declaration order. ``exclude`` lists keys that are
    stripped from finalized payloads at every nesting level.
    """

    meta: SchemaMeta | None = Field(default=None)
    exclude: list[str] = Field(default_factory=list)
    fields: Annotated[dict[str, FieldDefinition], WrapValidator(_load_field_map)] = Field(
        default_factory=dict
    )
    settings: SchemaSettings | None = Field(default=None)

    @field_validator("meta", "settings", mode="wrap")
    @classmethod
    def _drop_invalid_metadata(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        # Metadata never affects evaluation
        try:
            return handler(value)
        except ValidationError:
            return None

    @field_validator("exclude", mode="wrap")
    @classmethod
    def _drop_invalid_exclude(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        try:
            return handler(value)
        except ValidationError:
            return [key for key in value if isinstance(key, str)] if isinstance(value, list) else []


LogicGroup.model_rebuild()
ValidationGroup.model_rebuild()
FieldRule.model_rebuild()
FieldDefinition.model_rebuild()
FormSchema.model_rebuild()


def inspect_schema(schema: FormSchema | dict[str, Any]) -> tuple[FormSchema, dict[str, str]]:
    """
    Load ``schema`` and report the fields that had to be left out.

    Returns:
        The loaded schema and a mapping of dotted field path to a summary
        of why that field could not be loaded.

    Raises:
        SchemaError: If the mapping is not a schema at all, e.g. ``fields``
            is not an object.
    """
    if isinstance(schema, FormSchema):
        return schema, {}
    rejected: dict[str, str] = {}
    try:
        loaded = FormSchema.model_validate(schema, context={"rejected": rejected})
    except ValidationError as e:
        raise SchemaError(f"Invalid form schema: {e}") from e
    return loaded, rejected


def load_schema(schema: FormSchema | dict[str, Any]) -> FormSchema:
    """
    Return ``schema`` as a :class:`FormSchema`.

    Malformed fields are dropped; the rest of the schema still loads.

    Raises:
        SchemaError: If the mapping does not describe a schema at all.
    """
    loaded, rejected = inspect_schema(schema)
    if rejected:
        logger = get_engine_logger("load_schema")
        logger.warning(f"skipped malformed fields: {rejected}")
    return loaded


def freeze_schema(schema: FormSchema | dict[str, Any]) -> FormSchema:
    """Validate a schema mapping into an immutable :class:`FormSchema`."""
    return load_schema(schema)
