"""
Field-State Orchestrator.

This is the main entry point of the form engine. Given a schema, the
working data and an optional config record, it computes the complete
state of every field: visibility, enablement, required-ness, resolved
value, validation error, and child states for nested item schemas.

Usage:
    state = compute_form_state(schema, {"firstName": "Ada"})

    state.is_valid
    state.fields["firstName"].value
"""

import re
from typing import Any

from form_engine.logger import get_engine_logger
from form_engine.models.schema import (
    FieldDefinition,
    FieldRule,
    FormSchema,
    ValidationGroup,
    ValidationNode,
    load_schema,
)
from form_engine.models.state import FieldState, FormState
from form_engine.rules.constants import REQUIRED_MESSAGE
from form_engine.rules.evaluator import evaluate_logic
from form_engine.rules.validator import evaluate_validation
from form_engine.transform import path_resolver
from form_engine.transform.sanitizer import sanitize_form_data
from form_engine.transform.values import is_blank, is_mapping, to_text

_TEMPLATE_TOKEN = re.compile(r"\{\{(.*?)\}\}")

_WIDGET_FALLBACKS: dict[str, Any] = {
    "checkbox": False,
    "switch": False,
    "multi-select": [],
    "tags": [],
    "number": 0,
    "slider": 0,
    "object": {},
    "section": {},
}


def get_fallback_value(widget: str) -> Any:
    """Empty value for a widget when no data, config or default exists."""
    fallback = _WIDGET_FALLBACKS.get(widget, "")
    # Fresh containers so callers never share a mutable fallback
    if isinstance(fallback, (list, dict)):
        return type(fallback)()
    return fallback


def get_default_data_type(widget: str) -> str:
    """Data type implied by a widget when the schema declares none."""
    if widget in ("number-input", "number", "slider"):
        return "number"
    if widget in ("checkbox", "switch"):
        return "boolean"
    if widget in ("date", "date-picker"):
        return "date"
    return "string"


def calculate_effects(
    rules: tuple[FieldRule, ...],
    data: dict[str, Any],
) -> set[str]:
    """Collect the effects of every rule whose condition holds."""
    return {
        rule.effect
        for rule in rules
        if rule.condition is not None and evaluate_logic(rule.condition, data)
    }


def is_statically_required(node: ValidationNode | None) -> bool:
    """Whether a validation tree contains a ``required`` rule anywhere."""
    if node is None:
        return False
    if isinstance(node, ValidationGroup):
        return any(is_statically_required(rule) for rule in node.rules)
    return node.type == "required"


def resolve_template(template: str, data: dict[str, Any]) -> str:
    """Replace each ``{{dot.path}}`` token with the value found in ``data``."""

    def _substitute(match: re.Match) -> str:
        value = path_resolver.get(data, match.group(1).strip())
        return "" if value is None else to_text(value)

    return _TEMPLATE_TOKEN.sub(_substitute, template)


def _resolve_value(
    key: str,
    field: FieldDefinition,
    working_data: dict[str, Any],
    config_data: dict[str, Any],
) -> Any:
    value = working_data.get(key)
    if value is not None:
        return value

    config_value = path_resolver.get(config_data, field.bind_path or key)
    if config_value is not None:
        return config_value

    if field.default_value is not None:
        return field.default_value

    return get_fallback_value(field.widget)


def _as_record(value: Any) -> dict[str, Any]:
    return value if is_mapping(value) else {}


def _compute_children(
    item_schema: dict[str, FieldDefinition],
    value: Any,
) -> dict[str, FieldState] | list[dict[str, FieldState]]:
    if isinstance(value, list):
        return [process_fields(item_schema, _as_record(item), {}) for item in value]
    return process_fields(item_schema, _as_record(value), {})


def _compute_error(
    field: FieldDefinition,
    value: Any,
    effects: set[str],
    is_required: bool,
) -> str | None:
    if "OPTIONAL" in effects and is_blank(value):
        return None
    if field.validation is not None:
        return evaluate_validation(field.validation, value)
    if is_required and is_blank(value):
        return REQUIRED_MESSAGE
    return None


def _display_text(ui_props: dict[str, Any], name: str, default: str | None) -> str | None:
    """A uiProps override for a display string, else the schema value."""
    override = ui_props.get(name)
    return override if isinstance(override, str) else default


def _max_items(ui_props: dict[str, Any]) -> int | None:
    max_items = ui_props.get("maxItems")
    return max_items if isinstance(max_items, int) and not isinstance(max_items, bool) else None


def compute_field_state(
    key: str,
    field: FieldDefinition,
    working_data: dict[str, Any],
    config_data: dict[str, Any],
) -> FieldState:
    """Compute the state of one field at the current tree level."""
    rules = field.normalized_rules()
    effects = calculate_effects(rules, working_data)

    has_show_rule = any(rule.effect == "SHOW" for rule in rules)
    is_visible = "SHOW" in effects if has_show_rule else "HIDE" not in effects
    is_disabled = "DISABLE" in effects

    if "REQUIRE" in effects:
        is_required = True
    elif "OPTIONAL" in effects:
        is_required = False
    else:
        is_required = is_statically_required(field.validation)

    value = _resolve_value(key, field, working_data, config_data)
    if field.template is not None:
        value = resolve_template(field.template, working_data)

    data_type = field.primary_data_type or get_default_data_type(field.widget)
    if isinstance(value, str) and value.startswith("="):
        data_type = "code"

    children = None
    if field.item_schema is not None:
        children = _compute_children(field.item_schema, value)

    error = None
    if is_visible and not is_disabled:
        error = _compute_error(field, value, effects, is_required)

    ui_props = dict(field.ui_props or {})
    return FieldState(
        value=value,
        is_visible=is_visible,
        is_disabled=is_disabled,
        is_required=is_required,
        error=error,
        label=_display_text(ui_props, "label", field.label),
        widget=field.widget,
        placeholder=_display_text(ui_props, "placeholder", field.placeholder) or "",
        description=_display_text(ui_props, "description", field.description),
        data_type=data_type,
        data_types=list(field.data_type) if isinstance(field.data_type, list) else None,
        multiple=(
            field.multiple if field.multiple is not None else field.widget == "multi-select"
        ),
        auto_save=field.auto_save,
        max_items=_max_items(ui_props),
        options=[option.model_dump() for option in field.options or []],
        ui_props=ui_props,
        children=children,
    )


def process_fields(
    fields: dict[str, FieldDefinition],
    working_data: dict[str, Any],
    config_data: dict[str, Any],
) -> dict[str, FieldState]:
    """Compute field states for one level of the schema tree, in key order."""
    return {
        key: compute_field_state(key, field, working_data, config_data)
        for key, field in fields.items()
    }


def _child_groups(state: FieldState) -> list[tuple[str, dict[str, FieldState]]]:
    if isinstance(state.children, list):
        return [(str(index), group) for index, group in enumerate(state.children)]
    if state.children is not None:
        return [("", state.children)]
    return []


def collect_visible_errors(
    fields: dict[str, FieldState],
    prefix: str = "",
) -> dict[str, str]:
    """
    Errors of every visible, enabled field in the tree, keyed by dotted path.

    Descendants of hidden or disabled containers are skipped.
    """
    errors: dict[str, str] = {}
    for key, state in fields.items():
        if not state.is_visible or state.is_disabled:
            continue
        path = f"{prefix}.{key}" if prefix else key
        if state.error is not None:
            errors[path] = state.error
        for segment, group in _child_groups(state):
            group_prefix = f"{path}.{segment}" if segment else path
            errors.update(collect_visible_errors(group, group_prefix))
    return errors


def compute_form_state(
    schema: FormSchema | dict[str, Any],
    working_data: dict[str, Any],
    config_data: dict[str, Any] | None = None,
    options: dict[str, Any] | None = None,
) -> FormState:
    """
    Compute the full form state.

    Args:
        schema: Form schema, or its JSON mapping.
        working_data: Current edit buffer. Sanitized before use.
        config_data: Fallback value source read through each field's bind path.
        options: ``{"isDebug": bool}``. Only affects diagnostic logging.

    Returns:
        FormState with one FieldState per schema field. ``is_valid`` is
        False when any visible field in the tree has an error.
    """
    schema = load_schema(schema)
    options = options or {}
    logger = get_engine_logger("compute_form_state", options.get("isDebug"))

    clean_data = sanitize_form_data(schema, working_data)
    fields = process_fields(schema.fields, clean_data, config_data or {})
    visible_errors = collect_visible_errors(fields)
    is_valid = not visible_errors

    logger.debug(
        f"computed state: field_count={len(fields)} is_valid={is_valid} "
        f"visible_errors={visible_errors}"
    )

    return FormState(fields=fields, is_valid=is_valid, data=clean_data)
