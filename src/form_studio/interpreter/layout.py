"""
Rendering plan for a dynamic form.

Turns a ``FormDocument`` into ordered sections of field plans, each with the
widget to render, its label, hints, column span and validation rules.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from form_studio.config import get_config
from form_studio.interpreter.rules import Rule, RuleKind, derive_rules, is_number
from form_studio.models.schema import (
    FieldSchema,
    FormDocument,
    FormSchema,
    SchemaType,
    UIHint,
    UIHintMap,
)

GRID_COLUMNS = 24


class WidgetKind(str, Enum):
    NUMBER = "number"
    DATE = "date"
    SELECT = "select"
    SWITCH = "switch"
    TEXTAREA = "textarea"
    EMAIL = "email"
    PASSWORD = "password"
    TEXT = "text"


def select_widget(field_schema: FieldSchema, hint: UIHint) -> WidgetKind:
    """Pick the input widget for a field."""
    schema_type = field_schema.schema_type

    if schema_type in (SchemaType.NUMBER, SchemaType.INTEGER):
        return WidgetKind.NUMBER
    if schema_type is SchemaType.BOOLEAN:
        return WidgetKind.SWITCH
    if schema_type is SchemaType.STRING:
        if field_schema.format == "date":
            return WidgetKind.DATE
        if isinstance(field_schema.enum, list):
            return WidgetKind.SELECT
        if hint.widget == "textarea":
            return WidgetKind.TEXTAREA
        if field_schema.format == "email":
            return WidgetKind.EMAIL
        if hint.widget == "password":
            return WidgetKind.PASSWORD
        return WidgetKind.TEXT
    # missing or unsupported type
    return WidgetKind.TEXT


def parse_col(value: Any) -> int | None:
    """
    A ``ui:col`` value as a whole number of columns from 1 to 24, else None.

    Numeric strings such as ``"12"`` are accepted.
    """
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return None
    if is_number(value) and float(value).is_integer() and 1 <= value <= GRID_COLUMNS:
        return int(value)
    return None


def column_span(hint: UIHint) -> int:
    """Column span on a 24 column grid; ``ui:col`` overrides the default."""
    span = parse_col(hint.col)
    return span if span is not None else get_config().default_col_span


@dataclass
class FieldPlan:
    """Everything needed to render one field."""

    name: str
    label: str
    widget: WidgetKind
    col_span: int
    rules: list[Rule]
    tooltip: str | None = None
    help: str | None = None
    placeholder: str | None = None
    options: list[Any] | None = None
    rows: int | None = None
    min: int | float | None = None
    max: int | float | None = None
    step: int | float | None = None
    max_length: int | None = None

    @property
    def required(self) -> bool:
        return any(rule.kind is RuleKind.REQUIRED for rule in self.rules)


@dataclass
class Section:
    """A group of fields; ``title`` is None for the implicit leading section."""

    title: str | None
    fields: list[FieldPlan] = field(default_factory=list)


@dataclass
class FormPlan:
    title: str
    sections: list[Section]

    @property
    def fields(self) -> list[FieldPlan]:
        return [plan for section in self.sections for plan in section.fields]


def derive_initial_values(schema: FormSchema) -> dict[str, Any]:
    """Map each property that declares a ``default`` (any value) to it."""
    return {
        name: field_schema.default
        for name, field_schema in schema.properties.items()
        if field_schema.has_default
    }


def group_and_order(
    schema: FormSchema,
    ui_hints: UIHintMap,
) -> list[tuple[str | None, list[str]]]:
    """
    Partition field names into sections by their ``ui:section`` hint.

    Unsectioned fields form one unnamed section that always comes first.
    Named sections follow in order of first appearance, and property order is
    kept within each section.
    """
    unsectioned: list[str] = []
    named: dict[str, list[str]] = {}

    for name in schema.properties:
        hint = ui_hints.get(name)
        section = hint.section if hint is not None else None
        if section:
            named.setdefault(section, []).append(name)
        else:
            unsectioned.append(name)

    groups: list[tuple[str | None, list[str]]] = []
    if unsectioned:
        groups.append((None, unsectioned))
    groups.extend(named.items())
    return groups


def plan_field(name: str, field_schema: FieldSchema, hint: UIHint, required: set[str]) -> FieldPlan:
    widget = select_widget(field_schema, hint)
    plan = FieldPlan(
        name=name,
        label=field_schema.title or name,
        widget=widget,
        col_span=column_span(hint),
        rules=derive_rules(name, field_schema, required),
        tooltip=hint.tooltip,
        help=hint.help,
        placeholder=hint.placeholder or field_schema.description,
    )

    if widget is WidgetKind.NUMBER:
        plan.min = field_schema.minimum if is_number(field_schema.minimum) else None
        plan.max = field_schema.maximum if is_number(field_schema.maximum) else None
        plan.step = 1 if field_schema.schema_type is SchemaType.INTEGER else 0.01
    elif widget is WidgetKind.SELECT:
        plan.options = list(field_schema.enum)
    elif widget is WidgetKind.TEXTAREA:
        rows = hint.rows
        plan.rows = rows if is_number(rows) else get_config().textarea_rows

    if widget in (WidgetKind.TEXT, WidgetKind.TEXTAREA, WidgetKind.EMAIL, WidgetKind.PASSWORD):
        if is_number(field_schema.max_length):
            plan.max_length = int(field_schema.max_length)

    return plan


def build_render_plan(document: FormDocument, title: str | None = None) -> FormPlan:
    """Build the sectioned rendering plan for a form."""
    schema = document.form_schema
    required = schema.required_set

    sections = []
    for section_title, names in group_and_order(schema, document.ui_schema):
        section = Section(title=section_title)
        for name in names:
            section.fields.append(
                plan_field(name, schema.properties[name], document.hint(name), required)
            )
        sections.append(section)

    return FormPlan(title=title or schema.title or "Form", sections=sections)
