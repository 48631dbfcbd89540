"""
Schema interpreter: JSON Schema + UI Schema to an interactive form.
"""

from form_studio.interpreter.coercion import coerce_on_change, parse_date, parse_number
from form_studio.interpreter.form import DynamicForm, drop_empty, validate_values
from form_studio.interpreter.layout import (
    FieldPlan,
    FormPlan,
    Section,
    WidgetKind,
    build_render_plan,
    column_span,
    parse_col,
    derive_initial_values,
    group_and_order,
    select_widget,
)
from form_studio.interpreter.rules import Rule, RuleKind, derive_rules

__all__ = [
    "DynamicForm",
    "FieldPlan",
    "FormPlan",
    "Rule",
    "RuleKind",
    "Section",
    "WidgetKind",
    "build_render_plan",
    "coerce_on_change",
    "column_span",
    "parse_col",
    "derive_initial_values",
    "derive_rules",
    "drop_empty",
    "group_and_order",
    "parse_date",
    "parse_number",
    "select_widget",
    "validate_values",
]
