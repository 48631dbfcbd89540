"""
Interactive dynamic form.

``DynamicForm`` owns the value state of one rendered form: it seeds values
from schema defaults, coerces every change, validates on submit and hands the
cleaned values to the submit collaborator.
"""

import inspect
import logging
from typing import Any, Awaitable, Callable

from form_studio.interpreter.coercion import coerce_on_change
from form_studio.interpreter.layout import FormPlan, build_render_plan, derive_initial_values
from form_studio.interpreter.rules import derive_rules
from form_studio.models.schema import FormDocument, load_form_document
from form_studio.models.validation_result import FieldValidationError, ValidationResult

logger = logging.getLogger(__name__)

SubmitCallback = Callable[[dict[str, Any]], Awaitable[Any] | Any]


def drop_empty(values: dict[str, Any]) -> dict[str, Any]:
    """Coerce ``""`` to absent and omit absent values."""
    return {name: value for name, value in values.items() if value is not None and value != ""}


def validate_values(document: FormDocument, values: dict[str, Any]) -> ValidationResult:
    """
    Validate a value map against every field's rules.

    Empty strings count as absent. Each field reports at most its rules'
    failures in rule order.
    """
    schema = document.form_schema
    required = schema.required_set
    cleaned = drop_empty(values)

    errors: list[FieldValidationError] = []
    for name, field_schema in schema.properties.items():
        value = cleaned.get(name)
        for rule in derive_rules(name, field_schema, required):
            if not rule.check(value):
                errors.append(FieldValidationError(
                    field_name=name,
                    error_type=rule.kind.value,
                    message=rule.message,
                    limit=rule.limit,
                    value=value,
                ))

    if errors:
        return ValidationResult.failed(errors)
    return ValidationResult.passed(cleaned)


class DynamicForm:
    """
    A form rendered from a JSON Schema and UI Schema.

    Usage:
        form = DynamicForm(schema, ui_schema, on_submit=client_submit)
        form.set_value("age", "42")
        result = await form.submit()
        if not result.is_valid:
            print(result.to_error_dict())
    """

    def __init__(
        self,
        schema: Any,
        ui_schema: Any = None,
        on_submit: SubmitCallback | None = None,
        title: str | None = None,
    ):
        """
        Initialize the form.

        Args:
            schema: JSON Schema as a dict or ``FormSchema``. Malformed
                schemas render no fields.
            ui_schema: UI Schema mapping field names to hints.
            on_submit: Called with the cleaned values after a valid submit.
                May be a coroutine function.
            title: Overrides the schema title.
        """
        if isinstance(schema, FormDocument):
            self.document = schema
        else:
            self.document = load_form_document(schema, ui_schema)
        self.on_submit = on_submit
        self.plan: FormPlan = build_render_plan(self.document, title)
        self.initial_values = derive_initial_values(self.document.form_schema)
        self.values: dict[str, Any] = dict(self.initial_values)
        self.errors: dict[str, list[str]] = {}
        self.submitting = False

    @property
    def title(self) -> str:
        return self.plan.title

    @property
    def field_names(self) -> list[str]:
        return [plan.name for plan in self.plan.fields]

    def set_value(self, name: str, raw: Any) -> Any:
        """Apply a control change; returns the coerced value (None if absent)."""
        field_schema = self.document.form_schema.properties.get(name)
        value = coerce_on_change(field_schema, raw)
        if value is None:
            self.values.pop(name, None)
        else:
            self.values[name] = value
        self.errors.pop(name, None)
        return value

    def validate(self) -> ValidationResult:
        result = validate_values(self.document, self.values)
        self.errors = result.to_error_dict()
        return result

    def reset(self) -> None:
        """Restore the schema defaults (the Reset button)."""
        self.values = dict(self.initial_values)
        self.errors = {}

    async def submit(self) -> ValidationResult:
        """
        Validate and submit the current values.

        On validation failure nothing is sent. On success the cleaned values
        are passed to ``on_submit`` and the values are cleared. If
        ``on_submit`` raises, the values are kept and the error propagates.
        """
        if self.submitting:
            logger.info("Submit ignored: a previous submit is still in flight")
            return ValidationResult.refused("A submission is already in progress")

        result = self.validate()
        if not result.is_valid:
            logger.debug("Submit blocked by %d validation errors", result.error_count)
            return result

        self.submitting = True
        try:
            if self.on_submit is not None:
                outcome = self.on_submit(dict(result.validated_data))
                if inspect.isawaitable(outcome):
                    await outcome
        finally:
            self.submitting = False

        self.values = {}
        self.errors = {}
        return result
