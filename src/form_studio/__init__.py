"""
Form Studio: dynamic forms from JSON Schema.

Render and validate forms described by a JSON Schema plus a UI Schema, and
author those schemas with a visual field builder.

Simple Usage:
    from form_studio import DynamicForm

    form = DynamicForm(
        schema={
            "type": "object",
            "properties": {"email": {"type": "string", "format": "email"}},
            "required": ["email"],
        },
        on_submit=save_values,
    )
    form.set_value("email", "ada@example.com")
    result = await form.submit()

Builder Usage:
    from form_studio import BuilderSession, FieldKind

    session = BuilderSession(title="Sales Entry")
    session.add(FieldKind.INTEGER, label="Units sold")
    document = session.to_document()

    json_schema = document.to_wire()["schema"]
    ui_schema = document.to_wire()["uiSchema"]

Screens:
    from form_studio import FormApiClient, SchemaStudio, DivisionScreen

    client = FormApiClient("https://portal.example.com/api")
    studio = SchemaStudio(client)
    page = DivisionScreen(client, "sales", "daily-report")

Logging:
    from form_studio.logs import setup_logging

    setup_logging(console=True, verbose=True)
"""

from form_studio.auth import AuthSession, get_current_session
from form_studio.builder import (
    BuilderSession,
    from_schema,
    parse_form_document,
    slugify,
    to_schema,
    unique_key,
)
from form_studio.client import FormApiClient
from form_studio.errors import (
    ApiError,
    FormStudioError,
    RouteResolutionError,
    SchemaParseError,
)
from form_studio.interpreter import (
    DynamicForm,
    build_render_plan,
    coerce_on_change,
    derive_initial_values,
    derive_rules,
    group_and_order,
)
from form_studio.logs import disable_logging, enable_logging, setup_logging
from form_studio.models import (
    FieldDescriptor,
    FieldKind,
    FieldSchema,
    FormDefinition,
    FormDocument,
    FormSchema,
    Submission,
    UIHint,
    ValidationResult,
    FieldValidationError,
)
from form_studio.screens import DivisionScreen
from form_studio.studio import SchemaStudio
from form_studio.submissions import format_value, summarize_submissions

__all__ = [
    # Interpreter
    "DynamicForm",
    "build_render_plan",
    "coerce_on_change",
    "derive_initial_values",
    "derive_rules",
    "group_and_order",
    # Builder
    "BuilderSession",
    "from_schema",
    "parse_form_document",
    "slugify",
    "to_schema",
    "unique_key",
    # Screens and collaborators
    "AuthSession",
    "DivisionScreen",
    "FormApiClient",
    "SchemaStudio",
    "get_current_session",
    "format_value",
    "summarize_submissions",
    # Models
    "FieldDescriptor",
    "FieldKind",
    "FieldSchema",
    "FormDefinition",
    "FormDocument",
    "FormSchema",
    "Submission",
    "UIHint",
    "ValidationResult",
    "FieldValidationError",
    # Errors
    "ApiError",
    "FormStudioError",
    "RouteResolutionError",
    "SchemaParseError",
    # Logging
    "setup_logging",
    "disable_logging",
    "enable_logging",
]

__version__ = "0.1.0"
