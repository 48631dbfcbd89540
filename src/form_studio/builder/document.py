"""
Raw JSON editing of a form document.

The advanced editor exposes the JSON Schema and UI Schema as two text
buffers. They are parsed and validated together into one ``FormDocument``;
a problem in either buffer rejects the pair.
"""

import json
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from form_studio.errors import SchemaParseError
from form_studio.interpreter.layout import parse_col
from form_studio.models.schema import FormDocument, FormSchema, SchemaType, UIHint

SCHEMA_SOURCE = "Schema"
UI_SCHEMA_SOURCE = "UI Schema"

VALID_TYPES = {t.value for t in SchemaType}
VALID_WIDGETS = {"textarea", "password", "updown"}


def format_json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def format_form_document(document: FormDocument) -> tuple[str, str]:
    """Render a document as the two pretty-printed text buffers."""
    wire = document.to_wire()
    return format_json(wire["schema"]), format_json(wire["uiSchema"])


def _parse_json(text: str, source: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise SchemaParseError(source, str(e)) from e


def validate_json_schema(schema: Any) -> list[str]:
    """Structural checks on a form's JSON Schema. Returns error messages."""
    errors = []

    if not isinstance(schema, Mapping):
        return ["Root schema must be an object"]

    if schema.get("type") != "object":
        errors.append("Root schema type must be 'object'")

    properties = schema.get("properties")
    if properties is None:
        errors.append("Missing 'properties' field in schema")
    elif not isinstance(properties, Mapping):
        errors.append("'properties' must be an object")
    else:
        for prop_name, prop_def in properties.items():
            if not isinstance(prop_def, Mapping):
                errors.append(f"Property '{prop_name}' must be an object")
                continue
            prop_type = prop_def.get("type")
            if prop_type not in VALID_TYPES:
                errors.append(f"Property '{prop_name}' has invalid type: {prop_type}")
            if "enum" in prop_def and not isinstance(prop_def["enum"], list):
                errors.append(f"Property '{prop_name}' enum must be an array")

    if "required" in schema:
        if not isinstance(schema["required"], list):
            errors.append("'required' must be an array")
        else:
            known = properties if isinstance(properties, Mapping) else {}
            for req_field in schema["required"]:
                if req_field not in known:
                    errors.append(f"Required field '{req_field}' not in properties")

    return errors


def validate_ui_schema(ui_schema: Any) -> list[str]:
    """Structural checks on a UI Schema. Returns error messages."""
    if not isinstance(ui_schema, Mapping):
        return ["UI Schema must be an object"]

    errors = []
    for name, hint in ui_schema.items():
        if not isinstance(hint, Mapping):
            errors.append(f"Hints for '{name}' must be an object")
            continue
        col = hint.get("ui:col")
        if col is not None and parse_col(col) is None:
            errors.append(f"'ui:col' for '{name}' must be an integer from 1 to 24")
        widget = hint.get("ui:widget")
        if widget is not None and widget not in VALID_WIDGETS:
            errors.append(f"Unknown 'ui:widget' for '{name}': {widget}")
        options = hint.get("ui:options")
        if options is not None and not isinstance(options, Mapping):
            errors.append(f"'ui:options' for '{name}' must be an object")
    return errors


def parse_form_document(schema_text: str, ui_schema_text: str) -> FormDocument:
    """
    Parse and validate the two JSON text buffers as one document.

    Raises:
        SchemaParseError: If either buffer is not valid JSON or does not
            describe a valid form. ``source`` names the buffer at fault.
    """
    schema = _parse_json(schema_text, SCHEMA_SOURCE)
    ui_schema = _parse_json(ui_schema_text, UI_SCHEMA_SOURCE)

    errors = validate_json_schema(schema)
    if errors:
        raise SchemaParseError(SCHEMA_SOURCE, "; ".join(errors))
    errors = validate_ui_schema(ui_schema)
    if errors:
        raise SchemaParseError(UI_SCHEMA_SOURCE, "; ".join(errors))

    try:
        form_schema = FormSchema.model_validate(schema)
    except ValidationError as e:
        raise SchemaParseError(SCHEMA_SOURCE, str(e)) from e
    try:
        hints = {name: UIHint.model_validate(hint) for name, hint in ui_schema.items()}
    except ValidationError as e:
        raise SchemaParseError(UI_SCHEMA_SOURCE, str(e)) from e

    return FormDocument(form_schema=form_schema, ui_schema=hints)
