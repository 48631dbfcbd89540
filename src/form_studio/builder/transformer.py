"""
Conversion between builder field descriptors and JSON Schema + UI Schema.

The conversion is lossy by construction: ``from_schema`` only keeps what a
``FieldDescriptor`` can express. Patterns, length limits, descriptions and
unknown ``ui:*`` hints do not survive a load through the builder.
"""

import logging
from typing import Any, Iterable

from form_studio.builder.keys import unique_key
from form_studio.config import get_config
from form_studio.interpreter.rules import is_number
from form_studio.models.field_descriptor import FIELD_NAME_PATTERN, FieldDescriptor, FieldKind
from form_studio.models.schema import (
    FieldSchema,
    FormDocument,
    FormSchema,
    SchemaType,
    UIHint,
    UIHintMap,
    load_form_schema,
    load_ui_hints,
)

logger = logging.getLogger(__name__)


def _field_schema(descriptor: FieldDescriptor) -> tuple[FieldSchema, UIHint | None]:
    kind = descriptor.type
    title = descriptor.label or descriptor.name
    props: dict[str, Any] = {"title": title}
    hint = None

    if kind is FieldKind.STRING:
        props["type"] = SchemaType.STRING.value
    elif kind is FieldKind.TEXT:
        props["type"] = SchemaType.STRING.value
        hint = UIHint(widget="textarea", options={"rows": get_config().textarea_rows})
    elif kind is FieldKind.NUMBER or kind is FieldKind.INTEGER:
        props["type"] = kind.value
        if is_number(descriptor.min):
            props["minimum"] = descriptor.min
        if is_number(descriptor.max):
            props["maximum"] = descriptor.max
    elif kind is FieldKind.BOOLEAN:
        props["type"] = SchemaType.BOOLEAN.value
    elif kind is FieldKind.EMAIL:
        props["type"] = SchemaType.STRING.value
        props["format"] = "email"
    elif kind is FieldKind.DATE:
        props["type"] = SchemaType.STRING.value
        props["format"] = "date"
    elif kind is FieldKind.SELECT:
        props["type"] = SchemaType.STRING.value
        props["enum"] = [option for option in descriptor.options or [] if option]
    else:
        raise ValueError(f"Unsupported field type: {kind}")

    if descriptor.placeholder:
        hint = hint or UIHint()
        hint.placeholder = descriptor.placeholder

    return FieldSchema(**props), hint


def to_schema(descriptors: Iterable[FieldDescriptor], title: str | None = None) -> FormDocument:
    """
    Build a JSON Schema + UI Schema from builder fields.

    Fields without a name are skipped. ``required`` lists required fields in
    builder order and is omitted when empty.
    """
    config = get_config()
    properties: dict[str, FieldSchema] = {}
    ui_schema: UIHintMap = {}
    required: list[str] = []

    for descriptor in descriptors:
        if not descriptor.name:
            continue
        field_schema, hint = _field_schema(descriptor)
        properties[descriptor.name] = field_schema
        if hint is not None:
            ui_schema[descriptor.name] = hint
        if descriptor.required:
            required.append(descriptor.name)

    root: dict[str, Any] = {
        "schema_uri": config.json_schema_version,
        "type": "object",
        "title": title or config.default_form_title,
        "properties": properties,
    }
    if required:
        root["required"] = required

    return FormDocument(form_schema=FormSchema(**root), ui_schema=ui_schema)


def classify(field_schema: FieldSchema, hint: UIHint | None) -> FieldKind:
    """Map a schema entry back to a builder field type."""
    schema_type = field_schema.schema_type

    if schema_type is SchemaType.STRING:
        if field_schema.format == "email":
            return FieldKind.EMAIL
        if field_schema.format == "date":
            return FieldKind.DATE
        if isinstance(field_schema.enum, list) and field_schema.enum:
            return FieldKind.SELECT
        if hint is not None and hint.widget == "textarea":
            return FieldKind.TEXT
        return FieldKind.STRING
    if schema_type is SchemaType.NUMBER:
        return FieldKind.NUMBER
    if schema_type is SchemaType.INTEGER:
        return FieldKind.INTEGER
    if schema_type is SchemaType.BOOLEAN:
        return FieldKind.BOOLEAN
    # missing or unsupported type
    return FieldKind.STRING


def from_schema(schema: Any, ui_schema: Any = None) -> list[FieldDescriptor]:
    """
    Rebuild builder fields from a JSON Schema + UI Schema.

    One field per property, in declaration order. Property keys that are not
    valid field keys are slugified, which renames them.
    """
    if isinstance(schema, FormDocument):
        form_schema, hints = schema.form_schema, schema.ui_schema
    else:
        form_schema, hints = load_form_schema(schema), load_ui_hints(ui_schema)

    required = form_schema.required_set
    descriptors: list[FieldDescriptor] = []
    used: list[str] = []

    for name, field_schema in form_schema.properties.items():
        hint = hints.get(name)
        kind = classify(field_schema, hint)

        key = name
        if not FIELD_NAME_PATTERN.fullmatch(name) or name in used:
            key = unique_key(name, used)
            logger.warning("Property key %r is not a valid field key, renamed to %r", name, key)
        used.append(key)

        descriptor = FieldDescriptor(
            name=key,
            label=field_schema.title or name,
            type=kind,
            required=name in required,
            placeholder=(hint.placeholder if hint is not None else None) or None,
        )
        if kind is FieldKind.SELECT:
            descriptor.options = [str(option) for option in field_schema.enum]
        elif kind.is_numeric:
            if is_number(field_schema.minimum):
                descriptor.min = field_schema.minimum
            if is_number(field_schema.maximum):
                descriptor.max = field_schema.maximum
        descriptors.append(descriptor)

    return descriptors
