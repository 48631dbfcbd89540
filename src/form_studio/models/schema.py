"""
JSON Schema and UI Schema models.

A form is described by two documents: a JSON Schema (``FormSchema``) listing
the fields and their constraints, and a sparse UI Schema (``UIHintMap``)
carrying rendering hints that JSON Schema cannot express. Both are kept loose
enough that externally authored documents load without errors; unknown keys
are preserved.
"""

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

logger = logging.getLogger(__name__)


class SchemaType(str, Enum):
    """Primitive JSON Schema types a form field can have."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"


def _drop_mistyped(data: Any, expected: Mapping[str, type | tuple[type, ...]]) -> Any:
    """Remove optional keys whose value has the wrong JSON type, one key at a time."""
    if not isinstance(data, Mapping):
        return data
    cleaned = dict(data)
    for key, kinds in expected.items():
        value = cleaned.get(key)
        if value is not None and not isinstance(value, kinds):
            logger.warning("Ignoring %r: unexpected value %r", key, value)
            del cleaned[key]
    return cleaned


class FieldSchema(BaseModel):
    """One entry of a JSON Schema ``properties`` mapping."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _ignore_mistyped_keys(cls, data: Any) -> Any:
        return _drop_mistyped(data, {
            "type": str,
            "title": str,
            "description": str,
            "format": str,
            "enum": list,
            "patternMessage": str,
            "pattern_message": str,
        })

    type: str | None = Field(default=None, description="JSON Schema type")
    title: str | None = Field(default=None, description="Human-readable label")
    description: str | None = Field(default=None, description="Help text")
    default: Any = Field(default=None, description="Initial value, if present")
    enum: list[Any] | None = Field(default=None, description="Allowed values")
    format: str | None = Field(default=None, description="Format: email, date")
    minimum: Any = Field(default=None, description="Minimum numeric value")
    maximum: Any = Field(default=None, description="Maximum numeric value")
    min_length: Any = Field(default=None, alias="minLength")
    max_length: Any = Field(default=None, alias="maxLength")
    pattern: Any = Field(default=None, description="Regex pattern; non-strings are ignored by the rules")
    pattern_message: str | None = Field(default=None, alias="patternMessage")

    @property
    def schema_type(self) -> SchemaType | None:
        """The primitive type, or None when missing or unsupported."""
        try:
            return SchemaType(self.type)
        except ValueError:
            return None

    @property
    def has_default(self) -> bool:
        """Whether the ``default`` key was present, whatever its value."""
        return "default" in self.model_fields_set

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)


class UIHint(BaseModel):
    """Rendering hints for a single field."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    section: str | None = Field(default=None, alias="ui:section")
    tooltip: str | None = Field(default=None, alias="ui:tooltip")
    placeholder: str | None = Field(default=None, alias="ui:placeholder")
    help: str | None = Field(default=None, alias="ui:help")
    col: Any = Field(default=None, alias="ui:col")
    widget: str | None = Field(default=None, alias="ui:widget")
    options: dict[str, Any] | None = Field(default=None, alias="ui:options")

    @model_validator(mode="before")
    @classmethod
    def _ignore_mistyped_keys(cls, data: Any) -> Any:
        return _drop_mistyped(data, {
            "ui:section": str,
            "ui:tooltip": str,
            "ui:placeholder": str,
            "ui:help": str,
            "ui:widget": str,
            "ui:options": dict,
        })

    @property
    def rows(self) -> Any:
        if self.options:
            return self.options.get("rows")
        return None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)


UIHintMap = dict[str, UIHint]


class FormSchema(BaseModel):
    """Root JSON Schema of a form."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    schema_uri: str | None = Field(default=None, alias="$schema")
    type: str = Field(default="object")
    title: str | None = Field(default=None)
    description: str | None = Field(default=None)
    properties: dict[str, FieldSchema] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _ignore_mistyped_keys(cls, data: Any) -> Any:
        return _drop_mistyped(data, {
            "$schema": str,
            "schema_uri": str,
            "title": str,
            "description": str,
        })

    @property
    def required_set(self) -> set[str]:
        return set(self.required)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)


class FormDocument(BaseModel):
    """A JSON Schema and its UI Schema, always handled as a pair."""

    model_config = ConfigDict(populate_by_name=True)

    form_schema: FormSchema = Field(default_factory=FormSchema, alias="schema")
    ui_schema: UIHintMap = Field(default_factory=dict, alias="uiSchema")

    def hint(self, name: str) -> UIHint:
        return self.ui_schema.get(name) or UIHint()

    def to_wire(self) -> dict[str, Any]:
        """Export as the ``{"schema": ..., "uiSchema": ...}`` wire shape."""
        return {
            "schema": self.form_schema.to_dict(),
            "uiSchema": {name: hint.to_dict() for name, hint in self.ui_schema.items()},
        }


def load_form_schema(raw: Any) -> FormSchema:
    """
    Build a ``FormSchema`` from untrusted input without raising.

    A non-mapping root, a root whose ``type`` is not ``object`` or a
    ``properties`` value that is not a mapping all degrade to a schema with
    no fields. Individual properties that are not valid field schemas are
    skipped.
    """
    if isinstance(raw, FormSchema):
        return raw
    if not isinstance(raw, Mapping):
        logger.warning("Form schema root is not an object, rendering no fields")
        return FormSchema()
    if raw.get("type", "object") != "object":
        logger.warning("Form schema root type is %r, rendering no fields", raw.get("type"))
        return FormSchema()

    raw_properties = raw.get("properties")
    if not isinstance(raw_properties, Mapping):
        logger.warning("Form schema has no properties mapping, rendering no fields")
        return FormSchema()

    properties: dict[str, FieldSchema] = {}
    for name, definition in raw_properties.items():
        if not isinstance(definition, Mapping):
            logger.warning("Skipping property %r: definition is not an object", name)
            continue
        try:
            properties[str(name)] = FieldSchema.model_validate(dict(definition))
        except ValidationError as e:
            logger.warning("Skipping property %r: %s", name, e)

    required = raw.get("required")
    root = {key: value for key, value in raw.items() if key not in ("properties", "required")}
    root["properties"] = properties
    if isinstance(required, list):
        root["required"] = [name for name in required if isinstance(name, str)]

    try:
        return FormSchema.model_validate(root)
    except ValidationError as e:
        logger.warning("Form schema root is malformed, rendering no fields: %s", e)
        return FormSchema()


def load_ui_hints(raw: Any) -> UIHintMap:
    """Build a ``UIHintMap`` from untrusted input, skipping malformed entries."""
    if not isinstance(raw, Mapping):
        return {}

    hints: UIHintMap = {}
    for name, hint in raw.items():
        if isinstance(hint, UIHint):
            hints[str(name)] = hint
            continue
        if not isinstance(hint, Mapping):
            logger.debug("Ignoring UI hint for %r: not an object", name)
            continue
        try:
            hints[str(name)] = UIHint.model_validate(dict(hint))
        except ValidationError as e:
            logger.debug("Ignoring UI hint for %r: %s", name, e)
    return hints


def load_form_document(schema: Any, ui_schema: Any = None) -> FormDocument:
    """Build a ``FormDocument`` from untrusted schema and UI schema values."""
    return FormDocument(
        form_schema=load_form_schema(schema),
        ui_schema=load_ui_hints(ui_schema),
    )
