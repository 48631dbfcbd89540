"""
Field descriptor models for the visual form builder.

A ``FieldDescriptor`` is the builder's simplified, human-friendly view of one
form field. A list of them is converted to and from a JSON Schema by
``form_studio.builder.transformer``.
"""

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

FIELD_NAME_PATTERN = re.compile(r"[a-z_][a-z0-9_]*")


class FieldKind(str, Enum):
    """Field types offered by the builder."""

    STRING = "string"
    TEXT = "text"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    EMAIL = "email"
    DATE = "date"
    SELECT = "select"

    @property
    def label(self) -> str:
        """Display label, also used as the default label on quick add."""
        return FIELD_KIND_LABELS[self]

    @property
    def is_numeric(self) -> bool:
        return self in (FieldKind.NUMBER, FieldKind.INTEGER)


FIELD_KIND_LABELS = {
    FieldKind.STRING: "Short Text",
    FieldKind.TEXT: "Long Text",
    FieldKind.NUMBER: "Number",
    FieldKind.INTEGER: "Integer",
    FieldKind.BOOLEAN: "Yes/No",
    FieldKind.EMAIL: "Email",
    FieldKind.DATE: "Date",
    FieldKind.SELECT: "Dropdown",
}


class FieldDescriptor(BaseModel):
    """One editable field in the builder."""

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(default="", description="Field key; empty until named")
    label: str = Field(default="", description="Human-readable label")
    type: FieldKind = Field(default=FieldKind.STRING, description="Builder field type")
    required: bool = Field(default=False, description="Whether the field is required")
    placeholder: str | None = Field(default=None, description="Placeholder text")
    options: list[str] | None = Field(default=None, description="Dropdown options (select only)")
    min: int | float | None = Field(default=None, description="Minimum (numeric types)")
    max: int | float | None = Field(default=None, description="Maximum (numeric types)")

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if value and not FIELD_NAME_PATTERN.fullmatch(value):
            raise ValueError(f"Invalid field key '{value}': use lowercase letters, digits and '_'")
        return value
