"""
Data models for Form Studio.

This module contains Pydantic models for:
- JSON Schema + UI Schema documents
- Builder field descriptors
- Records exchanged with the REST collaborator
- Validation results
"""

from form_studio.models.definition import (
    Division,
    FormDefinition,
    Notice,
    SaveResult,
    Screen,
    Submission,
)
from form_studio.models.field_descriptor import (
    FIELD_NAME_PATTERN,
    FieldDescriptor,
    FieldKind,
)
from form_studio.models.schema import (
    FieldSchema,
    FormDocument,
    FormSchema,
    SchemaType,
    UIHint,
    UIHintMap,
    load_form_document,
    load_form_schema,
    load_ui_hints,
)
from form_studio.models.validation_result import (
    FieldValidationError,
    ValidationResult,
)

__all__ = [
    # Schema documents
    "FieldSchema",
    "FormDocument",
    "FormSchema",
    "SchemaType",
    "UIHint",
    "UIHintMap",
    "load_form_document",
    "load_form_schema",
    "load_ui_hints",
    # Builder
    "FIELD_NAME_PATTERN",
    "FieldDescriptor",
    "FieldKind",
    # Collaborator records
    "Division",
    "FormDefinition",
    "Notice",
    "SaveResult",
    "Screen",
    "Submission",
    # Validation
    "FieldValidationError",
    "ValidationResult",
]
