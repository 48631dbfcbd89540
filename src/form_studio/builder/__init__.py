"""
Visual form builder: field descriptors to and from JSON Schema.
"""

from form_studio.builder.document import (
    format_form_document,
    parse_form_document,
    validate_json_schema,
    validate_ui_schema,
)
from form_studio.builder.keys import slugify, unique_key
from form_studio.builder.session import BuilderSession
from form_studio.builder.transformer import classify, from_schema, to_schema

__all__ = [
    "BuilderSession",
    "classify",
    "format_form_document",
    "from_schema",
    "parse_form_document",
    "slugify",
    "to_schema",
    "unique_key",
    "validate_json_schema",
    "validate_ui_schema",
]
