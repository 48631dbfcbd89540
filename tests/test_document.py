"""Tests for parsing the raw JSON buffers."""

import json

import pytest

from form_studio.builder.document import (
    format_form_document,
    parse_form_document,
    validate_json_schema,
    validate_ui_schema,
)
from form_studio.builder.transformer import to_schema
from form_studio.errors import SchemaParseError
from form_studio.models.field_descriptor import FieldDescriptor, FieldKind

SCHEMA = {
    "type": "object",
    "title": "Feedback",
    "properties": {"rating": {"type": "integer", "minimum": 1, "maximum": 5}},
    "required": ["rating"],
}


class TestParseFormDocument:
    """Tests for parse_form_document."""

    def test_valid_pair(self):
        """Test both buffers parse into one document."""
        document = parse_form_document(json.dumps(SCHEMA), json.dumps({"rating": {"ui:col": 24}}))
        assert document.form_schema.title == "Feedback"
        assert document.hint("rating").col == 24

    def test_bad_schema_json(self):
        """Test malformed schema JSON names the schema buffer."""
        with pytest.raises(SchemaParseError) as excinfo:
            parse_form_document("{nope", "{}")
        assert excinfo.value.source == "Schema"
        assert str(excinfo.value).startswith("Schema JSON error:")

    def test_bad_ui_json(self):
        """Test malformed UI JSON names the UI buffer."""
        with pytest.raises(SchemaParseError) as excinfo:
            parse_form_document(json.dumps(SCHEMA), "[1,")
        assert excinfo.value.source == "UI Schema"

    def test_required_must_exist(self):
        """Test required names must be declared properties."""
        schema = dict(SCHEMA, required=["rating", "comment"])
        with pytest.raises(SchemaParseError, match="comment"):
            parse_form_document(json.dumps(schema), "{}")

    def test_format_then_parse(self):
        """Test builder output formats into buffers that parse back."""
        document = to_schema([FieldDescriptor(name="bio", type=FieldKind.TEXT)], "About")
        schema_text, ui_text = format_form_document(document)
        parsed = parse_form_document(schema_text, ui_text)
        assert parsed.hint("bio").widget == "textarea"
        assert parsed.form_schema.title == "About"


class TestStructuralChecks:
    """Tests for the structural validators."""

    def test_schema_errors(self):
        """Test schema problems are listed."""
        errors = validate_json_schema({
            "type": "array",
            "properties": {"a": {"type": "date"}, "b": 3},
            "required": "a",
        })
        assert "Root schema type must be 'object'" in errors
        assert "Property 'a' has invalid type: date" in errors
        assert "Property 'b' must be an object" in errors
        assert "'required' must be an array" in errors

    def test_missing_properties(self):
        """Test a schema without properties is rejected."""
        assert validate_json_schema({"type": "object"}) == ["Missing 'properties' field in schema"]

    def test_ui_errors(self):
        """Test UI hint problems are listed."""
        errors = validate_ui_schema({
            "a": {"ui:col": 0, "ui:widget": "slider"},
            "b": "x",
        })
        assert len(errors) == 3

    def test_ui_root(self):
        """Test the UI Schema root must be an object."""
        assert validate_ui_schema([]) == ["UI Schema must be an object"]

    def test_ui_col_matches_rendering(self):
        """Test a numeric string column span is accepted like the renderer does."""
        assert validate_ui_schema({"a": {"ui:col": "12"}}) == []
        assert validate_ui_schema({"a": {"ui:col": "wide"}}) != []
