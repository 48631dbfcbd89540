"""Tests for on-change value coercion."""

from datetime import date, datetime

import pytest

from form_studio.interpreter.coercion import coerce_on_change
from form_studio.models.schema import FieldSchema


def field(**kwargs) -> FieldSchema:
    return FieldSchema.model_validate(kwargs)


INTEGER = field(type="integer", minimum=0)
NUMBER = field(type="number")
DATE = field(type="string", format="date")
TEXT = field(type="string")
BOOLEAN = field(type="boolean")


class TestNumbers:
    """Tests for number and integer coercion."""

    @pytest.mark.parametrize("raw, expected", [
        ("3.9", 3),
        ("-3.9", -3),
        ("-3.9abc", -3),
        ("12", 12),
        (7.8, 7),
    ])
    def test_integer_truncates_toward_zero(self, raw, expected):
        """Test integers are stripped, parsed and truncated."""
        assert coerce_on_change(INTEGER, raw) == expected

    @pytest.mark.parametrize("raw", ["", None, "abc", "-"])
    def test_empty_is_absent(self, raw):
        """Test empty or unparseable input is absent, not zero."""
        assert coerce_on_change(INTEGER, raw) is None
        assert coerce_on_change(NUMBER, raw) is None

    def test_number_keeps_fraction(self):
        """Test numbers keep decimals and drop stray characters."""
        assert coerce_on_change(NUMBER, "$1,234.50") == 1234.5
        assert coerce_on_change(NUMBER, 2.25) == 2.25


class TestDates:
    """Tests for date coercion."""

    def test_iso_date(self):
        """Test ISO dates are stored as YYYY-MM-DD."""
        assert coerce_on_change(DATE, "2026-10-19") == "2026-10-19"

    def test_date_objects(self):
        """Test date and datetime picks."""
        assert coerce_on_change(DATE, date(2026, 1, 2)) == "2026-01-02"
        assert coerce_on_change(DATE, datetime(2026, 1, 2, 15, 0)) == "2026-01-02"

    @pytest.mark.parametrize("raw", [None, "", "19/10/2026", "2026-13-01", 42])
    def test_invalid_is_absent(self, raw):
        """Test invalid picks are absent."""
        assert coerce_on_change(DATE, raw) is None


class TestOtherTypes:
    """Tests for boolean and string coercion."""

    @pytest.mark.parametrize("raw, expected", [(1, True), ("", False), (None, False), ("no", True)])
    def test_boolean_truthiness(self, raw, expected):
        """Test booleans are never absent."""
        assert coerce_on_change(BOOLEAN, raw) is expected

    def test_string_empty_is_absent(self):
        """Test empty strings become absent."""
        assert coerce_on_change(TEXT, "") is None

    def test_string_not_trimmed(self):
        """Test non-empty strings pass through unchanged."""
        assert coerce_on_change(TEXT, "  padded ") == "  padded "

    def test_missing_schema_is_string(self):
        """Test unknown fields are coerced like strings."""
        assert coerce_on_change(None, "") is None
        assert coerce_on_change(field(type="array"), "x") == "x"
