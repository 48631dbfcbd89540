"""Tests for submission summaries."""

import pytest

from form_studio.models.definition import Submission
from form_studio.submissions import format_value, submission_details, summarize_submissions

SCHEMA = {
    "type": "object",
    "properties": {name: {"type": "string", "title": name.upper()} for name in "abcdefgh"},
}


def make_submission(data, version=3):
    return Submission.model_validate({
        "_id": "s1",
        "data": data,
        "formVersion": version,
        "createdAt": "2026-03-05T14:07:00Z",
        "submittedBy": {"email": "ops@example.com"},
    })


class TestFormatValue:
    """Tests for format_value."""

    @pytest.mark.parametrize("value, expected", [
        (None, "-"),
        (True, "Yes"),
        (False, "No"),
        (0, "0"),
        ("", ""),
        (["a", "b"], "a, b"),
        ([], "[]"),
        ({"k": 1}, '{"k":1}'),
    ])
    def test_values(self, value, expected):
        """Test display text for each kind of value."""
        assert format_value(value) == expected


class TestSummaries:
    """Tests for summarize_submissions and submission_details."""

    def test_first_six_fields(self):
        """Test cards show the first six schema fields in order."""
        cards = summarize_submissions([make_submission({"a": "x", "g": "hidden"})], SCHEMA)
        card = cards[0]
        assert [label for label, _ in card.items] == ["A", "B", "C", "D", "E", "F"]
        assert card.items[0] == ("A", "x")
        assert card.items[1] == ("B", "-")

    def test_card_header(self):
        """Test version, date and author on the card."""
        card = summarize_submissions([make_submission({})], SCHEMA, limit=2)[0]
        assert card.version == "v3"
        assert card.created_at == "05 Mar 2026, 14:07"
        assert card.submitted_by == {"email": "ops@example.com"}
        assert len(card.items) == 2

    def test_missing_version(self):
        """Test submissions without a version show no badge text."""
        card = summarize_submissions([make_submission({}, version=None)], SCHEMA)[0]
        assert card.version == ""

    def test_no_schema(self):
        """Test a missing schema yields cards without items."""
        cards = summarize_submissions([make_submission({"a": 1})], None)
        assert cards[0].items == []

    def test_details_lists_every_field(self):
        """Test the detail view shows all schema fields."""
        card = submission_details(make_submission({"h": "last"}), SCHEMA)
        assert len(card.items) == 8
        assert card.items[-1] == ("H", "last")
