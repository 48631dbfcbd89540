"""
Display summaries of recent submissions.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Iterable

from form_studio.config import get_config
from form_studio.models.definition import Submission
from form_studio.models.schema import FormSchema, load_form_schema

CREATED_AT_FORMAT = "%d %b %Y, %H:%M"
EMPTY_VALUE = "-"


def format_value(value: Any) -> str:
    """Render a submitted value as display text."""
    if value is None:
        return EMPTY_VALUE
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value) if value else "[]"
    if isinstance(value, dict):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


@dataclass
class SubmissionCard:
    id: str
    version: str
    created_at: str
    submitted_by: Any = None
    items: list[tuple[str, str]] = field(default_factory=list)


def _labelled_items(data: dict[str, Any], schema: FormSchema, names: Iterable[str]) -> list[tuple[str, str]]:
    items = []
    for name in names:
        field_schema = schema.properties.get(name)
        label = (field_schema.title if field_schema is not None else None) or name
        items.append((label, format_value(data.get(name))))
    return items


def _card(submission: Submission, schema: FormSchema, names: list[str]) -> SubmissionCard:
    return SubmissionCard(
        id=submission.id,
        version=f"v{submission.form_version}" if submission.form_version is not None else "",
        created_at=submission.created_at.strftime(CREATED_AT_FORMAT),
        submitted_by=submission.submitted_by,
        items=_labelled_items(submission.data, schema, names),
    )


def summarize_submissions(
    submissions: Iterable[Submission],
    schema: Any,
    limit: int | None = None,
) -> list[SubmissionCard]:
    """One card per submission showing the first few schema fields."""
    form_schema = load_form_schema(schema) if schema is not None else FormSchema()
    count = limit if limit is not None else get_config().summary_field_count
    primary = list(form_schema.properties)[:count]
    return [_card(submission, form_schema, primary) for submission in submissions]


def submission_details(submission: Submission, schema: Any) -> SubmissionCard:
    """A card listing every schema field of one submission."""
    form_schema = load_form_schema(schema)
    return _card(submission, form_schema, list(form_schema.properties))
