"""
Validation rules derived from JSON Schema field constraints.

Rules are returned in a fixed order (required, string constraints, numeric
bounds) because some UI layers only surface the first failing rule.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

from form_studio.models.schema import FieldSchema, SchemaType

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
DEFAULT_PATTERN_MESSAGE = "Invalid format"


class RuleKind(str, Enum):
    REQUIRED = "required"
    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"
    EMAIL = "email"
    PATTERN = "pattern"
    MINIMUM = "minimum"
    MAXIMUM = "maximum"


def is_number(value: Any) -> bool:
    """True for real ints and floats; bools do not count."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def format_number(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class Rule:
    """A single validation constraint on one field's value."""

    kind: RuleKind
    message: str
    limit: Any = None
    regex: re.Pattern | None = None

    def check(self, value: Any) -> bool:
        """Return True when ``value`` satisfies this rule."""
        if self.kind is RuleKind.REQUIRED:
            return value is not None
        if value is None:
            return True

        if self.kind is RuleKind.MIN_LENGTH:
            return not isinstance(value, str) or len(value) >= self.limit
        if self.kind is RuleKind.MAX_LENGTH:
            return not isinstance(value, str) or len(value) <= self.limit
        if self.kind is RuleKind.EMAIL:
            return isinstance(value, str) and EMAIL_PATTERN.match(value) is not None
        if self.kind is RuleKind.PATTERN:
            return self.regex.search(str(value)) is not None
        if self.kind is RuleKind.MINIMUM:
            return is_number(value) and value >= self.limit
        if self.kind is RuleKind.MAXIMUM:
            return is_number(value) and value <= self.limit
        raise ValueError(f"Unknown rule kind: {self.kind}")


def _compile_pattern(pattern: Any) -> re.Pattern | None:
    if not isinstance(pattern, str) or not pattern:
        logger.debug("Dropping unusable pattern %r", pattern)
        return None
    try:
        return re.compile(pattern)
    except re.error as e:
        logger.debug("Dropping invalid pattern %r: %s", pattern, e)
        return None


def derive_rules(
    name: str,
    field: FieldSchema | None,
    required: Iterable[str],
) -> list[Rule]:
    """
    Build the ordered validation rules for one field.

    Args:
        name: Field name (property key).
        field: The field's schema entry, or None if missing.
        required: Names of required fields.

    Returns:
        Rules in evaluation order.
    """
    rules: list[Rule] = []
    if name in set(required):
        rules.append(Rule(RuleKind.REQUIRED, "Required"))
    if field is None:
        return rules

    schema_type = field.schema_type

    if schema_type is SchemaType.STRING:
        if is_number(field.min_length):
            rules.append(Rule(
                RuleKind.MIN_LENGTH,
                f"Min {format_number(field.min_length)} characters",
                limit=field.min_length,
            ))
        if is_number(field.max_length):
            rules.append(Rule(
                RuleKind.MAX_LENGTH,
                f"Max {format_number(field.max_length)} characters",
                limit=field.max_length,
            ))
        if field.format == "email":
            rules.append(Rule(RuleKind.EMAIL, "Please enter a valid email"))
        if field.pattern is not None:
            regex = _compile_pattern(field.pattern)
            if regex is not None:
                rules.append(Rule(
                    RuleKind.PATTERN,
                    field.pattern_message or DEFAULT_PATTERN_MESSAGE,
                    limit=field.pattern,
                    regex=regex,
                ))

    elif schema_type in (SchemaType.NUMBER, SchemaType.INTEGER):
        if is_number(field.minimum):
            rules.append(Rule(
                RuleKind.MINIMUM,
                f"Minimum {format_number(field.minimum)}",
                limit=field.minimum,
            ))
        if is_number(field.maximum):
            rules.append(Rule(
                RuleKind.MAXIMUM,
                f"Maximum {format_number(field.maximum)}",
                limit=field.maximum,
            ))

    return rules
