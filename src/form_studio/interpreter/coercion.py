"""
Value coercion applied on every change of a form control.

``None`` means "absent": a cleared control removes the value instead of
storing an empty string or zero, so required checks stay meaningful and a
cleared field does not pick its default back up.
"""

import math
import re
from datetime import date, datetime
from typing import Any

from form_studio.interpreter.rules import is_number
from form_studio.models.schema import FieldSchema, SchemaType

_NON_NUMERIC = re.compile(r"[^\d.\-]")
_LEADING_NUMBER = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


def parse_number(raw: Any, integer: bool = False) -> int | float | None:
    """
    Interpret raw numeric input.

    Characters other than digits, ``.`` and ``-`` are stripped, then the
    leading numeric literal is parsed. Integers are truncated toward zero,
    so ``"-3.9abc"`` becomes ``-3``.
    """
    if raw is None or isinstance(raw, bool):
        return None

    if is_number(raw):
        number = raw
    else:
        text = _NON_NUMERIC.sub("", str(raw))
        match = _LEADING_NUMBER.match(text)
        if not match:
            return None
        number = float(match.group(0))

    if isinstance(number, float) and not math.isfinite(number):
        return None
    if integer:
        return math.trunc(number)
    if isinstance(number, float) and number.is_integer() and not is_number(raw):
        return int(number)
    return number


def parse_date(raw: Any) -> str | None:
    """Normalize a picked date to ``YYYY-MM-DD``; anything invalid is absent."""
    if raw is None or raw == "":
        return None
    if isinstance(raw, datetime):
        return raw.date().isoformat()
    if isinstance(raw, date):
        return raw.isoformat()
    if not isinstance(raw, str):
        return None

    text = raw.strip()
    try:
        return date.fromisoformat(text).isoformat()
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date().isoformat()
    except ValueError:
        return None


def coerce_on_change(field: FieldSchema | None, raw: Any) -> Any:
    """
    Normalize a raw control value for a field.

    Args:
        field: The field's schema entry. A missing entry is treated as a
            plain string field.
        raw: The value reported by the control.

    Returns:
        The normalized value, or None for "absent".
    """
    schema_type = field.schema_type if field is not None else None

    if schema_type is SchemaType.NUMBER:
        return parse_number(raw)
    if schema_type is SchemaType.INTEGER:
        return parse_number(raw, integer=True)
    if schema_type is SchemaType.BOOLEAN:
        return bool(raw)
    if schema_type is SchemaType.STRING and field.format == "date":
        return parse_date(raw)

    # string, enum, email, textarea, and unsupported types
    if raw == "":
        return None
    return raw
