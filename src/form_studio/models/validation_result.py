"""
Outcome of checking a form's values against its derived rules.
"""

from typing import Any

from pydantic import BaseModel, Field


class FieldValidationError(BaseModel):
    """One failed rule on one field."""

    field_name: str = Field(..., description="Property key of the field")
    error_type: str = Field(..., description="Rule kind that failed, e.g. 'required'")
    message: str = Field(..., description="Message shown next to the input")
    limit: Any | None = Field(default=None, description="Bound or pattern the rule enforces")
    value: Any | None = Field(default=None, description="Value that failed the rule")


class ValidationResult(BaseModel):
    """Result of validating (and possibly submitting) a form."""

    is_valid: bool
    errors: list[FieldValidationError] = Field(default_factory=list)
    validated_data: dict[str, Any] | None = Field(
        default=None, description="Values handed to the submit callback when valid"
    )
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def passed(cls, data: dict[str, Any]) -> "ValidationResult":
        return cls(is_valid=True, validated_data=data)

    @classmethod
    def failed(cls, errors: list[FieldValidationError]) -> "ValidationResult":
        return cls(is_valid=False, errors=errors)

    @classmethod
    def refused(cls, reason: str) -> "ValidationResult":
        """A submit that was not attempted; no field is at fault."""
        return cls(is_valid=False, warnings=[reason])

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def error_fields(self) -> list[str]:
        """Fields with at least one error, in form order."""
        return list(dict.fromkeys(e.field_name for e in self.errors))

    def first_error(self, field_name: str) -> str | None:
        """The message shown under a field's input, if any."""
        for error in self.errors:
            if error.field_name == field_name:
                return error.message
        return None

    def to_error_dict(self) -> dict[str, list[str]]:
        """Map each field name to its error messages."""
        result: dict[str, list[str]] = {}
        for error in self.errors:
            result.setdefault(error.field_name, []).append(error.message)
        return result
