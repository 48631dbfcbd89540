"""Exceptions raised by Form Studio."""


class FormStudioError(Exception):
    """Base class for Form Studio errors."""


class SchemaParseError(FormStudioError):
    """A schema or UI schema text buffer could not be parsed."""

    def __init__(self, source: str, message: str):
        self.source = source
        self.message = message
        super().__init__(f"{source} JSON error: {message}")


class ApiError(FormStudioError):
    """The REST collaborator failed or returned an error status."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class RouteResolutionError(FormStudioError):
    """A division or screen route key matched nothing."""
