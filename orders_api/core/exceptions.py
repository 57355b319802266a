"""
Application Exceptions

Typed failures raised by use cases and controllers. Each one carries the
HTTP status code it maps to and a machine-readable body, so the web layer
can translate them without knowing where they came from.
"""

from typing import Any, Optional


class AppException(Exception):
    """Base class for every failure that has an HTTP representation."""

    status_code: int = 500

    def __init__(self, message: str, issues: Optional[list[dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.issues = issues or []

    @property
    def body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"message": self.message}
        if self.issues:
            body["issues"] = self.issues
        return body

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.status_code}: {self.message}>"


class BadRequestException(AppException):
    """Input failed validation."""
    status_code = 400


class NotFoundException(AppException):
    """Referenced entity does not exist."""
    status_code = 404


class ConflictException(AppException):
    """Uniqueness violation or a state change that is not allowed."""
    status_code = 409
