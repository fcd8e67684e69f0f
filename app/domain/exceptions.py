"""Domain exceptions.

Every expected failure of a catalog operation is raised as a
``ServiceError`` carrying a machine-readable code, a message, the HTTP
status the API layer should answer with, and optional field-level details.
Anything that is not a ``ServiceError`` is treated as unexpected.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Machine-readable error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    BUSINESS_RULE_ERROR = "BUSINESS_RULE_ERROR"
    NOT_FOUND = "NOT_FOUND"


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    def __init__(self, message: str) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
        """
        super().__init__(message)
        self.message = message


class ServiceError(DomainError):
    """Structured error raised by catalog services.

    Attributes:
        code: Error code.
        message: Human-readable error message.
        status_code: HTTP status code for the API response.
        details: Field-level details, each a ``{"field", "message"}`` dict.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        """Initialize service error.

        Args:
            code: Error code.
            message: Human-readable error message.
            status_code: HTTP status code.
            details: Optional list of field-level details.
        """
        super().__init__(message)
        self.code = code
        self.status_code = status_code
        self.details = details or []

    def to_dict(self) -> dict[str, Any]:
        """Convert to the ``error`` member of the response envelope.

        Returns:
            Dictionary representation.
        """
        return {
            "code": self.code.value,
            "message": self.message,
            "details": list(self.details),
        }


class ValidationError(ServiceError):
    """Raised when input is malformed or out of range."""

    def __init__(
        self,
        message: str,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(ErrorCode.VALIDATION_ERROR, message, 400, details)


class BusinessRuleError(ServiceError):
    """Raised when an operation would violate a catalog invariant."""

    def __init__(self, message: str) -> None:
        super().__init__(ErrorCode.BUSINESS_RULE_ERROR, message, 400)


class NotFoundError(ServiceError):
    """Raised when a referenced record does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(ErrorCode.NOT_FOUND, message, 404)


def details_from_pydantic(errors: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Flatten pydantic error dicts into field-level details.

    Location prefixes added by FastAPI (``body``, ``query``, ``path``) are
    dropped so the field reads as the client sent it.

    Args:
        errors: Output of ``pydantic.ValidationError.errors()``.

    Returns:
        List of ``{"field", "message"}`` dicts.
    """
    details = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in ("body", "query", "path"):
            loc = loc[1:]
        details.append(
            {
                "field": ".".join(loc) or None,
                "message": error.get("msg", "Invalid value"),
            }
        )
    return details
