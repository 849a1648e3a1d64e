"""Error Hierarchy: typed exceptions for every table API failure mode.

Invariants:
    - Every error has a name (the `error` field of the response body), a message,
      a category (ErrorCategory) and the HTTP status it maps to
    - to_response() produces the flat REST envelope {error, message, ...details}
    - Stores never raise these; they return None/False and the routes raise

Design Decisions:
    - Single hierarchy with TableError base: one FastAPI handler catches all
    - FieldError as dataclass: validation details stay framework-agnostic
"""

from dataclasses import dataclass, asdict
from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for logging and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    HTTP = "http"
    INTERNAL = "internal"


@dataclass(frozen=True)
class FieldError:
    """One failed field check: dotted field path, message, error type."""
    field: str
    message: str
    type: str


class TableError(Exception):
    """Base exception for all table API errors."""

    def __init__(
        self,
        message: str,
        name: str,
        category: ErrorCategory,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.name = name
        self.category = category
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the standard REST error body."""
        return {"error": self.name, "message": self.message}


class TableValidationError(TableError):
    """Request body or parameters failed the declared shape."""

    def __init__(self, details: list[FieldError]):
        super().__init__(
            _format_validation_message(details), "Validation Error",
            ErrorCategory.VALIDATION, 400,
        )
        self.details = details

    def to_response(self) -> dict:
        body = super().to_response()
        body["details"] = [asdict(d) for d in self.details]
        return body


class ResourceNotFoundError(TableError):
    """Requested row or column does not exist."""

    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "Not Found", ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


def _format_validation_message(details: list[FieldError]) -> str:
    if not details:
        return "Validation error"
    parts = [
        f'{d.message} at "{d.field}"' if d.field else d.message
        for d in details
    ]
    return "Validation error: " + "; ".join(parts)
