"""Error Hierarchy — typed, categorized exceptions for all ResponseRift failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Request errors (400/404) are recoverable; fixture errors (500) are critical
    - to_response() produces the public envelope: "error" (str) for 404/500,
      "errors" (list[str]) for every 400
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ResponseRiftError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    REFERENTIAL = "referential"
    RESOURCE_NOT_FOUND = "resource_not_found"
    MALFORMED_BODY = "malformed_body"
    FIXTURE = "fixture"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    record_id: Any = None
    debug_info: dict[str, Any] | None = None


class ResponseRiftError(Exception):
    """Base exception for all ResponseRift errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the public REST error body."""
        return {"error": self.message}


# ─── Request Errors (400/404) ───────────────────────────────────

class ResourceNotFoundError(ResponseRiftError):
    """Path id does not resolve in the target collection."""
    def __init__(
        self, label: str, record_id: Any = None, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.record_id = record_id
        super().__init__(
            f"{label} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.label = label


class PayloadValidationError(ResponseRiftError):
    """Body is missing fields, mistyped, or out of range."""
    def __init__(self, errors: list[str], context: ErrorContext | None = None):
        super().__init__(
            "; ".join(errors) or "Invalid payload",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.errors = list(errors)

    def to_response(self) -> dict:
        return {"errors": self.errors}


class ReferentialViolationError(PayloadValidationError):
    """A foreign-key field points at a record that does not exist."""
    def __init__(self, errors: list[str], context: ErrorContext | None = None):
        super().__init__(errors, context)
        self.code = "REFERENTIAL_VIOLATION"
        self.category = ErrorCategory.REFERENTIAL


class MalformedBodyError(PayloadValidationError):
    """Body is empty or not parseable JSON."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(["Invalid JSON payload"], context)
        self.code = "MALFORMED_BODY"
        self.category = ErrorCategory.MALFORMED_BODY


# ─── Startup Errors (500-level) ─────────────────────────────────

class FixtureLoadError(ResponseRiftError):
    """A seed fixture exists but cannot be read as a JSON array."""
    def __init__(self, message: str, path: str, context: ErrorContext | None = None):
        super().__init__(
            f"Fixture {path} could not be loaded: {message}",
            "FIXTURE_LOAD_ERROR", ErrorCategory.FIXTURE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.path = path
