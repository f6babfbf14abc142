"""Error Hierarchy: typed, categorized exceptions for all tracker failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; store errors (500-level) are critical
    - to_response() produces the REST envelope {"error": message, "code": code}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ExerciseTrackerError base: one FastAPI handler maps all
      of them, so no route builds its own error JSON
    - `error` is the plain message string: existing clients read `body.error`
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from exercise_tracker.core.domain_types import ValidationFailure


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"


@dataclass
class ErrorContext:
    """Context for error observability; never serialized to clients."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None


class ExerciseTrackerError(Exception):
    """Base exception for all tracker errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.details = details

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        body: dict[str, Any] = {"error": self.message, "code": self.code}
        if self.details:
            body["details"] = self.details
        return body


# ─── Domain Errors (400-level) ──────────────────────────────────

class ExerciseValidationError(ExerciseTrackerError):
    """Request payload or query string rejected."""
    def __init__(
        self, message: str, code: str = "VALIDATION_ERROR",
        field: str | None = None, context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field

    @classmethod
    def from_failure(
        cls, failure: ValidationFailure, context: ErrorContext | None = None,
    ) -> "ExerciseValidationError":
        return cls(failure.message, failure.code.value, failure.field, context)


class DuplicateUsernameError(ExerciseTrackerError):
    """Username already taken."""
    def __init__(self, username: str, context: ErrorContext | None = None):
        super().__init__(
            "Username already exists", "DUPLICATE_USERNAME",
            ErrorCategory.CONFLICT, ErrorSeverity.WARNING, context, 400,
        )
        self.username = username


class UserNotFoundError(ExerciseTrackerError):
    """User id does not resolve (unknown or malformed)."""
    def __init__(self, user_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_id = user_id
        super().__init__(
            "User not found", "USER_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING, ctx, 404,
        )
        self.user_id = user_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreError(ExerciseTrackerError):
    """Durable store operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            message, "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
            details={"operation": operation},
        )
        self.operation = operation
