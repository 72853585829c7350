"""Error Hierarchy — typed, categorized exceptions for all /diary/ failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (4xx) are caller mistakes; infrastructure errors (5xx) are critical
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with DiaryError base: FastAPI global handler catches all
    - GeneratorAPIError never reaches a handler: the transformer absorbs it
"""

from dataclasses import dataclass, field
from enum import Enum
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
    AUTHORIZATION = "authorization"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entry_id: int | None = None


class DiaryError(Exception):
    """Base exception for all /diary/ errors."""

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
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "entry_id": self.context.entry_id,
                },
            }
        }


# ─── Domain Errors (4xx) ────────────────────────────────────────

class ContentRequiredError(DiaryError):
    """Submitted entry has no content after trimming."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Content is required",
            "CONTENT_REQUIRED", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class AdminAuthorizationError(DiaryError):
    """Admin operation attempted without a valid admin token."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Admin token missing or invalid",
            "ADMIN_TOKEN_INVALID", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )


# ─── Infrastructure Errors (5xx) ────────────────────────────────

class DatabaseError(DiaryError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class GeneratorAPIError(DiaryError):
    """Text-generation service call failed or returned an unusable reply."""
    def __init__(
        self,
        message: str,
        api_error_type: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Generator API error ({api_error_type}): {message}",
            "GENERATOR_API_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.WARNING, context,
        )
        self.api_error_type = api_error_type
