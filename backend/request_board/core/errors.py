"""Error Hierarchy — typed, categorized exceptions for all Request Board failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with RequestBoardError base: FastAPI global handler catches all (ADR: uniform error shape)
    - A second active request is a 400 with CONFLICT category: clients already treat it as bad input
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
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    AUTHENTICATION = "authentication"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    request_id: str | None = None
    user_id: str | None = None
    debug_info: dict[str, Any] | None = None


class RequestBoardError(Exception):
    """Base exception for all Request Board errors."""

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
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class BadRequestError(RequestBoardError):
    """Caller input or action is invalid."""
    def __init__(
        self,
        message: str,
        field: str | None = None,
        context: ErrorContext | None = None,
        code: str = "BAD_REQUEST",
        category: ErrorCategory = ErrorCategory.VALIDATION,
    ):
        super().__init__(
            message, code, category, ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class ActiveRequestExistsError(BadRequestError):
    """Creator already owns a request on the board."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "You already have an active request. Delete it to post another.",
            context=context,
            code="ACTIVE_REQUEST_EXISTS",
            category=ErrorCategory.CONFLICT,
        )


class ResourceNotFoundError(RequestBoardError):
    """Requested resource does not exist (or is not visible to the caller)."""
    def __init__(
        self, message: str = "Request not found",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


class AuthenticationError(RequestBoardError):
    """Bearer token missing or not resolvable to a user."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "UNAUTHENTICATED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(RequestBoardError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
