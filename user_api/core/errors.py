"""Error Hierarchy: typed, categorized exceptions for User API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the status envelope {statusCode, message, data?}
    - statusCode in the envelope always equals http_status (transport status)
    - Storage failures are never classified by kind: one StorageError for all driver errors

Design Decisions:
    - Single hierarchy with UserApiError base: FastAPI global handler catches all
    - StorageError raised by infrastructure, StorageUnavailableError raised by routes:
      the route owns the user-facing message, the store owns the raw cause
"""

from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    DATABASE = "database"
    INTERNAL = "internal"


class UserApiError(Exception):
    """Base exception for all User API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        data: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.data = data

    def to_response(self) -> dict:
        """Convert to the status envelope. `data` omitted when absent."""
        response: dict[str, Any] = {
            "statusCode": self.http_status,
            "message": self.message,
        }
        if self.data is not None:
            response["data"] = self.data
        return response


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(UserApiError):
    """Storage backend operation failed (any driver error)."""
    def __init__(self, operation: str, original: Exception):
        super().__init__(
            str(original) or original.__class__.__name__,
            "STORAGE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 503,
        )
        self.operation = operation
        self.original = original
        self.data = self.to_payload()

    def to_payload(self) -> dict:
        """Raw error payload forwarded to the caller."""
        return {
            "name": self.original.__class__.__name__,
            "message": str(self.original),
        }


class StorageUnavailableError(UserApiError):
    """Route-level storage failure: route-specific message, raw payload as data."""
    def __init__(self, message: str, data: Any = None):
        super().__init__(
            message, "STORAGE_UNAVAILABLE", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 503, data,
        )

    @classmethod
    def from_storage_error(
        cls, message: str, exc: StorageError,
    ) -> "StorageUnavailableError":
        return cls(message, exc.to_payload())
