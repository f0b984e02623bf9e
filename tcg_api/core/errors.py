"""Error Hierarchy — storage exceptions and HTTP-facing API errors.

Invariants:
    - The store raises only StorageError subclasses; nothing else escapes it
    - Every TcgApiError has a code (str), category, severity and http_status
    - to_response() is always {"error": code, "message": message}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Two hierarchies: StorageError is what the store knows about,
      TcgApiError is what a client sees. The service layer translates one
      into the other, so a raw store error never reaches a response.
"""

from enum import Enum
from uuid import UUID


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    ROUTING = "routing"
    INTERNAL = "internal"


# ─── Storage Errors ─────────────────────────────────────────────

class StorageError(Exception):
    """Base exception for in-memory store failures."""

    def __init__(self, message: str, kind: str, record_id: UUID | None):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.record_id = record_id


class RecordNotFoundError(StorageError):
    """No record with this identifier exists for the resource kind."""
    def __init__(self, kind: str, record_id: UUID):
        super().__init__(f"{kind} '{record_id}' not found", kind, record_id)


class RecordAlreadyExistsError(StorageError):
    """A record with this identifier already exists for the resource kind."""
    def __init__(self, kind: str, record_id: UUID):
        super().__init__(f"{kind} '{record_id}' already exists", kind, record_id)


# ─── API Errors ─────────────────────────────────────────────────

class TcgApiError(Exception):
    """Base exception for all errors rendered as an HTTP response."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.code, "message": self.message}


class InvalidIdError(TcgApiError):
    """Path segment is not a canonical UUID."""
    def __init__(self, label: str):
        super().__init__(
            f"Invalid {label} ID format", "invalid_id",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, 400,
        )


class InvalidJsonError(TcgApiError):
    """Request body could not be decoded into the record shape."""
    def __init__(self):
        super().__init__(
            "Invalid JSON in request body", "invalid_json",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, 400,
        )


class RecordIdRequiredError(TcgApiError):
    """Item operation attempted on the collection path."""
    def __init__(self, label: str, operation: str):
        super().__init__(
            f"{label.capitalize()} ID required for {operation}", "id_required",
            ErrorCategory.ROUTING, ErrorSeverity.WARNING, 400,
        )


class ResourceNotFoundError(TcgApiError):
    """Requested resource does not exist."""
    def __init__(self, message: str = "Resource not found"):
        super().__init__(
            message, "not_found",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.INFO, 404,
        )


class MethodNotAllowedError(TcgApiError):
    """HTTP method is not supported on this path."""
    def __init__(self, message: str = "Method not allowed"):
        super().__init__(
            message, "method_not_allowed",
            ErrorCategory.ROUTING, ErrorSeverity.WARNING, 405,
        )


class InternalError(TcgApiError):
    """Operation failed; details are logged, never returned."""
    def __init__(self, message: str = "An unexpected error occurred"):
        super().__init__(
            message, "internal_error",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL, 500,
        )
