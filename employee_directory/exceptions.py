# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Domain exceptions for the employee directory.

Services raise these instead of HTTPException so the HTTP boundary can map
them to status codes in one place (the exception handlers in ``main.py``).
"""

from typing import Any, Dict, Optional


class DirectoryError(Exception):
    """Base exception for all employee directory errors."""

    status_code: int = 500

    def __init__(self, message: str = "Internal server error",
                 details: Optional[Dict[str, Any]] = None,
                 status_code: Optional[int] = None) -> None:
        self.message = message
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message}


class ValidationError(DirectoryError):
    """Missing or malformed input. Carries one message per offending field."""

    status_code = 400

    def __init__(self, fields: Dict[str, str], message: str = "Validation failed") -> None:
        super().__init__(message, details={"fields": dict(fields)})
        self.fields = dict(fields)

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message, "fields": self.fields}


class ConflictError(DirectoryError):
    status_code = 400

    def __init__(self, message: str = "An employee with this email already exists") -> None:
        super().__init__(message)


class NotFoundError(DirectoryError):
    status_code = 404

    def __init__(self, employee_id: Optional[str] = None) -> None:
        details = {"employee_id": str(employee_id)} if employee_id else {}
        super().__init__("Employee not found", details)


class ServiceUnavailableError(DirectoryError):
    """The notification webhook could not be reached at all."""

    status_code = 503

    def __init__(self, message: str = "Email service unavailable. "
                 "Please ensure the workflow webhook is reachable.") -> None:
        super().__init__(message)


class UpstreamError(DirectoryError):
    """The notification webhook answered with an error status; it is passed through."""

    def __init__(self, status_code: int, reason: str = "") -> None:
        message = f"Webhook error: {reason}" if reason else "Webhook error"
        super().__init__(message, details={"upstream_status": status_code},
                         status_code=status_code)


class InternalError(DirectoryError):
    status_code = 500


class StorageError(InternalError):
    """Raised by storage backends in place of their native driver/IO errors."""

    def to_body(self) -> Dict[str, Any]:
        return {"error": "Internal server error"}
