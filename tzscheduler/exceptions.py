"""
Error taxonomy shared by every schedule operation.

Each error carries the wire ``code`` clients switch on and the HTTP status
the API layer renders it with. ``NotFoundError`` deliberately covers both
"does not exist" and "belongs to someone else".
"""

from typing import Any, Dict, Optional


class SchedulerError(Exception):
    """Base exception for all schedule-service errors."""

    code = "INTERNAL_SERVER_ERROR"
    status_code = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        error = {"code": self.code, "message": self.message}
        if self.details:
            error["details"] = self.details
        return error


class UnauthorizedError(SchedulerError):
    """Raised when no caller identity could be resolved."""

    code = "UNAUTHORIZED"
    status_code = 401

    def __init__(self, message: str = "You must be signed in to perform this action."):
        super().__init__(message)


class NotFoundError(SchedulerError):
    """Raised when a schedule or child is absent or not owned by the caller."""

    code = "NOT_FOUND"
    status_code = 404


class ValidationError(SchedulerError):
    """Raised when input violates a shape, range or ordering precondition."""

    code = "BAD_REQUEST"
    status_code = 400

    def __init__(self, message: str, issues: Optional[list] = None):
        super().__init__(message, {"issues": issues} if issues else None)
        self.issues = issues or []
