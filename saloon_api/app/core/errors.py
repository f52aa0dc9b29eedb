"""
Domain error hierarchy for the saloon service.

Every expected failure of a saloon operation is raised as a subclass
of ``SaloonError``.  Each class carries a stable ``code`` and the HTTP
status the API layer answers with, and knows how to render itself as
the error half of the response envelope.  ``SaloonError`` derives from
``ValueError`` so callers that only care about "bad request of some
kind" can keep catching ``ValueError``.
"""

from typing import Any, Dict, Optional


class SaloonError(ValueError):
    """Base class for all expected saloon service failures."""

    code = "SALOON_ERROR"
    http_status = 400

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_response(self) -> Dict[str, Any]:
        """Convert to the error response envelope."""
        return {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
            },
        }


class InvalidArgumentError(SaloonError):
    """Raised for missing or malformed input."""

    code = "INVALID_ARGUMENT"
    http_status = 400


class NotFoundError(SaloonError):
    """Raised when an id does not resolve to a saloon."""

    code = "NOT_FOUND"
    http_status = 404


class EmptyCollectionError(NotFoundError):
    """Raised when listing saloons while none exist."""

    code = "EMPTY_COLLECTION"


class PermissionDeniedError(SaloonError):
    """Raised when the caller is not allowed to modify a saloon."""

    code = "PERMISSION_DENIED"
    http_status = 403
