"""Error taxonomy shared by the storage, session and request layers.

Every error carries the HTTP status the boundary answers with and renders
itself into the common response envelope.
"""
from typing import Any, Dict, Optional


class QadsError(Exception):
    """Base exception for all application errors."""

    http_status: int = 500
    headers: Optional[Dict[str, str]] = None

    def __init__(self, message: str, http_status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if http_status is not None:
            self.http_status = http_status

    def to_response(self) -> Dict[str, Any]:
        """Convert to the standard response envelope."""
        return {"success": False, "message": self.message, "data": None}


class StorageError(QadsError):
    """Any I/O or driver failure inside the store."""

    http_status = 500


class ConstraintViolation(QadsError):
    """A unique key (e.g. the login name) is already taken."""

    http_status = 409


class NotFoundOrNotOwned(QadsError):
    """A scoped operation touched no rows.

    Raised both when the row does not exist and when it belongs to another
    tenant; callers cannot tell the two apart.
    """

    http_status = 404


class Unauthenticated(QadsError):
    """The bearer token is missing or does not resolve to a tenant."""

    http_status = 401
    headers = {"WWW-Authenticate": "Bearer"}

    def __init__(self, message: str = "Invalid session"):
        super().__init__(message)


class InvalidInput(QadsError):
    http_status = 400
