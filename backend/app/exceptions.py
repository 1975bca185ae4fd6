"""
Notes API Backend: Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for the failure modes of the notes API.
How:   Each exception carries a human-readable message (returned to the client
       in the `message` field of the error envelope) and an optional context
       dict (logged only). Global handlers registered in `app.main` map each
       class to an HTTP status code.
Who:   Raised by the Note Store and the route layer; caught by global handlers.

Exception Hierarchy:
    NotesAPIError (base)
    ├── ValidationError        → 400 Bad Request
    ├── MalformedRequestError  → 400 Bad Request
    └── NotFoundError          → 404 Not Found
"""

from typing import Any, Dict, Optional


class NotesAPIError(Exception):
    """
    Base exception for all notes API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotesAPIError):
    """
    Raised when a note cannot be created from the supplied fields.

    When:    `title` or `content` is missing, not a string, or blank after trimming.
    HTTP:    400 Bad Request

    The store raises this before touching its collection, so a rejected
    create never leaves a partial note behind.
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Title and content are required",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class MalformedRequestError(NotesAPIError):
    """Raised when the request body cannot be decoded (e.g. broken JSON). HTTP 400."""

    status_code = 400

    def __init__(
        self,
        message: str = "Malformed request body",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(NotesAPIError):
    """
    Raised when a requested resource does not exist.

    When:    GET /api/notes/{id} with an id that no note carries.
    HTTP:    404 Not Found

    The store itself reports a missing id as `None`; the route layer converts
    that into this exception so the envelope handler can produce the 404.
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "Note",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
