"""
Notes API: Custom Exception Hierarchy
=======================================

What:  Application-specific exceptions for the error scenarios of the service.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the matching HTTP status.
Who:   Raised by the store, the service layer and middleware.

Exception Hierarchy:
    NotesError (base)             → 500 Internal Server Error
    ├── ValidationError           → 422 Unprocessable Entity
    ├── NotFoundError             → 404 Not Found
    └── PayloadTooLargeError      → 413 Payload Too Large

Malformed JSON and wrong body shapes are rejected by FastAPI itself
(RequestValidationError) before any of these can be raised.
"""

from typing import Any, Dict, Optional


class NotesError(Exception):
    """
    Base exception for all Notes API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info, returned as "details"
    """

    status_code = 500
    error_code = "server_error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotesError):
    """
    Raised when a request is well-formed JSON but cannot be acted on.

    When:    PATCH /notes/{id} with neither title nor content.
    HTTP:    422 Unprocessable Entity

    Raised before the store is consulted, so the response is the same
    whether or not the id exists.
    """

    status_code = 422
    error_code = "validation_error"

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(NotesError):
    """
    Raised when a requested note does not exist.

    When:    PATCH or DELETE /notes/{id} for an id that was never created
             or has already been deleted.
    HTTP:    404 Not Found
    """

    status_code = 404
    error_code = "not_found"

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class PayloadTooLargeError(NotesError):
    """
    Raised when a request body exceeds the configured size cap.

    When:    Content-Length (or the buffered body) is larger than
             settings.max_body_bytes. Checked before JSON parsing.
    HTTP:    413 Payload Too Large
    """

    status_code = 413
    error_code = "payload_too_large"

    def __init__(
        self,
        limit: int,
        size: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"Request body exceeds the {limit} byte limit"
        ctx = context or {}
        ctx["limit"] = limit
        if size is not None:
            ctx["size"] = size
        super().__init__(message=message, context=ctx)
        self.limit = limit
        self.size = size
