"""
Movie Library API - Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the three request failure kinds.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the right status code.
Who:   Raised by route handlers and dependencies; never by the stores.

Exception Hierarchy:
    MovieLibraryError (base)
    ├── MalformedInputError   → 400 Bad Request (unparseable id, missing param, bad body)
    ├── ValidationError       → 400 Bad Request (rating out of range, missing parent movie)
    └── NotFoundError         → 404 Not Found
"""

from typing import Any, Dict, Optional


class MovieLibraryError(Exception):
    """
    Base exception for all Movie Library errors.

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


class MalformedInputError(MovieLibraryError):
    """
    Raised when the request itself cannot be interpreted.

    When:    Path id is not an integer, a required query parameter is missing
             or empty, or the JSON body does not match the request schema.
    HTTP:    400 Bad Request

    FastAPI would answer body problems with 422; main.py converts its
    RequestValidationError into this exception's response shape instead.
    """

    status_code = 400
    error_code = "malformed_input"

    def __init__(
        self,
        message: str = "Malformed request",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class ValidationError(MovieLibraryError):
    """
    Raised when well-formed input breaks a business rule.

    When:    Review rating outside 1..5, or a review posted for a movie
             that does not exist.
    HTTP:    400 Bad Request
    """

    status_code = 400
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


class NotFoundError(MovieLibraryError):
    """
    Raised when a well-formed id matches no record.

    HTTP:    404 Not Found

    The stores return None/False for missing records; routes convert that
    into NotFoundError so the stores stay free of HTTP concerns.
    """

    status_code = 404
    error_code = "not_found"

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
