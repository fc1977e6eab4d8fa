"""
PeakPerformance Backend — Custom Exception Hierarchy
======================================================

What:  Application-specific exceptions for the three outcomes a resource
       handler can fail with.
Why:   Services raise; global handlers (registered in main.py) turn each type
       into the right HTTP status and an `{"error": message}` body.
How:   Each exception carries a client-safe message and an optional context
       dict that is logged but never returned.

Exception Hierarchy:
    PeakPerformanceError (base)
    ├── ValidationError   → 400 Bad Request (required field missing on create)
    ├── NotFoundError     → 404 Not Found   (no row matched the identity)
    └── DatabaseError     → 500 Internal Server Error (any persistence failure)

The messages are the per-resource strings from the message catalogue, so two
resources raising the same exception type still answer with their own text.
"""

from typing import Any, Dict, Optional


class PeakPerformanceError(Exception):
    """
    Base exception for all PeakPerformance application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(PeakPerformanceError):
    """
    Raised when a create payload lacks a required field.

    "Lacks" follows the truthiness rule: a missing key, null, empty string,
    zero and false all count as absent.

    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Validation failed",
        fields: Optional[list] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if fields:
            ctx["fields"] = fields
        super().__init__(message=message, context=ctx)
        self.fields = fields or []


class NotFoundError(PeakPerformanceError):
    """
    Raised when no row matches the requested identity.

    HTTP:    404 Not Found
    """

    def __init__(
        self,
        message: str = "The requested resource was not found",
        resource: Optional[str] = None,
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if resource:
            ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(PeakPerformanceError):
    """
    Raised when a database operation fails.

    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is the resource's fixed generic
        string. The original exception type and text live in `context` and
        are only written to the server log. Connection drops and constraint
        violations are reported identically.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
