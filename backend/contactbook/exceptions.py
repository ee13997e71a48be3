"""
ContactBook Backend: Exception Hierarchy
========================================

What:  Application-specific exceptions, each mapped to one HTTP status code.
How:   Each exception carries a client-safe message and an optional context
       dict. Global handlers in main.py turn them into JSON error responses;
       the context is logged but only returned for validation errors.
Who:   Raised by the service layer; caught by the handlers in main.py.

Exception Hierarchy:
    ContactBookError (base)
    ├── ValidationError  → 400 Bad Request
    ├── NotFoundError    → 404 Not Found
    └── DatabaseError    → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class ContactBookError(Exception):
    """
    Base exception for all ContactBook application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, not returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(ContactBookError):
    """
    Raised when client input fails validation.

    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Invalid contact id 'abc'",
            "details": {"field": "contact_id"}
        }
    """

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


class NotFoundError(ContactBookError):
    """
    Raised when a requested resource does not exist.

    When:    GET /api/contacts/{id} for an id with no row.
    HTTP:    404 Not Found

    SQLAlchemy returns None for a missing row; the service layer converts
    that None into this exception.
    """

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


class DatabaseError(ContactBookError):
    """
    Raised when a database operation fails.

    When:    Connection lost, constraint violation, statement deadline exceeded.
    HTTP:    500 Internal Server Error

    The client always gets a generic message. Driver details (SQL text,
    constraint names) stay in the server log.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
