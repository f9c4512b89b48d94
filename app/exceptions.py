"""
Products API: Custom Exception Hierarchy
========================================

What:  Application-specific exceptions for the product request lifecycle.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return JSON responses with the matching HTTP status code.
Who:   Raised by the product service; caught by the global handlers.

Exception Hierarchy:
    ProductsAPIError (base)      → 500 Internal Server Error
    ├── ValidationError          → 400 Bad Request, body = field-error map
    ├── NotFoundError            → 404 Not Found, empty body
    └── DatabaseError            → 500 Internal Server Error, body = {message}
"""

from typing import Any, Dict, Optional


class ProductsAPIError(Exception):
    """
    Base exception for all Products API errors.

    Attributes:
        message:  Human-readable description returned to the client
        context:  Additional debug info (logged, not returned)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(ProductsAPIError):
    """
    Raised when a candidate product fails field validation.

    HTTP:    400 Bad Request

    The response body is the field-error map itself:
        {
            "brand": "The brand is required",
            "price": "The price is not valid"
        }
    """

    def __init__(
        self,
        errors: Dict[str, str],
        message: str = "Validation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["fields"] = sorted(errors)
        super().__init__(message=message, context=ctx)
        self.errors = dict(errors)


class NotFoundError(ProductsAPIError):
    """
    Raised when a requested product does not exist.

    When:    GET or PUT /api/products/{id} with an id that has no row.
    HTTP:    404 Not Found (no body)
    """

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


class DatabaseError(ProductsAPIError):
    """
    Raised when a statement against the pool fails.

    When:    Connection lost, timeout, constraint violation, malformed query.
    HTTP:    500 Internal Server Error

    The message is the underlying driver error text and is returned to the
    client as `{"message": ...}`. The failing operation and exception type
    travel in `context` and are only logged.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
