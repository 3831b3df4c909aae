"""
storefront/exceptions.py
Domain exceptions raised by the service layer.

Services never build HTTP responses. Each exception knows its status
code and error code; the app-level handler renders it through the
standard error envelope in storefront.errors.
"""
from typing import Any, Dict, Optional

from storefront.errors import APIError, ErrorCode


class StorefrontException(Exception):
    """Base exception for the storefront"""
    status_code: int = 500
    error: str = "Internal Error"
    code: str = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def to_api_error(self) -> APIError:
        return APIError(
            status_code=self.status_code,
            error=self.error,
            message=self.message,
            code=self.code,
            details=self.details,
        )


class NotFoundError(StorefrontException):
    """
    Raised when requested resource doesn't exist.
    """
    status_code = 404
    error = "Not Found"
    code = ErrorCode.NOT_FOUND

    def __init__(self, resource: str, identifier: Any = None, code: Optional[str] = None):
        message = f"{resource} not found"
        if identifier is not None:
            message = f"{resource} with id '{identifier}' not found"
        if code:
            self.code = code
        super().__init__(message)


class AlreadyInCartError(StorefrontException):
    """
    Raised when the (user, course) cart uniqueness constraint rejects an insert.

    Informational rather than destructive: the desired state already holds.
    """
    status_code = 409
    error = "Already in Cart"
    code = ErrorCode.ALREADY_IN_CART

    def __init__(self, course_id: int):
        super().__init__(
            "This course is already in your cart",
            details={"course_id": course_id, "severity": "info"},
        )


class EmptyCartError(StorefrontException):
    """
    Raised when checkout is attempted with nothing in the cart.
    Clients should send the user back to the cart view.
    """
    status_code = 409
    error = "Cart Empty"
    code = ErrorCode.CART_EMPTY

    def __init__(self):
        super().__init__(
            "Your cart is empty",
            details={"redirect": "/cart", "severity": "info"},
        )


class CartChangedError(StorefrontException):
    """
    Raised when the cart lines being paid for were already taken by a
    concurrent checkout. Nothing was written by this attempt.
    """
    status_code = 409
    error = "Cart Changed"
    code = ErrorCode.CART_CHANGED

    def __init__(self):
        super().__init__(
            "Your cart changed during checkout. Please review it and try again.",
            details={"redirect": "/cart", "severity": "info"},
        )


class CheckoutFailedError(StorefrontException):
    """
    Raised when the order transaction could not be committed.
    Nothing was written; the cart is intact.
    """
    status_code = 502
    error = "Payment Failed"
    code = ErrorCode.CHECKOUT_FAILED

    def __init__(self, message: str = "Something went wrong. Please try again."):
        super().__init__(message, details={"severity": "error"})


class InvalidOrderStateError(StorefrontException):
    status_code = 400
    error = "Invalid State"
    code = ErrorCode.INVALID_STATE

    def __init__(self, order_id: int, current: str, expected: str):
        super().__init__(
            f"Order {order_id} is '{current}', expected '{expected}'",
            details={"order_id": order_id, "current_status": current},
        )


class EmailAlreadyRegisteredError(StorefrontException):
    status_code = 400
    error = "Bad Request"
    code = ErrorCode.EMAIL_TAKEN

    def __init__(self):
        super().__init__("Email already registered", details={"field": "email"})
