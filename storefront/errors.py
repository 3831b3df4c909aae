"""
storefront/errors.py
Centralized HTTP error contract

CORE PRINCIPLES:
- All errors follow one envelope
- Errors are user-safe (no stack traces)
- Errors are machine-readable

ERROR RESPONSE STRUCTURE:
{
    "success": false,
    "error": "ErrorType",
    "message": "Human-readable description",
    "code": "UNIQUE_ERROR_CODE",
    "details": {} (optional)
}

HTTP STATUS CODE DISCIPLINE:
- 400: Invalid input / invalid state transition
- 401: Authentication missing or expired
- 403: Access forbidden (ownership / role gate)
- 404: Resource does not exist
- 409: Conflicts with current data (duplicate cart line, empty cart)
- 422: Validation error (Pydantic)
- 429: Rate limit exceeded
- 500: Internal only, never caused by user input
- 502: Checkout could not be completed
"""

from typing import Optional, Dict, Any
from fastapi import HTTPException, status
from fastapi.responses import JSONResponse


class ErrorCode:
    """Unique error codes for machine-readable error handling"""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_INPUT = "INVALID_INPUT"

    AUTH_REQUIRED = "AUTH_REQUIRED"
    AUTH_EXPIRED = "AUTH_EXPIRED"
    AUTH_INVALID = "AUTH_INVALID"

    FORBIDDEN = "FORBIDDEN"
    ADMIN_REQUIRED = "ADMIN_REQUIRED"
    OWNERSHIP_VIOLATION = "OWNERSHIP_VIOLATION"

    NOT_FOUND = "NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    COURSE_NOT_FOUND = "COURSE_NOT_FOUND"
    CART_ITEM_NOT_FOUND = "CART_ITEM_NOT_FOUND"
    ORDER_NOT_FOUND = "ORDER_NOT_FOUND"

    ALREADY_IN_CART = "ALREADY_IN_CART"
    EMAIL_TAKEN = "EMAIL_TAKEN"
    CART_EMPTY = "CART_EMPTY"
    CART_CHANGED = "CART_CHANGED"
    INVALID_STATE = "INVALID_STATE"

    CHECKOUT_FAILED = "CHECKOUT_FAILED"
    FEATURE_DISABLED = "FEATURE_DISABLED"

    RATE_LIMITED = "RATE_LIMITED"

    INTERNAL_ERROR = "INTERNAL_ERROR"


class APIError(Exception):
    """Base API exception with consistent structure"""

    def __init__(
        self,
        status_code: int,
        error: str,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.status_code = status_code
        self.error = error
        self.message = message
        self.code = code
        self.details = details
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        result = {
            "success": False,
            "error": self.error,
            "message": self.message,
            "code": self.code
        }
        if self.details:
            result["details"] = self.details
        return result

    def to_response(self) -> JSONResponse:
        """Convert to FastAPI JSONResponse"""
        return JSONResponse(status_code=self.status_code, content=self.to_dict())


class ForbiddenError(APIError):
    """403 Forbidden - Access denied"""
    def __init__(self, message: str, code: str = ErrorCode.FORBIDDEN, details: Optional[Dict] = None):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            error="Forbidden",
            message=message,
            code=code,
            details=details
        )


def raise_unauthorized(message: str = "Authentication required", code: str = ErrorCode.AUTH_REQUIRED):
    """Raise 401 Unauthorized"""
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail={"success": False, "error": "Unauthorized", "message": message, "code": code},
        headers={"WWW-Authenticate": "Bearer"},
    )


def validate_ownership(user_id: int, resource_user_id: int, resource_name: str = "resource"):
    """Validate that a resource belongs to the current user"""
    if user_id != resource_user_id:
        raise ForbiddenError(
            f"This {resource_name} does not belong to you",
            code=ErrorCode.OWNERSHIP_VIOLATION
        )


ERROR_MAPPING = {
    400: ("Bad Request", ErrorCode.INVALID_INPUT),
    401: ("Unauthorized", ErrorCode.AUTH_REQUIRED),
    403: ("Forbidden", ErrorCode.FORBIDDEN),
    404: ("Not Found", ErrorCode.NOT_FOUND),
    405: ("Method Not Allowed", ErrorCode.INVALID_INPUT),
    409: ("Conflict", ErrorCode.INVALID_STATE),
    422: ("Validation Error", ErrorCode.VALIDATION_ERROR),
    429: ("Too Many Requests", ErrorCode.RATE_LIMITED),
    500: ("Internal Error", ErrorCode.INTERNAL_ERROR),
}


def get_error_summary() -> Dict[str, Any]:
    """Return summary of error handling system for documentation"""
    return {
        "version": "1.0",
        "service": "storefront-error-handler",
        "response_structure": {
            "success": "boolean (always false for errors)",
            "error": "string (error type)",
            "message": "string (human-readable)",
            "code": "string (machine-readable)",
            "details": "object (optional)"
        },
        "status_codes": {
            str(code): label for code, (label, _) in sorted(ERROR_MAPPING.items())
        },
        "error_codes": [
            attr for attr in dir(ErrorCode)
            if not attr.startswith('_')
        ]
    }
