"""
Custom Exceptions for the Hostel Leave Management Backend

This module defines the exception classes raised by services and
dependencies, and the FastAPI handlers that turn them into JSON
error responses.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from hostel_leave.config.logging import get_logger

logger = get_logger(__name__)


class ErrorCode(str, Enum):
    """Standard error codes for the application"""
    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    OPERATION_FAILED = "OPERATION_FAILED"
    INVALID_STATE = "INVALID_STATE"

    # Authentication & Authorization
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    AUTHORIZATION_FAILED = "AUTHORIZATION_FAILED"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    TOKEN_INVALID = "TOKEN_INVALID"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Database errors
    DATABASE_ERROR = "DATABASE_ERROR"
    DUPLICATE_ENTRY = "DUPLICATE_ENTRY"

    # Resource specific errors
    STUDENT_NOT_FOUND = "STUDENT_NOT_FOUND"
    LEAVE_NOT_FOUND = "LEAVE_NOT_FOUND"

    # Document errors
    DOCUMENT_GENERATION_FAILED = "DOCUMENT_GENERATION_FAILED"


class BaseAppException(Exception):
    """
    Base exception class for all application exceptions.

    Provides consistent error handling across the application with
    structured error information.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to the error response body"""
        return {
            "success": False,
            "message": self.message,
            "error_code": self.error_code.value,
            "details": self.details or None,
        }

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', error_code='{self.error_code.value}')"


# ========================================
# General Application Exceptions
# ========================================

class OperationError(BaseAppException):
    """Exception raised when an operation fails"""

    def __init__(
        self,
        message: str = "Operation failed",
        error_code: ErrorCode = ErrorCode.OPERATION_FAILED,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message, error_code, details, status_code)


class ValidationError(BaseAppException):
    """Exception raised when request data is missing or malformed"""

    def __init__(
        self,
        message: str = "Validation failed",
        field_errors: Optional[Dict[str, List[str]]] = None,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        status_code: int = 400
    ):
        details = {"field_errors": field_errors} if field_errors else {}
        super().__init__(message, error_code, details, status_code)


class InvalidStateError(BaseAppException):
    """Exception raised when an entity is not in the state an operation requires"""

    def __init__(
        self,
        message: str = "Invalid state for this operation",
        current_state: Optional[str] = None,
        required_state: Optional[str] = None
    ):
        details = {}
        if current_state is not None:
            details["current_state"] = current_state
        if required_state is not None:
            details["required_state"] = required_state
        super().__init__(message, ErrorCode.INVALID_STATE, details, 400)


class ResourceNotFoundError(BaseAppException):
    """Exception raised when a requested resource is not found"""

    def __init__(
        self,
        resource_type: str = "Resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None
    ):
        if not message:
            message = f"{resource_type} not found"
        details = {
            "resource_type": resource_type,
            "resource_id": resource_id
        }
        super().__init__(message, ErrorCode.RESOURCE_NOT_FOUND, details, 404)


class StudentNotFoundError(ResourceNotFoundError):
    """Exception raised when a student is not found"""

    def __init__(self, student_id: Optional[Any] = None, message: Optional[str] = None):
        super().__init__("Student", str(student_id) if student_id is not None else None, message)
        self.error_code = ErrorCode.STUDENT_NOT_FOUND


class LeaveNotFoundError(ResourceNotFoundError):
    """Exception raised when a leave request is not found"""

    def __init__(self, leave_id: Optional[Any] = None, message: Optional[str] = None):
        super().__init__("Leave", str(leave_id) if leave_id is not None else None, message)
        self.error_code = ErrorCode.LEAVE_NOT_FOUND


# ========================================
# Authentication & Authorization Exceptions
# ========================================

class AuthenticationError(BaseAppException):
    """Exception raised when authentication fails"""

    def __init__(
        self,
        message: str = "Authentication failed",
        error_code: ErrorCode = ErrorCode.AUTHENTICATION_FAILED,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 401
    ):
        super().__init__(message, error_code, details, status_code)


class AuthorizationError(BaseAppException):
    """Exception raised when authorization fails"""

    def __init__(
        self,
        message: str = "Access denied",
        error_code: ErrorCode = ErrorCode.AUTHORIZATION_FAILED
    ):
        super().__init__(message, error_code, None, 403)


class TokenError(AuthenticationError):
    """Exception raised for a bearer token that was presented but cannot be used"""

    def __init__(
        self,
        message: str = "Invalid token",
        error_code: ErrorCode = ErrorCode.TOKEN_INVALID,
        token_type: str = "access"
    ):
        super().__init__(message, error_code, {"token_type": token_type}, 403)


class TokenExpiredError(TokenError):
    """Exception raised when a token has expired"""

    def __init__(self, message: str = "Token has expired", token_type: str = "access"):
        super().__init__(message, ErrorCode.TOKEN_EXPIRED, token_type)


class InvalidTokenError(TokenError):
    """Exception raised when token is invalid"""

    def __init__(
        self,
        message: str = "Invalid token",
        token_type: str = "access",
        reason: Optional[str] = None
    ):
        super().__init__(message, ErrorCode.TOKEN_INVALID, token_type)
        if reason:
            self.details["reason"] = reason


# ========================================
# Database Exceptions
# ========================================

class DatabaseError(BaseAppException):
    """Exception raised when database operations fail"""

    def __init__(
        self,
        message: str = "Database error",
        operation: Optional[str] = None,
        table: Optional[str] = None,
        error_code: ErrorCode = ErrorCode.DATABASE_ERROR,
        status_code: int = 500
    ):
        details = {}
        if operation:
            details["operation"] = operation
        if table:
            details["table"] = table
        super().__init__(message, error_code, details, status_code)


class DuplicateEntryError(DatabaseError):
    """Exception raised when a unique key already exists"""

    def __init__(
        self,
        message: str = "Duplicate entry",
        field: Optional[str] = None,
        table: Optional[str] = None
    ):
        super().__init__(message, table=table, error_code=ErrorCode.DUPLICATE_ENTRY, status_code=400)
        if field:
            self.details["field"] = field


class DocumentGenerationError(OperationError):
    """Exception raised when a leave certificate cannot be written"""

    def __init__(self, message: str = "Error generating PDF", leave_id: Optional[Any] = None):
        details = {"leave_id": str(leave_id)} if leave_id is not None else None
        super().__init__(message, ErrorCode.DOCUMENT_GENERATION_FAILED, details, 500)


# ========================================
# Utility Functions
# ========================================

def handle_database_exception(exc: Exception, table: Optional[str] = None) -> BaseAppException:
    """Convert database exceptions to application exceptions"""
    error_message = str(exc).lower()

    if "duplicate" in error_message or "unique constraint" in error_message:
        return DuplicateEntryError(table=table)
    return DatabaseError(table=table)


def create_validation_error(
    field_errors: Dict[str, List[str]],
    missing_fields: Optional[List[str]] = None
) -> ValidationError:
    """Create a validation error with field-specific errors"""
    missing = sorted(set(missing_fields or []))
    if missing:
        message = f"Missing required fields: {', '.join(missing)}"
    else:
        total_errors = sum(len(errors) for errors in field_errors.values())
        message = f"Validation failed with {total_errors} error(s)"
    return ValidationError(message, field_errors)


# ========================================
# FastAPI exception handlers
# ========================================

# Pydantic error types that mean "the caller left this field out or blank"
MISSING_ERROR_TYPES = {"missing", "string_too_short"}


def _error_response(
    request: Request,
    status_code: int,
    body: Dict[str, Any],
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    body["path"] = request.url.path
    body["timestamp"] = datetime.now(timezone.utc).isoformat()
    return JSONResponse(status_code=status_code, content=body, headers=headers)


async def app_exception_handler(request: Request, exc: BaseAppException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            f"{exc.__class__.__name__} on {request.method} {request.url.path}: {exc.message}",
            exc_info=exc,
        )
    else:
        logger.info(f"{exc.__class__.__name__} on {request.method} {request.url.path}: {exc.message}")
    return _error_response(request, exc.status_code, exc.to_dict())


# Framework errors raised outside our services (unknown routes, missing static files)
HTTP_ERROR_CODES = {
    401: ErrorCode.AUTHENTICATION_FAILED,
    403: ErrorCode.AUTHORIZATION_FAILED,
    404: ErrorCode.RESOURCE_NOT_FOUND,
}


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    error_code = HTTP_ERROR_CODES.get(exc.status_code)
    if error_code is None:
        error_code = ErrorCode.INTERNAL_ERROR if exc.status_code >= 500 else ErrorCode.OPERATION_FAILED
    body = {
        "success": False,
        "message": str(exc.detail),
        "error_code": error_code.value,
        "details": None,
    }
    return _error_response(request, exc.status_code, body, headers=getattr(exc, "headers", None))


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    field_errors: Dict[str, List[str]] = {}
    missing_fields: List[str] = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(location) or "body"
        field_errors.setdefault(field, []).append(error.get("msg", "Invalid value"))
        if error.get("type") in MISSING_ERROR_TYPES:
            missing_fields.append(field)
    return await app_exception_handler(request, create_validation_error(field_errors, missing_fields))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    body = {
        "success": False,
        "message": "Server error",
        "error_code": ErrorCode.INTERNAL_ERROR.value,
        "details": None,
    }
    return _error_response(request, 500, body)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on the application"""
    app.add_exception_handler(BaseAppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = [
    'ErrorCode',
    'BaseAppException',
    'OperationError',
    'ValidationError',
    'InvalidStateError',
    'ResourceNotFoundError',
    'StudentNotFoundError',
    'LeaveNotFoundError',
    'AuthenticationError',
    'AuthorizationError',
    'TokenError',
    'TokenExpiredError',
    'InvalidTokenError',
    'DatabaseError',
    'DuplicateEntryError',
    'DocumentGenerationError',
    'handle_database_exception',
    'create_validation_error',
    'register_exception_handlers',
]
