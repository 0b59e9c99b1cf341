"""
Standard API response wrappers.
"""

from typing import Any, Dict, Optional

from pydantic import Field

from hostel_leave.schemas.base import BaseSchema

__all__ = ["ErrorResponse", "ERROR_RESPONSES"]


class ErrorResponse(BaseSchema):
    """Standard error response."""

    success: bool = Field(default=False, description="Success flag")
    message: str = Field(..., description="Error message")
    error_code: Optional[str] = Field(default=None, description="Application error code")
    details: Optional[Dict[str, Any]] = Field(default=None, description="Structured error details")
    path: Optional[str] = Field(default=None, description="Request path that caused error")
    timestamp: Optional[str] = Field(default=None, description="Error timestamp")


# OpenAPI documentation of the error envelope shared by every route
ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {
    code: {"model": ErrorResponse} for code in (400, 401, 403, 404, 500)
}
