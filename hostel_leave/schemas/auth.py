"""
Signup, login and profile schemas.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field, field_validator

from hostel_leave.schemas.base import BaseCreateSchema, BaseSchema, Password

__all__ = [
    "SignupRequest",
    "LoginRequest",
    "StudentProfile",
    "SignupResponse",
    "LoginResponse",
]


class SignupRequest(BaseCreateSchema):
    """New student registration."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=255)
    password: Password
    hostel: str = Field(..., min_length=1, max_length=100)
    year: str = Field(..., min_length=1, max_length=20, description="Study year, numbers are accepted")

    @field_validator("year", mode="before")
    @classmethod
    def coerce_year(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(int(v)) if float(v).is_integer() else str(v)
        return v

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()


class LoginRequest(BaseCreateSchema):
    email: str = Field(..., min_length=1)
    password: Password

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()


class StudentProfile(BaseSchema):
    """Public student fields; the password hash is never included."""

    id: int
    name: str
    email: str
    hostel: str
    year: str


class SignupResponse(BaseSchema):
    message: str = "Signed up and logged in"
    token: str
    student: StudentProfile


class LoginResponse(BaseSchema):
    success: bool = True
    student: StudentProfile
    token: Optional[str] = Field(default=None, description="Only present when login tokens are enabled")
