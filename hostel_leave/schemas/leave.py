"""
Leave application, history and admin decision schemas.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_core import PydanticCustomError

from hostel_leave.schemas.base import BaseCreateSchema, BaseSchema, require_text
from hostel_leave.utils.datetime_utils import parse_datetime

__all__ = [
    "LeaveApplyRequest",
    "LeaveApplyResponse",
    "AdminDecisionRequest",
    "MyLeaveItem",
    "AdminLeaveItem",
    "ApproveResponse",
    "RejectResponse",
    "DocumentResponse",
]


class LeaveApplyRequest(BaseCreateSchema):
    """
    Student leave application.

    No date-range checks are made: a to_date before from_date is accepted.
    """

    student_id: int = Field(..., description="Applying student's id")
    from_date: datetime = Field(..., description="Leave start; date-only values mean midnight UTC")
    to_date: datetime = Field(..., description="Leave end")
    reason: str = Field(..., min_length=1, max_length=1000)

    @field_validator("student_id", mode="before")
    @classmethod
    def student_id_present(cls, v: Any) -> Any:
        return require_text(v)

    @field_validator("from_date", "to_date", mode="before")
    @classmethod
    def parse_dates(cls, v: Any) -> datetime:
        require_text(v)
        try:
            return parse_datetime(v)
        except ValueError:
            raise PydanticCustomError("datetime_parsing", "Invalid date value")


class LeaveApplyResponse(BaseSchema):
    success: bool = True
    message: str = "Leave applied successfully!"
    leave_id: int


class AdminDecisionRequest(BaseCreateSchema):
    admin_comment: Optional[str] = Field(default=None, max_length=1000)


class MyLeaveItem(BaseSchema):
    """A row of a student's leave history with display-formatted dates."""

    id: int
    from_date: str
    to_date: str
    reason: str
    status: str
    admin_comment: Optional[str] = None
    pdf_path: Optional[str] = None


class AdminLeaveItem(BaseSchema):
    """A leave joined with the identity of the student who applied."""

    id: int
    student_id: int
    from_date: Optional[str]
    to_date: Optional[str]
    reason: str
    status: str
    admin_comment: Optional[str] = None
    pdf_path: Optional[str] = None
    applied_at: Optional[str]
    name: str
    email: str
    hostel: str
    year: str


class ApproveResponse(BaseSchema):
    message: str = "Approved and PDF generated"
    status: str
    pdf_url: str


class RejectResponse(BaseSchema):
    message: str = "Leave rejected"
    status: str


class DocumentResponse(BaseSchema):
    message: str = "PDF generated successfully"
    pdf_url: str
