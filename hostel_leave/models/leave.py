"""
Leave request database model.

Status only moves from pending to accepted or rejected; pdf_path is
filled in once an approval certificate has been written.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, Enum, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hostel_leave.db.base import Base
from hostel_leave.models.enums import LeaveStatus
from hostel_leave.utils.datetime_utils import utcnow

if TYPE_CHECKING:
    from hostel_leave.models.student import Student

__all__ = ["LeaveRequest"]


class LeaveRequest(Base):
    """A student's request for time away from the hostel."""

    __tablename__ = "leaves"
    __table_args__ = (
        Index("ix_leaves_student_applied", "student_id", "applied_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    student_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False,
    )
    # Stored as naive UTC
    from_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    to_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    reason: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[LeaveStatus] = mapped_column(
        Enum(
            LeaveStatus,
            name="leave_status_enum",
            native_enum=False,
            length=20,
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
        default=LeaveStatus.PENDING,
    )
    admin_comment: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    pdf_path: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    applied_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)

    student: Mapped["Student"] = relationship("Student")

    @property
    def is_pending(self) -> bool:
        return self.status == LeaveStatus.PENDING

    def __repr__(self) -> str:
        return f"<LeaveRequest id={self.id} student_id={self.student_id} status={self.status.value}>"
