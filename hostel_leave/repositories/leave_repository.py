"""
Leave Repository

Persistence for leave requests: creation, per-student history, the admin
listing joined with student identity, and status updates.
"""

from datetime import datetime
from typing import List, Tuple

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hostel_leave.core.exceptions import handle_database_exception
from hostel_leave.models.enums import LeaveStatus
from hostel_leave.models.leave import LeaveRequest
from hostel_leave.models.student import Student
from hostel_leave.repositories.base_repository import BaseRepository
from hostel_leave.utils.datetime_utils import utcnow


class LeaveRepository(BaseRepository[LeaveRequest]):
    """Leave request persistence."""

    def __init__(self, db: Session):
        super().__init__(LeaveRequest, db)

    def create_leave(
        self,
        student_id: int,
        from_date: datetime,
        to_date: datetime,
        reason: str,
    ) -> LeaveRequest:
        """Insert a pending leave request and commit."""
        leave = LeaveRequest(
            student_id=student_id,
            from_date=from_date,
            to_date=to_date,
            reason=reason,
            status=LeaveStatus.PENDING,
            applied_at=utcnow(),
        )
        with self.transaction():
            self.add(leave)
        return leave

    def find_by_student(self, student_id: int) -> List[LeaveRequest]:
        """All leaves of one student, newest applied first."""
        stmt = (
            select(LeaveRequest)
            .where(LeaveRequest.student_id == student_id)
            .order_by(LeaveRequest.applied_at.desc(), LeaveRequest.id.desc())
        )
        try:
            return list(self.db.scalars(stmt).all())
        except SQLAlchemyError as e:
            raise handle_database_exception(e, table=self.table_name) from e

    def find_all_with_students(self) -> List[Tuple[LeaveRequest, Student]]:
        """Every leave joined with its student, newest applied first."""
        stmt = (
            select(LeaveRequest, Student)
            .join(Student, LeaveRequest.student_id == Student.id)
            .order_by(LeaveRequest.applied_at.desc(), LeaveRequest.id.desc())
        )
        try:
            return [(leave, student) for leave, student in self.db.execute(stmt).all()]
        except SQLAlchemyError as e:
            raise handle_database_exception(e, table=self.table_name) from e
