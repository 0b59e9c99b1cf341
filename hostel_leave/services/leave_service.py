"""
Leave Service

The leave workflow: students apply and review their history, the warden
approves or rejects, and approved leaves get a printable certificate.

Status only moves pending -> accepted or pending -> rejected.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from hostel_leave.config.logging import get_logger
from hostel_leave.core.exceptions import (
    InvalidStateError,
    LeaveNotFoundError,
    StudentNotFoundError,
    create_validation_error,
)
from hostel_leave.models.enums import LeaveStatus
from hostel_leave.models.leave import LeaveRequest
from hostel_leave.repositories.leave_repository import LeaveRepository
from hostel_leave.repositories.student_repository import StudentRepository
from hostel_leave.services.document_service import DocumentGenerator
from hostel_leave.utils.datetime_utils import format_iso, format_local_datetime, parse_datetime

logger = get_logger(__name__)

DEFAULT_APPROVE_COMMENT = "Approved"
DEFAULT_REJECT_COMMENT = "Rejected"


class LeaveService:
    """Leave applications and the admin decision workflow."""

    def __init__(self, db: Session, documents: DocumentGenerator, tz_name: str = "Asia/Kolkata"):
        self.db = db
        self.leaves = LeaveRepository(db)
        self.students = StudentRepository(db)
        self.documents = documents
        self.tz_name = tz_name

    # ==================== Student operations ====================

    def apply_leave(self, student_id: int, from_date: Any, to_date: Any, reason: str) -> LeaveRequest:
        """
        Record a pending leave request.

        Dates may be datetimes, dates or parseable strings. No range check
        is made, so a to_date before from_date is stored as given.

        Raises:
            ValidationError: If a field is missing or a date is unparseable
                or cannot be shown in the display time zone
            StudentNotFoundError: If the student does not exist
        """
        fields = {"student_id": student_id, "from_date": from_date, "to_date": to_date, "reason": reason}
        missing = [k for k, v in fields.items() if v is None or (isinstance(v, str) and not v.strip())]
        if missing:
            raise create_validation_error({k: ["Field required"] for k in missing}, missing)

        start = self._parse_date("from_date", from_date)
        end = self._parse_date("to_date", to_date)

        if self.students.get_by_id(student_id) is None:
            raise StudentNotFoundError(student_id)

        leave = self.leaves.create_leave(student_id, start, end, reason.strip())
        logger.info(f"Student {student_id} applied for leave {leave.id}")
        return leave

    def list_my_leaves(self, student_id: Optional[int]) -> List[Dict[str, Any]]:
        """
        A student's leaves, newest applied first, formatted for display.

        Dates use the configured time zone and status its display label.
        An unknown student simply has no leaves.
        """
        if student_id is None:
            raise create_validation_error({"student_id": ["Field required"]}, ["student_id"])

        return [
            {
                "id": leave.id,
                "from_date": format_local_datetime(leave.from_date, self.tz_name),
                "to_date": format_local_datetime(leave.to_date, self.tz_name),
                "reason": leave.reason,
                "status": LeaveStatus(leave.status).label,
                "admin_comment": leave.admin_comment,
                "pdf_path": leave.pdf_path,
            }
            for leave in self.leaves.find_by_student(student_id)
        ]

    # ==================== Admin operations ====================

    def list_all_leaves(self) -> List[Dict[str, Any]]:
        """Every leave with the applying student's identity."""
        rows = []
        for leave, student in self.leaves.find_all_with_students():
            rows.append({
                "id": leave.id,
                "student_id": leave.student_id,
                "from_date": format_iso(leave.from_date),
                "to_date": format_iso(leave.to_date),
                "reason": leave.reason,
                "status": LeaveStatus(leave.status).value,
                "admin_comment": leave.admin_comment,
                "pdf_path": leave.pdf_path,
                "applied_at": format_iso(leave.applied_at),
                "name": student.name,
                "email": student.email,
                "hostel": student.hostel,
                "year": student.year,
            })
        return rows

    def approve(self, leave_id: int, admin_comment: Optional[str] = None) -> LeaveRequest:
        """
        Accept a pending leave and write its certificate.

        The status change is only committed once the certificate exists.

        Raises:
            LeaveNotFoundError: If the leave does not exist
            InvalidStateError: If the leave was already decided
            DocumentGenerationError: If the certificate cannot be written
        """
        leave = self._get_pending(leave_id)

        with self.leaves.transaction():
            leave.status = LeaveStatus.ACCEPTED
            leave.admin_comment = admin_comment or DEFAULT_APPROVE_COMMENT
            leave.pdf_path = self.documents.render(leave, leave.student)

        logger.info(f"Leave {leave_id} approved")
        return leave

    def reject(self, leave_id: int, admin_comment: Optional[str] = None) -> LeaveRequest:
        """Reject a pending leave. No certificate is written."""
        leave = self._get_pending(leave_id)

        with self.leaves.transaction():
            leave.status = LeaveStatus.REJECTED
            leave.admin_comment = admin_comment or DEFAULT_REJECT_COMMENT

        logger.info(f"Leave {leave_id} rejected")
        return leave

    def generate_document(self, leave_id: int) -> str:
        """
        (Re)write the certificate of an accepted leave and return its URL.

        Raises:
            LeaveNotFoundError: If the leave does not exist
            InvalidStateError: If the leave is not accepted; nothing is written
        """
        leave = self._get(leave_id)
        if LeaveStatus(leave.status) is not LeaveStatus.ACCEPTED:
            raise InvalidStateError(
                "PDF available only for accepted leaves",
                current_state=LeaveStatus(leave.status).value,
                required_state=LeaveStatus.ACCEPTED.value,
            )

        with self.leaves.transaction():
            leave.pdf_path = self.documents.render(leave, leave.student)
        return leave.pdf_path

    # ==================== Helpers ====================

    def _get(self, leave_id: int) -> LeaveRequest:
        leave = self.leaves.get_by_id(leave_id)
        if leave is None:
            raise LeaveNotFoundError(leave_id)
        return leave

    def _get_pending(self, leave_id: int) -> LeaveRequest:
        leave = self._get(leave_id)
        if not leave.is_pending:
            status = LeaveStatus(leave.status).value
            raise InvalidStateError(
                f"Leave already {status}",
                current_state=status,
                required_state=LeaveStatus.PENDING.value,
            )
        return leave

    def _parse_date(self, field: str, value: Any) -> datetime:
        """Parse a leave date that can also be shown in the display time zone."""
        try:
            parsed = parse_datetime(value)
            format_local_datetime(parsed, self.tz_name)
        except (ValueError, OverflowError):
            raise create_validation_error({field: ["Invalid date value"]})
        return parsed


__all__ = ["LeaveService", "DEFAULT_APPROVE_COMMENT", "DEFAULT_REJECT_COMMENT"]
