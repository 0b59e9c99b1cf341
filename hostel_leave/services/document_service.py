"""
Leave certificate generation.

Both the approval flow and the on-demand endpoint write certificates
through DocumentGenerator, so there is a single layout and a single
file naming rule.
"""

from pathlib import Path
from typing import Any, Dict, Union

from hostel_leave.config.logging import get_logger
from hostel_leave.core.exceptions import DocumentGenerationError
from hostel_leave.models.leave import LeaveRequest
from hostel_leave.models.student import Student
from hostel_leave.utils.datetime_utils import format_local_datetime, utcnow
from hostel_leave.utils.pdf_utils import PDFGenerator

logger = get_logger(__name__)


class DocumentGenerator:
    """Writes ``leave_<id>.pdf`` files under the public PDF directory."""

    def __init__(
        self,
        output_dir: Union[str, Path],
        url_prefix: str = "/pdfs",
        tz_name: str = "Asia/Kolkata",
        app_name: str = "Hostel Leave Management System",
    ):
        self.output_dir = Path(output_dir)
        self.url_prefix = url_prefix.rstrip("/")
        self.tz_name = tz_name
        self.app_name = app_name
        self.pdf = PDFGenerator()

    @staticmethod
    def file_name(leave_id: int) -> str:
        return f"leave_{leave_id}.pdf"

    def file_path(self, leave_id: int) -> Path:
        return self.output_dir / self.file_name(leave_id)

    def public_url(self, leave_id: int) -> str:
        return f"{self.url_prefix}/{self.file_name(leave_id)}"

    def build_certificate_data(self, leave: LeaveRequest, student: Student) -> Dict[str, Any]:
        """Flatten a leave and its student into display strings."""
        status = leave.status.value if hasattr(leave.status, "value") else str(leave.status)
        return {
            "student_name": student.name,
            "student_id": student.id,
            "applied_at": format_local_datetime(leave.applied_at, self.tz_name),
            "email": student.email,
            "hostel": student.hostel,
            "year": student.year,
            "from_date": format_local_datetime(leave.from_date, self.tz_name),
            "to_date": format_local_datetime(leave.to_date, self.tz_name),
            "reason": leave.reason,
            "status": status,
            "admin_comment": leave.admin_comment,
            "footer": f"Generated by {self.app_name} © {utcnow().year}",
        }

    def render(self, leave: LeaveRequest, student: Student) -> str:
        """
        Write the certificate for ``leave`` and return its public URL.

        An existing file for the same leave is overwritten.

        Raises:
            DocumentGenerationError: If the directory or file cannot be
                written or the layout fails to render
        """
        target = self.file_path(leave.id)
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            self.pdf.generate_leave_certificate(str(target), self.build_certificate_data(leave, student))
        except Exception as e:
            logger.error(f"Failed to write certificate for leave {leave.id}: {e}", exc_info=True)
            raise DocumentGenerationError(leave_id=leave.id) from e

        logger.info(f"Wrote leave certificate {target}")
        return self.public_url(leave.id)


__all__ = ["DocumentGenerator"]
