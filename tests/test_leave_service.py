from datetime import datetime

import pytest

from hostel_leave.core.exceptions import (
    DocumentGenerationError,
    InvalidStateError,
    LeaveNotFoundError,
    StudentNotFoundError,
    ValidationError,
)
from hostel_leave.models.enums import LeaveStatus
from hostel_leave.models.leave import LeaveRequest
from hostel_leave.services.leave_service import LeaveService


@pytest.fixture
def service(db, context):
    return LeaveService(db, context.document_generator, tz_name=context.settings.TIMEZONE)


@pytest.fixture
def pending(service, student):
    return service.apply_leave(student.id, "2025-01-01", "2025-01-03", "Home")


def pdf_file(context, leave_id):
    return context.settings.get_pdf_dir() / f"leave_{leave_id}.pdf"


class TestApplyLeave:
    def test_new_leave_is_pending(self, pending, student):
        assert pending.id is not None
        assert pending.student_id == student.id
        assert pending.status == LeaveStatus.PENDING
        assert pending.from_date == datetime(2025, 1, 1)
        assert pending.applied_at is not None
        assert pending.pdf_path is None

    def test_reversed_date_range_is_accepted(self, service, student):
        leave = service.apply_leave(student.id, "2025-02-10", "2025-02-01", "Trip")
        assert leave.status == LeaveStatus.PENDING
        assert leave.to_date < leave.from_date

    def test_unknown_student(self, service, student):
        with pytest.raises(StudentNotFoundError):
            service.apply_leave(student.id + 100, "2025-01-01", "2025-01-02", "Home")

    def test_unparseable_date(self, service, student):
        with pytest.raises(ValidationError):
            service.apply_leave(student.id, "someday", "2025-01-02", "Home")

    def test_blank_reason(self, service, student):
        with pytest.raises(ValidationError) as exc_info:
            service.apply_leave(student.id, "2025-01-01", "2025-01-02", "  ")
        assert exc_info.value.message == "Missing required fields: reason"


class TestListing:
    def test_my_leaves_newest_first_with_display_values(self, service, student, pending):
        later = service.apply_leave(student.id, "2025-03-01", "2025-03-02", "Exam break")

        rows = service.list_my_leaves(student.id)

        assert [row["id"] for row in rows] == [later.id, pending.id]
        assert rows[1]["from_date"] == "01 Jan 2025, 05:30 AM"
        assert rows[1]["status"] == "Pending"
        assert rows[1]["pdf_path"] is None

    def test_my_leaves_requires_student_id(self, service):
        with pytest.raises(ValidationError):
            service.list_my_leaves(None)

    def test_unknown_student_has_no_leaves(self, service):
        assert service.list_my_leaves(9999) == []

    def test_all_leaves_include_student_identity(self, service, student, pending):
        rows = service.list_all_leaves()
        assert len(rows) == 1
        row = rows[0]
        assert row["name"] == "Asha"
        assert row["email"] == "asha@x.com"
        assert row["hostel"] == "H1"
        assert row["year"] == "2"
        assert row["status"] == "pending"
        assert row["from_date"] == "2025-01-01T00:00:00+00:00"


class TestDecisions:
    def test_approve_writes_certificate(self, service, context, pending):
        leave = service.approve(pending.id)

        assert leave.status == LeaveStatus.ACCEPTED
        assert leave.admin_comment == "Approved"
        assert leave.pdf_path == f"/pdfs/leave_{pending.id}.pdf"
        assert pdf_file(context, pending.id).read_bytes().startswith(b"%PDF")

    def test_approve_keeps_given_comment(self, service, pending):
        assert service.approve(pending.id, "Enjoy").admin_comment == "Enjoy"

    def test_decided_leave_cannot_be_decided_again(self, service, pending):
        service.approve(pending.id)
        with pytest.raises(InvalidStateError):
            service.approve(pending.id)
        with pytest.raises(InvalidStateError):
            service.reject(pending.id)

    def test_reject_leaves_no_certificate(self, service, context, pending):
        leave = service.reject(pending.id)

        assert leave.status == LeaveStatus.REJECTED
        assert leave.admin_comment == "Rejected"
        assert leave.pdf_path is None
        assert not pdf_file(context, pending.id).exists()

    @pytest.mark.parametrize("operation", ["approve", "reject", "generate_document"])
    def test_unknown_leave(self, service, operation):
        with pytest.raises(LeaveNotFoundError):
            getattr(service, operation)(424242)

    def test_failed_certificate_leaves_request_pending(self, service, context, pending, monkeypatch):
        def broken_render(leave, student):
            raise DocumentGenerationError(leave_id=leave.id)

        monkeypatch.setattr(service.documents, "render", broken_render)

        with pytest.raises(DocumentGenerationError):
            service.approve(pending.id)

        fresh = context.session_factory()
        try:
            stored = fresh.get(LeaveRequest, pending.id)
            assert stored.status == LeaveStatus.PENDING
            assert stored.pdf_path is None
            assert stored.admin_comment is None
        finally:
            fresh.close()


class TestGenerateDocument:
    def test_pending_leave_is_refused_without_writing(self, service, context, pending):
        with pytest.raises(InvalidStateError) as exc_info:
            service.generate_document(pending.id)
        assert exc_info.value.message == "PDF available only for accepted leaves"
        assert not pdf_file(context, pending.id).exists()

    def test_accepted_leave_is_regenerated(self, service, context, pending):
        service.approve(pending.id)
        pdf_file(context, pending.id).unlink()

        assert service.generate_document(pending.id) == f"/pdfs/leave_{pending.id}.pdf"
        assert pdf_file(context, pending.id).exists()


class TestDateBounds:
    def test_date_beyond_display_time_zone_is_rejected(self, service, student):
        with pytest.raises(ValidationError) as exc_info:
            service.apply_leave(student.id, "2025-01-01", "9999-12-31T23:00:00", "Forever")
        assert "to_date" in exc_info.value.details["field_errors"]
        assert service.list_my_leaves(student.id) == []

    def test_history_still_renders_after_rejected_date(self, service, student, pending):
        with pytest.raises(ValidationError):
            service.apply_leave(student.id, "9999-12-31T23:00:00", "9999-12-31T23:30:00", "Forever")

        rows = service.list_my_leaves(student.id)
        assert [row["id"] for row in rows] == [pending.id]
