from datetime import datetime

import pytest

from hostel_leave.core.exceptions import DocumentGenerationError
from hostel_leave.models.enums import LeaveStatus
from hostel_leave.models.leave import LeaveRequest
from hostel_leave.models.student import Student
from hostel_leave.services.document_service import DocumentGenerator


@pytest.fixture
def student():
    return Student(id=3, name="Asha", email="asha@x.com", password="hash", hostel="H1", year="2")


@pytest.fixture
def leave():
    return LeaveRequest(
        id=7,
        student_id=3,
        from_date=datetime(2025, 1, 1),
        to_date=datetime(2025, 1, 3),
        reason="Family <wedding> & travel",
        status=LeaveStatus.ACCEPTED,
        admin_comment="Approved",
        applied_at=datetime(2024, 12, 30, 6, 0),
    )


def test_render_writes_pdf_and_returns_public_url(tmp_path, leave, student):
    generator = DocumentGenerator(tmp_path / "public" / "pdfs")

    url = generator.render(leave, student)

    assert url == "/pdfs/leave_7.pdf"
    written = tmp_path / "public" / "pdfs" / "leave_7.pdf"
    assert written.read_bytes().startswith(b"%PDF")


def test_render_overwrites_existing_certificate(tmp_path, leave, student):
    generator = DocumentGenerator(tmp_path)
    target = tmp_path / "leave_7.pdf"
    target.write_bytes(b"stale")

    generator.render(leave, student)

    assert target.read_bytes().startswith(b"%PDF")


def test_certificate_data_uses_display_formatting(tmp_path, leave, student):
    data = DocumentGenerator(tmp_path, app_name="Hostel Leave Management System").build_certificate_data(
        leave, student
    )

    assert data["student_name"] == "Asha"
    assert data["student_id"] == 3
    assert data["from_date"] == "01 Jan 2025, 05:30 AM"
    assert data["to_date"] == "03 Jan 2025, 05:30 AM"
    assert data["applied_at"] == "30 Dec 2024, 11:30 AM"
    assert data["status"] == "accepted"
    assert data["footer"].startswith("Generated by Hostel Leave Management System © ")


def test_unwritable_directory_raises_generation_error(tmp_path, leave, student):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    generator = DocumentGenerator(blocker / "pdfs")

    with pytest.raises(DocumentGenerationError) as exc_info:
        generator.render(leave, student)
    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "Error generating PDF"
