"""
On-demand certificate generation.
"""

from fastapi import APIRouter, Depends

from hostel_leave.api import deps
from hostel_leave.schemas.leave import DocumentResponse
from hostel_leave.services.leave_service import LeaveService

router = APIRouter(tags=["Documents"])


@router.get("/api/generate-pdf/{leave_id}", response_model=DocumentResponse, summary="Generate leave certificate")
def generate_pdf(leave_id: int, leaves: LeaveService = Depends(deps.get_leave_service)) -> DocumentResponse:
    return DocumentResponse(pdf_url=leaves.generate_document(leave_id))
