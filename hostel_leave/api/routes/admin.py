"""
Warden endpoints, guarded by the shared x-admin-secret header.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends

from hostel_leave.api import deps
from hostel_leave.schemas.leave import (
    AdminDecisionRequest,
    AdminLeaveItem,
    ApproveResponse,
    RejectResponse,
)
from hostel_leave.services.leave_service import LeaveService

router = APIRouter(prefix="/api/leaves", tags=["Admin"], dependencies=[Depends(deps.require_admin)])


def _comment(payload: Optional[AdminDecisionRequest]) -> Optional[str]:
    return payload.admin_comment if payload else None


@router.get("", response_model=List[AdminLeaveItem], summary="All leave requests")
def list_leaves(leaves: LeaveService = Depends(deps.get_leave_service)) -> List[AdminLeaveItem]:
    return [AdminLeaveItem(**row) for row in leaves.list_all_leaves()]


@router.post("/{leave_id}/approve", response_model=ApproveResponse, summary="Approve and issue certificate")
def approve_leave(
    leave_id: int,
    payload: Optional[AdminDecisionRequest] = Body(default=None),
    leaves: LeaveService = Depends(deps.get_leave_service),
) -> ApproveResponse:
    leave = leaves.approve(leave_id, _comment(payload))
    return ApproveResponse(status=leave.status.value, pdf_url=leave.pdf_path)


@router.post("/{leave_id}/reject", response_model=RejectResponse, summary="Reject a leave")
def reject_leave(
    leave_id: int,
    payload: Optional[AdminDecisionRequest] = Body(default=None),
    leaves: LeaveService = Depends(deps.get_leave_service),
) -> RejectResponse:
    leave = leaves.reject(leave_id, _comment(payload))
    return RejectResponse(status=leave.status.value)
