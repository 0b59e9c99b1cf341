"""
Student leave endpoints: apply and history.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from hostel_leave.api import deps
from hostel_leave.schemas.leave import LeaveApplyRequest, LeaveApplyResponse, MyLeaveItem
from hostel_leave.services.leave_service import LeaveService

router = APIRouter(tags=["Leaves"])


@router.post("/apply-leave", response_model=LeaveApplyResponse, summary="Apply for leave")
def apply_leave(
    payload: LeaveApplyRequest,
    leaves: LeaveService = Depends(deps.get_leave_service),
) -> LeaveApplyResponse:
    leave = leaves.apply_leave(payload.student_id, payload.from_date, payload.to_date, payload.reason)
    return LeaveApplyResponse(leave_id=leave.id)


@router.get("/api/my-leaves", response_model=List[MyLeaveItem], summary="A student's leave history")
def my_leaves(
    student_id: Optional[int] = Query(default=None),
    leaves: LeaveService = Depends(deps.get_leave_service),
) -> List[MyLeaveItem]:
    return [MyLeaveItem(**row) for row in leaves.list_my_leaves(student_id)]
