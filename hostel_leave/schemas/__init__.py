from hostel_leave.schemas.auth import (
    LoginRequest,
    LoginResponse,
    SignupRequest,
    SignupResponse,
    StudentProfile,
)
from hostel_leave.schemas.leave import (
    AdminDecisionRequest,
    AdminLeaveItem,
    ApproveResponse,
    DocumentResponse,
    LeaveApplyRequest,
    LeaveApplyResponse,
    MyLeaveItem,
    RejectResponse,
)
from hostel_leave.schemas.response import ERROR_RESPONSES, ErrorResponse

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "SignupRequest",
    "SignupResponse",
    "StudentProfile",
    "AdminDecisionRequest",
    "AdminLeaveItem",
    "ApproveResponse",
    "DocumentResponse",
    "LeaveApplyRequest",
    "LeaveApplyResponse",
    "MyLeaveItem",
    "RejectResponse",
    "ErrorResponse",
    "ERROR_RESPONSES",
]
