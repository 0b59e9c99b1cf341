"""
Database models package.
"""

from hostel_leave.models.enums import LeaveStatus
from hostel_leave.models.leave import LeaveRequest
from hostel_leave.models.student import Student

__all__ = ["LeaveStatus", "LeaveRequest", "Student"]
