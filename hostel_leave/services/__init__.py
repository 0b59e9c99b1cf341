"""
Service layer: business rules over the repositories.
"""

from hostel_leave.services.auth_service import AuthService
from hostel_leave.services.document_service import DocumentGenerator
from hostel_leave.services.leave_service import LeaveService

__all__ = ["AuthService", "DocumentGenerator", "LeaveService"]
