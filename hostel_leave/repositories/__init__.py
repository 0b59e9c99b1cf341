from hostel_leave.repositories.base_repository import BaseRepository
from hostel_leave.repositories.leave_repository import LeaveRepository
from hostel_leave.repositories.student_repository import StudentRepository

__all__ = ["BaseRepository", "LeaveRepository", "StudentRepository"]
