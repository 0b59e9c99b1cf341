"""
Student database model.

Students are created at signup and never deleted.
"""

from datetime import datetime
from typing import Any, Dict

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from hostel_leave.db.base import Base
from hostel_leave.utils.datetime_utils import utcnow

__all__ = ["Student"]


class Student(Base):
    """Hostel resident who can apply for leave."""

    __tablename__ = "students"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
        comment="Login identifier, unique across students"
    )
    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="bcrypt hash, never the plain password"
    )
    hostel: Mapped[str] = mapped_column(String(100), nullable=False)
    year: Mapped[str] = mapped_column(String(20), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)

    def public_profile(self) -> Dict[str, Any]:
        """Fields that may be returned to callers."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "hostel": self.hostel,
            "year": self.year,
        }

    def __repr__(self) -> str:
        return f"<Student id={self.id} email={self.email}>"
