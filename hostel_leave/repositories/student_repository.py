"""
Student repository: credential storage lookups.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hostel_leave.core.exceptions import handle_database_exception
from hostel_leave.models.student import Student
from hostel_leave.repositories.base_repository import BaseRepository


class StudentRepository(BaseRepository[Student]):
    """Student lookups by id and email."""

    def __init__(self, db: Session):
        super().__init__(Student, db)

    def create_student(self, name: str, email: str, password_hash: str, hostel: str, year: str) -> Student:
        """
        Insert a student and commit.

        Raises:
            DuplicateEntryError: If the email is already registered
        """
        student = Student(name=name, email=email, password=password_hash, hostel=hostel, year=year)
        with self.transaction():
            self.add(student)
        return student

    def find_by_email(self, email: str) -> Optional[Student]:
        try:
            return self.db.scalars(select(Student).where(Student.email == email)).first()
        except SQLAlchemyError as e:
            raise handle_database_exception(e, table=self.table_name) from e
