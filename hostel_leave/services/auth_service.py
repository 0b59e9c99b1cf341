"""
Authentication Service

Student registration, credential checks, bearer token verification and
the shared admin secret gate.
"""

from typing import Any, Dict, Optional, Tuple

from sqlalchemy.orm import Session

from hostel_leave.config.logging import get_logger
from hostel_leave.config.settings import Settings
from hostel_leave.core.exceptions import (
    AuthenticationError,
    DuplicateEntryError,
    InvalidTokenError,
    StudentNotFoundError,
    create_validation_error,
)
from hostel_leave.core.security import PasswordManager, TokenManager, check_admin_secret
from hostel_leave.models.student import Student
from hostel_leave.repositories.student_repository import StudentRepository

logger = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"
EMAIL_EXISTS = "Email already exists"


def _is_blank(name: str, value: Any) -> bool:
    if value is None or value == "":
        return True
    # Whitespace is significant in passwords
    return name != "password" and isinstance(value, str) and not value.strip()


def _require_fields(**fields: Any) -> None:
    missing = [name for name, value in fields.items() if _is_blank(name, value)]
    if missing:
        raise create_validation_error({name: ["Field required"] for name in missing}, missing)


class AuthService:
    """Signup, login and identity lookups for students."""

    def __init__(
        self,
        db: Session,
        password_manager: PasswordManager,
        token_manager: TokenManager,
        settings: Settings,
    ):
        self.db = db
        self.students = StudentRepository(db)
        self.password_manager = password_manager
        self.token_manager = token_manager
        self.settings = settings

    def issue_token(self, student: Student) -> str:
        return self.token_manager.create_token({"id": student.id, "email": student.email})

    def register(
        self,
        name: str,
        email: str,
        password: str,
        hostel: str,
        year: str,
    ) -> Tuple[str, Dict[str, Any]]:
        """
        Create a student account and sign them in.

        Returns:
            Tuple of (access token, public profile)

        Raises:
            ValidationError: If a field is missing or blank
            DuplicateEntryError: If the email is already registered
        """
        _require_fields(name=name, email=email, password=password, hostel=hostel, year=year)
        email = email.strip().lower()

        if self.students.find_by_email(email) is not None:
            raise DuplicateEntryError(EMAIL_EXISTS, field="email", table="students")

        password_hash = self.password_manager.hash_password(password)
        try:
            student = self.students.create_student(
                name=name.strip(),
                email=email,
                password_hash=password_hash,
                hostel=hostel.strip(),
                year=str(year).strip(),
            )
        except DuplicateEntryError:
            # Lost a race with a concurrent signup for the same email
            raise DuplicateEntryError(EMAIL_EXISTS, field="email", table="students")

        logger.info(f"Registered student {student.id}")
        return self.issue_token(student), student.public_profile()

    def login(self, email: str, password: str) -> Tuple[Dict[str, Any], Optional[str]]:
        """
        Check credentials.

        Unknown email and wrong password fail with the same message. The
        token is only issued when LOGIN_ISSUES_TOKEN is enabled.

        Returns:
            Tuple of (public profile, token or None)
        """
        _require_fields(email=email, password=password)
        student = self.students.find_by_email(email.strip().lower())
        if student is None or not self.password_manager.verify_password(password, student.password):
            logger.info("Rejected login attempt")
            raise AuthenticationError(INVALID_CREDENTIALS)

        token = self.issue_token(student) if self.settings.LOGIN_ISSUES_TOKEN else None
        return student.public_profile(), token

    def verify_token(self, token: Optional[str]) -> Dict[str, Any]:
        """Decode a bearer token into its identity claim ``{id, email}``."""
        payload = self.token_manager.verify_token(token)
        if payload.get("id") is None:
            raise InvalidTokenError(reason="missing identity claim")
        return {"id": payload["id"], "email": payload.get("email")}

    def get_profile(self, student_id: int) -> Dict[str, Any]:
        student = self.students.get_by_id(student_id)
        if student is None:
            raise StudentNotFoundError(student_id)
        return student.public_profile()

    def require_admin_secret(self, header_value: Optional[str]) -> None:
        check_admin_secret(header_value, self.settings.ADMIN_SECRET)


__all__ = ["AuthService", "INVALID_CREDENTIALS", "EMAIL_EXISTS"]
