"""
Security and Authentication Module

Password hashing, JWT token management and the shared admin secret check.
"""

import secrets
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Dict, Optional

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from hostel_leave.config.logging import get_logger
from hostel_leave.config.settings import Settings
from hostel_leave.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    InvalidTokenError,
    TokenExpiredError,
)

logger = get_logger(__name__)

ADMIN_SECRET_HEADER = "x-admin-secret"


class TokenType(str, Enum):
    """Token type enumeration"""
    ACCESS = "access"


class PasswordManager:
    """Password hashing and verification"""

    def __init__(self, rounds: int = 10):
        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash_password(self, password: str) -> str:
        """
        Hash a password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            Hashed password
        """
        return self.pwd_context.hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a password against its hash.

        A malformed stored hash counts as a mismatch.
        """
        try:
            return self.pwd_context.verify(plain_password, hashed_password)
        except (ValueError, TypeError) as e:
            logger.error(f"Password verification failed: {str(e)}")
            return False


class TokenManager:
    """JWT token management utilities"""

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_hours: int = 6):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = timedelta(hours=expire_hours)

    def create_token(
        self,
        data: Dict[str, Any],
        token_type: TokenType = TokenType.ACCESS,
        expires_delta: Optional[timedelta] = None
    ) -> str:
        """
        Create JWT token with specified data and expiration.

        Args:
            data: Claims to encode in token
            token_type: Type of token to create
            expires_delta: Custom expiration time

        Returns:
            Encoded JWT token
        """
        now = datetime.now(timezone.utc)
        to_encode = data.copy()
        to_encode.update({
            "exp": now + (expires_delta or self.expires_delta),
            "iat": now,
            "type": token_type.value,
            "jti": secrets.token_urlsafe(16),
        })
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify_token(
        self,
        token: Optional[str],
        expected_type: TokenType = TokenType.ACCESS
    ) -> Dict[str, Any]:
        """
        Verify and decode JWT token.

        Raises:
            AuthenticationError: If no token was supplied
            TokenExpiredError: If token has expired
            InvalidTokenError: If token is malformed, badly signed or of the wrong type
        """
        if not token:
            raise AuthenticationError("Missing token")
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            raise TokenExpiredError()
        except JWTError as e:
            logger.warning(f"Token verification failed: {str(e)}")
            raise InvalidTokenError(reason=str(e))

        if payload.get("type") != expected_type.value:
            raise InvalidTokenError(reason="wrong token type")
        return payload

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenManager":
        return cls(
            secret_key=settings.JWT_SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
            expire_hours=settings.ACCESS_TOKEN_EXPIRE_HOURS,
        )


def check_admin_secret(provided: Optional[str], configured: Optional[str]) -> None:
    """
    Compare the admin header against the configured shared secret.

    An unconfigured secret refuses every request.
    """
    if not configured or not provided:
        raise AuthorizationError("Admin only")
    if not secrets.compare_digest(provided.encode("utf-8"), configured.encode("utf-8")):
        logger.warning("Rejected admin request with wrong shared secret")
        raise AuthorizationError("Admin only")


__all__ = [
    "ADMIN_SECRET_HEADER",
    "TokenType",
    "PasswordManager",
    "TokenManager",
    "check_admin_secret",
]
