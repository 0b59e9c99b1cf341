"""
FastAPI dependencies.

Example usage in a router:
    from fastapi import Depends, APIRouter
    from hostel_leave.api import deps

    router = APIRouter()

    @router.get("/api/me")
    def read_me(identity = Depends(deps.get_current_identity)):
        return identity
"""

from typing import Any, Dict, Generator, Optional

from fastapi import Depends, Header, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from hostel_leave.core.context import AppContext
from hostel_leave.core.security import ADMIN_SECRET_HEADER
from hostel_leave.services.auth_service import AuthService
from hostel_leave.services.leave_service import LeaveService

# auto_error=False so a missing header reaches our own 401 "Missing token"
bearer_scheme = HTTPBearer(auto_error=False)


# --- Context & database --------------------------------------------------------

def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_db(ctx: AppContext = Depends(get_context)) -> Generator[Session, None, None]:
    """One session per request, always closed."""
    db = ctx.session_factory()
    try:
        yield db
    finally:
        db.close()


# --- Services ------------------------------------------------------------------

def get_auth_service(
    db: Session = Depends(get_db),
    ctx: AppContext = Depends(get_context),
) -> AuthService:
    return AuthService(db, ctx.password_manager, ctx.token_manager, ctx.settings)


def get_leave_service(
    db: Session = Depends(get_db),
    ctx: AppContext = Depends(get_context),
) -> LeaveService:
    return LeaveService(db, ctx.document_generator, tz_name=ctx.settings.TIMEZONE)


# --- Authentication & Authorization -------------------------------------------

def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: AuthService = Depends(get_auth_service),
) -> Dict[str, Any]:
    """Identity claim ``{id, email}`` of a valid bearer token."""
    token = credentials.credentials if credentials else None
    return auth.verify_token(token)


def require_admin(
    x_admin_secret: Optional[str] = Header(default=None, alias=ADMIN_SECRET_HEADER),
    auth: AuthService = Depends(get_auth_service),
) -> None:
    auth.require_admin_secret(x_admin_secret)


__all__ = [
    "get_context",
    "get_db",
    "get_auth_service",
    "get_leave_service",
    "get_current_identity",
    "require_admin",
]
