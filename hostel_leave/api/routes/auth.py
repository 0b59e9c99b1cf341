"""
Student signup, login and profile endpoints.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from hostel_leave.api import deps
from hostel_leave.schemas.auth import (
    LoginRequest,
    LoginResponse,
    SignupRequest,
    SignupResponse,
    StudentProfile,
)
from hostel_leave.services.auth_service import AuthService

router = APIRouter(tags=["Auth"])


@router.post(
    "/api/signup",
    response_model=SignupResponse,
    status_code=status.HTTP_200_OK,
    summary="Register a student",
)
def signup(payload: SignupRequest, auth: AuthService = Depends(deps.get_auth_service)) -> SignupResponse:
    token, profile = auth.register(
        name=payload.name,
        email=payload.email,
        password=payload.password,
        hostel=payload.hostel,
        year=payload.year,
    )
    return SignupResponse(token=token, student=StudentProfile(**profile))


@router.post(
    "/login",
    response_model=LoginResponse,
    response_model_exclude_none=True,
    summary="Check student credentials",
)
def login(payload: LoginRequest, auth: AuthService = Depends(deps.get_auth_service)) -> LoginResponse:
    profile, token = auth.login(payload.email, payload.password)
    return LoginResponse(student=StudentProfile(**profile), token=token)


@router.get("/api/me", response_model=StudentProfile, summary="Profile of the token holder")
def read_me(
    identity: Dict[str, Any] = Depends(deps.get_current_identity),
    auth: AuthService = Depends(deps.get_auth_service),
) -> StudentProfile:
    return StudentProfile(**auth.get_profile(identity["id"]))
