"""
HTTP API: routers and dependencies.
"""

from fastapi import APIRouter

from hostel_leave.api.routes import admin, auth, documents, leaves
from hostel_leave.schemas.response import ERROR_RESPONSES

api_router = APIRouter(responses=ERROR_RESPONSES)
api_router.include_router(auth.router)
api_router.include_router(leaves.router)
api_router.include_router(admin.router)
api_router.include_router(documents.router)

__all__ = ["api_router"]
