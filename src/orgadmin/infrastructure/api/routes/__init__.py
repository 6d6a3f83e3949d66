"""API Routes for OrgAdmin."""

from .departments_router import router as departments_router
from .roles_router import router as roles_router

__all__ = [
    "departments_router",
    "roles_router",
]
