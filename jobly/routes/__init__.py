"""
API routes for the Jobly data service.
"""

from .auth_routes import router as auth_router
from .companies import router as companies_router
from .jobs import router as jobs_router
from .users import router as users_router

__all__ = [
    "auth_router",
    "companies_router",
    "jobs_router",
    "users_router",
]
