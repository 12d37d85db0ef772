"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from portal.api.routes.application_routes import router as application_router
from portal.api.routes.about_routes import router as about_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(application_router)
api_router.include_router(about_router)
