"""
SpaceTechHub Careers Portal - Main Application

FastAPI backend with:
- Application submissions with resume upload (base64 in JSON)
- Admin listing/review of applications and About Us editing
- Pluggable storage: in-memory, MongoDB blob store, or PostgreSQL

Run: uvicorn portal.main:app --reload
"""

from typing import Optional

from fastapi import FastAPI, Request

from portal import __version__
from portal.api.routes import api_router
from portal.core.config import Settings, get_settings
from portal.core.errors import register_exception_handlers
from portal.core.logging import configure_logging
from portal.schemas.schemas import HealthResponse
from portal.storage.base import StorageBackend
from portal.storage.selector import create_storage


def create_app(settings: Optional[Settings] = None, storage: Optional[StorageBackend] = None) -> FastAPI:
    """
    Build the app. The storage backend is selected here, once, and shared
    by every request handled by this process.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="""
        Job application portal API.

        ## Features
        - **Applications**: submit (with resume), list, view, download resume
        - **About Us**: read and edit the About Us page content

        ## Storage
        - memory: local development, not durable
        - kv: whole collections as JSON blobs (MongoDB)
        - relational: one row per application (PostgreSQL)

        No authentication: admin operations are open.
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    app.state.settings = settings
    app.state.storage = storage if storage is not None else create_storage(settings)

    # Error handlers, CORS headers and the 500 boundary
    register_exception_handlers(app)

    # Include API routes
    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check(request: Request):
        """Storage backend in use and whether it is reachable."""
        backend: StorageBackend = request.app.state.storage
        connected = backend.ping()
        return HealthResponse(
            status="healthy" if connected else "degraded",
            storage=backend.name,
            connected=connected
        )

    return app


app = create_app()
