"""
Schemas module - Request/Response schemas for API endpoints.

These models are used for:
- Request body validation
- Response serialization
- Records passed between the router and the storage backends
"""

from portal.schemas.schemas import (
    ABOUT_US_ID,
    AboutUs,
    AboutUsUpdate,
    Application,
    ApplicationCreate,
    ApplicationSummary,
    ErrorResponse,
    HealthResponse,
    ResumeFile,
)

__all__ = [
    "ABOUT_US_ID",
    "AboutUs",
    "AboutUsUpdate",
    "Application",
    "ApplicationCreate",
    "ApplicationSummary",
    "ErrorResponse",
    "HealthResponse",
    "ResumeFile",
]
