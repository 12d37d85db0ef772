"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
JSON uses camelCase (contactInfo, resumeFileName, ...); Python code uses
snake_case attributes.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator, model_validator
from pydantic.alias_generators import to_camel


ABOUT_US_ID = "about-us"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================
# APPLICATION SCHEMAS
# ============================================================

class ApplicationCreate(CamelModel):
    name: StrictStr = Field(..., min_length=1)
    contact_info: StrictStr = ""
    department: StrictStr = Field(..., min_length=1)
    branch: StrictStr = ""
    year: StrictStr = ""
    experience: StrictStr = ""
    resume_file_name: Optional[StrictStr] = None
    resume_file_content: Optional[StrictStr] = None
    resume_file_type: Optional[StrictStr] = None

    @field_validator("contact_info", "branch", "year", "experience", mode="before")
    @classmethod
    def null_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("resume_file_name", "resume_file_content", "resume_file_type", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def resume_name_and_content_together(self):
        if (self.resume_file_name is None) != (self.resume_file_content is None):
            raise ValueError("resumeFileName and resumeFileContent must be provided together")
        return self


class Application(CamelModel):
    """A stored application. Immutable once created."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: int
    name: str
    contact_info: str = ""
    department: str
    branch: str = ""
    year: str = ""
    experience: str = ""
    resume_file_name: Optional[str] = None
    resume_file_content: Optional[str] = None
    resume_file_type: Optional[str] = None
    created_at: datetime

    @property
    def has_resume(self) -> bool:
        return bool(self.resume_file_name) and bool(self.resume_file_content)


class ApplicationSummary(CamelModel):
    """Listing view of an application: no resume payload, just a flag."""

    id: int
    name: str
    contact_info: str = ""
    department: str
    branch: str = ""
    year: str = ""
    experience: str = ""
    resume_file_name: Optional[str] = None
    resume_file_type: Optional[str] = None
    has_resume: bool = False
    created_at: datetime

    @classmethod
    def from_application(cls, application: Application) -> "ApplicationSummary":
        data = application.model_dump(exclude={"resume_file_content"})
        return cls(**data, has_resume=application.has_resume)


class ResumeFile(CamelModel):
    file_name: str
    content: str  # base64 text, no data URL prefix
    mime_type: Optional[str] = None


# ============================================================
# ABOUT US SCHEMAS
# ============================================================

class AboutUs(CamelModel):
    id: str = ABOUT_US_ID
    content: str
    updated_at: datetime


class AboutUsUpdate(CamelModel):
    content: StrictStr = Field(..., min_length=1)


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    storage: str
    connected: bool
