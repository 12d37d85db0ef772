"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url


DEFAULT_ABOUT_US_CONTENT = "Welcome to SpaceTechHub, a center for space technology innovation."


class Settings(BaseSettings):
    # App
    app_name: str = "SpaceTechHub Careers Portal"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api"

    # Storage selection: auto | memory | kv | relational
    storage_backend: Literal["auto", "memory", "kv", "relational"] = "auto"

    # PostgreSQL (relational backend)
    database_url: Optional[str] = None
    auto_create_schema: bool = True

    # Serverless platform signal (Netlify sets NETLIFY=true during builds/functions)
    netlify: bool = False
    function_path_prefix: str = "/.netlify/functions"

    # MongoDB (key-value blob backend)
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "careers_portal"
    kv_collection: str = "blobs"

    # Content
    about_us_default_content: str = DEFAULT_ABOUT_US_CONTENT

    @property
    def safe_database_url(self) -> str:
        """Database URL with the password masked, for logs."""
        if not self.database_url:
            return ""
        return make_url(self.database_url).render_as_string(hide_password=True)

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
