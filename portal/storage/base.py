"""
Storage Backend - the persistence contract shared by every implementation.

Public methods apply the failure policy once for all backends:
- reads fail open: any error is logged and turned into an empty/default result
- writes fail closed: any error surfaces as StorageError

Implementations only provide the underscore-prefixed primitives.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import List, Optional

from portal.core.config import DEFAULT_ABOUT_US_CONTENT
from portal.schemas.schemas import (
    AboutUs, Application, ApplicationCreate, ApplicationSummary, ResumeFile
)

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """A write could not be persisted. The message is safe to show clients."""


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def newest_first(applications: List[Application]) -> List[Application]:
    return sorted(applications, key=lambda a: a.id, reverse=True)


def resume_of(application: Optional[Application]) -> Optional[ResumeFile]:
    """Resume fields of a record, or None when there is nothing to download."""
    if application is None or not application.has_resume:
        return None
    return ResumeFile(
        file_name=application.resume_file_name,
        content=application.resume_file_content,
        mime_type=application.resume_file_type,
    )


class StorageBackend(ABC):
    name = "abstract"

    def __init__(self, default_about_us: str = DEFAULT_ABOUT_US_CONTENT):
        self.default_about_us = default_about_us

    def default_about_us_record(self) -> AboutUs:
        return AboutUs(content=self.default_about_us, updated_at=utcnow())

    # ------------------------------------------------------------
    # Reads (fail open)
    # ------------------------------------------------------------

    def list_applications(self) -> List[ApplicationSummary]:
        """All applications, newest first, without resume payloads."""
        try:
            return self._list_applications()
        except Exception:
            logger.exception("[%s] listing applications failed", self.name)
            return []

    def get_application(self, application_id: int) -> Optional[Application]:
        try:
            return self._get_application(application_id)
        except Exception:
            logger.exception("[%s] reading application %s failed", self.name, application_id)
            return None

    def get_application_resume(self, application_id: int) -> Optional[ResumeFile]:
        try:
            return self._get_application_resume(application_id)
        except Exception:
            logger.exception("[%s] reading resume of application %s failed", self.name, application_id)
            return None

    def get_about_us(self) -> AboutUs:
        try:
            return self._get_about_us()
        except Exception:
            logger.exception("[%s] reading about us failed, serving default", self.name)
            return self.default_about_us_record()

    # ------------------------------------------------------------
    # Writes (fail closed)
    # ------------------------------------------------------------

    def create_application(self, data: ApplicationCreate) -> Application:
        try:
            return self._create_application(data)
        except StorageError:
            raise
        except Exception as e:
            logger.exception("[%s] creating application failed", self.name)
            raise StorageError("Failed to create application") from e

    def update_about_us(self, content: str) -> AboutUs:
        try:
            return self._update_about_us(content)
        except StorageError:
            raise
        except Exception as e:
            logger.exception("[%s] updating about us failed", self.name)
            raise StorageError("Failed to update about us content") from e

    def ping(self) -> bool:
        return True

    # ------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------

    @abstractmethod
    def _list_applications(self) -> List[ApplicationSummary]:
        ...

    @abstractmethod
    def _get_application(self, application_id: int) -> Optional[Application]:
        ...

    def _get_application_resume(self, application_id: int) -> Optional[ResumeFile]:
        return resume_of(self._get_application(application_id))

    @abstractmethod
    def _create_application(self, data: ApplicationCreate) -> Application:
        ...

    @abstractmethod
    def _get_about_us(self) -> AboutUs:
        ...

    @abstractmethod
    def _update_about_us(self, content: str) -> AboutUs:
        ...
