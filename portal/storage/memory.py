"""
Volatile storage: everything lives in this instance, gone on restart.

For local development. Serverless invocations may or may not reuse the
process, so nothing here is durable.
"""

from typing import List, Optional

from portal.schemas.schemas import AboutUs, Application, ApplicationCreate, ApplicationSummary
from portal.storage.base import StorageBackend, newest_first, utcnow


class MemoryStorage(StorageBackend):
    name = "memory"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._applications: List[Application] = []
        self._next_id = 1
        self._about_us: Optional[AboutUs] = None

    def _list_applications(self) -> List[ApplicationSummary]:
        return [ApplicationSummary.from_application(a) for a in newest_first(self._applications)]

    def _get_application(self, application_id: int) -> Optional[Application]:
        for application in self._applications:
            if application.id == application_id:
                return application
        return None

    def _create_application(self, data: ApplicationCreate) -> Application:
        application = Application(
            **data.model_dump(),
            id=self._next_id,
            created_at=utcnow(),
        )
        self._next_id += 1
        self._applications.append(application)
        return application

    def _get_about_us(self) -> AboutUs:
        if self._about_us is None:
            self._about_us = self.default_about_us_record()
        return self._about_us

    def _update_about_us(self, content: str) -> AboutUs:
        self._about_us = AboutUs(content=content, updated_at=utcnow())
        return self._about_us
