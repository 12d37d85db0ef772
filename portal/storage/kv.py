"""
Key-value storage: whole collections serialized as JSON blobs.

Keys:
    all-applications -> JSON array of every application (camelCase fields)
    about-us         -> JSON object of the About Us record

Every write reads the whole blob, changes it, and writes it all back. There
is no compare-and-swap: two concurrent creations can read the same blob and
the later write drops the other one's application (and both may get the
same id). Last writer wins. Use the relational backend where that matters.
"""

import json
from typing import List, Optional

from portal.schemas.schemas import ABOUT_US_ID, AboutUs, Application, ApplicationCreate, ApplicationSummary
from portal.storage.base import StorageBackend, newest_first, utcnow


APPLICATIONS_KEY = "all-applications"
ABOUT_US_KEY = ABOUT_US_ID


class KeyValueStorage(StorageBackend):
    name = "kv"

    def __init__(self, blob_store, *args, **kwargs):
        """
        Args:
            blob_store: object with get(key) -> Optional[str], set(key, value)
                and ping() -> bool, e.g. MongoBlobStore
        """
        super().__init__(*args, **kwargs)
        self.blobs = blob_store

    def _load_applications(self) -> List[Application]:
        raw = self.blobs.get(APPLICATIONS_KEY)
        if not raw:
            return []
        return [Application.model_validate(item) for item in json.loads(raw)]

    def _save_applications(self, applications: List[Application]) -> None:
        payload = [a.model_dump(mode="json", by_alias=True) for a in applications]
        self.blobs.set(APPLICATIONS_KEY, json.dumps(payload))

    def _list_applications(self) -> List[ApplicationSummary]:
        return [ApplicationSummary.from_application(a) for a in newest_first(self._load_applications())]

    def _get_application(self, application_id: int) -> Optional[Application]:
        for application in self._load_applications():
            if application.id == application_id:
                return application
        return None

    def _create_application(self, data: ApplicationCreate) -> Application:
        applications = self._load_applications()
        next_id = max((a.id for a in applications), default=0) + 1

        application = Application(**data.model_dump(), id=next_id, created_at=utcnow())
        applications.append(application)
        self._save_applications(applications)
        return application

    def _get_about_us(self) -> AboutUs:
        raw = self.blobs.get(ABOUT_US_KEY)
        if raw:
            return AboutUs.model_validate(json.loads(raw))

        about_us = self.default_about_us_record()
        self._save_about_us(about_us)
        return about_us

    def _save_about_us(self, about_us: AboutUs) -> None:
        self.blobs.set(ABOUT_US_KEY, about_us.model_dump_json(by_alias=True))

    def _update_about_us(self, content: str) -> AboutUs:
        about_us = AboutUs(content=content, updated_at=utcnow())
        self._save_about_us(about_us)
        return about_us

    def ping(self) -> bool:
        return self.blobs.ping()
