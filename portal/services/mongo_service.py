"""
MongoDB Service - key-value blob store.

Each key is one document:
    {"_id": "<key>", "value": "<json text>", "updated_at": <datetime>}

The value is opaque to MongoDB; callers serialize whole collections into
it, the same way a platform blob store is used.
"""

from datetime import datetime, timezone
from typing import Optional

from pymongo.collection import Collection

from portal.db.mongodb import get_collection


class MongoBlobStore:
    """
    Blob store over a single MongoDB collection.
    set() replaces the whole value; there is no version check.
    """

    def __init__(self, collection: Optional[Collection] = None, collection_name: str = "blobs"):
        self.collection: Collection = collection if collection is not None else get_collection(collection_name)

    def get(self, key: str) -> Optional[str]:
        doc = self.collection.find_one({"_id": key})
        if doc is None:
            return None
        return doc.get("value")

    def set(self, key: str, value: str) -> None:
        # Upsert: update if exists, insert if not
        self.collection.replace_one(
            {"_id": key},
            {"_id": key, "value": value, "updated_at": datetime.now(timezone.utc)},
            upsert=True
        )

    def ping(self) -> bool:
        try:
            self.collection.database.client.admin.command("ping")
            return True
        except Exception:
            return False
