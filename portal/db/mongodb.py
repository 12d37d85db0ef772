"""
MongoDB Connection Utility

MongoDB backs the key-value blob store: one document per key, the value is
an opaque JSON string. It stands in for the hosting platform's blob store.
"""
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from portal.core.config import get_settings

# Global client (connection pooling handled internally by pymongo)
_client: Optional[MongoClient] = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        settings = get_settings()
        _client = MongoClient(settings.mongodb_uri, serverSelectionTimeoutMS=5000)
    return _client


def get_mongo_db() -> Database:
    """Get the portal database"""
    return get_mongo_client()[get_settings().mongodb_db]


def get_collection(name: str) -> Collection:
    return get_mongo_db()[name]

