"""
Environment Selector - picks the storage backend once per process.

STORAGE_BACKEND=memory|kv|relational forces a backend. With the default
"auto":
    DATABASE_URL set      -> relational
    NETLIFY=true          -> kv (platform blob store, backed by MongoDB here)
    otherwise             -> memory (local development)
"""

import logging

from portal.core.config import Settings
from portal.storage.base import StorageBackend

logger = logging.getLogger(__name__)

BACKEND_KINDS = ("memory", "kv", "relational")


def select_backend_kind(settings: Settings) -> str:
    if settings.storage_backend != "auto":
        return settings.storage_backend
    if settings.database_url:
        return "relational"
    if settings.netlify:
        return "kv"
    return "memory"


def create_storage(settings: Settings) -> StorageBackend:
    """Build the backend chosen for this process. Call once, at app creation."""
    kind = select_backend_kind(settings)
    common = {"default_about_us": settings.about_us_default_content}

    if kind == "relational":
        from portal.db.postgres import make_engine
        from portal.storage.relational import RelationalStorage

        if not settings.database_url:
            raise RuntimeError("STORAGE_BACKEND=relational requires DATABASE_URL")
        engine = make_engine(settings.database_url, echo=settings.debug)
        storage = RelationalStorage(engine, **common)
        if settings.auto_create_schema:
            try:
                storage.ensure_schema()
            except Exception as e:
                # Reads still fail open and writes report 500 until the database is reachable
                logger.warning("Schema initialization failed: %s", e.__class__.__name__)
        logger.info("Storage backend: relational (%s)", settings.safe_database_url)
        return storage

    if kind == "kv":
        from portal.services.mongo_service import MongoBlobStore
        from portal.storage.kv import KeyValueStorage

        storage = KeyValueStorage(MongoBlobStore(collection_name=settings.kv_collection), **common)
        logger.info("Storage backend: kv (collection %s)", settings.kv_collection)
        return storage

    from portal.storage.memory import MemoryStorage

    logger.info("Storage backend: memory (not durable)")
    return MemoryStorage(**common)
