"""
Storage module - one contract, three backends.

Usage:
    from portal.storage import create_storage
    storage = create_storage(get_settings())
"""
from portal.storage.base import StorageBackend, StorageError
from portal.storage.kv import KeyValueStorage
from portal.storage.memory import MemoryStorage
from portal.storage.relational import RelationalStorage
from portal.storage.selector import create_storage, select_backend_kind

__all__ = [
    "StorageBackend",
    "StorageError",
    "KeyValueStorage",
    "MemoryStorage",
    "RelationalStorage",
    "create_storage",
    "select_backend_kind",
]
