import os

# Keep developer .env / shell settings from picking a real backend for the module-level app
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from typing import Dict, Optional  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from portal.core.config import Settings  # noqa: E402
from portal.db.postgres import make_engine  # noqa: E402
from portal.main import create_app  # noqa: E402
from portal.storage.kv import KeyValueStorage  # noqa: E402
from portal.storage.memory import MemoryStorage  # noqa: E402
from portal.storage.relational import RelationalStorage  # noqa: E402


class DictBlobStore:
    """In-process blob store with the MongoBlobStore interface."""

    def __init__(self):
        self.data: Dict[str, str] = {}
        self.writes = 0

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.writes += 1
        self.data[key] = value

    def ping(self) -> bool:
        return True


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, storage_backend="memory", log_level="WARNING")


@pytest.fixture
def memory_storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def blob_store() -> DictBlobStore:
    return DictBlobStore()


@pytest.fixture
def kv_storage(blob_store) -> KeyValueStorage:
    return KeyValueStorage(blob_store)


@pytest.fixture
def sqlite_engine():
    engine = make_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,  # one shared connection for the in-memory database
    )
    yield engine
    engine.dispose()


@pytest.fixture
def relational_storage(sqlite_engine) -> RelationalStorage:
    storage = RelationalStorage(sqlite_engine)
    storage.ensure_schema()
    return storage


@pytest.fixture(params=["memory", "kv", "relational"])
def storage(request):
    """Every backend, for contract tests."""
    return request.getfixturevalue(f"{request.param}_storage")


@pytest.fixture
def app(settings, memory_storage):
    return create_app(settings=settings, storage=memory_storage)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
