from fastapi import Request

from portal.storage.base import StorageBackend


def get_storage(request: Request) -> StorageBackend:
    """
    Dependency for FastAPI route injection.
    The backend is chosen once in create_app() and kept on app.state.
    """
    return request.app.state.storage
