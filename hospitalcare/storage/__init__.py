from fastapi import Request
from hospitalcare.config import Settings
from hospitalcare.storage.base import Storage, initial_beds, day_window
from hospitalcare.storage.memory import MemStorage


def build_storage(settings: Settings) -> Storage:
    """Construct the backend named by STORAGE_BACKEND."""
    if settings.storage_backend == "memory":
        return MemStorage()
    if settings.storage_backend == "database":
        from hospitalcare.storage.database import DatabaseStorage
        return DatabaseStorage(settings.database_url)
    raise ValueError(f"Unknown storage backend: {settings.storage_backend!r}")


def get_storage(request: Request) -> Storage:
    """FastAPI dependency: the store the application was built with."""
    return request.app.state.storage


__all__ = ["Storage", "MemStorage", "build_storage", "get_storage", "initial_beds", "day_window"]
