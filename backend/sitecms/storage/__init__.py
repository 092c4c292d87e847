from .base import (
    ALL_KINDS,
    CUSTOM_BUTTONS,
    MENU_ITEMS,
    PAGES,
    SITE_SETTINGS,
    USERS,
    Collection,
    EntityKind,
    EntityStore,
    StorageError,
    UniqueConstraintError,
)
from .memory import MemoryCollection, MemoryStore


def build_store(backend: str) -> EntityStore:
    """Instantiate the configured backend ("memory" or "database")."""
    if backend == "memory":
        return MemoryStore()
    if backend == "database":
        from .database import DatabaseStore
        return DatabaseStore()
    raise ValueError(f"Unknown storage backend: {backend!r}")
