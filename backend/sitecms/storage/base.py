# sitecms/storage/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

Record = Dict[str, Any]


class StorageError(Exception):
    """The backend could not complete an operation."""


class UniqueConstraintError(StorageError):
    """A write collided with an existing unique key."""

    def __init__(self, kind: str, key: str, value: Any = None):
        self.kind = kind
        self.key = key
        self.value = value
        super().__init__(f"{kind}.{key} must be unique (got {value!r})")


@dataclass(frozen=True)
class EntityKind:
    """
    Describes one collection of the entity store.

    - unique_key: field looked up by get_by_unique_key and kept unique
    - stamp_on_create: server-controlled timestamp fields set on create
    - touch_on_update: timestamp field refreshed by every update
    - defaults: values filled in when create() omits them
    """
    name: str
    unique_key: Optional[str] = None
    stamp_on_create: Tuple[str, ...] = ()
    touch_on_update: Optional[str] = None
    defaults: Dict[str, Any] = field(default_factory=dict)


PAGES = EntityKind(
    "pages",
    unique_key="slug",
    stamp_on_create=("created_at", "updated_at"),
    touch_on_update="updated_at",
)
MENU_ITEMS = EntityKind("menu_items")
CUSTOM_BUTTONS = EntityKind(
    "custom_buttons",
    stamp_on_create=("created_at",),
    defaults={"style": "primary", "size": "default", "open_in_new_tab": True},
)
SITE_SETTINGS = EntityKind("site_settings", unique_key="name")
USERS = EntityKind("users", unique_key="username")

ALL_KINDS = (PAGES, MENU_ITEMS, CUSTOM_BUTTONS, SITE_SETTINGS, USERS)


class Collection(ABC):
    """
    CRUD contract shared by every backend.

    Records are plain dicts; callers never get a live reference into the
    backend. Missing rows are reported as None / False, not exceptions.
    """

    kind: EntityKind

    @abstractmethod
    def list(self) -> List[Record]:
        """All rows, ascending by id."""

    @abstractmethod
    def get_by_id(self, row_id: int) -> Optional[Record]:
        ...

    @abstractmethod
    def get_by_unique_key(self, value: Any) -> Optional[Record]:
        ...

    @abstractmethod
    def create(self, fields: Record) -> Record:
        ...

    @abstractmethod
    def update(self, row_id: int, fields: Record) -> Optional[Record]:
        ...

    @abstractmethod
    def update_many(self, changes: Dict[int, Record]) -> List[Record]:
        """Apply several partial updates; unknown ids are skipped."""

    @abstractmethod
    def delete(self, row_id: int) -> bool:
        ...

    def count(self) -> int:
        return len(self.list())

    def _require_unique_key(self) -> str:
        if not self.kind.unique_key:
            raise TypeError(f"{self.kind.name} has no unique key")
        return self.kind.unique_key


class EntityStore:
    """Owns one collection per entity kind."""

    backend_name = "abstract"

    def __init__(self, collections: Dict[str, Collection]):
        self._collections = collections

    def collection(self, kind: EntityKind) -> Collection:
        return self._collections[kind.name]

    @property
    def pages(self) -> Collection:
        return self.collection(PAGES)

    @property
    def menu_items(self) -> Collection:
        return self.collection(MENU_ITEMS)

    @property
    def custom_buttons(self) -> Collection:
        return self.collection(CUSTOM_BUTTONS)

    @property
    def settings(self) -> Collection:
        return self.collection(SITE_SETTINGS)

    @property
    def users(self) -> Collection:
        return self.collection(USERS)
