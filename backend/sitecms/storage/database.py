# sitecms/storage/database.py
from __future__ import annotations

from typing import Any, Dict, List, Optional, Type

from sitecms.extensions import db
from sitecms.models import CustomButton, MenuItem, Page, SiteSetting, User
from sitecms.models.base import BaseModel
from sitecms.utils.timestamps import utc_now
from sitecms.utils.transaction import storage_errors, transactional
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
    Record,
)

MODELS_BY_KIND: Dict[str, Type[BaseModel]] = {
    PAGES.name: Page,
    MENU_ITEMS.name: MenuItem,
    CUSTOM_BUTTONS.name: CustomButton,
    SITE_SETTINGS.name: SiteSetting,
    USERS.name: User,
}


class DatabaseCollection(Collection):
    """
    One relational table behind the collection contract.

    Ids are assigned by the database; every write commits before returning.
    Must be used inside a Flask application context.
    """

    def __init__(self, kind: EntityKind, model: Type[BaseModel]):
        self.kind = kind
        self.model = model

    def list(self) -> List[Record]:
        with storage_errors():
            rows = db.session.execute(
                db.select(self.model).order_by(self.model.id.asc())
            ).scalars()
            return [row.to_record() for row in rows]

    def count(self) -> int:
        with storage_errors():
            return db.session.execute(
                db.select(db.func.count()).select_from(self.model)
            ).scalar_one()

    def get_by_id(self, row_id: int) -> Optional[Record]:
        with storage_errors():
            row = db.session.get(self.model, row_id)
            return row.to_record() if row is not None else None

    def get_by_unique_key(self, value: Any) -> Optional[Record]:
        key = self._require_unique_key()
        with storage_errors():
            row = db.session.execute(
                db.select(self.model).filter_by(**{key: value})
            ).scalars().first()
            return row.to_record() if row is not None else None

    def create(self, fields: Record) -> Record:
        record = {**self.kind.defaults, **fields}
        record.pop("id", None)

        now = utc_now()
        for name in self.kind.stamp_on_create:
            record[name] = now

        row = self.model()
        self._assign(row, record)

        with transactional(*self._unique_context(record)):
            db.session.add(row)

        with storage_errors():
            return row.to_record()

    def update(self, row_id: int, fields: Record) -> Optional[Record]:
        with storage_errors():
            row = db.session.get(self.model, row_id)
        if row is None:
            return None

        with transactional(*self._unique_context(fields)):
            self._assign(row, fields)
            self._touch(row)

        with storage_errors():
            return row.to_record()

    def update_many(self, changes: Dict[int, Record]) -> List[Record]:
        if not changes:
            return []

        with storage_errors():
            rows = db.session.execute(
                db.select(self.model).where(self.model.id.in_(list(changes)))
            ).scalars().all()
        by_id = {row.id: row for row in rows}

        with transactional(self.kind, self.kind.unique_key):
            for row_id, fields in changes.items():
                row = by_id.get(row_id)
                if row is None:
                    continue
                self._assign(row, fields)
                self._touch(row)

        with storage_errors():
            return [by_id[row_id].to_record() for row_id in changes if row_id in by_id]

    def delete(self, row_id: int) -> bool:
        with storage_errors():
            row = db.session.get(self.model, row_id)
        if row is None:
            return False

        with transactional():
            db.session.delete(row)
        return True

    def _assign(self, row: BaseModel, fields: Record) -> None:
        for name, value in fields.items():
            if name == "id":
                continue
            if name not in self.model.__mapper__.column_attrs.keys():
                raise TypeError(f"{self.model.__name__} has no field {name!r}")
            setattr(row, name, value)

    def _touch(self, row: BaseModel) -> None:
        if self.kind.touch_on_update:
            setattr(row, self.kind.touch_on_update, utc_now())

    def _unique_context(self, fields: Record):
        key = self.kind.unique_key
        if key and key in fields:
            return self.kind, key, fields[key]
        return self.kind, key, None


class DatabaseStore(EntityStore):
    """Durable backend on the Flask-SQLAlchemy session."""

    backend_name = "database"

    def __init__(self):
        super().__init__({
            kind.name: DatabaseCollection(kind, MODELS_BY_KIND[kind.name])
            for kind in ALL_KINDS
        })
