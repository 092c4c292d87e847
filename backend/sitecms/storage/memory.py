# sitecms/storage/memory.py
from __future__ import annotations

import copy
import threading
from collections import OrderedDict
from typing import Any, Dict, Iterable, List, Optional

from sitecms.utils.timestamps import utc_now
from .base import ALL_KINDS, Collection, EntityKind, EntityStore, Record, UniqueConstraintError


class MemoryCollection(Collection):
    """
    Insertion-ordered rows held in process memory.

    Ids come from a monotonic counter seeded with the highest id passed in
    at construction, so a deleted id is never handed out again.
    """

    def __init__(self, kind: EntityKind, rows: Optional[Iterable[Record]] = None):
        self.kind = kind
        self._lock = threading.RLock()
        self._rows: "OrderedDict[int, Record]" = OrderedDict()
        for row in rows or ():
            self._rows[int(row["id"])] = copy.deepcopy(dict(row))
        self._last_id = max(self._rows, default=0)

    def list(self) -> List[Record]:
        with self._lock:
            return [copy.deepcopy(row) for row in self._rows.values()]

    def count(self) -> int:
        return len(self._rows)

    def get_by_id(self, row_id: int) -> Optional[Record]:
        with self._lock:
            row = self._rows.get(row_id)
            return copy.deepcopy(row) if row is not None else None

    def get_by_unique_key(self, value: Any) -> Optional[Record]:
        key = self._require_unique_key()
        with self._lock:
            for row in self._rows.values():
                if row.get(key) == value:
                    return copy.deepcopy(row)
        return None

    def create(self, fields: Record) -> Record:
        record = {**self.kind.defaults, **copy.deepcopy(fields)}
        record.pop("id", None)

        with self._lock:
            self._assert_unique(record)

            now = utc_now()
            for name in self.kind.stamp_on_create:
                record[name] = now

            self._last_id += 1
            record["id"] = self._last_id
            self._rows[record["id"]] = record
            return copy.deepcopy(record)

    def update(self, row_id: int, fields: Record) -> Optional[Record]:
        with self._lock:
            if row_id not in self._rows:
                return None
            return self._apply(row_id, fields)

    def update_many(self, changes: Dict[int, Record]) -> List[Record]:
        with self._lock:
            known = [row_id for row_id in changes if row_id in self._rows]
            # check the batch as a whole (against itself too) before any write
            staged = {row_id: {**self._rows[row_id], **changes[row_id]} for row_id in known}
            prospective = {**self._rows, **staged}
            for row_id, row in staged.items():
                self._assert_unique(row, exclude_id=row_id, rows=prospective)
            return [self._apply(row_id, changes[row_id], check=False) for row_id in known]

    def delete(self, row_id: int) -> bool:
        with self._lock:
            return self._rows.pop(row_id, None) is not None

    def _apply(self, row_id: int, fields: Record, check: bool = True) -> Record:
        changes = {k: copy.deepcopy(v) for k, v in fields.items() if k != "id"}
        if check:
            self._assert_unique(changes, exclude_id=row_id)

        updated = {**self._rows[row_id], **changes}
        if self.kind.touch_on_update:
            updated[self.kind.touch_on_update] = utc_now()

        self._rows[row_id] = updated
        return copy.deepcopy(updated)

    def _assert_unique(
        self,
        record: Record,
        exclude_id: Optional[int] = None,
        rows: Optional[Dict[int, Record]] = None,
    ) -> None:
        key = self.kind.unique_key
        if not key or key not in record:
            return
        value = record[key]
        for row_id, row in (self._rows if rows is None else rows).items():
            if row_id != exclude_id and row.get(key) == value:
                raise UniqueConstraintError(self.kind.name, key, value)


class MemoryStore(EntityStore):
    """Ephemeral backend; state is lost when the process exits."""

    backend_name = "memory"

    def __init__(self, initial: Optional[Dict[str, Iterable[Record]]] = None):
        initial = initial or {}
        super().__init__({
            kind.name: MemoryCollection(kind, initial.get(kind.name))
            for kind in ALL_KINDS
        })
