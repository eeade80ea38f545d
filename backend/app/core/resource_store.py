"""Resource Store — one collection's ordered in-memory storage and identity assignment.

Invariants:
    - next id = max(existing ids) + 1, or 1 when empty — ids never reused while a
      higher id exists, deleted ids never handed out again by the same store
    - update forces "id" back to the path id regardless of patch content
    - update writes back in place; delete splices — relative order always preserved
    - Records handed in or out are deep copies — callers never alias stored state
    - Every operation holds the store lock (insert's id computation + append is atomic)

Design Decisions:
    - One generic store reused for all 12 resources (no per-resource subclasses)
    - RLock per store: async handlers never interleave inside a synchronous call,
      the lock extends the same guarantee to threaded callers
    - Tracks the highest id ever assigned so deleting the tail record cannot
      make its id reappear
"""

import copy
import threading
from typing import Iterable, Mapping

from app.core.domain_types import Record, RecordId
from app.core.errors import ResourceNotFoundError


def _is_int_id(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ResourceStore:
    """Mutable, ordered collection of records of one entity type."""

    def __init__(self, label: str, records: Iterable[Mapping] = ()):
        self.label = label
        self._records: list[Record] = [copy.deepcopy(dict(r)) for r in records]
        self._lock = threading.RLock()
        self._high_water = max(
            (r["id"] for r in self._records if _is_int_id(r.get("id"))),
            default=0,
        )

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def list_all(self) -> list[Record]:
        """Full ordered sequence (copies)."""
        with self._lock:
            return copy.deepcopy(self._records)

    def find_by_id(self, record_id: int) -> Record | None:
        with self._lock:
            index = self._index_of(record_id)
            if index is None:
                return None
            return copy.deepcopy(self._records[index])

    def get(self, record_id: int) -> Record:
        """Like find_by_id, but raises ResourceNotFoundError."""
        record = self.find_by_id(record_id)
        if record is None:
            raise ResourceNotFoundError(self.label, record_id)
        return record

    def exists(self, record_id: int) -> bool:
        with self._lock:
            return self._index_of(record_id) is not None

    def next_id(self) -> RecordId:
        with self._lock:
            return RecordId(self._high_water + 1)

    def insert(self, partial: Mapping) -> Record:
        """Assign the next id, append, return the stored record."""
        with self._lock:
            record_id = self.next_id()
            record = {"id": record_id, **copy.deepcopy(dict(partial))}
            record["id"] = record_id
            self._records.append(record)
            self._high_water = record_id
            return copy.deepcopy(record)

    def update(self, record_id: int, patch: Mapping) -> Record:
        """Shallow-merge patch over the record in place; id is forced."""
        with self._lock:
            index = self._index_of(record_id)
            if index is None:
                raise ResourceNotFoundError(self.label, record_id)
            updated = {**self._records[index], **copy.deepcopy(dict(patch))}
            updated["id"] = self._records[index]["id"]
            self._records[index] = updated
            return copy.deepcopy(updated)

    def delete(self, record_id: int) -> Record:
        """Remove the record (positional splice) and return it."""
        with self._lock:
            index = self._index_of(record_id)
            if index is None:
                raise ResourceNotFoundError(self.label, record_id)
            return self._records.pop(index)

    def _index_of(self, record_id: int) -> int | None:
        for index, record in enumerate(self._records):
            if _is_int_id(record.get("id")) and record["id"] == record_id:
                return index
        return None
