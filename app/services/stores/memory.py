"""
In-Memory Store Implementation

Keeps records in a Python list for the lifetime of the process.

Behavior:
    - Preserves insertion order
    - Guards every read and write with one re-entrant lock per store
    - Remembers the highest ID it ever held so IDs are never reused

Author: Khalil Bannouri
Version: 3.0.0
"""

import logging
import threading
from typing import ContextManager, Iterable, Optional

from app.services.ids import next_id, numeric_id
from app.services.stores.base import BaseStore, RecordT

logger = logging.getLogger(__name__)


class InMemoryStore(BaseStore[RecordT]):
    """
    List-backed store.

    Attributes:
        name: Collection name used in log messages

    Example:
        >>> store = InMemoryStore("dishes")
        >>> store.next_id()
        '1'
    """

    def __init__(self, name: str, records: Optional[Iterable[RecordT]] = None):
        self.name = name
        self._records: list[RecordT] = []
        self._lock = threading.RLock()
        self._highest_id = 0

        for record in records or []:
            self.add(record)

        logger.info(f"InMemoryStore '{name}' initialized with {len(self._records)} records")

    @property
    def provider_name(self) -> str:
        """Return the provider name."""
        return "memory"

    def locked(self) -> ContextManager:
        return self._lock

    def _index_of(self, record_id: str) -> int:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return -1

    def _track_id(self, record_id: str) -> None:
        value = numeric_id(record_id)
        if value is not None and value > self._highest_id:
            self._highest_id = value

    def list(self) -> list[RecordT]:
        with self._lock:
            return list(self._records)

    def get(self, record_id: str) -> Optional[RecordT]:
        with self._lock:
            index = self._index_of(record_id)
            return self._records[index] if index > -1 else None

    def next_id(self) -> str:
        with self._lock:
            return next_id((r.id for r in self._records), floor=self._highest_id)

    def add(self, record: RecordT) -> RecordT:
        with self._lock:
            if self._index_of(record.id) > -1:
                raise ValueError(f"Duplicate id in {self.name}: {record.id}")
            self._records.append(record)
            self._track_id(record.id)
            logger.debug(f"{self.name}: added #{record.id}")
            return record

    def save(self, record: RecordT) -> RecordT:
        with self._lock:
            index = self._index_of(record.id)
            if index < 0:
                raise KeyError(record.id)
            self._records[index] = record
            return record

    def delete(self, record_id: str) -> bool:
        with self._lock:
            index = self._index_of(record_id)
            if index > -1:
                self._records.pop(index)
                logger.debug(f"{self.name}: removed #{record_id}")
                return True
            return False

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def health_check(self) -> bool:
        return True

    def __repr__(self):
        return f"<InMemoryStore {self.name} ({self.count()} records)>"
