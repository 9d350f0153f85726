# core/store/base.py
"""
Record Store contract for VentureLink.

Every collection is an ordered list of JSON-compatible dicts. Backends only
have to implement whole-collection reads and writes; lookups and merge-patch
updates are built on top of those two primitives.

Failure policy (shared by all backends):
- a read/parse failure returns the collection default (empty list)
- a write failure is logged and dropped, never raised to the caller
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

from core.constants import COLLECTIONS

logger = logging.getLogger("venturelink.store")

Record = dict
Predicate = Callable[[dict], bool]


class RecordStore(ABC):
    """
    Abstract base class for record persistence.

    Business services receive an instance of this class and never import a
    concrete backend. Subclasses implement `_read` and `_write`.
    """

    backend_name = "abstract"

    def get_all(self, collection: str) -> list[Record]:
        """Return every record of a collection, in stored order."""
        self._check_collection(collection)
        try:
            records = self._read(collection)
        except Exception as e:
            logger.error(f"Failed to load collection '{collection}' from {self.backend_name}: {e}")
            return self.default(collection)
        if records is None:
            return self.default(collection)
        return records

    def save(self, collection: str, records: list[Record]) -> None:
        """Overwrite a collection with `records` (no partial patch)."""
        self._check_collection(collection)
        try:
            self._write(collection, list(records))
        except Exception as e:
            logger.error(f"Failed to save collection '{collection}' to {self.backend_name}: {e}")

    def find(self, collection: str, predicate: Predicate) -> Optional[Record]:
        for record in self.get_all(collection):
            if predicate(record):
                return record
        return None

    def filter(self, collection: str, predicate: Predicate) -> list[Record]:
        return [r for r in self.get_all(collection) if predicate(r)]

    def get(self, collection: str, record_id: str) -> Optional[Record]:
        return self.find(collection, lambda r: r.get("id") == record_id)

    def update(self, collection: str, record_id: str, changes: dict) -> Optional[Record]:
        """
        Merge `changes` into the record with the given id.

        Returns the updated record, or None if no record has that id.
        """
        records = self.get_all(collection)
        for index, record in enumerate(records):
            if record.get("id") == record_id:
                updated = {**record, **changes}
                records[index] = updated
                self.save(collection, records)
                return updated
        return None

    def default(self, collection: str) -> list[Record]:
        return []

    def is_available(self) -> bool:
        return True

    def close(self) -> None:
        """Release backend resources. Safe to call more than once."""

    @abstractmethod
    def _read(self, collection: str) -> Optional[list[Record]]:
        """Return the stored records, or None if the collection was never written."""

    @abstractmethod
    def _write(self, collection: str, records: list[Record]) -> None:
        """Persist the full collection."""

    @staticmethod
    def _check_collection(collection: str) -> None:
        if collection not in COLLECTIONS:
            raise ValueError(f"Unknown collection: {collection}")
