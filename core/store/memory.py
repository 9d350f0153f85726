# core/store/memory.py
import copy

from .base import RecordStore


class MemoryRecordStore(RecordStore):
    """
    In-process store. Single-process only and reset on restart.

    Records are deep-copied in both directions so a caller holding a record
    cannot change stored state without going through `save`.
    """

    backend_name = "memory"

    def __init__(self, initial=None):
        self._collections = {}
        for collection, records in (initial or {}).items():
            self.save(collection, records)

    def _read(self, collection):
        if collection not in self._collections:
            return None
        return copy.deepcopy(self._collections[collection])

    def _write(self, collection, records):
        self._collections[collection] = copy.deepcopy(records)

    def clear(self):
        self._collections = {}
