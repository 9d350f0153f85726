# core/store/__init__.py
"""
Record Store construction and the process-wide instance.

The store is built once in `CoreConfig.ready()` and closed at interpreter
exit. Views read it with `get_store()`; tests swap it with `set_store()`.
"""
import logging

from .base import RecordStore
from .documents import DocumentRecordStore
from .keyvalue import KeyValueFileStore
from .memory import MemoryRecordStore

logger = logging.getLogger("venturelink.store")

BACKEND_MEMORY = "memory"
BACKEND_FILE = "file"
BACKEND_DATABASE = "database"
BACKEND_MONGO = "mongo"

BACKENDS = (BACKEND_MEMORY, BACKEND_FILE, BACKEND_DATABASE, BACKEND_MONGO)

_store = None


def build_store(config: dict) -> RecordStore:
    """
    Build the backend named by config["BACKEND"].

    A `mongo` backend that does not answer a ping falls back to the
    key-value file backend.
    """
    backend = (config.get("BACKEND") or BACKEND_FILE).lower()

    if backend == BACKEND_MEMORY:
        return MemoryRecordStore()

    if backend == BACKEND_FILE:
        return KeyValueFileStore(config["PATH"])

    if backend == BACKEND_DATABASE:
        return DocumentRecordStore()

    if backend == BACKEND_MONGO:
        from .mongo import MongoRecordStore

        store = MongoRecordStore(
            config["MONGODB_URL"],
            config["MONGODB_DATABASE"],
            timeout_ms=config.get("MONGODB_TIMEOUT_MS", 2000),
        )
        if store.ping():
            logger.info(f"Record store: MongoDB at {config['MONGODB_URL']}")
            return store
        store.close()
        logger.warning("MongoDB not available, falling back to key-value file store")
        return KeyValueFileStore(config["PATH"])

    raise ValueError(f"Unknown record store backend: {backend!r} (expected one of {', '.join(BACKENDS)})")


def get_store() -> RecordStore:
    global _store
    if _store is None:
        from django.conf import settings

        _store = build_store(settings.VENTURELINK_STORE)
        logger.info(f"Record store initialised lazily: {_store.backend_name}")
    return _store


def set_store(store: RecordStore) -> RecordStore:
    """Install `store` as the process store and return the previous one."""
    global _store
    previous = _store
    _store = store
    return previous


def close_store() -> None:
    global _store
    if _store is not None:
        _store.close()
        _store = None


__all__ = [
    "RecordStore",
    "MemoryRecordStore",
    "KeyValueFileStore",
    "DocumentRecordStore",
    "build_store",
    "get_store",
    "set_store",
    "close_store",
    "BACKENDS",
]
