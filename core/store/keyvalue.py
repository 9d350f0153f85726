# core/store/keyvalue.py
"""
Key-value file backend.

Mirrors the browser-local-storage layout: a single JSON document whose
entries are named `venturelink_<collection>` and whose values are
JSON-serialized arrays (strings, exactly as `localStorage.setItem` would hold
them). A damaged entry only affects its own collection.
"""
import json
import logging
import os
import tempfile
from pathlib import Path

from .base import RecordStore

logger = logging.getLogger("venturelink.store")

KEY_PREFIX = "venturelink_"


def storage_key(collection: str) -> str:
    return f"{KEY_PREFIX}{collection}"


class KeyValueFileStore(RecordStore):
    backend_name = "file"

    def __init__(self, path):
        self.path = Path(path)

    # -- raw key-value access ------------------------------------------

    def get_item(self, key: str):
        return self._load_entries().get(key)

    def set_item(self, key: str, value: str) -> None:
        entries = self._load_entries()
        entries[key] = value
        self._dump_entries(entries)

    def remove_item(self, key: str) -> None:
        entries = self._load_entries()
        if entries.pop(key, None) is not None:
            self._dump_entries(entries)

    def clear(self) -> None:
        for key in list(self._load_entries()):
            if key.startswith(KEY_PREFIX):
                self.remove_item(key)

    # -- RecordStore ---------------------------------------------------

    def _read(self, collection):
        raw = self.get_item(storage_key(collection))
        if raw is None:
            return None
        records = json.loads(raw)
        if not isinstance(records, list):
            raise ValueError(f"entry {storage_key(collection)} is not an array")
        return records

    def _write(self, collection, records):
        self.set_item(storage_key(collection), json.dumps(records, default=str))

    def is_available(self) -> bool:
        directory = self.path.parent
        return directory.exists() and os.access(directory, os.W_OK)

    # -- file handling -------------------------------------------------

    def _load_entries(self) -> dict:
        try:
            content = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        try:
            entries = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error(f"Error parsing store file {self.path}: {e}")
            return {}
        return entries if isinstance(entries, dict) else {}

    def _dump_entries(self, entries: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".venturelink-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(entries, handle, indent=2)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
