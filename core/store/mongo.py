# core/store/mongo.py
import logging

from pymongo import ASCENDING, MongoClient
from pymongo.errors import PyMongoError

from .base import RecordStore

logger = logging.getLogger("venturelink.store")

POSITION_FIELD = "_position"


class MongoRecordStore(RecordStore):
    """
    One MongoDB collection per record collection.

    Records keep their string `id`; Mongo's `_id` is never exposed. Writes are
    a delete-then-insert of the whole collection, so there is no atomic
    increment for counters (find-then-overwrite, same as every backend).
    """

    backend_name = "mongo"

    def __init__(self, url, database_name, timeout_ms=2000, client=None):
        self.url = url
        self.database_name = database_name
        self.client = client or MongoClient(url, serverSelectionTimeoutMS=timeout_ms)
        self.db = self.client[database_name]

    def _read(self, collection):
        cursor = self.db[collection].find({}, {"_id": 0}).sort(POSITION_FIELD, ASCENDING)
        records = []
        for doc in cursor:
            doc.pop(POSITION_FIELD, None)
            records.append(doc)
        return records

    def _write(self, collection, records):
        documents = [{**record, POSITION_FIELD: position} for position, record in enumerate(records)]
        target = self.db[collection]
        target.delete_many({})
        if documents:
            target.insert_many(documents)

    def ping(self) -> bool:
        try:
            self.client.admin.command("ping")
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed ({self.url}): {e}")
            return False
        return True

    def is_available(self) -> bool:
        return self.ping()

    def close(self) -> None:
        self.client.close()
