# core/store/documents.py
from django.db import connection, transaction
from django.db.utils import DatabaseError

from .base import RecordStore


class DocumentRecordStore(RecordStore):
    """
    Stores each record as a `core.Document` row in the Django database.

    A save replaces the whole collection inside one transaction; there is no
    locking across a read-modify-write sequence (last write wins).
    """

    backend_name = "database"

    def _read(self, collection):
        from core.models import Document

        rows = Document.objects.filter(collection=collection).order_by("position").values_list("data", flat=True)
        return list(rows)

    def _write(self, collection, records):
        from core.models import Document

        documents = [
            Document(
                collection=collection,
                record_id=str(record.get("id", position)),
                position=position,
                data=record,
            )
            for position, record in enumerate(records)
        ]
        with transaction.atomic():
            Document.objects.filter(collection=collection).delete()
            Document.objects.bulk_create(documents)

    def is_available(self) -> bool:
        try:
            connection.ensure_connection()
        except DatabaseError:
            return False
        return True
