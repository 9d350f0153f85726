# core/models.py
from django.db import models


class Document(models.Model):
    """
    One record of a Record Store collection, kept as a JSON document.

    Used by the `database` store backend. `position` preserves collection
    order, since collections are always written as a whole.
    """
    collection = models.CharField(max_length=64, db_index=True)
    record_id = models.CharField(max_length=255)
    position = models.PositiveIntegerField(default=0)
    data = models.JSONField(default=dict)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["collection", "position"]
        constraints = [
            models.UniqueConstraint(
                fields=["collection", "record_id"],
                name="document_collection_record_uniq",
            ),
        ]
        indexes = [
            models.Index(fields=["collection", "position"], name="document_coll_pos_idx"),
        ]

    def __str__(self):
        return f"{self.collection}:{self.record_id}"
