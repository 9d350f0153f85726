# core/identifiers.py
import uuid

from django.utils import timezone


def new_id() -> str:
    """Time-based record identifier (uuid1: timestamp + node + sequence)."""
    return uuid.uuid1().hex


def now_iso() -> str:
    return timezone.now().isoformat()
