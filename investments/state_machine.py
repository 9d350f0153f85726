# investments/state_machine.py
"""
Interest record state machine.

interested → liked_back ⇄ declined
     └────→ declined → interested (investor re-opens)

A founder may like back a declined record at any time.

Any transition not in VALID_TRANSITIONS is rejected.
"""
from typing import Tuple
import logging

from core.constants import (
    INTEREST_DECLINED,
    INTEREST_INTERESTED,
    INTEREST_LIKED_BACK,
    INTEREST_STATUS_CHOICES,
    LEGACY_INTEREST_STATUSES,
)

logger = logging.getLogger("venturelink.investments")


# Valid state transitions: from_status -> list of allowed to_statuses
VALID_TRANSITIONS = {
    INTEREST_INTERESTED: [INTEREST_LIKED_BACK, INTEREST_DECLINED],
    INTEREST_LIKED_BACK: [INTEREST_DECLINED],
    INTEREST_DECLINED: [INTEREST_INTERESTED, INTEREST_LIKED_BACK],
}


def normalize_status(status: str) -> str:
    """Map statuses from the older negotiation flow onto the canonical set."""
    return LEGACY_INTEREST_STATUSES.get(status, status)


def can_transition(record: dict, new_status: str) -> Tuple[bool, str]:
    """
    Check if an interest record can move to a new status.

    Returns (can_transition: bool, reason: str)
    """
    current_status = normalize_status(record.get("status", INTEREST_INTERESTED))

    if new_status == current_status:
        return True, "Same status"

    if new_status not in dict(INTEREST_STATUS_CHOICES):
        return False, f"Invalid status: {new_status}"

    allowed = VALID_TRANSITIONS.get(current_status, [])

    if new_status not in allowed:
        return False, f"Cannot transition from '{current_status}' to '{new_status}'"

    return True, ""


def check_transition(record: dict, new_status: str, actor_id=None) -> Tuple[bool, str]:
    """
    Validate a transition and log the outcome.

    The caller persists the new status; this function never writes.
    """
    can, reason = can_transition(record, new_status)

    if not can:
        logger.warning(
            f"Invalid interest transition attempted: investment={record.get('id')}, "
            f"from={record.get('status')}, to={new_status}, actor={actor_id or 'unknown'}. "
            f"Reason: {reason}"
        )
        return False, reason

    logger.info(
        f"Interest transition: investment={record.get('id')}, "
        f"from={record.get('status')}, to={new_status}, actor={actor_id or 'unknown'}"
    )
    return True, reason


def get_allowed_transitions(record: dict) -> list:
    return VALID_TRANSITIONS.get(normalize_status(record.get("status", INTEREST_INTERESTED)), [])
