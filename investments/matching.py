# investments/matching.py
"""
Mutual interest: the investor liked the idea, expressed interest in it, and
the founder liked that interest back. Derived on demand from the likes,
investments and ideas collections; nothing is stored.
"""
from core.constants import COLLECTION_IDEAS, COLLECTION_INVESTMENTS, COLLECTION_LIKES, INTEREST_LIKED_BACK
from .state_machine import normalize_status


def has_mutual_interest(store, founder_id, investor_id, idea_id) -> bool:
    liked = store.find(
        COLLECTION_LIKES,
        lambda l: l.get("idea_id") == idea_id and l.get("user_id") == investor_id,
    )
    if liked is None:
        return False

    record = store.find(
        COLLECTION_INVESTMENTS,
        lambda r: r.get("idea_id") == idea_id and r.get("investor_id") == investor_id,
    )
    if record is None or normalize_status(record.get("status")) != INTEREST_LIKED_BACK:
        return False

    idea = store.get(COLLECTION_IDEAS, idea_id)
    if idea is not None and idea.get("founder_id") != founder_id:
        return False
    return True


def annotate_can_chat(store, records, founder_for_idea):
    """
    Attach `can_chat` to each interest record.
    `founder_for_idea` maps an idea id to its founder id.
    """
    annotated = []
    for record in records:
        founder_id = founder_for_idea.get(record.get("idea_id"))
        can_chat = founder_id is not None and has_mutual_interest(
            store, founder_id, record.get("investor_id"), record.get("idea_id")
        )
        annotated.append({**record, "can_chat": can_chat})
    return annotated
