# investments/services.py
"""
Interest Ledger.

An Interest Record is the authoritative state of an investor's interest in
an idea. Each idea also carries `interested_investors`, a denormalized
read-model of the same records (name, firm, amount, status) that is
rewritten whenever the ledger changes a record.
"""
import logging

from rest_framework.exceptions import NotFound, PermissionDenied

from core.constants import (
    COLLECTION_IDEAS,
    COLLECTION_INVESTMENTS,
    INTEREST_INTERESTED,
    INTEREST_LIKED_BACK,
)
from core.exceptions import DuplicateInterest, InvalidTransition
from core.identifiers import new_id, now_iso
from ideas.services import IdeaCatalog
from .state_machine import check_transition, normalize_status

logger = logging.getLogger("venturelink.investments")


def _normalized(record):
    if record is None:
        return None
    status = normalize_status(record.get("status", INTEREST_INTERESTED))
    if status != record.get("status"):
        record = {**record, "status": status}
    return record


class InterestLedger:
    def __init__(self, store):
        self.store = store
        self.catalog = IdeaCatalog(store)

    # -- queries -------------------------------------------------------

    def all(self):
        return [_normalized(r) for r in self.store.get_all(COLLECTION_INVESTMENTS)]

    def get(self, record_id):
        return _normalized(self.store.get(COLLECTION_INVESTMENTS, str(record_id)))

    def require(self, record_id):
        record = self.get(record_id)
        if record is None:
            raise NotFound("Investment not found")
        return record

    def find_for(self, investor_id, idea_id):
        return _normalized(self.store.find(
            COLLECTION_INVESTMENTS,
            lambda r: r.get("investor_id") == investor_id and r.get("idea_id") == idea_id,
        ))

    def for_idea(self, idea_id):
        return [r for r in self.all() if r.get("idea_id") == idea_id]

    def for_investor(self, investor_id):
        return [r for r in self.all() if r.get("investor_id") == investor_id]

    def for_founder(self, founder_id):
        idea_ids = {idea["id"] for idea in self.catalog.get_ideas_by_founder(founder_id)}
        return [r for r in self.all() if r.get("idea_id") in idea_ids]

    # -- commands ------------------------------------------------------

    def express_interest(self, investor: dict, idea_id, amount: str) -> dict:
        """
        Record an investor's interest in an idea.

        Raises DuplicateInterest if the pair already has a record and
        NotFound for an unknown idea.
        """
        idea = self.catalog.require_idea(idea_id)
        if self.find_for(investor["id"], idea["id"]) is not None:
            logger.warning(f"Duplicate interest rejected: idea={idea['id']}, investor={investor['id']}")
            raise DuplicateInterest()

        now = now_iso()
        record = {
            "id": new_id(),
            "idea_id": idea["id"],
            "investor_id": investor["id"],
            "investor_name": investor.get("name"),
            "investor_firm": investor.get("company"),
            "amount": amount,
            "status": INTEREST_INTERESTED,
            "created_at": now,
            "updated_at": now,
        }
        records = self.store.get_all(COLLECTION_INVESTMENTS)
        records.append(record)
        self.store.save(COLLECTION_INVESTMENTS, records)
        self._upsert_snapshot(record)

        logger.info(f"Interest expressed: idea={idea['id']}, investor={investor['id']}, amount={amount!r}")
        return record

    def like_back(self, investor_id, idea_id, actor_id=None):
        """
        Founder reciprocates: the pair's record moves to `liked_back`.
        Returns the updated record, or None when the pair has no record.
        """
        record = self.find_for(investor_id, idea_id)
        if record is None:
            return None
        return self._set_status(record, INTEREST_LIKED_BACK, actor_id)

    def update(self, record_id, changes: dict, actor_id=None) -> dict:
        record = self.require(record_id)
        patch = {}
        if "amount" in changes:
            patch["amount"] = changes["amount"]
        if "status" in changes and changes["status"] != record["status"]:
            ok, reason = check_transition(record, changes["status"], actor_id)
            if not ok:
                raise InvalidTransition(reason)
            patch["status"] = changes["status"]
        if not patch:
            return record
        return self._write(record, patch)

    def withdraw(self, record_id, requesting_user_id) -> dict:
        """Delete a record. Only the investor who created it may do this."""
        record = self.require(record_id)
        if record.get("investor_id") != requesting_user_id:
            raise PermissionDenied("You can only withdraw your own investments")

        records = [r for r in self.store.get_all(COLLECTION_INVESTMENTS) if r.get("id") != record["id"]]
        self.store.save(COLLECTION_INVESTMENTS, records)
        self._remove_snapshot(record)

        logger.info(f"Interest withdrawn: investment={record['id']}, investor={requesting_user_id}")
        return record

    # -- internals -----------------------------------------------------

    def _set_status(self, record, status, actor_id):
        ok, reason = check_transition(record, status, actor_id)
        if not ok:
            raise InvalidTransition(reason)
        if record["status"] == status:
            return record
        return self._write(record, {"status": status})

    def _write(self, record, patch):
        patch = {**patch, "updated_at": now_iso()}
        updated = self.store.update(COLLECTION_INVESTMENTS, record["id"], patch)
        if updated is None:
            raise NotFound("Investment not found")
        updated = _normalized(updated)
        self._upsert_snapshot(updated)
        return updated

    def _upsert_snapshot(self, record):
        idea = self.catalog.get_idea(record["idea_id"])
        if idea is None:
            return
        snapshot = {
            "investor_id": record["investor_id"],
            "name": record.get("investor_name"),
            "firm": record.get("investor_firm"),
            "amount": record.get("amount"),
            "status": record.get("status"),
        }
        investors = [
            s for s in (idea.get("interested_investors") or [])
            if s.get("investor_id") != record["investor_id"]
        ]
        investors.append(snapshot)
        self.store.update(COLLECTION_IDEAS, idea["id"], {"interested_investors": investors})

    def _remove_snapshot(self, record):
        idea = self.catalog.get_idea(record["idea_id"])
        if idea is None:
            return
        investors = [
            s for s in (idea.get("interested_investors") or [])
            if s.get("investor_id") != record["investor_id"]
        ]
        self.store.update(COLLECTION_IDEAS, idea["id"], {"interested_investors": investors})
