from django.test import SimpleTestCase
from rest_framework.exceptions import NotFound, PermissionDenied

from core.constants import COLLECTION_IDEAS, COLLECTION_INVESTMENTS, COLLECTION_LIKES
from core.exceptions import DuplicateInterest, InvalidTransition
from core.store import MemoryRecordStore
from investments.matching import has_mutual_interest
from investments.services import InterestLedger
from investments.state_machine import can_transition, get_allowed_transitions

INVESTOR = {"id": "inv1", "name": "Ivy Investor", "company": "Northstar"}


def seeded_store():
    return MemoryRecordStore(initial={
        COLLECTION_IDEAS: [{"id": "42", "title": "Idea 42", "founder_id": "f1", "likes": 0, "interested_investors": []}],
    })


class InterestLedgerTest(SimpleTestCase):
    def setUp(self):
        self.store = seeded_store()
        self.ledger = InterestLedger(self.store)

    def snapshots(self):
        return self.store.get(COLLECTION_IDEAS, "42")["interested_investors"]

    def test_express_interest_then_duplicate_rejected(self):
        record = self.ledger.express_interest(INVESTOR, "42", "$250k")

        self.assertEqual(record["status"], "interested")
        self.assertEqual(record["amount"], "$250k")
        self.assertEqual(record["investor_name"], "Ivy Investor")
        self.assertEqual(self.snapshots(), [{
            "investor_id": "inv1",
            "name": "Ivy Investor",
            "firm": "Northstar",
            "amount": "$250k",
            "status": "interested",
        }])

        with self.assertRaises(DuplicateInterest):
            self.ledger.express_interest(INVESTOR, "42", "$500k")
        self.assertEqual(len(self.store.get_all(COLLECTION_INVESTMENTS)), 1)

    def test_express_interest_unknown_idea(self):
        with self.assertRaises(NotFound):
            self.ledger.express_interest(INVESTOR, "missing", "$1m")

    def test_like_back_refreshes_snapshot(self):
        self.ledger.express_interest(INVESTOR, "42", "$250k")

        record = self.ledger.like_back("inv1", "42", actor_id="f1")

        self.assertEqual(record["status"], "liked_back")
        self.assertEqual(self.ledger.find_for("inv1", "42")["status"], "liked_back")
        self.assertEqual(self.snapshots()[0]["status"], "liked_back")

    def test_like_back_without_record(self):
        self.assertIsNone(self.ledger.like_back("inv1", "42"))
        self.assertEqual(self.store.get_all(COLLECTION_INVESTMENTS), [])

    def test_like_back_after_decline(self):
        record = self.ledger.express_interest(INVESTOR, "42", "$250k")
        self.ledger.update(record["id"], {"status": "declined"})

        updated = self.ledger.like_back("inv1", "42", actor_id="f1")

        self.assertEqual(updated["status"], "liked_back")
        self.assertEqual(self.ledger.find_for("inv1", "42")["status"], "liked_back")
        self.assertEqual(self.snapshots()[0]["status"], "liked_back")

    def test_invalid_update_rejected(self):
        record = self.ledger.express_interest(INVESTOR, "42", "$250k")
        self.ledger.like_back("inv1", "42")
        with self.assertRaises(InvalidTransition):
            self.ledger.update(record["id"], {"status": "interested"})

    def test_update_amount_and_status(self):
        record = self.ledger.express_interest(INVESTOR, "42", "$250k")

        updated = self.ledger.update(record["id"], {"amount": "$300k", "status": "declined"})

        self.assertEqual(updated["amount"], "$300k")
        self.assertEqual(updated["status"], "declined")
        self.assertEqual(self.snapshots()[0]["amount"], "$300k")

    def test_declined_can_reopen(self):
        record = self.ledger.express_interest(INVESTOR, "42", "$250k")
        self.ledger.update(record["id"], {"status": "declined"})
        self.assertEqual(self.ledger.update(record["id"], {"status": "interested"})["status"], "interested")

    def test_withdraw(self):
        record = self.ledger.express_interest(INVESTOR, "42", "$250k")

        with self.assertRaises(PermissionDenied):
            self.ledger.withdraw(record["id"], "someone-else")

        self.ledger.withdraw(record["id"], "inv1")
        self.assertIsNone(self.ledger.get(record["id"]))
        self.assertEqual(self.snapshots(), [])

        with self.assertRaises(NotFound):
            self.ledger.withdraw(record["id"], "inv1")

    def test_legacy_statuses_read_as_liked_back(self):
        self.store.save(COLLECTION_INVESTMENTS, [
            {"id": "r1", "idea_id": "42", "investor_id": "inv1", "status": "negotiating"},
            {"id": "r2", "idea_id": "42", "investor_id": "inv2", "status": "funded"},
        ])
        self.assertEqual({r["status"] for r in self.ledger.for_idea("42")}, {"liked_back"})

    def test_queries(self):
        self.store.save(COLLECTION_IDEAS, self.store.get_all(COLLECTION_IDEAS) + [
            {"id": "43", "title": "Other", "founder_id": "f2", "interested_investors": []},
        ])
        self.ledger.express_interest(INVESTOR, "42", "$250k")
        self.ledger.express_interest(INVESTOR, "43", "$100k")
        self.ledger.express_interest({"id": "inv2", "name": "Victor"}, "42", "$50k")

        self.assertEqual(len(self.ledger.for_investor("inv1")), 2)
        self.assertEqual(len(self.ledger.for_idea("42")), 2)
        self.assertEqual({r["idea_id"] for r in self.ledger.for_founder("f2")}, {"43"})


class StateMachineTest(SimpleTestCase):
    def test_allowed_transitions(self):
        self.assertTrue(can_transition({"status": "interested"}, "liked_back")[0])
        self.assertTrue(can_transition({"status": "interested"}, "declined")[0])
        self.assertTrue(can_transition({"status": "liked_back"}, "declined")[0])
        self.assertTrue(can_transition({"status": "declined"}, "interested")[0])
        self.assertTrue(can_transition({"status": "declined"}, "liked_back")[0])

    def test_rejected_transitions(self):
        self.assertFalse(can_transition({"status": "liked_back"}, "interested")[0])
        ok, reason = can_transition({"status": "interested"}, "funded")
        self.assertFalse(ok)
        self.assertIn("Invalid status", reason)

    def test_same_status_is_allowed(self):
        self.assertTrue(can_transition({"status": "liked_back"}, "liked_back")[0])

    def test_legacy_status_uses_canonical_rules(self):
        self.assertEqual(get_allowed_transitions({"status": "negotiating"}), ["declined"])


class MutualInterestTest(SimpleTestCase):
    def setUp(self):
        self.store = seeded_store()

    def add_like(self):
        self.store.save(COLLECTION_LIKES, [{"id": "l1", "idea_id": "42", "user_id": "inv1"}])

    def add_interest(self, status):
        self.store.save(COLLECTION_INVESTMENTS, [
            {"id": "r1", "idea_id": "42", "investor_id": "inv1", "status": status},
        ])

    def test_nothing(self):
        self.assertFalse(has_mutual_interest(self.store, "f1", "inv1", "42"))

    def test_like_only(self):
        self.add_like()
        self.assertFalse(has_mutual_interest(self.store, "f1", "inv1", "42"))

    def test_interest_liked_back_without_like(self):
        self.add_interest("liked_back")
        self.assertFalse(has_mutual_interest(self.store, "f1", "inv1", "42"))

    def test_like_and_interest_not_liked_back(self):
        self.add_like()
        self.add_interest("interested")
        self.assertFalse(has_mutual_interest(self.store, "f1", "inv1", "42"))

    def test_all_three(self):
        self.add_like()
        self.add_interest("liked_back")
        self.assertTrue(has_mutual_interest(self.store, "f1", "inv1", "42"))

    def test_legacy_status_counts(self):
        self.add_like()
        self.add_interest("negotiating")
        self.assertTrue(has_mutual_interest(self.store, "f1", "inv1", "42"))

    def test_wrong_founder(self):
        self.add_like()
        self.add_interest("liked_back")
        self.assertFalse(has_mutual_interest(self.store, "f2", "inv1", "42"))

    def test_missing_idea_skips_founder_check(self):
        self.store.save(COLLECTION_IDEAS, [])
        self.add_like()
        self.add_interest("liked_back")
        self.assertTrue(has_mutual_interest(self.store, "anyone", "inv1", "42"))
