from django.test import SimpleTestCase
from rest_framework import status

from chats.services import ChatChannelManager
from core.constants import COLLECTION_CHATS
from core.store import MemoryRecordStore
from core.tests.helpers import StoreAPITestCase
from ideas.services import IdeaCatalog, LikeService
from investments.services import InterestLedger


class ChatChannelManagerTest(SimpleTestCase):
    def setUp(self):
        self.store = MemoryRecordStore()
        self.chats = ChatChannelManager(self.store)

    def test_channel_id_is_stable(self):
        self.assertEqual(ChatChannelManager.channel_id("f1", "inv1", "42"), "chat_f1_inv1_42")
        self.assertEqual(
            ChatChannelManager.channel_id("f1", "inv1", "42"),
            ChatChannelManager.channel_id("f1", "inv1", "42"),
        )
        self.assertNotEqual(
            ChatChannelManager.channel_id("f1", "inv1", "42"),
            ChatChannelManager.channel_id("f1", "inv1", "43"),
        )

    def test_get_or_create_is_idempotent(self):
        channel, created = self.chats.get_or_create("f1", "inv1", "42")
        self.assertTrue(created)
        self.assertEqual(channel["messages"], [])

        again, created = self.chats.get_or_create("f1", "inv1", "42")
        self.assertFalse(created)
        self.assertEqual(again["id"], channel["id"])
        self.assertEqual(len(self.store.get_all(COLLECTION_CHATS)), 1)

    def test_hello_from_alice(self):
        channel, _ = self.chats.get_or_create("alice", "inv1", "42")

        message = self.chats.append_message(channel["id"], "alice", "Alice", "Hello")

        self.assertEqual(message["body"], "Hello")
        self.assertEqual(message["sender_name"], "Alice")
        stored = self.chats.get(channel["id"])["messages"]
        self.assertEqual([(m["sender_name"], m["body"]) for m in stored], [("Alice", "Hello")])

    def test_messages_keep_order(self):
        channel, _ = self.chats.get_or_create("f1", "inv1", "42")
        for body in ("one", "two", "three"):
            self.chats.append_message(channel["id"], "f1", "Alice", body)
        self.assertEqual([m["body"] for m in self.chats.get(channel["id"])["messages"]], ["one", "two", "three"])

    def test_message_to_unknown_channel_is_dropped(self):
        self.assertIsNone(self.chats.append_message("chat_x_y_z", "f1", "Alice", "Hello"))
        self.assertEqual(self.store.get_all(COLLECTION_CHATS), [])

    def test_channels_for_user(self):
        self.chats.get_or_create("f1", "inv1", "42")
        self.chats.get_or_create("f2", "inv1", "43")
        self.assertEqual(len(self.chats.channels_for_user("inv1")), 2)
        self.assertEqual(len(self.chats.channels_for_user("f2")), 1)
        self.assertEqual(self.chats.channels_for_user("nobody"), [])


class ChatApiTest(StoreAPITestCase):
    def setUp(self):
        super().setUp()
        self.founder = self.create_founder(name="Alice Founder")
        self.investor = self.create_investor()
        self.outsider = self.create_investor(name="Victor Chen")
        self.idea = IdeaCatalog(self.store).add_idea(
            {
                "title": "Peer-to-peer solar trading",
                "description": "Households sell surplus rooftop energy to their neighbours.",
                "category": "CleanTech",
            },
            self.founder,
        )

    def make_mutual(self):
        LikeService(self.store).toggle_like(self.investor["id"], self.idea["id"])
        ledger = InterestLedger(self.store)
        ledger.express_interest(self.investor, self.idea["id"], "$250k")
        ledger.like_back(self.investor["id"], self.idea["id"])

    def open_chat(self):
        return self.client.post("/api/chats", {"idea_id": self.idea["id"]}, format="json")

    def test_open_requires_mutual_interest(self):
        self.auth(self.investor)
        resp = self.open_chat()
        self.assertEqual(resp.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(resp.json()["error"], "Chat is only available after mutual interest")

    def test_open_then_reopen(self):
        self.make_mutual()
        self.auth(self.investor)

        resp = self.open_chat()
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        chat_id = resp.json()["data"]["id"]
        self.assertEqual(chat_id, f"chat_{self.founder['id']}_{self.investor['id']}_{self.idea['id']}")

        resp = self.open_chat()
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.json()["data"]["id"], chat_id)

    def test_founder_opens_with_investor_id(self):
        self.make_mutual()
        self.auth(self.founder)
        resp = self.client.post(
            "/api/chats",
            {"idea_id": self.idea["id"], "investor_id": self.investor["id"]},
            format="json",
        )
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)

    def test_outsider_cannot_open(self):
        self.make_mutual()
        self.auth(self.outsider)
        resp = self.client.post(
            "/api/chats",
            {"idea_id": self.idea["id"], "investor_id": self.investor["id"]},
            format="json",
        )
        self.assertEqual(resp.status_code, status.HTTP_403_FORBIDDEN)

    def test_send_and_read_messages(self):
        self.make_mutual()
        self.auth(self.investor)
        chat_id = self.open_chat().json()["data"]["id"]

        self.auth(self.founder)
        resp = self.client.post("/api/chats/message", {"chat_id": chat_id, "body": "Hello"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertEqual(resp.json()["data"]["sender_name"], "Alice Founder")

        self.auth(self.investor)
        messages = self.client.get(f"/api/chats/{chat_id}/messages").json()["data"]
        self.assertEqual([m["body"] for m in messages], ["Hello"])

        chats = self.client.get("/api/chats").json()["data"]
        self.assertEqual([c["id"] for c in chats], [chat_id])

    def test_non_participant_cannot_read_or_write(self):
        self.make_mutual()
        self.auth(self.investor)
        chat_id = self.open_chat().json()["data"]["id"]

        self.auth(self.outsider)
        self.assertEqual(self.client.get(f"/api/chats/{chat_id}").status_code, status.HTTP_403_FORBIDDEN)
        resp = self.client.post("/api/chats/message", {"chat_id": chat_id, "body": "Hi"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_403_FORBIDDEN)

    def test_open_for_deleted_idea(self):
        self.make_mutual()
        IdeaCatalog(self.store).delete_idea(self.idea["id"])
        self.auth(self.investor)

        resp = self.client.post(
            "/api/chats",
            {"idea_id": self.idea["id"], "founder_id": self.outsider["id"]},
            format="json",
        )

        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(self.store.get_all(COLLECTION_CHATS), [])

    def test_open_with_someone_elses_founder_id(self):
        self.make_mutual()
        self.auth(self.investor)
        resp = self.client.post(
            "/api/chats",
            {"idea_id": self.idea["id"], "founder_id": self.outsider["id"]},
            format="json",
        )
        self.assertEqual(resp.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(self.store.get_all(COLLECTION_CHATS), [])

    def test_message_keeps_comparison_text(self):
        self.make_mutual()
        self.auth(self.investor)
        chat_id = self.open_chat().json()["data"]["id"]

        resp = self.client.post(
            "/api/chats/message",
            {"chat_id": chat_id, "body": "3 < 5 and 7 > 2"},
            format="json",
        )

        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertEqual(resp.json()["data"]["body"], "3 < 5 and 7 > 2")

    def test_message_to_unknown_chat(self):
        self.auth(self.investor)
        resp = self.client.post("/api/chats/message", {"chat_id": "chat_a_b_c", "body": "Hello"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)

    def test_message_length_limits(self):
        self.make_mutual()
        self.auth(self.investor)
        chat_id = self.open_chat().json()["data"]["id"]

        resp = self.client.post("/api/chats/message", {"chat_id": chat_id, "body": "x" * 1001}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)

        resp = self.client.post("/api/chats/message", {"chat_id": chat_id, "body": "   "}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
