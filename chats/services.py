# chats/services.py
"""
Chat Channel Manager.

One channel per (founder, investor, idea) triple, addressed by a
deterministic id. A channel, once created, stays open; messages are
append-only and kept in insertion order.
"""
import logging

from core.constants import CHAT_ID_PREFIX, COLLECTION_CHATS
from core.identifiers import new_id, now_iso

logger = logging.getLogger("venturelink.chats")


class ChatChannelManager:
    def __init__(self, store):
        self.store = store

    @staticmethod
    def channel_id(founder_id, investor_id, idea_id) -> str:
        return f"{CHAT_ID_PREFIX}_{founder_id}_{investor_id}_{idea_id}"

    def get(self, channel_id):
        return self.store.get(COLLECTION_CHATS, channel_id)

    def get_or_create(self, founder_id, investor_id, idea_id):
        """
        Return (channel, created). Calling this again for the same triple
        returns the existing channel untouched.
        """
        chat_id = self.channel_id(founder_id, investor_id, idea_id)
        channels = self.store.get_all(COLLECTION_CHATS)
        existing = next((c for c in channels if c.get("id") == chat_id), None)
        if existing is not None:
            return existing, False

        channel = {
            "id": chat_id,
            "founder_id": founder_id,
            "investor_id": investor_id,
            "idea_id": idea_id,
            "messages": [],
            "created_at": now_iso(),
        }
        channels.append(channel)
        self.store.save(COLLECTION_CHATS, channels)
        logger.info(f"Chat channel opened: chat={chat_id}")
        return channel, True

    def append_message(self, channel_id, sender_id, sender_name, body):
        """Append a message; returns it, or None when the channel does not exist."""
        channels = self.store.get_all(COLLECTION_CHATS)
        channel = next((c for c in channels if c.get("id") == channel_id), None)
        if channel is None:
            logger.warning(f"Message dropped for unknown chat={channel_id}, sender={sender_id}")
            return None

        message = {
            "id": new_id(),
            "sender_id": sender_id,
            "sender_name": sender_name,
            "body": body,
            "timestamp": now_iso(),
        }
        channel["messages"] = list(channel.get("messages") or []) + [message]
        self.store.save(COLLECTION_CHATS, channels)
        logger.info(f"Message sent: chat={channel_id}, sender={sender_id}")
        return message

    def channels_for_user(self, user_id):
        return self.store.filter(
            COLLECTION_CHATS,
            lambda c: user_id in (c.get("founder_id"), c.get("investor_id")),
        )
