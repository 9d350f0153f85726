# ideas/services.py
"""
Idea Catalog and likes.

Ideas are kept most-recent-first. The `likes` counter on an idea is a
cached count of Like records and is adjusted by `LikeService.toggle_like`
only; it never drops below zero.
"""
import logging

from rest_framework.exceptions import NotFound

from core.constants import (
    COLLECTION_IDEAS,
    COLLECTION_LIKES,
    IDEA_STATUS_ACTIVE,
)
from core.identifiers import new_id, now_iso

logger = logging.getLogger("venturelink.ideas")

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


def founder_snapshot(founder) -> dict:
    return {"name": founder.get("name"), "company": founder.get("company")}


class IdeaCatalog:
    def __init__(self, store):
        self.store = store

    def all(self):
        return self.store.get_all(COLLECTION_IDEAS)

    def get_idea(self, idea_id):
        return self.store.get(COLLECTION_IDEAS, str(idea_id))

    def require_idea(self, idea_id):
        idea = self.get_idea(idea_id)
        if idea is None:
            raise NotFound("Idea not found")
        return idea

    def add_idea(self, fields: dict, founder: dict) -> dict:
        """
        Create an idea owned by `founder` (a user record) and put it first.
        """
        idea = {
            "title": fields["title"],
            "description": fields["description"],
            "category": fields["category"],
            "funding_goal": fields.get("funding_goal") or None,
            "document": fields.get("document") or None,
            "id": new_id(),
            "founder_id": founder["id"],
            "founder": founder_snapshot(founder),
            "created_at": now_iso(),
            "likes": 0,
            "interested_investors": [],
            "status": IDEA_STATUS_ACTIVE,
        }
        ideas = self.all()
        ideas.insert(0, idea)
        self.store.save(COLLECTION_IDEAS, ideas)
        logger.info(f"Idea created: idea={idea['id']}, founder={founder['id']}")
        return idea

    def get_ideas_by_founder(self, founder_id):
        return [idea for idea in self.all() if idea.get("founder_id") == founder_id]

    def list_ideas(self, category=None, search=None, status=None):
        ideas = self.all()

        if category and category.lower() != "all":
            wanted = category.lower()
            ideas = [i for i in ideas if (i.get("category") or "").lower() == wanted]

        if status:
            ideas = [i for i in ideas if i.get("status") == status]

        if search:
            needle = search.lower()
            ideas = [i for i in ideas if needle in _search_text(i)]

        return ideas

    def update_idea(self, idea_id, partial: dict):
        """Merge-patch an idea. Returns the updated record or None."""
        updated = self.store.update(COLLECTION_IDEAS, str(idea_id), partial)
        if updated is not None:
            logger.info(f"Idea updated: idea={idea_id}, fields={sorted(partial)}")
        return updated

    def delete_idea(self, idea_id) -> bool:
        ideas = self.all()
        remaining = [i for i in ideas if i.get("id") != idea_id]
        if len(remaining) == len(ideas):
            return False
        self.store.save(COLLECTION_IDEAS, remaining)
        logger.info(f"Idea deleted: idea={idea_id}")
        return True

    @staticmethod
    def paginate(records, page=1, limit=DEFAULT_PAGE_SIZE) -> dict:
        page = max(1, int(page))
        limit = max(1, min(int(limit), MAX_PAGE_SIZE))
        start = (page - 1) * limit
        return {
            "data": records[start:start + limit],
            "total": len(records),
            "page": page,
            "limit": limit,
        }


def _search_text(idea) -> str:
    founder = idea.get("founder") or {}
    parts = [
        idea.get("title"),
        idea.get("description"),
        founder.get("name"),
        founder.get("company"),
    ]
    return " ".join(p for p in parts if p).lower()


class LikeService:
    def __init__(self, store):
        self.store = store
        self.catalog = IdeaCatalog(store)

    def toggle_like(self, user_id, idea_id):
        """
        Like or unlike an idea.

        Returns (liked, like_record). `like_record` is None after an unlike.
        """
        idea = self.catalog.require_idea(idea_id)
        likes = self.store.get_all(COLLECTION_LIKES)
        existing = next(
            (l for l in likes if l.get("idea_id") == idea["id"] and l.get("user_id") == user_id),
            None,
        )

        if existing is not None:
            likes = [l for l in likes if l is not existing]
            self.store.save(COLLECTION_LIKES, likes)
            self._sync_counter(idea["id"], likes)
            logger.info(f"Idea unliked: idea={idea['id']}, user={user_id}")
            return False, None

        like = {
            "id": new_id(),
            "idea_id": idea["id"],
            "user_id": user_id,
            "created_at": now_iso(),
        }
        likes.append(like)
        self.store.save(COLLECTION_LIKES, likes)
        self._sync_counter(idea["id"], likes)
        logger.info(f"Idea liked: idea={idea['id']}, user={user_id}")
        return True, like

    def _sync_counter(self, idea_id, likes):
        count = sum(1 for l in likes if l.get("idea_id") == idea_id)
        self.catalog.update_idea(idea_id, {"likes": count})

    def has_liked(self, user_id, idea_id) -> bool:
        return self.store.find(
            COLLECTION_LIKES,
            lambda l: l.get("idea_id") == idea_id and l.get("user_id") == user_id,
        ) is not None

    def liked_idea_ids(self, user_id):
        return [l["idea_id"] for l in self.store.filter(COLLECTION_LIKES, lambda l: l.get("user_id") == user_id)]

    def likes_for_idea(self, idea_id):
        return self.store.filter(COLLECTION_LIKES, lambda l: l.get("idea_id") == idea_id)
