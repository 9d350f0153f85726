# users/services.py
"""
User directory over the Record Store.

User records are plain dicts. The `password` key holds a Django password
hash and is stripped by `public_user()` before anything leaves the service
layer.
"""
import logging

from django.contrib.auth.hashers import check_password, make_password
from rest_framework.exceptions import ValidationError

from core.constants import COLLECTION_USERS
from core.identifiers import new_id, now_iso

logger = logging.getLogger("venturelink.auth")

PUBLIC_FIELDS = ("id", "name", "email", "role", "company", "bio", "created_at")
PROFILE_FIELDS = ("name", "company", "bio")


def public_user(user):
    if user is None:
        return None
    return {field: user.get(field) for field in PUBLIC_FIELDS}


def display_name(user) -> str:
    return (user or {}).get("name") or "User"


class UserDirectory:
    def __init__(self, store):
        self.store = store

    def get(self, user_id):
        if not user_id:
            return None
        return self.store.get(COLLECTION_USERS, str(user_id))

    def find_by_email(self, email):
        email = (email or "").strip().lower()
        return self.store.find(COLLECTION_USERS, lambda u: u.get("email") == email)

    def create_user(self, name, email, password, role, company=None, bio=None):
        """Create a user; email must be unique (case-insensitive)."""
        email = email.strip().lower()
        if self.find_by_email(email):
            raise ValidationError({"email": ["User with this email already exists"]})

        user = {
            "id": new_id(),
            "name": name,
            "email": email,
            "role": role,
            "company": company or None,
            "bio": bio or None,
            "created_at": now_iso(),
            "password": make_password(password),
        }
        users = self.store.get_all(COLLECTION_USERS)
        users.append(user)
        self.store.save(COLLECTION_USERS, users)
        logger.info(f"Registered {role} user {user['id']} ({email})")
        return user

    def authenticate(self, email, password):
        """Return the user for valid credentials, else None."""
        user = self.find_by_email(email)
        if user is None:
            return None
        if not check_password(password, user.get("password") or ""):
            logger.warning(f"Failed login for {user['id']}")
            return None
        return user

    def update_profile(self, user_id, changes):
        allowed = {key: value for key, value in changes.items() if key in PROFILE_FIELDS}
        return self.store.update(COLLECTION_USERS, str(user_id), allowed)
