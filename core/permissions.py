from rest_framework.permissions import BasePermission

from core.constants import ROLE_FOUNDER, ROLE_INVESTOR


# ---- Helper functions -------------------------------------------------


def has_role(user, role) -> bool:
    if not user or not getattr(user, "is_authenticated", False):
        return False
    return getattr(user, "role", None) == role


def is_participant(user, chat) -> bool:
    """True if user is the founder or the investor of a chat channel."""
    if not user or not getattr(user, "is_authenticated", False) or chat is None:
        return False
    return user.id in (chat.get("founder_id"), chat.get("investor_id"))


# ---- Permission classes -----------------------------------------------


class IsFounder(BasePermission):
    """
    Only users registered with the founder role.
    Authentication is checked first so anonymous callers get 401, not 403.
    """
    message = "Only founders can perform this action"

    def has_permission(self, request, view):
        return has_role(request.user, ROLE_FOUNDER)


class IsInvestor(BasePermission):
    message = "Only investors can perform this action"

    def has_permission(self, request, view):
        return has_role(request.user, ROLE_INVESTOR)
