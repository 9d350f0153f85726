# authx/tokens.py
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken


def issue_token(user) -> str:
    """
    Signed access token for a store user (HS256, lifetime from SIMPLE_JWT).
    The user id travels in the USER_ID_CLAIM.
    """
    token = AccessToken()
    token[api_settings.USER_ID_CLAIM] = user["id"]
    token["role"] = user.get("role")
    return str(token)


def read_user_id(raw_token: str):
    """Validate a raw token and return its user id. Raises TokenError."""
    token = AccessToken(raw_token)
    return token.get(api_settings.USER_ID_CLAIM)
