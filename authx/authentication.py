# authx/authentication.py
# DRF authentication class: bearer tokens resolved against the Record Store

import logging
from rest_framework.authentication import BaseAuthentication
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.exceptions import TokenError

from core.store import get_store
from users.services import UserDirectory, public_user
from .tokens import read_user_id

logger = logging.getLogger("venturelink.auth")


class StoreUser:
    """
    The authenticated principal handed to views as `request.user`.

    Wraps a user record from the Record Store; the password hash is never
    kept on the instance.
    """

    is_authenticated = True
    is_anonymous = False

    def __init__(self, record):
        self.record = public_user(record)
        self.id = record["id"]
        self.name = record.get("name")
        self.email = record.get("email")
        self.role = record.get("role")
        self.company = record.get("company")

    @property
    def pk(self):
        return self.id

    def __str__(self):
        return f"{self.name} <{self.email}>"


class StoreTokenAuthentication(BaseAuthentication):
    """
    Authenticates `Authorization: Bearer <token>`.

    1. Extracts the token from the Authorization header
    2. Verifies signature and expiry (simplejwt AccessToken)
    3. Loads the user record from the active Record Store
    """

    keyword = "Bearer"

    def authenticate(self, request):
        auth_header = request.headers.get("Authorization", "")

        if not auth_header.startswith(f"{self.keyword} "):
            return None

        parts = auth_header.split()
        if len(parts) != 2:
            raise AuthenticationFailed("Invalid authorization header")
        raw_token = parts[1]

        try:
            user_id = read_user_id(raw_token)
        except TokenError as e:
            logger.debug(f"Rejected bearer token: {e}")
            raise AuthenticationFailed("Invalid or expired token")

        record = UserDirectory(get_store()).get(user_id)
        if record is None:
            raise AuthenticationFailed("Invalid token")

        return (StoreUser(record), raw_token)

    def authenticate_header(self, request):
        return f'{self.keyword} realm="api"'
