# core/tests/helpers.py
from django.test import TestCase, override_settings
from rest_framework.test import APIClient

from authx.tokens import issue_token
from core.constants import ROLE_FOUNDER, ROLE_INVESTOR
from core.store import MemoryRecordStore, set_store
from users.services import UserDirectory

FAST_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@override_settings(PASSWORD_HASHERS=FAST_HASHERS)
class StoreAPITestCase(TestCase):
    """
    Every test gets a fresh in-memory record store installed as the
    process store, and an APIClient.
    """

    def setUp(self):
        self.store = MemoryRecordStore()
        self._previous_store = set_store(self.store)
        self.client = APIClient()

    def tearDown(self):
        set_store(self._previous_store)

    def create_user(self, name, role, email=None, company=None):
        email = email or f"{name.split()[0].lower()}@example.com"
        return UserDirectory(self.store).create_user(
            name=name,
            email=email,
            password="secret123",
            role=role,
            company=company,
        )

    def create_founder(self, name="Alice Founder", **kwargs):
        return self.create_user(name, ROLE_FOUNDER, **kwargs)

    def create_investor(self, name="Ivy Investor", **kwargs):
        return self.create_user(name, ROLE_INVESTOR, **kwargs)

    def auth(self, user):
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_token(user)}")

    def logout(self):
        self.client.credentials()
