from rest_framework import status

from core.tests.helpers import StoreAPITestCase


class ProfileApiTest(StoreAPITestCase):
    def setUp(self):
        super().setUp()
        self.founder = self.create_founder(company="GreenGrid")
        self.investor = self.create_investor()

    def test_get_my_profile(self):
        self.auth(self.founder)
        resp = self.client.get("/api/users/me")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.json()["data"]["email"], self.founder["email"])

    def test_update_profile_ignores_role_and_email(self):
        self.auth(self.founder)
        resp = self.client.patch(
            "/api/users/me",
            {"bio": "Building <b>grids</b>", "role": "investor", "email": "x@y.z"},
            format="json",
        )
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        data = resp.json()["data"]
        self.assertEqual(data["bio"], "Building grids")
        self.assertEqual(data["role"], "founder")
        self.assertEqual(data["email"], self.founder["email"])

    def test_other_users_email_is_hidden(self):
        self.auth(self.investor)
        resp = self.client.get(f"/api/users/{self.founder['id']}")
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        data = resp.json()["data"]
        self.assertEqual(data["company"], "GreenGrid")
        self.assertNotIn("email", data)

    def test_unknown_user(self):
        self.auth(self.investor)
        resp = self.client.get("/api/users/nobody")
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
