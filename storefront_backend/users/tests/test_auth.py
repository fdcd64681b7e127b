# users/tests/test_auth.py

from datetime import timedelta

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

User = get_user_model()

PASSWORD = "Crispy-Fries-2024"


class RegisterTests(TestCase):
    """
    GUARANTEES:
    - New accounts are created with a hashed password
    - Duplicate email / username are rejected (case-insensitive)
    - The password never appears in a response
    """

    def setUp(self):
        self.client = APIClient()

    def test_register_creates_user(self):
        res = self.client.post(
            "/api/v1/register",
            {"username": "alice", "email": "alice@example.com", "password": PASSWORD},
            format="json",
        )

        self.assertEqual(res.status_code, 201)
        self.assertEqual(res.data["username"], "alice")
        self.assertEqual(res.data["email"], "alice@example.com")
        self.assertNotIn("password", res.data)

        user = User.objects.get(email="alice@example.com")
        self.assertNotEqual(user.password, PASSWORD)
        self.assertTrue(user.check_password(PASSWORD))

    def test_duplicate_email_rejected(self):
        User.objects.create_user(email="bob@example.com", username="bob", password=PASSWORD)

        res = self.client.post(
            "/api/v1/register",
            {"username": "bobby", "email": "BOB@example.com", "password": PASSWORD},
            format="json",
        )

        self.assertEqual(res.status_code, 400)
        self.assertIn("email", res.data)
        self.assertEqual(User.objects.count(), 1)

    def test_duplicate_username_rejected(self):
        User.objects.create_user(email="carol@example.com", username="carol", password=PASSWORD)

        res = self.client.post(
            "/api/v1/register",
            {"username": "Carol", "email": "other@example.com", "password": PASSWORD},
            format="json",
        )

        self.assertEqual(res.status_code, 400)
        self.assertIn("username", res.data)

    def test_missing_fields_rejected(self):
        res = self.client.post("/api/v1/register", {"email": "x@example.com"}, format="json")

        self.assertEqual(res.status_code, 400)
        self.assertIn("username", res.data)
        self.assertIn("password", res.data)


class LoginTests(TestCase):
    """
    GUARANTEES:
    - Valid credentials return a bearer token carrying user_id/email/username
    - Wrong password and unknown email both yield 401
    - The issued token authenticates protected endpoints
    """

    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(
            email="dave@example.com",
            username="dave",
            password=PASSWORD,
        )

    def test_login_returns_token_with_claims(self):
        res = self.client.post(
            "/api/v1/login",
            {"email": "dave@example.com", "password": PASSWORD},
            format="json",
        )

        self.assertEqual(res.status_code, 200)
        self.assertIn("token", res.data)
        self.assertIn("refresh", res.data)
        self.assertEqual(res.data["user"]["email"], "dave@example.com")

        token = AccessToken(res.data["token"])
        self.assertEqual(str(token["user_id"]), str(self.user.id))
        self.assertEqual(token["email"], "dave@example.com")
        self.assertEqual(token["username"], "dave")

    def test_wrong_password_is_401(self):
        res = self.client.post(
            "/api/v1/login",
            {"email": "dave@example.com", "password": "not-the-password"},
            format="json",
        )

        self.assertEqual(res.status_code, 401)
        self.assertEqual(res.data["detail"], "Invalid credentials")

    def test_unknown_email_is_401(self):
        res = self.client.post(
            "/api/v1/login",
            {"email": "nobody@example.com", "password": PASSWORD},
            format="json",
        )

        self.assertEqual(res.status_code, 401)

    def test_inactive_user_cannot_login(self):
        self.user.is_active = False
        self.user.save(update_fields=["is_active"])

        res = self.client.post(
            "/api/v1/login",
            {"email": "dave@example.com", "password": PASSWORD},
            format="json",
        )

        self.assertEqual(res.status_code, 401)

    def test_token_authenticates_me(self):
        login = self.client.post(
            "/api/v1/login",
            {"email": "dave@example.com", "password": PASSWORD},
            format="json",
        )

        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['token']}")
        res = self.client.get("/api/v1/me")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["username"], "dave")

    def test_refresh_issues_access_token_with_claims(self):
        login = self.client.post(
            "/api/v1/login",
            {"email": "dave@example.com", "password": PASSWORD},
            format="json",
        )

        res = self.client.post(
            "/api/v1/token/refresh",
            {"refresh": login.data["refresh"]},
            format="json",
        )

        self.assertEqual(res.status_code, 200)
        token = AccessToken(res.data["access"])
        self.assertEqual(token["email"], "dave@example.com")

    def test_me_requires_token(self):
        res = self.client.get("/api/v1/me")
        self.assertEqual(res.status_code, 401)

    def test_garbage_token_rejected(self):
        self.client.credentials(HTTP_AUTHORIZATION="Bearer not-a-jwt")
        res = self.client.get("/api/v1/me")
        self.assertEqual(res.status_code, 401)

    def test_expired_token_rejected(self):
        token = AccessToken.for_user(self.user)
        token.set_exp(lifetime=-timedelta(seconds=1))
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

        res = self.client.get("/api/v1/me")
        self.assertEqual(res.status_code, 401)

        res = self.client.get("/api/v1/getCartItems")
        self.assertEqual(res.status_code, 401)
