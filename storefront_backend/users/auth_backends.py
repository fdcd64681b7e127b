"""
PATH: users/auth_backends.py

AUTH BACKEND: Email OR Username login

Rules:
- Storefront login sends an email (identifier contains "@")
- Django admin login posts the USERNAME_FIELD value, which is also the email;
  a bare username (no "@") is accepted as a convenience
- Inactive users never authenticate

Bearer-token requests do not pass through here: SimpleJWT's
JWTAuthentication resolves the user from the token's user_id claim.
"""

from __future__ import annotations

from django.contrib.auth import get_user_model
from django.contrib.auth.backends import BaseBackend

User = get_user_model()


class EmailOrUsernameBackend(BaseBackend):
    def authenticate(self, request, username=None, password=None, **kwargs):
        identifier = (username or kwargs.get("email") or "").strip()
        if not identifier or password is None:
            return None

        try:
            if "@" in identifier:
                user = User.objects.get(email__iexact=identifier)
            else:
                user = User.objects.get(username__iexact=identifier)
        except User.DoesNotExist:
            # Run the hasher anyway so response timing does not reveal unknown accounts.
            User().set_password(password)
            return None

        if not user.is_active:
            return None

        if user.check_password(password):
            return user

        return None

    def get_user(self, user_id):
        try:
            return User.objects.get(pk=user_id)
        except User.DoesNotExist:
            return None

