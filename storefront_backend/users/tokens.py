"""
PATH: users/tokens.py

BEARER CREDENTIALS (SimpleJWT)

Access token claims:
- user_id   (SIMPLE_JWT.USER_ID_CLAIM; the only claim cart/checkout rely on)
- email
- username
- exp       (ACCESS_TOKEN_LIFETIME)

Claims are stamped on the refresh token so that access tokens minted from it
(login or /token/refresh) carry them too.
"""

from __future__ import annotations

from rest_framework_simplejwt.tokens import RefreshToken


def issue_tokens_for_user(user) -> dict:
    refresh = RefreshToken.for_user(user)
    refresh["email"] = user.email
    refresh["username"] = user.username

    return {
        "token": str(refresh.access_token),
        "refresh": str(refresh),
    }
