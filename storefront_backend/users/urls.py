# users/urls.py

from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView

from .views import LoginView, MeView, RegisterView

urlpatterns = [
    # ---------------- PUBLIC AUTH ----------------
    path("register", RegisterView.as_view(), name="register"),
    path("login", LoginView.as_view(), name="login"),
    path("token/refresh", TokenRefreshView.as_view(), name="token-refresh"),
    # ---------------- AUTHENTICATED ----------------
    path("me", MeView.as_view(), name="me"),
]
