# backend/urls.py
"""
PROJECT URLS

All API routes live under /api/v1/ (no trailing slashes; the storefront
client calls camelCase paths such as /api/v1/getItems).

Operational:
- /api/v1/health checks DB connectivity (503 when the database is down).
- /api/v1/schema + /api/v1/docs (drf-spectacular).

Security hardening:
- Django admin path is configurable via env var (ADMIN_PATH).
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.contrib import admin
from django.db import connections
from django.db.utils import OperationalError
from django.urls import include, path
from django.views.generic import RedirectView
from drf_spectacular.utils import extend_schema
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1/"


# ------------------ API ROOT (PUBLIC) ------------------
@extend_schema(
    responses={
        200: {
            "type": "object",
            "properties": {
                "message": {"type": "string"},
                "auth": {"type": "object"},
                "docs": {"type": "object"},
                "catalog": {"type": "object"},
                "cart": {"type": "object"},
                "purchases": {"type": "object"},
            },
        }
    },
)
@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def api_root(request):
    return Response(
        {
            "message": "Storefront Backend API is running",
            "auth": {
                "register": f"{API_PREFIX}register",
                "login": f"{API_PREFIX}login",
                "refresh": f"{API_PREFIX}token/refresh",
                "me": f"{API_PREFIX}me",
            },
            "docs": {
                "swagger": f"{API_PREFIX}docs",
                "schema": f"{API_PREFIX}schema",
            },
            "catalog": {
                "categories": f"{API_PREFIX}getCategories",
                "items": f"{API_PREFIX}getItems",
            },
            "cart": {
                "items": f"{API_PREFIX}getCartItems",
                "summary": f"{API_PREFIX}getCartSummary",
            },
            "purchases": {
                "checkout": f"{API_PREFIX}checkout",
                "history": f"{API_PREFIX}getPurchases",
            },
        }
    )


# ------------------ HEALTH CHECK (PUBLIC) ------------------
@extend_schema(
    responses={
        200: {
            "type": "object",
            "properties": {
                "status": {"type": "string"},
                "db": {"type": "string"},
            },
        },
        503: {
            "type": "object",
            "properties": {
                "status": {"type": "string"},
                "db": {"type": "string"},
            },
        },
    },
)
@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def health_check(request):
    """
    Minimal operational endpoint:
    - Confirms app is responding
    - Confirms DB connection + simple query works
    """
    try:
        with connections["default"].cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
    except OperationalError:
        logger.exception("Health check: database unreachable")
        return Response({"status": "degraded", "db": "down"}, status=503)

    return Response({"status": "ok", "db": "ok"})


# ------------------ ADMIN PATH (HARDENED) ------------------
# Keep the trailing slash; Django admin expects it.
ADMIN_PATH = getattr(settings, "ADMIN_PATH", "admin/")
if not ADMIN_PATH.endswith("/"):
    ADMIN_PATH = f"{ADMIN_PATH}/"


# ------------------ API ROUTES (ALL UNDER /api/v1/) ------------------
api_v1_urlpatterns = [
    path("", api_root, name="api-root"),
    path("health", health_check, name="health-check"),
    # OpenAPI / Swagger
    path("schema", SpectacularAPIView.as_view(), name="schema"),
    path("docs", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    # Identity
    path("", include("users.urls")),
    # Storefront modules
    path("", include("catalog.urls")),
    path("", include("cart.urls")),
    path("", include("purchases.api.urls")),
]

urlpatterns = [
    path(ADMIN_PATH, admin.site.urls),
    # Visiting / takes you to Swagger docs
    path("", RedirectView.as_view(url=f"{API_PREFIX}docs", permanent=False), name="root"),
    path("api/v1/", include(api_v1_urlpatterns)),
]
