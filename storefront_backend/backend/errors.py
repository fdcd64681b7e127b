# backend/errors.py

"""
API ERROR NORMALIZATION

Domain errors raised by services are translated by views into:

    {"error": {"code": "<MACHINE_CODE>", "message": "<human readable>"}}

Framework errors (serializer validation, authentication) keep DRF's default
{"detail": ...} / {"<field>": [...]} shapes.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.response import Response

GENERIC_SERVER_ERROR = "Server error"


def error_response(*, code: str, message: str, http_status: int):
    return Response(
        {"error": {"code": code, "message": message}},
        status=http_status,
    )


def server_error_response():
    # Details go to the log, never to the client.
    return error_response(
        code="SERVER_ERROR",
        message=GENERIC_SERVER_ERROR,
        http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
