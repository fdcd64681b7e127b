# purchases/api/views.py

"""
PURCHASE API VIEWS

- POST /checkout       cart -> Purchase via checkout orchestrator
- GET  /getPurchases   caller's purchase history (newest first, with lines)
"""

from __future__ import annotations

import logging

from drf_spectacular.utils import OpenApiExample, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.errors import error_response, server_error_response
from purchases.api.serializers import (
    CheckoutInputSerializer,
    CheckoutResultSerializer,
    PurchaseSerializer,
)
from purchases.models import Purchase
from purchases.services import (
    CheckoutError,
    EmptyCartError,
    InvalidPaymentMethodError,
    MissingPaymentMethodError,
    StockValidationError,
    checkout_cart,
)

logger = logging.getLogger(__name__)


class CheckoutView(APIView):
    """
    Checkout the caller's cart into a Purchase.

    Calls:
    - purchases.services.checkout_orchestrator.checkout_cart()
    """

    permission_classes = [IsAuthenticated]
    serializer_class = CheckoutResultSerializer

    @extend_schema(
        request=CheckoutInputSerializer,
        responses={
            200: CheckoutResultSerializer,
            400: OpenApiResponse(description="Empty cart, insufficient stock or bad payment method"),
            500: OpenApiResponse(description="Server error"),
        },
        description="Atomically convert the cart into a purchase and decrement stock.",
        examples=[
            OpenApiExample(
                "Credit card",
                value={"paymentMethod": "credit-card"},
                request_only=True,
            ),
        ],
    )
    def post(self, request):
        serializer = CheckoutInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            purchase = checkout_cart(
                user=request.user,
                payment_method=serializer.validated_data.get("paymentMethod"),
            )
        except CheckoutError as exc:
            logger.warning(
                "Checkout rejected: %s",
                exc,
                extra={"user_id": str(request.user.pk)},
            )
            return error_response(
                code=_checkout_error_code(exc),
                message=str(exc),
                http_status=status.HTTP_400_BAD_REQUEST,
            )
        except Exception:
            logger.exception("Checkout failed", extra={"user_id": str(request.user.pk)})
            return server_error_response()

        return Response(CheckoutResultSerializer(purchase).data, status=status.HTTP_200_OK)


def _checkout_error_code(exc: CheckoutError) -> str:
    if isinstance(exc, EmptyCartError):
        return "EMPTY_CART"
    if isinstance(exc, StockValidationError):
        return "INSUFFICIENT_STOCK"
    if isinstance(exc, MissingPaymentMethodError):
        return "PAYMENT_METHOD_REQUIRED"
    if isinstance(exc, InvalidPaymentMethodError):
        return "INVALID_PAYMENT_METHOD"
    return "CHECKOUT_FAILED"


class PurchaseHistoryView(APIView):
    permission_classes = [IsAuthenticated]
    serializer_class = PurchaseSerializer

    @extend_schema(
        responses={
            200: PurchaseSerializer(many=True),
            404: OpenApiResponse(description="No purchases yet"),
        },
        description="List the caller's purchases with their line items",
    )
    def get(self, request):
        purchases = list(
            Purchase.objects.filter(user=request.user)
            .prefetch_related("items")
            .order_by("-created_at")
        )
        if not purchases:
            return error_response(
                code="NOT_FOUND",
                message="No purchases found for this user",
                http_status=status.HTTP_404_NOT_FOUND,
            )

        return Response(PurchaseSerializer(purchases, many=True).data, status=status.HTTP_200_OK)
