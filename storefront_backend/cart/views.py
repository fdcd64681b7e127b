# cart/views.py

"""
CART API VIEWS

Purpose:
- Per-user cart lifecycle for the storefront client.
- Add one unit / remove one unit / list / summary / clear.

Hard rules:
- Every endpoint is scoped to request.user (bearer JWT).
- Stock is not reserved here; checkout validates it.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.errors import error_response
from cart.serializers import (
    AddToCartInputSerializer,
    CartEntrySerializer,
    CartSummarySerializer,
)
from cart.services import add_item, cart_summary, clear_cart, list_entries, remove_one
from cart.services.exceptions import CartEntryNotFoundError, CartItemNotFoundError


class AddToCartView(APIView):
    """
    Add one unit of an item to the caller's cart.
    """

    permission_classes = [IsAuthenticated]
    serializer_class = CartEntrySerializer

    @extend_schema(
        request=AddToCartInputSerializer,
        responses={
            200: CartEntrySerializer,
            201: CartEntrySerializer,
            404: OpenApiResponse(description="Item not found"),
        },
        description="Add an item to the cart (201 new entry, 200 quantity incremented)",
    )
    def post(self, request):
        serializer = AddToCartInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            entry, created = add_item(
                user=request.user,
                item_id=serializer.validated_data["itemID"],
            )
        except CartItemNotFoundError as exc:
            return error_response(
                code="NOT_FOUND",
                message=str(exc),
                http_status=status.HTTP_404_NOT_FOUND,
            )

        return Response(
            CartEntrySerializer(entry).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )


class DeleteCartItemView(APIView):
    """
    Remove one unit of a cart entry; the last unit deletes the entry.
    """

    permission_classes = [IsAuthenticated]
    serializer_class = CartEntrySerializer

    @extend_schema(
        responses={200: dict, 404: OpenApiResponse(description="Cart item not found")},
        description="Decrease a cart entry by one (deleted when it reaches zero)",
    )
    def delete(self, request, cart_item_id):
        try:
            entry, deleted = remove_one(user=request.user, cart_entry_id=cart_item_id)
        except CartEntryNotFoundError as exc:
            return error_response(
                code="NOT_FOUND",
                message=str(exc),
                http_status=status.HTTP_404_NOT_FOUND,
            )

        return Response(
            {
                "message": "Item deleted from cart" if deleted else "Item quantity decreased",
                "item": CartEntrySerializer(entry).data,
            },
            status=status.HTTP_200_OK,
        )


class CartItemsView(APIView):
    permission_classes = [IsAuthenticated]
    serializer_class = CartEntrySerializer

    @extend_schema(
        responses={
            200: CartEntrySerializer(many=True),
            404: OpenApiResponse(description="Cart is empty"),
        },
        description="List the caller's cart entries joined with item details",
    )
    def get(self, request):
        entries = list(list_entries(user=request.user))
        if not entries:
            return error_response(
                code="NOT_FOUND",
                message="No items found in user's cart",
                http_status=status.HTTP_404_NOT_FOUND,
            )

        return Response(CartEntrySerializer(entries, many=True).data, status=status.HTTP_200_OK)


class CartSummaryView(APIView):
    permission_classes = [IsAuthenticated]
    serializer_class = CartSummarySerializer

    @extend_schema(
        responses={200: CartSummarySerializer},
        description="Subtotal, estimated tax and total for the caller's cart",
    )
    def get(self, request):
        summary = cart_summary(user=request.user)
        return Response(CartSummarySerializer(summary).data, status=status.HTTP_200_OK)


class ClearCartView(APIView):
    permission_classes = [IsAuthenticated]
    serializer_class = None

    @extend_schema(
        responses={200: dict},
        description="Remove every entry from the caller's cart",
    )
    def delete(self, request):
        removed = clear_cart(user=request.user)
        return Response(
            {"message": "Cart cleared", "removed": removed},
            status=status.HTTP_200_OK,
        )
