# catalog/views/item.py

"""
ITEM ENDPOINTS

Public (AllowAny):
- GET /getItems                      (django-filter: ?category=&name=&min_price=&max_price=&in_stock=)
- GET /getItemsByCategory/<id>       (404 when the category has no items)

Staff:
- POST   /postItem                   create-or-restock (201 created, 200 restocked)
- DELETE /deleteItem/<id>
"""

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import generics, status
from rest_framework.permissions import AllowAny, IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.errors import error_response
from catalog.filters import ItemFilter
from catalog.models import Item
from catalog.serializers import ItemSerializer, PostItemInputSerializer
from catalog.services import create_or_restock, delete_item
from catalog.services.exceptions import (
    CatalogValidationError,
    CategoryNotFoundError,
    ItemNotFoundError,
)


class ItemListView(generics.ListAPIView):
    permission_classes = [AllowAny]
    serializer_class = ItemSerializer
    filterset_class = ItemFilter
    queryset = Item.objects.select_related("category").order_by("category_id", "name")


class ItemsByCategoryView(APIView):
    permission_classes = [AllowAny]
    serializer_class = ItemSerializer

    @extend_schema(
        responses={
            200: ItemSerializer(many=True),
            404: OpenApiResponse(description="No items found for this category"),
        },
        description="List items of one category",
    )
    def get(self, request, category_id):
        items = list(
            Item.objects.select_related("category")
            .filter(category_id=category_id)
            .order_by("name")
        )
        if not items:
            return error_response(
                code="NOT_FOUND",
                message="No items found for this category",
                http_status=status.HTTP_404_NOT_FOUND,
            )

        return Response(ItemSerializer(items, many=True).data, status=status.HTTP_200_OK)


class PostItemView(APIView):
    permission_classes = [IsAdminUser]
    serializer_class = PostItemInputSerializer

    @extend_schema(
        request=PostItemInputSerializer,
        responses={
            200: ItemSerializer,
            201: ItemSerializer,
            400: OpenApiResponse(description="Invalid input"),
            404: OpenApiResponse(description="Category not found"),
        },
        description=(
            "Create a new item, or add stock to the existing item with the same "
            "normalized (name, price, category)."
        ),
    )
    def post(self, request):
        serializer = PostItemInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            item, created = create_or_restock(
                name=data["itemName"],
                category_id=data["categoryID"],
                price=data["price"],
                stock_quantity=data["stockQuantity"],
                description=data.get("description", ""),
            )
        except CategoryNotFoundError as exc:
            return error_response(
                code="NOT_FOUND",
                message=str(exc),
                http_status=status.HTTP_404_NOT_FOUND,
            )
        except CatalogValidationError as exc:
            return error_response(
                code="INVALID_ITEM",
                message=str(exc),
                http_status=status.HTTP_400_BAD_REQUEST,
            )

        return Response(
            ItemSerializer(item).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )


class DeleteItemView(APIView):
    permission_classes = [IsAdminUser]
    serializer_class = ItemSerializer

    @extend_schema(
        responses={200: dict, 404: OpenApiResponse(description="Item not found")},
        description="Delete an item by id (staff only)",
    )
    def delete(self, request, item_id):
        try:
            item = delete_item(item_id=item_id)
        except ItemNotFoundError as exc:
            return error_response(
                code="NOT_FOUND",
                message=str(exc),
                http_status=status.HTTP_404_NOT_FOUND,
            )

        return Response(
            {"message": "Item deleted successfully", "item": ItemSerializer(item).data},
            status=status.HTTP_200_OK,
        )
