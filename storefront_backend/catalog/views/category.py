# catalog/views/category.py

"""
CATEGORY ENDPOINTS

Policy:
- Anyone can READ categories (menu navigation)
- Only staff can CREATE / DELETE categories
"""

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import generics, status
from rest_framework.permissions import AllowAny, IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.errors import error_response
from catalog.models import Category
from catalog.serializers import CategoryInputSerializer, CategorySerializer
from catalog.services import create_category, delete_category
from catalog.services.exceptions import (
    CatalogValidationError,
    CategoryInUseError,
    CategoryNotFoundError,
    DuplicateCategoryError,
)


class CategoryListView(generics.ListAPIView):
    """
    GET /getCategories
    """

    permission_classes = [AllowAny]
    serializer_class = CategorySerializer
    queryset = Category.objects.all().order_by("name")


class CategoryCreateView(APIView):
    permission_classes = [IsAdminUser]
    serializer_class = CategoryInputSerializer

    @extend_schema(
        request=CategoryInputSerializer,
        responses={201: CategorySerializer, 400: OpenApiResponse(description="Blank or duplicate name")},
        description="Create a menu category (staff only)",
    )
    def post(self, request):
        serializer = CategoryInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            category = create_category(name=serializer.validated_data["name"])
        except (CatalogValidationError, DuplicateCategoryError) as exc:
            return error_response(
                code="INVALID_CATEGORY",
                message=str(exc),
                http_status=status.HTTP_400_BAD_REQUEST,
            )

        return Response(CategorySerializer(category).data, status=status.HTTP_201_CREATED)


class CategoryDeleteView(APIView):
    permission_classes = [IsAdminUser]
    serializer_class = CategorySerializer

    @extend_schema(
        responses={
            200: CategorySerializer,
            400: OpenApiResponse(description="Category still has items"),
            404: OpenApiResponse(description="Category not found"),
        },
        description="Delete a category by id (staff only)",
    )
    def delete(self, request, category_id):
        try:
            category = delete_category(category_id=category_id)
        except CategoryNotFoundError as exc:
            return error_response(
                code="NOT_FOUND",
                message=str(exc),
                http_status=status.HTTP_404_NOT_FOUND,
            )
        except CategoryInUseError as exc:
            return error_response(
                code="CATEGORY_IN_USE",
                message=str(exc),
                http_status=status.HTTP_400_BAD_REQUEST,
            )

        return Response(
            {
                "message": "Category deleted successfully",
                "category": CategorySerializer(category).data,
            },
            status=status.HTTP_200_OK,
        )
