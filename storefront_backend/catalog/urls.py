# catalog/urls.py

"""
CATALOG URLS

Mounted under /api/v1/ by backend/urls.py.
"""

from django.urls import path

from catalog.views import (
    CategoryCreateView,
    CategoryDeleteView,
    CategoryListView,
    DeleteItemView,
    ItemListView,
    ItemsByCategoryView,
    PostItemView,
)

urlpatterns = [
    # ---------------- CATEGORIES ----------------
    path("getCategories", CategoryListView.as_view(), name="get-categories"),
    path("postCategory", CategoryCreateView.as_view(), name="post-category"),
    path("deleteCategory/<int:category_id>", CategoryDeleteView.as_view(), name="delete-category"),
    # ---------------- ITEMS ----------------
    path("getItems", ItemListView.as_view(), name="get-items"),
    path("getItemsByCategory/<int:category_id>", ItemsByCategoryView.as_view(), name="get-items-by-category"),
    path("postItem", PostItemView.as_view(), name="post-item"),
    path("deleteItem/<int:item_id>", DeleteItemView.as_view(), name="delete-item"),
]
