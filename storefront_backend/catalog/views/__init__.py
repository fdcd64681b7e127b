from .category import CategoryCreateView, CategoryDeleteView, CategoryListView
from .item import DeleteItemView, ItemListView, ItemsByCategoryView, PostItemView

__all__ = [
    "CategoryListView",
    "CategoryCreateView",
    "CategoryDeleteView",
    "ItemListView",
    "ItemsByCategoryView",
    "PostItemView",
    "DeleteItemView",
]
