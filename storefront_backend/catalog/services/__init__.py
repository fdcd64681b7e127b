from .catalog_admin import create_category, delete_category, delete_item
from .restock import create_or_restock

__all__ = [
    "create_or_restock",
    "create_category",
    "delete_item",
    "delete_category",
]
