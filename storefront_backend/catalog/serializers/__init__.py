# catalog/serializers/__init__.py

from .category import CategoryInputSerializer, CategorySerializer
from .item import ItemSerializer, PostItemInputSerializer

__all__ = [
    "CategorySerializer",
    "CategoryInputSerializer",
    "ItemSerializer",
    "PostItemInputSerializer",
]
