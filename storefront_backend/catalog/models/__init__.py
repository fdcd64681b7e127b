"""
PATH: catalog/models/__init__.py

Catalog models export surface.
"""

from .category import Category
from .item import Item

__all__ = [
    "Category",
    "Item",
]
