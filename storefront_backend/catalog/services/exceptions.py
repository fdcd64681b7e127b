# catalog/services/exceptions.py

"""
CATALOG SERVICE ERRORS
"""


class CatalogError(Exception):
    """Base exception for catalog administration failures."""


class CatalogValidationError(CatalogError):
    """Raised when restock/category input is missing or malformed."""


class DuplicateCategoryError(CatalogError):
    """Raised when a category name is already taken."""


class CategoryNotFoundError(CatalogError):
    pass


class ItemNotFoundError(CatalogError):
    pass


class CategoryInUseError(CatalogError):
    """Raised when deleting a category that still owns items."""
