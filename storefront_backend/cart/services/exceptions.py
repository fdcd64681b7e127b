# cart/services/exceptions.py

"""
CART SERVICE ERRORS
"""


class CartError(Exception):
    """Base exception for cart operations."""


class CartItemNotFoundError(CartError):
    """Raised when the referenced catalog item does not exist."""


class CartEntryNotFoundError(CartError):
    """Raised when a cart entry is missing or belongs to another user."""
