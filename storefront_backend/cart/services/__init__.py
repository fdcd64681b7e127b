from .cart_service import (
    CartSummary,
    add_item,
    cart_summary,
    clear_cart,
    list_entries,
    remove_one,
)

__all__ = [
    "CartSummary",
    "add_item",
    "cart_summary",
    "clear_cart",
    "list_entries",
    "remove_one",
]
