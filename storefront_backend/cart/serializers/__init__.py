from .cart import (
    AddToCartInputSerializer,
    CartEntrySerializer,
    CartSummarySerializer,
)

__all__ = [
    "AddToCartInputSerializer",
    "CartEntrySerializer",
    "CartSummarySerializer",
]
