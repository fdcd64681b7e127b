from .purchase import Purchase
from .purchase_item import PurchaseItem

__all__ = ["Purchase", "PurchaseItem"]
