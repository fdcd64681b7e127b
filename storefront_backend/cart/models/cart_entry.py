# cart/models/cart_entry.py

"""
CART ENTRY MODEL

Purpose:
- One row per (user, item) pending purchase.

Rules:
- One entry per item per user (DB constraint); repeat adds increment quantity.
- Quantity is always >= 1; removing the last unit deletes the row.
- No price snapshot here: checkout reads the live item price under lock.
"""

from decimal import Decimal

from django.conf import settings
from django.db import models
from django.db.models import Q

from catalog import money
from catalog.models import Item

User = settings.AUTH_USER_MODEL


class CartEntry(models.Model):
    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name="cart_entries",
    )

    item = models.ForeignKey(
        Item,
        on_delete=models.CASCADE,
        related_name="cart_entries",
    )

    quantity = models.PositiveIntegerField(default=1)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at", "id"]
        verbose_name_plural = "cart entries"
        constraints = [
            models.UniqueConstraint(
                fields=["user", "item"],
                name="unique_item_per_user_cart",
            ),
            models.CheckConstraint(
                condition=Q(quantity__gte=1),
                name="cart_entry_quantity_at_least_one",
            ),
        ]

    @property
    def line_total(self) -> Decimal:
        return money.line_total(self.item.price or money.ZERO, self.quantity or 0)

    def __str__(self):
        return f"{getattr(self.item, 'name', 'Item')} x {self.quantity}"
