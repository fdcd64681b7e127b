# purchases/models/purchase_item.py

"""
PURCHASE ITEM (IMMUTABLE SNAPSHOT)

One purchased line. Quantity, unit price and item name are frozen at
checkout time, so later catalog edits or deletes never rewrite history
(the item FK is nulled on delete, the snapshot stays).
"""

from __future__ import annotations

from decimal import Decimal

from django.db import models

from catalog.models import Item

from .purchase import Purchase


class PurchaseItem(models.Model):
    purchase = models.ForeignKey(
        Purchase,
        on_delete=models.CASCADE,
        related_name="items",
    )

    item = models.ForeignKey(
        Item,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="purchase_items",
    )

    item_name = models.CharField(max_length=255)

    quantity = models.PositiveIntegerField()

    unit_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
    )

    class Meta:
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=1),
                name="purchase_item_quantity_at_least_one",
            ),
        ]

    @property
    def line_total(self) -> Decimal:
        return (self.unit_price or Decimal("0.00")) * Decimal(int(self.quantity or 0))

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError("PurchaseItem records are immutable once created.")
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.item_name} x {self.quantity}"
