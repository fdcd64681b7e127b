# catalog/models/item.py

"""
ITEM MODEL

Stock model:
- stock_quantity lives on the item itself (no per-location stock)
- never negative (DB check constraint)
- decremented only by checkout, incremented by create-or-restock

Identity for restocking:
- (name, price, category) is unique; name is stored normalized (trim + casefold)
"""

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q

from .category import Category


def normalize_item_name(value) -> str:
    return str(value or "").strip().casefold()


class Item(models.Model):
    category = models.ForeignKey(
        Category,
        on_delete=models.PROTECT,
        related_name="items",
    )

    name = models.CharField(max_length=255, db_index=True)

    price = models.DecimalField(max_digits=10, decimal_places=2)

    stock_quantity = models.PositiveIntegerField(default=0)

    description = models.TextField(blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["category_id", "name"]
        constraints = [
            models.UniqueConstraint(
                fields=["name", "price", "category"],
                name="unique_item_name_price_per_category",
            ),
            models.CheckConstraint(
                condition=Q(stock_quantity__gte=0),
                name="item_stock_quantity_non_negative",
            ),
            models.CheckConstraint(
                condition=Q(price__gt=0),
                name="item_price_positive",
            ),
        ]

    def clean(self):
        self.name = normalize_item_name(self.name)
        if not self.name:
            raise ValidationError({"name": "name is required"})

        if self.price is None or Decimal(self.price) <= 0:
            raise ValidationError({"price": "Price must be greater than zero"})

    def __str__(self):
        return f"{self.name} ({self.price})"
