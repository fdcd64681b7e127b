# cart/services/cart_service.py

"""
CART SERVICE

Purpose:
- Maintain a per-user mapping of item -> quantity.

Rules:
- First add of an item creates an entry at quantity 1; repeat adds
  increment it (F() expression, no read-modify-write).
- Removing one unit decrements; the last unit deletes the entry.
- Entries are always resolved through the owning user, so one customer
  can never touch another customer's cart.
- No stock reservation: stock is validated only at checkout.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from django.conf import settings
from django.db import IntegrityError, transaction
from django.db.models import F

from cart.models import CartEntry
from catalog.models import Item
from catalog.money import ZERO, line_total, to_money

from .exceptions import CartEntryNotFoundError, CartItemNotFoundError

logger = logging.getLogger(__name__)


def _tax_rate() -> Decimal:
    return Decimal(str(settings.STOREFRONT["TAX_RATE"]))


@dataclass(frozen=True)
class CartSummary:
    subtotal: Decimal
    tax_rate: Decimal
    tax: Decimal
    total: Decimal
    item_count: int
    line_count: int


# -------------------------------------------------
# QUERIES
# -------------------------------------------------


def list_entries(*, user, using: str = "default"):
    return (
        CartEntry.objects.using(using)
        .select_related("item", "item__category")
        .filter(user=user)
        .order_by("created_at", "id")
    )


def cart_summary(*, user, using: str = "default") -> CartSummary:
    """
    Informational totals for the cart page.

    Tax is an estimate shown to the customer; checkout charges the subtotal.
    """
    subtotal = ZERO
    item_count = 0
    line_count = 0

    for entry in list_entries(user=user, using=using):
        subtotal += line_total(entry.item.price, entry.quantity)
        item_count += entry.quantity
        line_count += 1

    rate = _tax_rate()
    subtotal = to_money(subtotal)
    tax = to_money(subtotal * rate)

    return CartSummary(
        subtotal=subtotal,
        tax_rate=rate,
        tax=tax,
        total=to_money(subtotal + tax),
        item_count=item_count,
        line_count=line_count,
    )


# -------------------------------------------------
# COMMANDS
# -------------------------------------------------


def add_item(*, user, item_id, using: str = "default") -> tuple[CartEntry, bool]:
    """
    Returns (entry, created).
    """
    if not Item.objects.using(using).filter(pk=item_id).exists():
        raise CartItemNotFoundError(f"Item not found: {item_id}")

    with transaction.atomic(using=using):
        entry = (
            CartEntry.objects.using(using)
            .select_for_update()
            .filter(user=user, item_id=item_id)
            .first()
        )

        if entry is None:
            try:
                with transaction.atomic(using=using):
                    entry = CartEntry.objects.using(using).create(
                        user=user, item_id=item_id, quantity=1
                    )
                created = True
            except IntegrityError:
                # Lost a race with a concurrent first add for the same item.
                entry = CartEntry.objects.using(using).get(user=user, item_id=item_id)
                created = False
        else:
            created = False

        if not created:
            CartEntry.objects.using(using).filter(pk=entry.pk).update(
                quantity=F("quantity") + 1
            )
            entry.refresh_from_db(using=using)

    logger.info(
        "Cart item added",
        extra={"user_id": str(user.pk), "item_id": entry.item_id, "quantity": entry.quantity},
    )
    return entry, created


def remove_one(*, user, cart_entry_id, using: str = "default") -> tuple[CartEntry, bool]:
    """
    Returns (entry, deleted).

    deleted=False -> quantity decreased by one
    deleted=True  -> last unit removed, entry deleted (the returned instance
                     is a detached snapshot that keeps its id)
    """
    with transaction.atomic(using=using):
        entry = (
            CartEntry.objects.using(using)
            .select_for_update()
            .select_related("item")
            .filter(pk=cart_entry_id, user=user)
            .first()
        )
        if entry is None:
            raise CartEntryNotFoundError(f"Cart item not found: {cart_entry_id}")

        if entry.quantity > 1:
            CartEntry.objects.using(using).filter(pk=entry.pk).update(
                quantity=F("quantity") - 1
            )
            entry.refresh_from_db(using=using)
            deleted = False
        else:
            entry_id = entry.pk
            entry.delete()
            entry.pk = entry_id
            deleted = True

    logger.info(
        "Cart item removed" if deleted else "Cart item decremented",
        extra={"user_id": str(user.pk), "cart_entry_id": entry.pk},
    )
    return entry, deleted


def clear_cart(*, user, using: str = "default") -> int:
    deleted, _ = CartEntry.objects.using(using).filter(user=user).delete()
    if deleted:
        logger.info("Cart cleared", extra={"user_id": str(user.pk), "entries": deleted})
    return deleted
