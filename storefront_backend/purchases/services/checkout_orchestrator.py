# purchases/services/checkout_orchestrator.py

"""
CHECKOUT ORCHESTRATOR (APPLICATION SERVICE)

Purpose:
- Turn the caller's cart into one Purchase (atomic, auditable).

Steps (all inside one transaction on the given database alias):
1. lock + load the cart entries and the items they reference
2. reject an empty cart
3. validate every requested quantity against current stock
4. total = sum(price * quantity), 2dp ROUND_HALF_UP
5. write the Purchase and one PurchaseItem per entry (price/name snapshot)
6. decrement stock with a guarded UPDATE (stock_quantity >= quantity)
7. delete the caller's cart entries

Any failure rolls back every write; stock, cart and history are unchanged.

Hard rules:
- Quantities are integer units.
- Money values are computed server-side from live item prices.
- Items are locked in primary-key order so concurrent checkouts sharing
  items cannot deadlock.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from django.conf import settings
from django.db import transaction
from django.db.models import F

from cart.models import CartEntry
from catalog.models import Item
from catalog.money import ZERO, to_money
from purchases.models import Purchase, PurchaseItem

from .exceptions import (
    EmptyCartError,
    InvalidPaymentMethodError,
    MissingPaymentMethodError,
    StockValidationError,
)

logger = logging.getLogger(__name__)


def accepted_payment_methods() -> list[str]:
    return list(settings.STOREFRONT["PAYMENT_METHODS"])


def _normalize_payment_method(method) -> str:
    m = str(method or "").strip().lower()
    if not m:
        raise MissingPaymentMethodError("Payment method is required")

    if m not in accepted_payment_methods():
        raise InvalidPaymentMethodError(
            f"Unsupported payment method: {m}. "
            f"Accepted: {', '.join(accepted_payment_methods())}"
        )
    return m


def _insufficient(item: Item) -> StockValidationError:
    return StockValidationError(f"Not enough stock for item: {item.name}")


def checkout_cart(*, user, payment_method, using: str = "default") -> Purchase:
    pm = _normalize_payment_method(payment_method)

    with transaction.atomic(using=using):
        entries = list(
            CartEntry.objects.using(using)
            .select_for_update()
            .filter(user=user)
            .order_by("item_id", "id")
        )
        if not entries:
            raise EmptyCartError("Cart is empty")

        items = {
            item.pk: item
            for item in Item.objects.using(using)
            .select_for_update()
            .filter(pk__in=[e.item_id for e in entries])
            .order_by("pk")
        }

        # Validate everything before writing anything.
        for entry in entries:
            item = items[entry.item_id]
            if entry.quantity > item.stock_quantity:
                raise _insufficient(item)

        total = to_money(
            sum(
                (items[e.item_id].price * Decimal(e.quantity) for e in entries),
                ZERO,
            )
        )

        purchase = Purchase.objects.using(using).create(
            user=user,
            total_amount=total,
            payment_method=pm,
        )

        for entry in entries:
            item = items[entry.item_id]

            PurchaseItem.objects.using(using).create(
                purchase=purchase,
                item=item,
                item_name=item.name,
                quantity=entry.quantity,
                unit_price=to_money(item.price),
            )

            updated = (
                Item.objects.using(using)
                .filter(pk=item.pk, stock_quantity__gte=entry.quantity)
                .update(stock_quantity=F("stock_quantity") - entry.quantity)
            )
            if updated != 1:
                # Stock moved between validation and write (no row locks on this backend).
                raise _insufficient(item)

        CartEntry.objects.using(using).filter(user=user).delete()

    logger.info(
        "Checkout completed",
        extra={
            "purchase_id": str(purchase.id),
            "user_id": str(user.pk),
            "total_amount": str(purchase.total_amount),
            "payment_method": pm,
            "lines": len(entries),
        },
    )
    return purchase
