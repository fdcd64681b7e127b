# catalog/services/restock.py

"""
CREATE-OR-RESTOCK (APPLICATION SERVICE)

Purpose:
- Admin intake of menu items.
- If an item with the same normalized (name, price, category) exists, its stock
  is increased; otherwise a new item row is inserted.

Normalization (before matching):
- name: trimmed + case-folded
- price: fixed 2dp, ROUND_HALF_UP
- stock_quantity: whole, non-negative integer

Concurrency:
- The matching row is locked (SELECT ... FOR UPDATE) and incremented with F().
- Two concurrent first-time inserts of the same triple collide on the
  unique constraint; the loser retries as a restock.
"""

from __future__ import annotations

import logging

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.db.models import F

from catalog.models import Category, Item
from catalog.models.item import normalize_item_name
from catalog.money import ZERO, to_money

from .exceptions import CatalogValidationError, CategoryNotFoundError

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = Item._meta.get_field("name").max_length
PRICE_MAX_DIGITS = Item._meta.get_field("price").max_digits
PRICE_DECIMAL_PLACES = Item._meta.get_field("price").decimal_places


def _to_stock_qty(value) -> int:
    """
    HARD RULE: stock quantities are whole integer units, never negative.
    """
    if value is None or value == "":
        raise CatalogValidationError("stockQuantity is required")

    if isinstance(value, bool):
        raise CatalogValidationError("stockQuantity must be a whole number")

    if isinstance(value, int):
        qty = value
    elif isinstance(value, str) and value.strip().isdigit():
        qty = int(value.strip())
    else:
        raise CatalogValidationError("stockQuantity must be a whole number")

    if qty < 0:
        raise CatalogValidationError("stockQuantity cannot be negative")
    return qty


def _restock(*, item_id: int, quantity: int, using: str) -> Item:
    item = Item.objects.using(using).select_for_update().get(pk=item_id)
    Item.objects.using(using).filter(pk=item.pk).update(
        stock_quantity=F("stock_quantity") + quantity
    )
    item.refresh_from_db(using=using)
    return item


def _first_message(exc: ValidationError) -> str:
    messages = exc.messages
    return messages[0] if messages else "Invalid item"


def _create_or_restock_locked(
    *,
    name: str,
    category: Category,
    price,
    quantity: int,
    description: str,
    using: str,
) -> tuple[Item, bool]:
    existing = (
        Item.objects.using(using)
        .select_for_update()
        .filter(name=name, price=price, category=category)
        .first()
    )
    if existing is not None:
        return _restock(item_id=existing.pk, quantity=quantity, using=using), False

    try:
        with transaction.atomic(using=using):
            item = Item(
                name=name,
                category=category,
                price=price,
                stock_quantity=quantity,
                description=description,
            )
            item.full_clean(validate_unique=False, validate_constraints=False)
            item.save(using=using)
        return item, True
    except ValidationError as exc:
        raise CatalogValidationError(_first_message(exc)) from exc
    except IntegrityError:
        # A concurrent intake inserted the same triple first.
        existing = Item.objects.using(using).get(name=name, price=price, category=category)
        return _restock(item_id=existing.pk, quantity=quantity, using=using), False


def create_or_restock(
    *,
    name,
    category_id,
    price,
    stock_quantity,
    description: str | None = "",
    using: str = "default",
) -> tuple[Item, bool]:
    """
    Returns (item, created).

    created=True  -> a new item row was inserted
    created=False -> an existing item's stock was increased
    """
    normalized_name = normalize_item_name(name)
    if not normalized_name:
        raise CatalogValidationError("itemName is required")
    if len(normalized_name) > NAME_MAX_LENGTH:
        raise CatalogValidationError(
            f"itemName must be at most {NAME_MAX_LENGTH} characters"
        )

    try:
        normalized_price = to_money(price)
    except ValueError as exc:
        raise CatalogValidationError(f"price is invalid: {exc}") from exc

    if normalized_price <= ZERO:
        raise CatalogValidationError("price must be greater than zero")

    # Quantized value must fit the column precision.
    if len(normalized_price.as_tuple().digits) > PRICE_MAX_DIGITS:
        raise CatalogValidationError(
            f"price must have at most {PRICE_MAX_DIGITS - PRICE_DECIMAL_PLACES} digits "
            "before the decimal point"
        )

    quantity = _to_stock_qty(stock_quantity)

    category = Category.objects.using(using).filter(pk=category_id).first()
    if category is None:
        raise CategoryNotFoundError(f"Category not found: {category_id}")

    with transaction.atomic(using=using):
        item, created = _create_or_restock_locked(
            name=normalized_name,
            category=category,
            price=normalized_price,
            quantity=quantity,
            description=(description or "").strip(),
            using=using,
        )

    logger.info(
        "Item created" if created else "Item restocked",
        extra={
            "item_id": item.pk,
            "category_id": category.pk,
            "quantity": quantity,
            "stock_quantity": item.stock_quantity,
        },
    )
    return item, created
