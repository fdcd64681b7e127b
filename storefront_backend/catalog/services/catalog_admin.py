# catalog/services/catalog_admin.py

"""
CATALOG ADMINISTRATION

Category creation and delete-by-identifier for items and categories.
Deletes return the removed row's data so the API can echo it back.
"""

from __future__ import annotations

import logging

from django.db import IntegrityError, transaction
from django.db.models import ProtectedError

from catalog.models import Category, Item

from .exceptions import (
    CatalogValidationError,
    CategoryInUseError,
    CategoryNotFoundError,
    DuplicateCategoryError,
    ItemNotFoundError,
)

logger = logging.getLogger(__name__)


def create_category(*, name, using: str = "default") -> Category:
    clean_name = " ".join(str(name or "").split())
    if not clean_name:
        raise CatalogValidationError("name cannot be blank")

    if Category.objects.using(using).filter(name__iexact=clean_name).exists():
        raise DuplicateCategoryError(f"Category already exists: {clean_name}")

    try:
        with transaction.atomic(using=using):
            category = Category.objects.using(using).create(name=clean_name)
    except IntegrityError as exc:
        raise DuplicateCategoryError(f"Category already exists: {clean_name}") from exc

    logger.info("Category created", extra={"category_id": category.pk})
    return category


def delete_item(*, item_id, using: str = "default") -> Item:
    with transaction.atomic(using=using):
        item = Item.objects.using(using).select_for_update().filter(pk=item_id).first()
        if item is None:
            raise ItemNotFoundError("Item not found")

        pk = item.pk
        item.delete(using=using)

    # delete() clears the pk; keep it for the response body.
    item.pk = pk
    logger.info("Item deleted", extra={"item_id": pk})
    return item


def delete_category(*, category_id, using: str = "default") -> Category:
    category = Category.objects.using(using).filter(pk=category_id).first()
    if category is None:
        raise CategoryNotFoundError("Category not found")

    pk = category.pk
    try:
        with transaction.atomic(using=using):
            category.delete(using=using)
    except ProtectedError as exc:
        raise CategoryInUseError(
            "Category still has items; delete or move them first"
        ) from exc

    category.pk = pk
    logger.info("Category deleted", extra={"category_id": pk})
    return category
