# catalog/tests/test_restock.py

from decimal import Decimal
from unittest import mock

from django.core.exceptions import ValidationError
from django.test import TestCase

from catalog.models import Category, Item
from catalog.services import create_or_restock
from catalog.services.exceptions import CatalogValidationError, CategoryNotFoundError


class CreateOrRestockTests(TestCase):
    """
    GUARANTEES:
    - A new (name, price, category) triple inserts one item
    - The same triple (after normalization) adds stock instead of duplicating
    - A different price or category is a different item
    - Invalid quantities / prices never touch the database
    """

    def setUp(self):
        self.burgers = Category.objects.create(name="Burgers")
        self.sides = Category.objects.create(name="Sides")

    def test_creates_new_item(self):
        item, created = create_or_restock(
            name="Burger",
            category_id=self.burgers.pk,
            price="7.99",
            stock_quantity=5,
        )

        self.assertTrue(created)
        self.assertEqual(item.name, "burger")
        self.assertEqual(item.price, Decimal("7.99"))
        self.assertEqual(item.stock_quantity, 5)

    def test_same_triple_restocks(self):
        first, _ = create_or_restock(
            name="Burger", category_id=self.burgers.pk, price="7.99", stock_quantity=5
        )

        second, created = create_or_restock(
            name="  BURGER ", category_id=self.burgers.pk, price=Decimal("7.990"), stock_quantity=3
        )

        self.assertFalse(created)
        self.assertEqual(second.pk, first.pk)
        self.assertEqual(second.stock_quantity, 8)
        self.assertEqual(Item.objects.count(), 1)

    def test_different_price_is_new_item(self):
        create_or_restock(name="Burger", category_id=self.burgers.pk, price="7.99", stock_quantity=5)
        _, created = create_or_restock(
            name="Burger", category_id=self.burgers.pk, price="8.49", stock_quantity=2
        )

        self.assertTrue(created)
        self.assertEqual(Item.objects.filter(name="burger").count(), 2)

    def test_different_category_is_new_item(self):
        create_or_restock(name="Fries", category_id=self.sides.pk, price="3.49", stock_quantity=5)
        _, created = create_or_restock(
            name="Fries", category_id=self.burgers.pk, price="3.49", stock_quantity=5
        )

        self.assertTrue(created)

    def test_price_rounds_half_up(self):
        item, _ = create_or_restock(
            name="Cola", category_id=self.sides.pk, price="1.995", stock_quantity=1
        )
        self.assertEqual(item.price, Decimal("2.00"))

    def test_zero_quantity_restock_is_allowed(self):
        item, _ = create_or_restock(
            name="Cola", category_id=self.sides.pk, price="1.99", stock_quantity=0
        )
        self.assertEqual(item.stock_quantity, 0)

    # =====================================================
    # REJECTIONS
    # =====================================================

    def test_negative_quantity_rejected(self):
        with self.assertRaises(CatalogValidationError):
            create_or_restock(name="Cola", category_id=self.sides.pk, price="1.99", stock_quantity=-1)
        self.assertFalse(Item.objects.exists())

    def test_fractional_quantity_rejected(self):
        with self.assertRaises(CatalogValidationError):
            create_or_restock(name="Cola", category_id=self.sides.pk, price="1.99", stock_quantity=2.5)

    def test_non_positive_price_rejected(self):
        with self.assertRaises(CatalogValidationError):
            create_or_restock(name="Cola", category_id=self.sides.pk, price="0", stock_quantity=1)

    def test_blank_name_rejected(self):
        with self.assertRaises(CatalogValidationError):
            create_or_restock(name="   ", category_id=self.sides.pk, price="1.99", stock_quantity=1)

    def test_name_longer_than_column_after_casefold_rejected(self):
        with self.assertRaises(CatalogValidationError):
            create_or_restock(name="ß" * 200, category_id=self.sides.pk, price="1.99", stock_quantity=1)
        self.assertFalse(Item.objects.exists())

    def test_price_with_too_many_digits_rejected(self):
        with self.assertRaises(CatalogValidationError):
            create_or_restock(
                name="Cola", category_id=self.sides.pk, price="123456789012.50", stock_quantity=1
            )
        self.assertFalse(Item.objects.exists())

    def test_model_validation_error_becomes_catalog_error(self):
        with mock.patch.object(
            Item, "full_clean", side_effect=ValidationError({"description": "Too long"})
        ):
            with self.assertRaises(CatalogValidationError) as ctx:
                create_or_restock(name="Cola", category_id=self.sides.pk, price="1.99", stock_quantity=1)

        self.assertEqual(str(ctx.exception), "Too long")
        self.assertFalse(Item.objects.exists())

    def test_unknown_category(self):
        with self.assertRaises(CategoryNotFoundError):
            create_or_restock(name="Cola", category_id=999999, price="1.99", stock_quantity=1)
