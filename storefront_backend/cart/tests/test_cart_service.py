# cart/tests/test_cart_service.py

from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings

from cart.models import CartEntry
from cart.services import add_item, cart_summary, clear_cart, list_entries, remove_one
from cart.services.exceptions import CartEntryNotFoundError, CartItemNotFoundError
from catalog.models import Category, Item

User = get_user_model()


class CartServiceTests(TestCase):
    """
    GUARANTEES:
    - One entry per (user, item); repeat adds increment
    - Quantity never drops below 1 (last unit deletes the entry)
    - A user can never touch another user's entries
    """

    def setUp(self):
        self.user = User.objects.create_user(email="eve@example.com", password="Eve-Pass-123")
        self.other = User.objects.create_user(email="mallory@example.com", password="Mal-Pass-123")

        category = Category.objects.create(name="Burgers")
        self.burger = Item.objects.create(
            category=category, name="burger", price=Decimal("7.99"), stock_quantity=5
        )
        self.fries = Item.objects.create(
            category=category, name="fries", price=Decimal("3.49"), stock_quantity=1
        )

    def test_first_add_creates_entry(self):
        entry, created = add_item(user=self.user, item_id=self.burger.pk)

        self.assertTrue(created)
        self.assertEqual(entry.quantity, 1)

    def test_repeat_add_increments(self):
        add_item(user=self.user, item_id=self.burger.pk)
        entry, created = add_item(user=self.user, item_id=self.burger.pk)

        self.assertFalse(created)
        self.assertEqual(entry.quantity, 2)
        self.assertEqual(CartEntry.objects.filter(user=self.user).count(), 1)

    def test_add_does_not_check_stock(self):
        # Stock is validated at checkout, not while browsing.
        for _ in range(3):
            entry, _ = add_item(user=self.user, item_id=self.fries.pk)
        self.assertEqual(entry.quantity, 3)

    def test_add_unknown_item(self):
        with self.assertRaises(CartItemNotFoundError):
            add_item(user=self.user, item_id=999999)

    def test_remove_one_decrements_then_deletes(self):
        add_item(user=self.user, item_id=self.burger.pk)
        entry, _ = add_item(user=self.user, item_id=self.burger.pk)

        entry, deleted = remove_one(user=self.user, cart_entry_id=entry.pk)
        self.assertFalse(deleted)
        self.assertEqual(entry.quantity, 1)

        entry, deleted = remove_one(user=self.user, cart_entry_id=entry.pk)
        self.assertTrue(deleted)
        self.assertIsNotNone(entry.pk)
        self.assertFalse(CartEntry.objects.filter(user=self.user).exists())

    def test_remove_other_users_entry_is_not_found(self):
        entry, _ = add_item(user=self.other, item_id=self.burger.pk)

        with self.assertRaises(CartEntryNotFoundError):
            remove_one(user=self.user, cart_entry_id=entry.pk)

        entry.refresh_from_db()
        self.assertEqual(entry.quantity, 1)

    def test_list_entries_is_per_user(self):
        add_item(user=self.user, item_id=self.burger.pk)
        add_item(user=self.other, item_id=self.fries.pk)

        entries = list(list_entries(user=self.user))

        self.assertEqual(len(entries), 1)
        self.assertEqual(entries[0].item.name, "burger")

    def test_clear_cart(self):
        add_item(user=self.user, item_id=self.burger.pk)
        add_item(user=self.user, item_id=self.fries.pk)
        add_item(user=self.other, item_id=self.fries.pk)

        removed = clear_cart(user=self.user)

        self.assertEqual(removed, 2)
        self.assertFalse(CartEntry.objects.filter(user=self.user).exists())
        self.assertTrue(CartEntry.objects.filter(user=self.other).exists())

    # =====================================================
    # SUMMARY
    # =====================================================

    def test_summary_totals(self):
        add_item(user=self.user, item_id=self.burger.pk)
        add_item(user=self.user, item_id=self.burger.pk)
        add_item(user=self.user, item_id=self.fries.pk)

        summary = cart_summary(user=self.user)

        # 2 * 7.99 + 3.49 = 19.47; 8.25% tax = 1.606... -> 1.61
        self.assertEqual(summary.subtotal, Decimal("19.47"))
        self.assertEqual(summary.tax, Decimal("1.61"))
        self.assertEqual(summary.total, Decimal("21.08"))
        self.assertEqual(summary.item_count, 3)
        self.assertEqual(summary.line_count, 2)

    @override_settings(STOREFRONT={"TAX_RATE": "0", "PAYMENT_METHODS": ["cash"]})
    def test_summary_without_tax(self):
        add_item(user=self.user, item_id=self.burger.pk)

        summary = cart_summary(user=self.user)

        self.assertEqual(summary.tax, Decimal("0.00"))
        self.assertEqual(summary.total, Decimal("7.99"))

    def test_empty_summary(self):
        summary = cart_summary(user=self.user)

        self.assertEqual(summary.subtotal, Decimal("0.00"))
        self.assertEqual(summary.item_count, 0)

    def test_entry_line_total(self):
        add_item(user=self.user, item_id=self.burger.pk)
        entry, _ = add_item(user=self.user, item_id=self.burger.pk)

        self.assertEqual(entry.line_total, Decimal("15.98"))

    def test_entry_line_total_rounds_half_up(self):
        entry = CartEntry(
            user=self.user,
            item=Item(name="nuggets", price=Decimal("1.005")),
            quantity=3,
        )

        # 3 * 1.005 = 3.015
        self.assertEqual(entry.line_total, Decimal("3.02"))
