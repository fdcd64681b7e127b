# catalog/tests/test_catalog_api.py

from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.test import TestCase
from rest_framework.test import APIClient

from catalog.models import Category, Item

User = get_user_model()


class CatalogApiTestBase(TestCase):
    def setUp(self):
        self.client = APIClient()

        self.staff = User.objects.create_user(
            email="manager@example.com",
            username="manager",
            password="Manager-Pass-1",
            is_staff=True,
        )
        self.customer = User.objects.create_user(
            email="customer@example.com",
            username="customer",
            password="Customer-Pass-1",
        )

        self.burgers = Category.objects.create(name="Burgers")
        self.drinks = Category.objects.create(name="Drinks")

        self.burger = Item.objects.create(
            category=self.burgers, name="burger", price=Decimal("7.99"), stock_quantity=5
        )
        self.cola = Item.objects.create(
            category=self.drinks, name="cola", price=Decimal("1.99"), stock_quantity=0
        )


class PublicListingTests(CatalogApiTestBase):
    def test_get_categories(self):
        res = self.client.get("/api/v1/getCategories")

        self.assertEqual(res.status_code, 200)
        self.assertEqual([c["name"] for c in res.data], ["Burgers", "Drinks"])
        self.assertIn("categoryID", res.data[0])

    def test_get_items(self):
        res = self.client.get("/api/v1/getItems")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(len(res.data), 2)

        burger = next(i for i in res.data if i["itemName"] == "burger")
        self.assertEqual(burger["price"], "7.99")
        self.assertEqual(burger["stockQuantity"], 5)
        self.assertEqual(burger["categoryName"], "Burgers")

    def test_get_items_filters(self):
        res = self.client.get("/api/v1/getItems", {"category": self.drinks.pk})
        self.assertEqual([i["itemName"] for i in res.data], ["cola"])

        res = self.client.get("/api/v1/getItems", {"in_stock": "true"})
        self.assertEqual([i["itemName"] for i in res.data], ["burger"])

        res = self.client.get("/api/v1/getItems", {"max_price": "5"})
        self.assertEqual([i["itemName"] for i in res.data], ["cola"])

    def test_items_by_category(self):
        res = self.client.get(f"/api/v1/getItemsByCategory/{self.burgers.pk}")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(len(res.data), 1)
        self.assertEqual(res.data[0]["itemID"], self.burger.pk)

    def test_items_by_category_empty_is_404(self):
        empty = Category.objects.create(name="Desserts")

        res = self.client.get(f"/api/v1/getItemsByCategory/{empty.pk}")

        self.assertEqual(res.status_code, 404)
        self.assertEqual(res.data["error"]["message"], "No items found for this category")


class StaffCatalogTests(CatalogApiTestBase):
    """
    GUARANTEES:
    - Only staff may create, restock or delete
    - Restock responds 200, creation 201
    - Deleting an unknown id is a 404
    """

    def test_post_item_requires_staff(self):
        payload = {"itemName": "Fries", "categoryID": self.burgers.pk, "price": "3.49", "stockQuantity": 4}

        res = self.client.post("/api/v1/postItem", payload, format="json")
        self.assertEqual(res.status_code, 401)

        self.client.force_authenticate(self.customer)
        res = self.client.post("/api/v1/postItem", payload, format="json")
        self.assertEqual(res.status_code, 403)

    def test_post_item_creates_then_restocks(self):
        self.client.force_authenticate(self.staff)
        payload = {"itemName": "Fries", "categoryID": self.burgers.pk, "price": "3.49", "stockQuantity": 4}

        res = self.client.post("/api/v1/postItem", payload, format="json")
        self.assertEqual(res.status_code, 201)
        self.assertEqual(res.data["itemName"], "fries")

        payload["itemName"] = "FRIES"
        payload["stockQuantity"] = 6
        res = self.client.post("/api/v1/postItem", payload, format="json")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["stockQuantity"], 10)

    def test_post_item_existing_burger_restocks(self):
        self.client.force_authenticate(self.staff)

        res = self.client.post(
            "/api/v1/postItem",
            {"itemName": "Burger", "categoryID": self.burgers.pk, "price": "7.99", "stockQuantity": 2},
            format="json",
        )

        self.assertEqual(res.status_code, 200)
        self.burger.refresh_from_db()
        self.assertEqual(self.burger.stock_quantity, 7)

    def test_post_item_negative_stock_rejected(self):
        self.client.force_authenticate(self.staff)

        res = self.client.post(
            "/api/v1/postItem",
            {"itemName": "Fries", "categoryID": self.burgers.pk, "price": "3.49", "stockQuantity": -1},
            format="json",
        )

        self.assertEqual(res.status_code, 400)
        self.assertFalse(Item.objects.filter(name="fries").exists())

    def test_post_item_zero_price_rejected(self):
        self.client.force_authenticate(self.staff)

        res = self.client.post(
            "/api/v1/postItem",
            {"itemName": "Fries", "categoryID": self.burgers.pk, "price": "0", "stockQuantity": 1},
            format="json",
        )

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.data["error"]["code"], "INVALID_ITEM")

    def test_post_item_price_too_large_rejected(self):
        self.client.force_authenticate(self.staff)

        res = self.client.post(
            "/api/v1/postItem",
            {"itemName": "Fries", "categoryID": self.burgers.pk, "price": "123456789012.50", "stockQuantity": 1},
            format="json",
        )

        self.assertEqual(res.status_code, 400)
        self.assertFalse(Item.objects.filter(name="fries").exists())

    def test_post_item_price_overflowing_after_rounding_rejected(self):
        self.client.force_authenticate(self.staff)

        # Ten digits on input, eleven once stored with two decimal places.
        res = self.client.post(
            "/api/v1/postItem",
            {"itemName": "Fries", "categoryID": self.burgers.pk, "price": "123456789.5", "stockQuantity": 1},
            format="json",
        )

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.data["error"]["code"], "INVALID_ITEM")
        self.assertFalse(Item.objects.filter(name="fries").exists())

    def test_post_item_name_too_long_after_casefold_rejected(self):
        self.client.force_authenticate(self.staff)

        # 200 characters on input, 400 once "ß" casefolds to "ss".
        res = self.client.post(
            "/api/v1/postItem",
            {"itemName": "ß" * 200, "categoryID": self.burgers.pk, "price": "3.49", "stockQuantity": 1},
            format="json",
        )

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.data["error"]["code"], "INVALID_ITEM")
        self.assertEqual(Item.objects.count(), 2)

    def test_post_item_unknown_category_is_404(self):
        self.client.force_authenticate(self.staff)

        res = self.client.post(
            "/api/v1/postItem",
            {"itemName": "Fries", "categoryID": 999999, "price": "3.49", "stockQuantity": 1},
            format="json",
        )

        self.assertEqual(res.status_code, 404)

    def test_delete_item(self):
        self.client.force_authenticate(self.staff)

        res = self.client.delete(f"/api/v1/deleteItem/{self.burger.pk}")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["message"], "Item deleted successfully")
        self.assertEqual(res.data["item"]["itemID"], self.burger.pk)
        self.assertFalse(Item.objects.filter(pk=self.burger.pk).exists())

    def test_delete_unknown_item_is_404(self):
        self.client.force_authenticate(self.staff)

        res = self.client.delete("/api/v1/deleteItem/999999")

        self.assertEqual(res.status_code, 404)

    def test_post_category(self):
        self.client.force_authenticate(self.staff)

        res = self.client.post("/api/v1/postCategory", {"name": "  Sides "}, format="json")
        self.assertEqual(res.status_code, 201)
        self.assertEqual(res.data["name"], "Sides")

        res = self.client.post("/api/v1/postCategory", {"name": "sides"}, format="json")
        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.data["error"]["code"], "INVALID_CATEGORY")

    def test_delete_category_in_use_is_400(self):
        self.client.force_authenticate(self.staff)

        res = self.client.delete(f"/api/v1/deleteCategory/{self.burgers.pk}")

        self.assertEqual(res.status_code, 400)
        self.assertTrue(Category.objects.filter(pk=self.burgers.pk).exists())

    def test_delete_empty_category(self):
        self.client.force_authenticate(self.staff)
        empty = Category.objects.create(name="Desserts")

        res = self.client.delete(f"/api/v1/deleteCategory/{empty.pk}")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["category"]["categoryID"], empty.pk)

    def test_delete_unknown_category_is_404(self):
        self.client.force_authenticate(self.staff)

        res = self.client.delete("/api/v1/deleteCategory/999999")

        self.assertEqual(res.status_code, 404)


class SeedMenuCommandTests(TestCase):
    def test_seed_is_idempotent_and_restocks(self):
        call_command("seed_menu")
        burger = Item.objects.get(name="burger")
        first_stock = burger.stock_quantity

        call_command("seed_menu")
        burger.refresh_from_db()

        self.assertEqual(burger.stock_quantity, first_stock * 2)
        self.assertEqual(Item.objects.filter(name="burger").count(), 1)
