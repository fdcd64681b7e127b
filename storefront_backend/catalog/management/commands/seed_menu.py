# catalog/management/commands/seed_menu.py

from decimal import Decimal

from django.core.management.base import BaseCommand

from catalog.models import Category
from catalog.services import create_or_restock

MENU = {
    "Burgers": [
        ("Burger", Decimal("7.99"), 25, "Beef patty, lettuce, tomato, house sauce"),
        ("Cheeseburger", Decimal("8.99"), 25, "Classic burger with cheddar"),
        ("Veggie Burger", Decimal("8.49"), 15, "Black bean patty, avocado"),
    ],
    "Sides": [
        ("Fries", Decimal("3.49"), 40, "Skin-on fries, sea salt"),
        ("Onion Rings", Decimal("3.99"), 30, "Beer-battered"),
    ],
    "Drinks": [
        ("Cola", Decimal("1.99"), 60, "330ml can"),
        ("Milkshake", Decimal("4.99"), 20, "Vanilla, chocolate or strawberry"),
    ],
}


class Command(BaseCommand):
    help = "Seed menu categories and items (re-running restocks existing items)"

    def handle(self, *args, **options):
        self.stdout.write(self.style.WARNING("Seeding menu..."))

        created_count = 0
        restocked_count = 0

        for category_name, items in MENU.items():
            category, _ = Category.objects.get_or_create(name=category_name)

            for name, price, stock, description in items:
                _, created = create_or_restock(
                    name=name,
                    category_id=category.pk,
                    price=price,
                    stock_quantity=stock,
                    description=description,
                )
                if created:
                    created_count += 1
                else:
                    restocked_count += 1

        self.stdout.write(
            self.style.SUCCESS(
                f"Menu seeded: {created_count} items created, {restocked_count} restocked."
            )
        )
