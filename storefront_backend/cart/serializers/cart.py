# cart/serializers/cart.py

from rest_framework import serializers

from cart.models import CartEntry
from catalog.money import line_total


class AddToCartInputSerializer(serializers.Serializer):
    itemID = serializers.IntegerField(min_value=1)


class CartEntrySerializer(serializers.ModelSerializer):
    """
    One cart row joined with its item (what the cart page renders).
    """

    cartItemID = serializers.IntegerField(source="id", read_only=True)
    itemID = serializers.IntegerField(source="item_id", read_only=True)
    itemName = serializers.CharField(source="item.name", read_only=True)
    price = serializers.DecimalField(
        source="item.price", max_digits=10, decimal_places=2, read_only=True
    )
    description = serializers.CharField(source="item.description", read_only=True)
    lineTotal = serializers.SerializerMethodField()

    class Meta:
        model = CartEntry
        fields = [
            "cartItemID",
            "itemID",
            "itemName",
            "price",
            "quantity",
            "description",
            "lineTotal",
        ]
        read_only_fields = fields

    def get_lineTotal(self, obj) -> str:
        return f"{line_total(obj.item.price, obj.quantity):.2f}"


class CartSummarySerializer(serializers.Serializer):
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2)
    taxRate = serializers.DecimalField(source="tax_rate", max_digits=6, decimal_places=4)
    tax = serializers.DecimalField(max_digits=12, decimal_places=2)
    total = serializers.DecimalField(max_digits=12, decimal_places=2)
    itemCount = serializers.IntegerField(source="item_count")
    lineCount = serializers.IntegerField(source="line_count")
