# purchases/api/serializers.py

from rest_framework import serializers

from purchases.models import Purchase, PurchaseItem


class CheckoutInputSerializer(serializers.Serializer):
    """
    paymentMethod is validated by the checkout service (missing vs unsupported
    map to distinct error codes), so the field is permissive here.
    """

    paymentMethod = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, max_length=32
    )


class CheckoutResultSerializer(serializers.Serializer):
    purchaseID = serializers.UUIDField(source="id")
    totalAmount = serializers.DecimalField(
        source="total_amount", max_digits=12, decimal_places=2
    )


class PurchaseItemSerializer(serializers.ModelSerializer):
    purchaseItemID = serializers.IntegerField(source="id", read_only=True)
    itemID = serializers.IntegerField(source="item_id", read_only=True, allow_null=True)
    itemName = serializers.CharField(source="item_name", read_only=True)
    unitPrice = serializers.DecimalField(
        source="unit_price", max_digits=10, decimal_places=2, read_only=True
    )
    lineTotal = serializers.DecimalField(
        source="line_total", max_digits=12, decimal_places=2, read_only=True
    )

    class Meta:
        model = PurchaseItem
        fields = [
            "purchaseItemID",
            "itemID",
            "itemName",
            "quantity",
            "unitPrice",
            "lineTotal",
        ]
        read_only_fields = fields


class PurchaseSerializer(serializers.ModelSerializer):
    purchaseID = serializers.UUIDField(source="id", read_only=True)
    totalAmount = serializers.DecimalField(
        source="total_amount", max_digits=12, decimal_places=2, read_only=True
    )
    paymentMethod = serializers.CharField(source="payment_method", read_only=True)
    purchaseDate = serializers.DateTimeField(source="created_at", read_only=True)
    items = PurchaseItemSerializer(many=True, read_only=True)

    class Meta:
        model = Purchase
        fields = [
            "purchaseID",
            "totalAmount",
            "paymentMethod",
            "purchaseDate",
            "items",
        ]
        read_only_fields = fields
