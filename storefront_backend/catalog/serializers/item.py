# catalog/serializers/item.py

"""
ITEM SERIALIZERS

Field names follow the storefront client's contract (camelCase keys).
Money is rendered as a 2dp string, never a float.
"""

from rest_framework import serializers

from catalog.models import Item


class ItemSerializer(serializers.ModelSerializer):
    itemID = serializers.IntegerField(source="id", read_only=True)
    itemName = serializers.CharField(source="name", read_only=True)
    categoryID = serializers.IntegerField(source="category_id", read_only=True)
    categoryName = serializers.CharField(source="category.name", read_only=True)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)
    stockQuantity = serializers.IntegerField(source="stock_quantity", read_only=True)

    class Meta:
        model = Item
        fields = [
            "itemID",
            "itemName",
            "categoryID",
            "categoryName",
            "price",
            "stockQuantity",
            "description",
        ]
        read_only_fields = fields


class PostItemInputSerializer(serializers.Serializer):
    """
    Create-or-restock input.

    Only shape is checked here; normalization (name casefold, price 2dp,
    whole-number stock) is owned by catalog.services.restock.
    """

    itemName = serializers.CharField(max_length=255)
    categoryID = serializers.IntegerField(min_value=1)
    price = serializers.DecimalField(max_digits=10, decimal_places=None)
    stockQuantity = serializers.IntegerField(min_value=0)
    description = serializers.CharField(required=False, allow_blank=True, default="")
