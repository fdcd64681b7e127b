# catalog/serializers/category.py

from rest_framework import serializers

from catalog.models import Category


class CategorySerializer(serializers.ModelSerializer):
    categoryID = serializers.IntegerField(source="id", read_only=True)

    class Meta:
        model = Category
        fields = ["categoryID", "name", "created_at"]
        read_only_fields = ["categoryID", "created_at"]


class CategoryInputSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, allow_blank=False, trim_whitespace=True)
