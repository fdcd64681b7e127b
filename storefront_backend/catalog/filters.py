# catalog/filters.py

import django_filters

from catalog.models import Item


class ItemFilter(django_filters.FilterSet):
    """
    GET /getItems?category=<id>&name=<text>&min_price=&max_price=&in_stock=true
    """

    category = django_filters.NumberFilter(field_name="category_id")
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    min_price = django_filters.NumberFilter(field_name="price", lookup_expr="gte")
    max_price = django_filters.NumberFilter(field_name="price", lookup_expr="lte")
    in_stock = django_filters.BooleanFilter(method="filter_in_stock")

    class Meta:
        model = Item
        fields = ["category", "name", "min_price", "max_price", "in_stock"]

    def filter_in_stock(self, queryset, name, value):
        if value is None:
            return queryset
        if value:
            return queryset.filter(stock_quantity__gt=0)
        return queryset.filter(stock_quantity=0)
