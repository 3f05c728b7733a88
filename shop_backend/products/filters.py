# products/filters.py

import django_filters

from products.models import ProductBatch


class ProductBatchFilter(django_filters.FilterSet):
    product_id = django_filters.UUIDFilter(field_name="product_id")
    in_stock = django_filters.BooleanFilter(field_name="quantity", method="filter_in_stock")

    class Meta:
        model = ProductBatch
        fields = ["product_id", "in_stock"]

    def filter_in_stock(self, queryset, name, value):
        if value:
            return queryset.filter(quantity__gt=0)
        return queryset.filter(quantity__lte=0)
