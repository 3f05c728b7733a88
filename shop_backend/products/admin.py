# products/admin.py

"""
Admin rules (audit-safe stock):

- Product and ProductBatch quantities are read-only here; stock moves
  only through the stock ledger service.
- StockMovement is append-only and cannot be edited or deleted.
"""

from django.contrib import admin

from products.models import Product, ProductBatch, StockMovement


class ProductBatchInline(admin.TabularInline):
    model = ProductBatch
    extra = 0
    fields = ("batch_number", "expiry_date", "quantity")
    readonly_fields = ("quantity",)


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("name", "sku", "unit", "current_stock", "created_at")
    search_fields = ("name", "sku")
    readonly_fields = ("current_stock",)
    inlines = [ProductBatchInline]


@admin.register(StockMovement)
class StockMovementAdmin(admin.ModelAdmin):
    list_display = (
        "product",
        "batch",
        "movement_type",
        "quantity",
        "reference_type",
        "reference_id",
        "created_at",
    )
    list_filter = ("movement_type", "reference_type")

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
