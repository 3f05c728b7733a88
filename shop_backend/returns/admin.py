# returns/admin.py

from django.contrib import admin

from returns.models import DocumentSequence, Return, ReturnItem


# ======================================================
# RETURN ADMIN (READ-ONLY)
# ======================================================


class ReturnItemInline(admin.TabularInline):
    model = ReturnItem
    extra = 0
    can_delete = False
    readonly_fields = (
        "product",
        "batch",
        "quantity",
        "unit_price",
        "total_price",
    )

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Return)
class ReturnAdmin(admin.ModelAdmin):
    list_display = (
        "return_no",
        "return_type",
        "total_amount",
        "refund_type",
        "reason",
        "created_at",
    )
    readonly_fields = [f.name for f in Return._meta.fields]
    search_fields = ("return_no", "reason")
    list_filter = ("return_type", "refund_type", "created_at")
    inlines = [ReturnItemInline]

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(DocumentSequence)
class DocumentSequenceAdmin(admin.ModelAdmin):
    list_display = ("partition", "prefix", "last_value", "updated_at")
    readonly_fields = ("partition", "prefix", "last_value", "updated_at")
