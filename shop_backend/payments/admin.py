# payments/admin.py

from django.contrib import admin

from payments.models import Payment


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display = ("type", "partner_id", "amount", "method", "reference_id", "created_at")
    list_filter = ("type", "method")

    def has_change_permission(self, request, obj=None):
        return False
