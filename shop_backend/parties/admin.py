# parties/admin.py

from django.contrib import admin

from parties.models import Customer, Supplier


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ("name", "phone", "ledger_balance", "created_at")
    readonly_fields = ("ledger_balance", "created_at")
    search_fields = ("name", "phone")


@admin.register(Supplier)
class SupplierAdmin(admin.ModelAdmin):
    list_display = ("name", "phone", "currency", "ledger_balance", "created_at")
    readonly_fields = ("ledger_balance", "created_at")
    search_fields = ("name", "phone")
