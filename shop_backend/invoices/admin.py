# invoices/admin.py

from django.contrib import admin

from invoices.models import (
    ImportInvoice,
    ImportInvoiceItem,
    SalesInvoice,
    SalesInvoiceItem,
)


class SalesInvoiceItemInline(admin.TabularInline):
    model = SalesInvoiceItem
    extra = 0


class ImportInvoiceItemInline(admin.TabularInline):
    model = ImportInvoiceItem
    extra = 0


@admin.register(SalesInvoice)
class SalesInvoiceAdmin(admin.ModelAdmin):
    list_display = ("display_no", "customer", "type", "status", "total_amount", "created_at")
    list_filter = ("status", "type")
    inlines = [SalesInvoiceItemInline]


@admin.register(ImportInvoice)
class ImportInvoiceAdmin(admin.ModelAdmin):
    list_display = ("display_no", "supplier", "type", "status", "total_amount", "created_at")
    list_filter = ("status", "type")
    inlines = [ImportInvoiceItemInline]
