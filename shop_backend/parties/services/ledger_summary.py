# parties/services/ledger_summary.py

"""
PARTY LEDGER SUMMARIES (READ-ONLY)

Customer:
- sales invoices: count, total, cash/credit split
- receipts (payments of type "customer")
- returns of type "customer"
- current ledger balance

Supplier:
- FINALIZED import invoices: count, total
- payments of type "supplier"
- returns of type "supplier"
- current ledger balance

The balance is read from the party row. It is never recomputed here.
"""

from decimal import Decimal

from django.db.models import Count, DecimalField, OuterRef, Q, Subquery, Sum, Value
from django.db.models.functions import Coalesce

from invoices.models import ImportInvoice, SalesInvoice
from parties.models import Customer, Supplier
from parties.services.balance_ledger import PartyNotFoundError
from payments.models import Payment
from returns.models import Return, ReturnType

ZERO = Decimal("0.00")


def _money_sum(expression, **extra):
    return Coalesce(
        Sum(expression, **extra),
        Value(ZERO),
        output_field=DecimalField(max_digits=14, decimal_places=2),
    )


def _sum_subquery(queryset, *, group_field, field):
    """
    Correlated SUM(field) over `queryset`, zero when empty.
    """
    summed = (
        queryset.order_by()
        .values(group_field)
        .annotate(total=Sum(field))
        .values("total")
    )
    return Coalesce(
        Subquery(summed[:1], output_field=DecimalField(max_digits=14, decimal_places=2)),
        Value(ZERO),
        output_field=DecimalField(max_digits=14, decimal_places=2),
    )


def _paid_subquery(payment_type):
    return _sum_subquery(
        Payment.objects.filter(type=payment_type, partner_id=OuterRef("pk")),
        group_field="partner_id",
        field="amount",
    )


def _returns_subquery(return_type):
    return _sum_subquery(
        Return.objects.filter(return_type=return_type, party_id=OuterRef("pk")),
        group_field="party_id",
        field="total_amount",
    )


# ============================================================
# CUSTOMERS
# ============================================================


def customers_with_ledger():
    return Customer.objects.annotate(
        total_invoices=Count("sales_invoices", distinct=True),
        total_purchase=_money_sum("sales_invoices__total_amount"),
        total_cash=_money_sum(
            "sales_invoices__total_amount",
            filter=Q(sales_invoices__type=SalesInvoice.TYPE_CASH),
        ),
        total_credit=_money_sum(
            "sales_invoices__total_amount",
            filter=Q(sales_invoices__type=SalesInvoice.TYPE_CREDIT),
        ),
        total_paid=_paid_subquery(Payment.Type.CUSTOMER.value),
        total_returns=_returns_subquery(ReturnType.CUSTOMER.value),
    ).order_by("name")


def _party_returns(*, return_type, party_id):
    return list(
        Return.objects.filter(return_type=return_type, party_id=party_id)
        .order_by("-created_at")
        .values("id", "return_no", "total_amount", "reason", "refund_type", "created_at")
    )


def get_customer_ledger_summary(customer_id) -> dict:
    customer = customers_with_ledger().filter(pk=customer_id).first()
    if customer is None:
        raise PartyNotFoundError(f"Customer {customer_id} not found")

    invoices = (
        SalesInvoice.objects.filter(customer_id=customer.pk)
        .annotate(items_count=Count("items"))
        .order_by("-created_at")
    )
    payments = Payment.objects.filter(
        type=Payment.Type.CUSTOMER.value, partner_id=customer.pk
    ).order_by("-created_at")

    return {
        "customer": {"id": customer.pk, "name": customer.name, "phone": customer.phone},
        "invoices": [
            {
                "id": inv.pk,
                "invoice_no": inv.display_no,
                "date": inv.created_at,
                "type": inv.type,
                "status": inv.status,
                "total_amount": inv.total_amount,
                "items_count": inv.items_count,
            }
            for inv in invoices
        ],
        "payments": list(
            payments.values("id", "amount", "method", "notes", "created_at")
        ),
        "returns": _party_returns(
            return_type=ReturnType.CUSTOMER.value, party_id=customer.pk
        ),
        "summary": {
            "total_invoices": customer.total_invoices,
            "total_purchase": customer.total_purchase,
            "total_cash": customer.total_cash,
            "total_credit": customer.total_credit,
            "total_paid": customer.total_paid,
            "total_returns": customer.total_returns,
            "balance": customer.ledger_balance,
        },
    }


# ============================================================
# SUPPLIERS
# ============================================================


def suppliers_with_ledger():
    finalized = Q(import_invoices__status=ImportInvoice.STATUS_FINALIZED)
    return Supplier.objects.annotate(
        total_invoices=Count("import_invoices", filter=finalized, distinct=True),
        total_imports=_money_sum("import_invoices__total_amount", filter=finalized),
        total_paid=_paid_subquery(Payment.Type.SUPPLIER.value),
        total_returns=_returns_subquery(ReturnType.SUPPLIER.value),
    ).order_by("name")


def get_supplier_ledger_summary(supplier_id) -> dict:
    supplier = suppliers_with_ledger().filter(pk=supplier_id).first()
    if supplier is None:
        raise PartyNotFoundError(f"Supplier {supplier_id} not found")

    invoices = (
        ImportInvoice.objects.filter(supplier_id=supplier.pk)
        .annotate(items_count=Count("items"))
        .order_by("-created_at")
    )
    payments = Payment.objects.filter(
        type=Payment.Type.SUPPLIER.value, partner_id=supplier.pk
    ).order_by("-created_at")

    return {
        "supplier": {
            "id": supplier.pk,
            "name": supplier.name,
            "phone": supplier.phone,
            "currency": supplier.currency,
        },
        "invoices": [
            {
                "id": inv.pk,
                "invoice_no": inv.display_no,
                "date": inv.created_at,
                "type": inv.type,
                "status": inv.status,
                "total_amount": inv.total_amount,
                "items_count": inv.items_count,
            }
            for inv in invoices
        ],
        "payments": list(
            payments.values("id", "amount", "method", "notes", "created_at")
        ),
        "returns": _party_returns(
            return_type=ReturnType.SUPPLIER.value, party_id=supplier.pk
        ),
        "summary": {
            "total_invoices": supplier.total_invoices,
            "total_imports": supplier.total_imports,
            "total_paid": supplier.total_paid,
            "total_returns": supplier.total_returns,
            "balance": supplier.ledger_balance,
        },
    }
