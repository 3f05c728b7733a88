# returns/selectors.py

"""
RETURNS SELECTORS (READ-ONLY QUERIES)

- list_returns              : newest first, with party name + origin invoice number
- get_return_detail         : header + items (product name, batch number/expiry)
- list_returnable_invoices  : finalized invoices of a party, optional date window

No writes, no invariants of their own.
"""

from __future__ import annotations

from django.db.models import CharField, OuterRef, Subquery, Value
from django.db.models.functions import Coalesce

from invoices.models import ImportInvoice, SalesInvoice
from parties.models import Customer, Supplier
from returns.models import Return, ReturnItem, ReturnType
from returns.services.exceptions import ReturnNotFoundError
from returns.services.return_rules import rule_for


def _name_of(model):
    return Subquery(
        model.objects.filter(pk=OuterRef("party_id")).values("name")[:1],
        output_field=CharField(),
    )


def _invoice_no_of(model):
    return Subquery(
        model.objects.filter(pk=OuterRef("invoice_id")).values("invoice_no")[:1],
        output_field=CharField(),
    )


def returns_queryset():
    """
    Returns annotated with the name of whichever party table matches return_type.
    """
    return Return.objects.annotate(
        customer_name=_name_of(Customer),
        supplier_name=_name_of(Supplier),
        sales_invoice_no=_invoice_no_of(SalesInvoice),
        import_invoice_no=_invoice_no_of(ImportInvoice),
    )


def _row(ret: Return) -> dict:
    is_customer = ret.return_type == ReturnType.CUSTOMER.value
    return {
        "id": ret.id,
        "return_no": ret.return_no,
        "return_type": ret.return_type,
        "invoice_id": ret.invoice_id,
        "party_id": ret.party_id,
        "party_name": ret.customer_name if is_customer else ret.supplier_name,
        "original_invoice_no": (
            ret.sales_invoice_no if is_customer else ret.import_invoice_no
        ),
        "total_amount": ret.total_amount,
        "reason": ret.reason,
        "refund_type": ret.refund_type,
        "notes": ret.notes,
        "status": ret.status,
        "created_at": ret.created_at,
    }


def list_returns(*, return_type=None) -> list[dict]:
    qs = returns_queryset()
    if return_type:
        qs = qs.filter(return_type=rule_for(return_type).return_type)
    return [_row(ret) for ret in qs.order_by("-created_at")]


def get_return_detail(*, return_id) -> dict:
    ret = returns_queryset().filter(pk=return_id).first()
    if ret is None:
        raise ReturnNotFoundError("Return not found")

    items = (
        ReturnItem.objects.filter(return_record=ret)
        .select_related("product", "batch")
        .order_by("product__name")
    )

    return {
        "return": _row(ret),
        "items": [
            {
                "id": item.id,
                "product_id": item.product_id,
                "product_name": item.product.name,
                "batch_id": item.batch_id,
                "batch_number": item.batch.batch_number if item.batch else None,
                "expiry_date": item.batch.expiry_date if item.batch else None,
                "quantity": item.quantity,
                "unit_price": item.unit_price,
                "total_price": item.total_price,
            }
            for item in items
        ],
    }


def list_returnable_invoices(*, return_type, party_id, from_date=None, to_date=None):
    """
    Finalized invoices of a customer (sales) or supplier (import).
    Dates are inclusive and compared on the invoice's creation date.
    """
    rule = rule_for(return_type)
    model = rule.invoice_model

    qs = model.objects.filter(
        **{rule.invoice_party_field: party_id},
        status=model.STATUS_FINALIZED,
    )
    if from_date:
        qs = qs.filter(created_at__date__gte=from_date)
    if to_date:
        qs = qs.filter(created_at__date__lte=to_date)

    party_field = rule.invoice_party_field.removesuffix("_id")
    qs = qs.annotate(
        party_name=Coalesce(f"{party_field}__name", Value(""))
    ).order_by("-created_at")

    return [
        {
            "id": inv.id,
            "invoice_no": inv.display_no,
            "type": inv.type,
            "total_amount": inv.total_amount,
            "created_at": inv.created_at,
            "party_name": inv.party_name,
        }
        for inv in qs
    ]
