# returns/services/return_stats.py

"""
RETURN STATISTICS (READ-ONLY)

Answers: "how many returns, for how much, and why?"

- per return type: total_returns + total_amount
- by reason: (reason, return_type) -> count + amount, most frequent first
"""

from decimal import Decimal

from django.db.models import Count, Sum
from django.db.models.functions import Coalesce

from returns.models import Return, ReturnType


def _type_summary(return_type: str) -> dict:
    row = Return.objects.filter(return_type=return_type).aggregate(
        total_returns=Count("id"),
        total_amount=Coalesce(Sum("total_amount"), Decimal("0.00")),
    )
    return {
        "total_returns": int(row["total_returns"] or 0),
        "total_amount": row["total_amount"],
    }


def get_return_stats() -> dict:
    by_reason = (
        Return.objects.filter(reason__isnull=False)
        .values("reason", "return_type")
        .annotate(count=Count("id"), amount=Sum("total_amount"))
        .order_by("-count", "reason", "return_type")
    )

    return {
        "customer": _type_summary(ReturnType.CUSTOMER.value),
        "supplier": _type_summary(ReturnType.SUPPLIER.value),
        "by_reason": [
            {
                "reason": row["reason"],
                "return_type": row["return_type"],
                "count": int(row["count"]),
                "amount": row["amount"] or Decimal("0.00"),
            }
            for row in by_reason
        ],
    }
