# parties/views/party.py

"""
CUSTOMER / SUPPLIER LEDGER ENDPOINTS (READ-ONLY)

GET /api/parties/customers/
GET /api/parties/customers/<uuid>/ledger/
GET /api/parties/suppliers/
GET /api/parties/suppliers/<uuid>/ledger/

Balances change only through returns (and other ledger services);
these endpoints never write.
"""

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from parties.serializers import CustomerLedgerRowSerializer, SupplierLedgerRowSerializer
from parties.services.balance_ledger import PartyNotFoundError
from parties.services.ledger_summary import (
    customers_with_ledger,
    get_customer_ledger_summary,
    get_supplier_ledger_summary,
    suppliers_with_ledger,
)
from returns.views.errors import error_response


class _LedgerViewSet(viewsets.ReadOnlyModelViewSet):
    summary_loader = None
    lookup_value_regex = (
        "[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
    )

    def get_queryset(self):
        qs = self.base_queryset()

        q = (self.request.query_params.get("q") or "").strip()
        if q:
            qs = qs.filter(name__icontains=q)

        return qs

    @action(detail=True, methods=["get"], url_path="ledger")
    def ledger(self, request, pk=None):
        try:
            summary = self.summary_loader(pk)
        except PartyNotFoundError as exc:
            return error_response(
                code="NOT_FOUND",
                message=str(exc),
                http_status=status.HTTP_404_NOT_FOUND,
            )
        return Response(summary)


class CustomerViewSet(_LedgerViewSet):
    serializer_class = CustomerLedgerRowSerializer
    summary_loader = staticmethod(get_customer_ledger_summary)

    def base_queryset(self):
        return customers_with_ledger()


class SupplierViewSet(_LedgerViewSet):
    serializer_class = SupplierLedgerRowSerializer
    summary_loader = staticmethod(get_supplier_ledger_summary)

    def base_queryset(self):
        return suppliers_with_ledger()
