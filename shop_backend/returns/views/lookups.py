# returns/views/lookups.py

"""
RETURN LOOKUP ENDPOINTS (READ-ONLY)

Used by the return screens to pick what can be returned:

- finalized invoices of a customer / supplier
- the returnable lines of one invoice
- aggregate statistics
"""

from django.utils.dateparse import parse_date
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from returns import selectors
from returns.serializers import (
    ReturnableInvoiceSerializer,
    ReturnableLineSerializer,
    ReturnStatsSerializer,
)
from returns.services import ReturnError, get_return_stats
from returns.services.returnable import get_finalized_invoice, get_returnable_lines
from returns.views.errors import error_response, return_error_response


def _parse_date(value, *, field):
    if not value:
        return None
    try:
        parsed = parse_date(value)
    except ValueError:
        parsed = None
    if parsed is None:
        raise ValueError(f"{field} must be a date (YYYY-MM-DD)")
    return parsed


class ReturnableInvoicesView(APIView):
    """
    GET /api/returns/invoices/<return_type>/<party_id>/?from_date=&to_date=
    """

    permission_classes = [IsAuthenticated]

    def get(self, request, return_type, party_id):
        try:
            from_date = _parse_date(
                request.query_params.get("from_date"), field="from_date"
            )
            to_date = _parse_date(request.query_params.get("to_date"), field="to_date")
        except ValueError as exc:
            return error_response(
                code="VALIDATION_ERROR",
                message=str(exc),
                http_status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            rows = selectors.list_returnable_invoices(
                return_type=return_type,
                party_id=party_id,
                from_date=from_date,
                to_date=to_date,
            )
        except ReturnError as exc:
            return return_error_response(exc)

        return Response(ReturnableInvoiceSerializer(rows, many=True).data)


class InvoiceReturnableLinesView(APIView):
    """
    GET /api/returns/invoice/<return_type>/<invoice_id>/

    Each line carries ordered, already returned and returnable quantities.
    """

    permission_classes = [IsAuthenticated]

    def get(self, request, return_type, invoice_id):
        try:
            invoice = get_finalized_invoice(
                return_type=return_type, invoice_id=invoice_id
            )
            lines = get_returnable_lines(return_type=return_type, invoice_id=invoice_id)
        except ReturnError as exc:
            return return_error_response(exc)

        return Response(
            {
                "invoice": {
                    "id": str(invoice.pk),
                    "invoice_no": invoice.display_no,
                    "type": invoice.type,
                    "status": invoice.status,
                    "party_id": str(invoice.party_id),
                    "total_amount": str(invoice.total_amount),
                    "created_at": invoice.created_at,
                },
                "items": ReturnableLineSerializer(
                    [line.as_dict() for line in lines], many=True
                ).data,
            }
        )


class ReturnStatsView(APIView):
    """
    GET /api/returns/stats/summary/
    """

    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(ReturnStatsSerializer(get_return_stats()).data)
