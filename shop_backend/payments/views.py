# payments/views.py

from rest_framework import viewsets

from payments.models import Payment
from payments.serializers import PaymentSerializer


class PaymentViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Read-only payment history.

    Filters (django-filter):
    - ?type=customer|supplier|customer_refund|supplier_credit
    - ?partner_id=<uuid>
    - ?reference_id=<uuid>
    - ?method=cash|bank|adjustment
    """

    queryset = Payment.objects.all().order_by("-created_at")
    serializer_class = PaymentSerializer
    filterset_fields = ["type", "partner_id", "reference_id", "method"]
