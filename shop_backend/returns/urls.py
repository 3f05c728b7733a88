# returns/urls.py

"""
RETURNS URLS

Mounted under /api/returns/
"""

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from returns.views import (
    InvoiceReturnableLinesView,
    ReturnableInvoicesView,
    ReturnStatsView,
    ReturnViewSet,
)

router = SimpleRouter()
router.register(r"", ReturnViewSet, basename="returns")

urlpatterns = [
    path("stats/summary/", ReturnStatsView.as_view(), name="return-stats"),
    path(
        "invoices/<str:return_type>/<uuid:party_id>/",
        ReturnableInvoicesView.as_view(),
        name="returnable-invoices",
    ),
    path(
        "invoice/<str:return_type>/<uuid:invoice_id>/",
        InvoiceReturnableLinesView.as_view(),
        name="invoice-returnable-lines",
    ),
    path("", include(router.urls)),
]
