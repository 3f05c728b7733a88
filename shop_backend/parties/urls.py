# parties/urls.py

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from parties.views import CustomerViewSet, SupplierViewSet

router = DefaultRouter()

router.register(r"customers", CustomerViewSet, basename="customers")
router.register(r"suppliers", SupplierViewSet, basename="suppliers")

urlpatterns = [
    path("", include(router.urls)),
]
