# payments/urls.py

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from payments.views import PaymentViewSet

router = SimpleRouter()
router.register(r"", PaymentViewSet, basename="payments")

urlpatterns = [
    path("", include(router.urls)),
]
