"""Purchase URL configuration."""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from modules.purchases.views import PurchaseViewSet

router = DefaultRouter(trailing_slash=True)
router.register("purchases", PurchaseViewSet, basename="purchase")

urlpatterns = router.urls
