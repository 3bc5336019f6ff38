"""Promocode URL configuration."""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from modules.promocodes.views import PromocodeViewSet

router = DefaultRouter(trailing_slash=True)
router.register("promocodes", PromocodeViewSet, basename="promocode")

urlpatterns = router.urls
