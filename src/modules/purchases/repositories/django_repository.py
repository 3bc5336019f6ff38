"""Django ORM implementations of the Purchase and LineItem repositories.

Reads eager-load ``line_items`` and their products (``prefetch_related``)
so serializing a purchase list costs a fixed number of queries.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.core.exceptions import ValidationError

from modules.purchases.models import LineItem, Purchase
from modules.purchases.repositories.interfaces import (
    ILineItemRepository,
    IPurchaseRepository,
)

logger = structlog.get_logger(__name__)


def _purchases():
    return Purchase.objects.prefetch_related("line_items__product")


class PurchaseDjangoRepository(IPurchaseRepository):
    """Concrete Purchase repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Purchase]:
        """Returns ``None`` for non-existent or invalid IDs."""
        try:
            return _purchases().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self) -> List[Purchase]:
        return list(_purchases())

    def list_by_billing_email(self, email: str) -> List[Purchase]:
        return list(_purchases().filter(billing_email=email))

    def save(self, entity: Purchase) -> Purchase:
        entity.save()
        logger.info("purchase.saved", purchase_id=str(entity.id))
        return entity


class LineItemDjangoRepository(ILineItemRepository):
    """Concrete LineItem repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[LineItem]:
        try:
            return LineItem.objects.select_related("product").filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self) -> List[LineItem]:
        return list(LineItem.objects.select_related("product"))

    def save(self, entity: LineItem) -> LineItem:
        entity.save()
        logger.info(
            "line_item.saved",
            line_item_id=str(entity.id),
            purchase_id=str(entity.purchase_id),
            product_id=str(entity.product_id),
        )
        return entity
