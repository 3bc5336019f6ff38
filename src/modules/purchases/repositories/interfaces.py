"""Purchase and LineItem repository interfaces."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.purchases.models import LineItem, Purchase


class IPurchaseRepository(IRepository["Purchase"]):
    """Repository contract for the Purchase aggregate."""

    @abstractmethod
    def list_by_billing_email(self, email: str) -> List[Purchase]:
        """Return every purchase billed to ``email`` (exact match)."""


class ILineItemRepository(IRepository["LineItem"]):
    """Repository contract for line items, saved one at a time."""
