"""Product repository interface.

Extends ``IRepository[Product]`` with the look-ups the catalog needs:
query-by-example and distinct column values.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def find_by_example(self, filters: Dict[str, Any]) -> List[Product]:
        """Return products whose fields equal every ``filters`` entry.

        An empty mapping matches every product.
        """

    @abstractmethod
    def distinct_values(self, column: str) -> List[str]:
        """Return the distinct values stored in ``column``, sorted."""
