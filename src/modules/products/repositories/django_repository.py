"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
instead of raising HTTP-level exceptions; the Service Layer decides
how to translate a missing entity into an API response.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog

from django.core.exceptions import ValidationError
from django.db.models import Q

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

DISTINCT_COLUMNS = frozenset({"category", "type"})


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self) -> List[Product]:
        return list(Product.objects.all())

    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.info("product.saved", product_id=str(entity.id))
        return entity

    def find_by_example(self, filters: Dict[str, Any]) -> List[Product]:
        """Build one exact-match predicate per supplied field and AND them.

        Examples of valid filters::

            {"category": "Golf"}
            {"category": "Golf", "active": True}
        """
        predicate = Q()
        for field, value in filters.items():
            predicate &= Q(**{field: value})
        return list(Product.objects.filter(predicate))

    def distinct_values(self, column: str) -> List[str]:
        if column not in DISTINCT_COLUMNS:
            raise ValueError(f"Distinct look-up not supported for '{column}'.")
        return list(
            Product.objects.order_by(column).values_list(column, flat=True).distinct()
        )
