"""Product service layer (Use Cases).

Orchestrates the catalog use-cases, delegating validation to
``validators.validate_product`` and persistence to the injected
``IProductRepository``.

Any database failure is logged and surfaced as ``PersistenceFailed``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import transaction

from modules.core.exceptions import persistence_guard
from modules.products.exceptions import InvalidProduct, ProductNotFound
from modules.products.models import Product
from modules.products.validators import validate_product

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, ProductExampleDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        """Validate and persist a new product.

        ``release_date`` and ``price`` are stored in their normalised form.

        Raises:
            InvalidProduct: one or more catalog rules are violated.
            PersistenceFailed: the database rejected the write.
        """
        product = Product(**dto.model_dump())
        log = logger.bind(product_name=product.name)

        errors = validate_product(product)
        if errors:
            log.warning("product.validation_failed", errors=errors)
            raise InvalidProduct(errors)

        with persistence_guard("product.save_failed"):
            product = self._repo.save(product)
        log.info("product.created", product_id=str(product.id))
        return product

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_products(self, example: ProductExampleDTO) -> List[Product]:
        """Return every product matching the fields set on ``example``."""
        filters = example.to_filters()
        with persistence_guard("product.query_failed", filters=list(filters)):
            return self._repo.find_by_example(filters)

    def get_product_by_id(self, id: str) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        with persistence_guard("product.query_failed", product_id=str(id)):
            product = self._repo.get_by_id(id)
        if not product:
            logger.info("product.not_found", product_id=str(id))
            raise ProductNotFound(
                f"Get by id failed, it does not exist in the database: {id}"
            )
        return product

    def get_unique_categories(self) -> List[str]:
        with persistence_guard("product.query_failed", column="category"):
            return self._repo.distinct_values("category")

    def get_unique_types(self) -> List[str]:
        with persistence_guard("product.query_failed", column="type"):
            return self._repo.distinct_values("type")
