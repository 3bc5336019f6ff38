"""Purchase service layer (Use Cases).

``save_purchase`` checks, in order:

1. Every line item's product exists (``ProductNotFound``).
2. No product is inactive (``InactiveProducts``, wins over card errors).
3. The credit card is valid (``InvalidCreditCard``).

Only then are the purchase and its line items written, inside a single
transaction: one failing line item rolls back the whole purchase.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List

import structlog
from django.db import transaction

from modules.core.exceptions import persistence_guard
from modules.purchases.exceptions import InactiveProducts, InvalidCreditCard
from modules.purchases.models import LineItem, Purchase
from modules.purchases.validators import validate_credit_card

if TYPE_CHECKING:
    from modules.products.models import Product
    from modules.products.services import ProductService
    from modules.purchases.dtos import CreatePurchaseDTO
    from modules.purchases.repositories.interfaces import (
        ILineItemRepository,
        IPurchaseRepository,
    )

logger = structlog.get_logger(__name__)


def _build_purchase(dto: CreatePurchaseDTO) -> Purchase:
    billing = dto.billing_address
    delivery = dto.delivery_address
    card = dto.credit_card
    return Purchase(
        billing_street=billing.street,
        billing_city=billing.city,
        billing_state=billing.state,
        billing_zip=billing.zip,
        billing_email=billing.email,
        billing_phone=billing.phone,
        delivery_first_name=delivery.first_name,
        delivery_last_name=delivery.last_name,
        delivery_street=delivery.street,
        delivery_city=delivery.city,
        delivery_state=delivery.state,
        delivery_zip=delivery.zip,
        card_number=card.card_number,
        cvv=card.cvv,
        expiration=card.expiration,
        cardholder=card.cardholder,
    )


class PurchaseService:
    """Application service for Purchase use-cases.

    Products are resolved through ``ProductService`` so a missing product
    surfaces with the catalog's own ``ProductNotFound``.
    """

    def __init__(
        self,
        purchase_repository: IPurchaseRepository,
        line_item_repository: ILineItemRepository,
        product_service: ProductService,
    ) -> None:
        self._purchase_repo = purchase_repository
        self._line_item_repo = line_item_repository
        self._product_service = product_service

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def save_purchase(self, dto: CreatePurchaseDTO) -> Purchase:
        """Validate and persist a purchase with its line items.

        Raises:
            ProductNotFound: a line item references an unknown product.
            InactiveProducts: a line item references an inactive product.
            InvalidCreditCard: the credit card is missing or invalid.
            PersistenceFailed: the database rejected a write; nothing is kept.
        """
        log = logger.bind(
            billing_email=dto.billing_address.email,
            item_count=len(dto.line_items),
        )

        card_errors = validate_credit_card(dto.credit_card)

        products: List[Product] = [
            self._product_service.get_product_by_id(str(item.product_id))
            for item in dto.line_items
        ]

        inactive: List[Dict[str, str]] = [
            {"id": str(product.id), "name": product.name}
            for product in products
            if not product.active
        ]
        if inactive:
            log.warning("purchase.rejected_inactive_products", inactive_products=inactive)
            raise InactiveProducts(inactive)

        if card_errors:
            log.warning("purchase.rejected_credit_card", errors=card_errors)
            raise InvalidCreditCard(card_errors)

        purchase = _build_purchase(dto)
        with persistence_guard("purchase.save_failed"), transaction.atomic():
            purchase = self._purchase_repo.save(purchase)
            for item, product in zip(dto.line_items, products):
                self._line_item_repo.save(
                    LineItem(purchase=purchase, product=product, quantity=item.quantity)
                )

        log.info("purchase.created", purchase_id=str(purchase.id))
        return purchase

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_purchases_by_email(self, email: str) -> List[Purchase]:
        """Return every purchase whose billing e-mail equals ``email``."""
        with persistence_guard("purchase.query_failed", billing_email=email):
            return self._purchase_repo.list_by_billing_email(email)
