"""Purchase API views.

Exposes the ``PurchaseService`` via HTTP using DRF ViewSets.
Purchases are looked up by billing e-mail, so the detail route's
lookup value is the e-mail itself.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.exceptions import PersistenceFailed
from modules.products.exceptions import ProductNotFound
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService
from modules.purchases.constants import EMAIL_NOT_SPECIFIED_MESSAGE
from modules.purchases.dtos import (
    BillingAddressDTO,
    CreatePurchaseDTO,
    CreditCardDTO,
    DeliveryAddressDTO,
    LineItemDTO,
)
from modules.purchases.exceptions import InactiveProducts, InvalidCreditCard
from modules.purchases.repositories.django_repository import (
    LineItemDjangoRepository,
    PurchaseDjangoRepository,
)
from modules.purchases.serializers import CreatePurchaseSerializer, PurchaseSerializer
from modules.purchases.services import PurchaseService

SERVER_ERROR = {"detail": "Internal server error."}


class PurchaseViewSet(GenericViewSet):
    """ViewSet for purchases.

    Uses ``PurchaseService`` with injected repositories (DIP).
    """

    serializer_class = PurchaseSerializer
    lookup_field = "email"
    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = PurchaseService(
            purchase_repository=PurchaseDjangoRepository(),
            line_item_repository=LineItemDjangoRepository(),
            product_service=ProductService(repository=ProductDjangoRepository()),
        )

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/purchases/"""
        create_serializer = CreatePurchaseSerializer(data=request.data)
        create_serializer.is_valid(raise_exception=True)

        data = create_serializer.validated_data
        card = data.get("credit_card")
        dto = CreatePurchaseDTO(
            billing_address=BillingAddressDTO(**data.get("billing_address", {})),
            delivery_address=DeliveryAddressDTO(**data.get("delivery_address", {})),
            credit_card=CreditCardDTO(**card) if card is not None else None,
            line_items=[
                LineItemDTO(product_id=item["product_id"], quantity=item["quantity"])
                for item in data["line_items"]
            ],
        )

        try:
            purchase = self._service.save_purchase(dto)
        except ProductNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except InactiveProducts as exc:
            return Response(
                {"message": exc.message, "inactive_products": exc.inactive_products},
                status=status.HTTP_422_UNPROCESSABLE_ENTITY,
            )
        except InvalidCreditCard as exc:
            return Response(
                {"detail": str(exc), "errors": exc.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )
        except PersistenceFailed:
            return Response(SERVER_ERROR, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        out = PurchaseSerializer(purchase)
        return Response(out.data, status=status.HTTP_201_CREATED)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/purchases/ answers 404: an e-mail is required."""
        return Response(
            {"detail": EMAIL_NOT_SPECIFIED_MESSAGE},
            status=status.HTTP_404_NOT_FOUND,
        )

    def retrieve(self, request: Request, email: str | None = None) -> Response:
        """GET /api/v1/purchases/{email}/"""
        if not email:
            return Response(
                {"detail": EMAIL_NOT_SPECIFIED_MESSAGE},
                status=status.HTTP_404_NOT_FOUND,
            )
        try:
            purchases = self._service.find_purchases_by_email(email)
        except PersistenceFailed:
            return Response(SERVER_ERROR, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(PurchaseSerializer(purchases, many=True).data)
