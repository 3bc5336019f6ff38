"""Product API views.

Exposes the ``ProductService`` via HTTP using DRF ViewSets.
Domain exceptions are caught and translated into appropriate
HTTP status codes; the view never swallows generic exceptions.
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.exceptions import PersistenceFailed
from modules.products.dtos import CreateProductDTO, ProductExampleDTO
from modules.products.exceptions import InvalidProduct, ProductNotFound
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService

SERVER_ERROR = {"detail": "Internal server error."}


class ProductViewSet(GenericViewSet):
    """ViewSet for the product catalog.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    """

    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/products/?category=Golf&active=true

        Every query parameter naming a product field narrows the result
        to exact matches; unknown parameters are ignored.
        """
        try:
            example = ProductExampleDTO(**request.query_params.dict())
        except PydanticValidationError as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            products = self._service.get_products(example)
        except PersistenceFailed:
            return Response(SERVER_ERROR, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(ProductSerializer(products, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/"""
        try:
            product = self._service.get_product_by_id(pk)
        except ProductNotFound as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_404_NOT_FOUND,
            )
        except PersistenceFailed:
            return Response(SERVER_ERROR, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(ProductSerializer(product).data)

    @action(detail=False, methods=["get"], url_path="categories")
    def categories(self, request: Request) -> Response:
        """GET /api/v1/products/categories/"""
        try:
            return Response(self._service.get_unique_categories())
        except PersistenceFailed:
            return Response(SERVER_ERROR, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    @action(detail=False, methods=["get"], url_path="types")
    def types(self, request: Request) -> Response:
        """GET /api/v1/products/types/"""
        try:
            return Response(self._service.get_unique_types())
        except PersistenceFailed:
            return Response(SERVER_ERROR, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        try:
            dto = CreateProductDTO(**request.data)
        except (PydanticValidationError, TypeError) as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            product = self._service.create_product(dto)
        except InvalidProduct as exc:
            return Response(
                {"detail": str(exc), "errors": exc.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )
        except PersistenceFailed:
            return Response(SERVER_ERROR, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        out = ProductSerializer(product)
        return Response(out.data, status=status.HTTP_201_CREATED)
