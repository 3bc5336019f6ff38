"""Promocode API views."""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.exceptions import PersistenceFailed
from modules.promocodes.dtos import CreatePromocodeDTO
from modules.promocodes.exceptions import (
    InvalidPromocode,
    PromocodeNotFound,
    PromocodeTitleTaken,
)
from modules.promocodes.repositories.django_repository import PromocodeDjangoRepository
from modules.promocodes.serializers import PromocodeSerializer
from modules.promocodes.services import PromocodeService

SERVER_ERROR = {"detail": "Internal server error."}


class PromocodeViewSet(GenericViewSet):
    """ViewSet for promo codes, addressed by title."""

    serializer_class = PromocodeSerializer
    lookup_field = "title"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = PromocodeService(repository=PromocodeDjangoRepository())

    def list(self, request: Request) -> Response:
        """GET /api/v1/promocodes/"""
        try:
            promocodes = self._service.list_promocodes()
        except PersistenceFailed:
            return Response(SERVER_ERROR, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(PromocodeSerializer(promocodes, many=True).data)

    def retrieve(self, request: Request, title: str | None = None) -> Response:
        """GET /api/v1/promocodes/{title}/"""
        try:
            promocode = self._service.get_promocode_by_title(title)
        except PromocodeNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except PersistenceFailed:
            return Response(SERVER_ERROR, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(PromocodeSerializer(promocode).data)

    def create(self, request: Request) -> Response:
        """POST /api/v1/promocodes/"""
        try:
            dto = CreatePromocodeDTO(**request.data)
        except (PydanticValidationError, TypeError) as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            promocode = self._service.save_promocode(dto)
        except PromocodeTitleTaken as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)
        except InvalidPromocode as exc:
            return Response(
                {"detail": str(exc), "errors": exc.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )
        except PersistenceFailed:
            return Response(SERVER_ERROR, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(
            PromocodeSerializer(promocode).data, status=status.HTTP_201_CREATED
        )
