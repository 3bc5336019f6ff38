"""Promocode service layer (Use Cases).

Title uniqueness is checked twice: a look-up before validation gives the
caller a clean 409, and the unique index on ``title`` catches the race
where two requests pass the look-up together.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import IntegrityError, transaction

from modules.core.exceptions import persistence_guard
from modules.promocodes.exceptions import (
    InvalidPromocode,
    PromocodeNotFound,
    PromocodeTitleTaken,
)
from modules.promocodes.models import Promocode
from modules.promocodes.validators import validate_promocode

if TYPE_CHECKING:
    from modules.promocodes.dtos import CreatePromocodeDTO
    from modules.promocodes.repositories.interfaces import IPromocodeRepository

logger = structlog.get_logger(__name__)


class PromocodeService:
    """Application service for Promocode use-cases."""

    def __init__(self, repository: IPromocodeRepository) -> None:
        self._repo = repository

    def save_promocode(self, dto: CreatePromocodeDTO) -> Promocode:
        """Validate and persist a new promocode.

        Raises:
            PromocodeTitleTaken: the title is already in use.
            InvalidPromocode: one or more field rules are violated.
            PersistenceFailed: the database rejected the write.
        """
        log = logger.bind(title=dto.title)

        with persistence_guard("promocode.query_failed", title=dto.title):
            existing = self._repo.get_by_title(dto.title) if dto.title else None
        if existing is not None:
            log.warning("promocode.title_taken")
            raise PromocodeTitleTaken()

        promocode = Promocode(**dto.model_dump())
        errors = validate_promocode(promocode)
        if errors:
            log.warning("promocode.validation_failed", errors=errors)
            raise InvalidPromocode(errors)

        with persistence_guard("promocode.save_failed", title=promocode.title):
            try:
                with transaction.atomic():
                    promocode = self._repo.save(promocode)
            except IntegrityError as exc:
                log.warning("promocode.title_taken", on="insert")
                raise PromocodeTitleTaken() from exc
        log.info("promocode.created", promocode_id=str(promocode.id))
        return promocode

    def list_promocodes(self) -> List[Promocode]:
        with persistence_guard("promocode.query_failed"):
            return self._repo.list()

    def get_promocode_by_title(self, title: str) -> Promocode:
        """Retrieve a promocode by its exact title.

        Raises:
            PromocodeNotFound: no promocode carries ``title``.
        """
        with persistence_guard("promocode.query_failed", title=title):
            promocode = self._repo.get_by_title(title)
        if promocode is None:
            logger.info("promocode.not_found", title=title)
            raise PromocodeNotFound(f"Promocode not found: {title}")
        return promocode
