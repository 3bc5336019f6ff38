"""Django ORM implementation of the Promocode repository."""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.core.exceptions import ValidationError

from modules.promocodes.models import Promocode
from modules.promocodes.repositories.interfaces import IPromocodeRepository

logger = structlog.get_logger(__name__)


class PromocodeDjangoRepository(IPromocodeRepository):
    """Concrete Promocode repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Promocode]:
        try:
            return Promocode.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_title(self, title: str) -> Optional[Promocode]:
        return Promocode.objects.filter(title=title).first()

    def list(self) -> List[Promocode]:
        return list(Promocode.objects.all())

    def save(self, entity: Promocode) -> Promocode:
        entity.save()
        logger.info("promocode.saved", promocode_id=str(entity.id))
        return entity
