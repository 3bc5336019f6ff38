"""Promocode repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.promocodes.models import Promocode


class IPromocodeRepository(IRepository["Promocode"]):
    """Repository contract for the Promocode aggregate."""

    @abstractmethod
    def get_by_title(self, title: str) -> Optional[Promocode]:
        """Return the promocode with exactly this title, or ``None``."""
