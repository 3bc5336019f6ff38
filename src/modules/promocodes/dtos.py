"""Promocode DTOs for the Service Layer.

As with products, every field is optional: presence is one of the rules
reported by ``validators.validate_promocode``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict


class CreatePromocodeDTO(BaseModel):
    """Immutable DTO for promocode creation requests."""

    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    rate: Optional[Decimal] = None
