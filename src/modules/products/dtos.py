"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer and the Service layer.
DTOs are immutable (``frozen=True``).

Every field is optional on purpose: the DTOs only coerce types, the
catalog rules (and their messages) live in ``validators.validate_product``.

- ``CreateProductDTO``: input for product creation.
- ``ProductExampleDTO``: query-by-example filter; unset fields match anything.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from modules.products.constants import QUANTITY_MAX


class ProductFieldsDTO(BaseModel):
    """Every writable Product attribute, all optional."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    description: Optional[str] = None
    demographic: Optional[str] = None
    category: Optional[str] = None
    type: Optional[str] = None
    release_date: Optional[str] = None
    price: Optional[Decimal] = None
    quantity: Optional[int] = None
    brand: Optional[str] = None
    material: Optional[str] = None
    primary_color_code: Optional[str] = None
    secondary_color_code: Optional[str] = None
    style_number: Optional[str] = None
    global_product_code: Optional[str] = None
    img_src: Optional[str] = None
    active: Optional[bool] = None


class CreateProductDTO(ProductFieldsDTO):
    """Immutable DTO for product creation requests."""


class ProductExampleDTO(ProductFieldsDTO):
    """Immutable example product used as a query filter.

    Numeric filters are limited to what the columns can hold, so an
    out-of-range value is rejected before it reaches the database.
    """

    price: Optional[Decimal] = Field(None, max_digits=10, decimal_places=2)
    quantity: Optional[int] = Field(None, ge=0, le=QUANTITY_MAX)

    def to_filters(self) -> Dict[str, Any]:
        """Return ``{field: value}`` for every field that was set."""
        return self.model_dump(exclude_none=True)
