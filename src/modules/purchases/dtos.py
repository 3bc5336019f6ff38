"""Purchase DTOs for the Service Layer.

- ``CreditCardDTO``: raw card fields; rules live in ``validate_credit_card``.
- ``BillingAddressDTO`` / ``DeliveryAddressDTO``: embedded addresses.
- ``LineItemDTO``: a product reference and quantity.
- ``CreatePurchaseDTO``: input for purchase creation.
"""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator


class CreditCardDTO(BaseModel):
    """Immutable credit card as supplied by the caller."""

    model_config = ConfigDict(frozen=True)

    card_number: Optional[str] = None
    cvv: Optional[str] = None
    expiration: Optional[str] = None
    cardholder: Optional[str] = None


class BillingAddressDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    street: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    email: str = ""
    phone: str = ""


class DeliveryAddressDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    first_name: str = ""
    last_name: str = ""
    street: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""


class LineItemDTO(BaseModel):
    """Immutable DTO for one line item.

    Only the product id is supplied; the Service Layer resolves the
    full product from the catalog.
    """

    model_config = ConfigDict(frozen=True)

    product_id: UUID
    quantity: int = 1

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Quantity must be at least 1.")
        return v


class CreatePurchaseDTO(BaseModel):
    """Immutable DTO for purchase creation requests."""

    model_config = ConfigDict(frozen=True)

    billing_address: BillingAddressDTO = BillingAddressDTO()
    delivery_address: DeliveryAddressDTO = DeliveryAddressDTO()
    credit_card: Optional[CreditCardDTO] = None
    line_items: List[LineItemDTO]
