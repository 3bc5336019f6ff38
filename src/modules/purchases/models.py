"""Purchase and LineItem models.

Business rules implemented:
- The credit card is embedded as columns of the purchase; it is never
  stored on its own.
- Billing and delivery addresses are embedded the same way; purchases are
  looked up by ``billing_email``.
- LineItem product FK uses PROTECT to preserve purchase history.
- LineItem quantity is at least 1 (defaults to 1).
"""

from __future__ import annotations

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel


class Purchase(BaseModel):
    """Purchase aggregate root: card, addresses and line items."""

    # Billing address
    billing_street = models.CharField(max_length=255, blank=True, default="")
    billing_city = models.CharField(max_length=100, blank=True, default="")
    billing_state = models.CharField(max_length=50, blank=True, default="")
    billing_zip = models.CharField(max_length=20, blank=True, default="")
    billing_email = models.CharField(max_length=254, blank=True, default="")
    billing_phone = models.CharField(max_length=30, blank=True, default="")

    # Delivery address
    delivery_first_name = models.CharField(max_length=100, blank=True, default="")
    delivery_last_name = models.CharField(max_length=100, blank=True, default="")
    delivery_street = models.CharField(max_length=255, blank=True, default="")
    delivery_city = models.CharField(max_length=100, blank=True, default="")
    delivery_state = models.CharField(max_length=50, blank=True, default="")
    delivery_zip = models.CharField(max_length=20, blank=True, default="")

    # Credit card
    card_number = models.CharField(max_length=16)
    cvv = models.CharField(max_length=3)
    expiration = models.CharField(max_length=5)
    cardholder = models.CharField(max_length=255)

    class Meta:
        db_table = "purchases"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["billing_email"], name="purchases_billing_email_idx"),
        ]

    @property
    def masked_card_number(self) -> str:
        """Card number with every digit but the last four hidden."""
        return "*" * (len(self.card_number) - 4) + self.card_number[-4:]

    def __str__(self) -> str:
        return f"Purchase {self.id} ({self.billing_email})"


class LineItem(BaseModel):
    """One purchased product inside a Purchase."""

    purchase = models.ForeignKey(
        "purchases.Purchase",
        on_delete=models.CASCADE,
        related_name="line_items",
    )
    product = models.ForeignKey(
        "products.Product",
        on_delete=models.PROTECT,
        related_name="line_items",
    )
    quantity = models.PositiveIntegerField(
        default=1,
        validators=[MinValueValidator(1)],
    )

    class Meta:
        db_table = "line_items"
        ordering = ["created_at"]

    def __str__(self) -> str:
        return f"{self.product_id} x{self.quantity}"
