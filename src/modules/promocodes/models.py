"""Promocode model.

Business rules implemented (see ``validators.validate_promocode``):
- Title is upper-case, has no spaces, is at most 50 characters and is
  unique (UNIQUE INDEX).
- Description at most 100 characters.
- Type is ``flat`` or ``percent``.
- Flat rates keep two decimal places; percent rates are whole numbers 0-100.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel
from modules.promocodes.constants import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH


class PromocodeType(models.TextChoices):
    FLAT = "flat", "Flat"
    PERCENT = "percent", "Percent"


class Promocode(BaseModel):
    """A discount code redeemable at checkout.

    ``unique=True`` on ``title`` makes the database the final arbiter of
    title uniqueness, even when two requests pass the service pre-check
    at the same time.
    """

    title = models.CharField(max_length=TITLE_MAX_LENGTH, unique=True)
    description = models.CharField(max_length=DESCRIPTION_MAX_LENGTH)
    type = models.CharField(max_length=10, choices=PromocodeType.choices)
    rate = models.DecimalField(max_digits=10, decimal_places=2)

    class Meta:
        db_table = "promocodes"
        ordering = ["title"]

    def __str__(self) -> str:
        return f"{self.title} ({self.type} {self.rate})"
