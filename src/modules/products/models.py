"""Product model for the sports catalog.

Business rules implemented (see ``validators.validate_product``):
- Name between 3 and 100 characters, description at most 200.
- Demographic, category and type restricted to fixed vocabularies.
- Release date stored as text, normalised to ``MM/dd/yyyy`` or ``MM-dd-yyyy``.
- Price kept with two decimal places (truncated, never rounded).
- Quantity between 0 and 2147483647 (the column's range).
- Price below 100000000 (the column holds 10 digits, 2 of them decimals).
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel
from modules.products.constants import DESCRIPTION_MAX_LENGTH, NAME_MAX_LENGTH


class Product(BaseModel):
    """Product aggregate root.

    Columns are NOT NULL at the database level; instances built from
    request data may still carry ``None`` until ``validate_product`` has
    accepted them.
    """

    name = models.CharField(max_length=NAME_MAX_LENGTH)
    description = models.CharField(max_length=DESCRIPTION_MAX_LENGTH)
    demographic = models.CharField(max_length=20)
    category = models.CharField(max_length=50)
    type = models.CharField(max_length=50)
    release_date = models.CharField(max_length=10)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    quantity = models.PositiveIntegerField()
    brand = models.TextField()
    material = models.TextField()
    primary_color_code = models.TextField()
    secondary_color_code = models.TextField()
    style_number = models.TextField()
    global_product_code = models.TextField()
    img_src = models.TextField()
    active = models.BooleanField()

    class Meta:
        db_table = "products"
        ordering = ["name"]
        indexes = [
            models.Index(fields=["category"], name="products_category_idx"),
            models.Index(fields=["type"], name="products_type_idx"),
            models.Index(fields=["active"], name="products_active_idx"),
        ]

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.name} ({self.category} / {self.type})"
