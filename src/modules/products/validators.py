"""Product validation rules.

``validate_product`` runs every rule and returns every violated
message; it never stops at the first failure.  Two fields are
normalised in place on the way through:

- ``release_date`` is rewritten in the layout it was parsed from.
- ``price`` is truncated (not rounded) to two decimal places.
"""

from __future__ import annotations

import calendar
import re
from datetime import date
from decimal import ROUND_DOWN, Decimal
from typing import TYPE_CHECKING, List, Optional

from modules.products.constants import (
    DESCRIPTION_MAX_LENGTH,
    MIN_RELEASE_DATE,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    PRICE_LIMIT,
    QUANTITY_MAX,
    RELEASE_DATE_FORMATS,
    RELEASE_DATE_TOO_EARLY,
    VALID_CATEGORIES,
    VALID_DEMOGRAPHICS,
    VALID_TYPES,
)

if TYPE_CHECKING:
    from modules.products.models import Product

TWO_PLACES = Decimal("0.01")

# (attribute, message) for the plain "must be present" rules.
REQUIRED_FIELDS = (
    ("img_src", "imgSrc is required."),
    ("quantity", "Quantity is required."),
    ("brand", "Brand is required."),
    ("material", "Material is required."),
    ("primary_color_code", "Primary Color Code is required."),
    ("secondary_color_code", "Secondary Color Code is required."),
    ("style_number", "Style Number is required."),
    ("global_product_code", "Global Product Code is required."),
    ("active", "Active field is required."),
)


def parse_release_date(value: str) -> Optional[tuple[date, str]]:
    """Parse ``value`` with the first matching layout.

    Returns the date and the layout template it matched, or ``None``.
    A day past the end of its month (29-31) is moved back to the last
    day of that month.
    """
    for pattern, template in RELEASE_DATE_FORMATS:
        match = re.match(pattern, value)
        if not match:
            continue
        month, day, year = (int(group) for group in match.groups())
        if not 1 <= month <= 12 or not 1 <= day <= 31 or year < 1:
            continue
        day = min(day, calendar.monthrange(year, month)[1])
        return date(year, month, day), template
    return None


def _validate_release_date(product: Product, errors: List[str]) -> None:
    if product.release_date is None:
        errors.append("Release date is required.")
        return

    parsed = parse_release_date(str(product.release_date))
    if parsed is None:
        errors.append(
            "Invalid release date format. Please use MM/dd/yyyy or MM-dd-yyyy format."
        )
        return

    release_date, template = parsed
    if release_date < MIN_RELEASE_DATE:
        errors.append(RELEASE_DATE_TOO_EARLY[template])
        return

    product.release_date = template.format(
        month=release_date.month, day=release_date.day, year=release_date.year
    )


def validate_product(product: Product) -> List[str]:
    """Check ``product`` against every catalog rule.

    Returns:
        The list of violated-rule messages, empty when the product is valid.
    """
    errors: List[str] = []

    name = product.name
    if name is None or not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
        errors.append("Name should be between 3 and 100 characters.")

    if product.description is None:
        errors.append("Description is required.")
    elif len(product.description) > DESCRIPTION_MAX_LENGTH:
        errors.append("Description should be at most 200 characters.")

    if product.demographic not in VALID_DEMOGRAPHICS:
        errors.append("Invalid demographic.")
    if product.category not in VALID_CATEGORIES:
        errors.append("Invalid category.")
    if product.type not in VALID_TYPES:
        errors.append("Invalid type.")

    _validate_release_date(product, errors)

    if product.price is None:
        errors.append("Price is required.")
    else:
        price = product.price
        if not isinstance(price, Decimal):
            price = Decimal(str(price))
        if not price.is_finite() or abs(price) >= PRICE_LIMIT:
            errors.append("Price must be less than 100000000.")
        else:
            product.price = price.quantize(TWO_PLACES, rounding=ROUND_DOWN)

    for attribute, message in REQUIRED_FIELDS:
        if getattr(product, attribute) is None:
            errors.append(message)

    if product.quantity is not None and product.quantity < 0:
        errors.append("Quantity cannot be negative.")
    elif product.quantity is not None and product.quantity > QUANTITY_MAX:
        errors.append("Quantity cannot exceed 2147483647.")

    return errors
