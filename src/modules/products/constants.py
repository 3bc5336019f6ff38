"""Product catalog constants.

The accepted demographics, categories and types are fixed for the
lifetime of the process.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

VALID_DEMOGRAPHICS: frozenset[str] = frozenset({"Men", "Women", "Kids"})

VALID_CATEGORIES: frozenset[str] = frozenset(
    {
        "Golf",
        "Soccer",
        "Basketball",
        "Hockey",
        "Football",
        "Running",
        "Baseball",
        "Skateboarding",
        "Boxing",
        "Weightlifting",
    }
)

VALID_TYPES: frozenset[str] = frozenset(
    {
        "Pant",
        "Short",
        "Shoe",
        "Glove",
        "Jacket",
        "Tank Top",
        "Sock",
        "Sunglasses",
        "Hat",
        "Helmet",
        "Belt",
        "Visor",
        "Shin Guard",
        "Elbow Pad",
        "Headband",
        "Wristband",
        "Hoodie",
        "Flip Flop",
        "Pool Noodle",
    }
)

# Accepted release date layouts, tried in order.  Each is
# (regex, template used to write the normalised value back).
RELEASE_DATE_FORMATS: tuple[tuple[str, str], ...] = (
    (r"^(\d{2})/(\d{2})/(\d{4})$", "{month:02d}/{day:02d}/{year:04d}"),
    (r"^(\d{2})-(\d{2})-(\d{4})$", "{month:02d}-{day:02d}-{year:04d}"),
)

# Message for a release date before MIN_RELEASE_DATE, keyed by layout template.
RELEASE_DATE_TOO_EARLY = {
    RELEASE_DATE_FORMATS[0][1]: "Release date must be after 01/01/1900.",
    RELEASE_DATE_FORMATS[1][1]: "Release date must be after 1/1/1900.",
}

MIN_RELEASE_DATE = date(1900, 1, 1)

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 200

# Exclusive upper bound of the price column (max_digits=10, decimal_places=2).
PRICE_LIMIT = Decimal("100000000")

# Largest value the quantity column (PositiveIntegerField) holds.
QUANTITY_MAX = 2147483647
