"""Purchase constants."""

from __future__ import annotations

import re

CARD_NUMBER_PATTERN = re.compile(r"^\d{16}$")
CVV_PATTERN = re.compile(r"^\d{3}$")
EXPIRATION_PATTERN = re.compile(r"^(\d{2})/(\d{2})$")

# Two-digit expiration years are read as 20yy.
EXPIRATION_CENTURY = 2000

INACTIVE_PRODUCTS_MESSAGE = "Some products are inactive and cannot be purchased."
EMAIL_NOT_SPECIFIED_MESSAGE = "Email not specified."
