"""Promocode constants."""

from __future__ import annotations

from decimal import Decimal

TITLE_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 100

PERCENT_MIN = 0
PERCENT_MAX = 100

FLAT_RATE_PLACES = Decimal("0.01")

# Exclusive upper bound of the rate column (max_digits=10, decimal_places=2).
RATE_LIMIT = Decimal("100000000")
