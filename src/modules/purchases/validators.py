"""Credit-card validation.

Every applicable check runs even after an earlier one fails, so the
caller receives the complete list of problems in a single response.
"""

from __future__ import annotations

import calendar
from datetime import date
from typing import TYPE_CHECKING, List, Optional

from modules.purchases.constants import (
    CARD_NUMBER_PATTERN,
    CVV_PATTERN,
    EXPIRATION_CENTURY,
    EXPIRATION_PATTERN,
)

if TYPE_CHECKING:
    from modules.purchases.dtos import CreditCardDTO


def parse_expiration(value: str) -> Optional[date]:
    """Return the last day of the ``MM/yy`` month, or ``None`` when malformed."""
    match = EXPIRATION_PATTERN.match(value)
    if not match:
        return None
    month = int(match.group(1))
    if not 1 <= month <= 12:
        return None
    year = EXPIRATION_CENTURY + int(match.group(2))
    return date(year, month, calendar.monthrange(year, month)[1])


def validate_credit_card(card: Optional[CreditCardDTO]) -> List[str]:
    """Check ``card`` and return every violated-rule message."""
    if card is None:
        return ["Credit card information is missing."]

    errors: List[str] = []

    if card.card_number is None or not CARD_NUMBER_PATTERN.match(card.card_number):
        errors.append("Credit card number must have 16 digits.")

    if card.cvv is None or not CVV_PATTERN.match(card.cvv):
        errors.append("CVV must have 3 digits.")

    if card.expiration is None:
        errors.append("Expiration date is missing.")
    else:
        expires_on = parse_expiration(card.expiration)
        if expires_on is None:
            errors.append("Expiration date must use the MM/yy format.")
        elif expires_on < date.today():
            errors.append("Credit card is expired.")

    if not card.cardholder:
        errors.append("Cardholder name is missing.")

    return errors
