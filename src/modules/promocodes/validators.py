"""Promocode validation rules.

``validate_promocode`` collects every violated message.  A ``flat``
rate is rounded half-up to two decimal places in place; that
normalisation is never an error by itself, but the rounded rate must
still fit the column (below 100000000).
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, List

from modules.promocodes.constants import (
    DESCRIPTION_MAX_LENGTH,
    FLAT_RATE_PLACES,
    PERCENT_MAX,
    PERCENT_MIN,
    RATE_LIMIT,
    TITLE_MAX_LENGTH,
)
from modules.promocodes.models import PromocodeType

if TYPE_CHECKING:
    from modules.promocodes.models import Promocode


def decimal_scale(value: Decimal) -> int:
    """Number of digits after the decimal point, as written (``10.0`` -> 1)."""
    exponent = value.as_tuple().exponent
    return -exponent if isinstance(exponent, int) and exponent < 0 else 0


def _validate_title(promocode: Promocode, errors: List[str]) -> None:
    title = promocode.title
    if title is None:
        errors.append("Invalid title: Title must exist.")
        return
    if len(title) > TITLE_MAX_LENGTH:
        errors.append("Invalid title: Title must be 50 characters or less.")
    if title != title.upper():
        errors.append("Invalid title: Promo code title must be uppercase only.")
    if " " in title:
        errors.append("Invalid title: Promo code title must not contain spaces.")


def _validate_rate(promocode: Promocode, errors: List[str]) -> None:
    rate = promocode.rate
    if rate is None:
        errors.append("Invalid rate: Rate must exist.")
        return
    if promocode.type is None:
        return

    if not isinstance(rate, Decimal):
        rate = Decimal(str(rate))

    if promocode.type == PromocodeType.FLAT:
        rounded = (
            rate.quantize(FLAT_RATE_PLACES, rounding=ROUND_HALF_UP)
            if rate.is_finite() and abs(rate) < RATE_LIMIT
            else None
        )
        if rounded is None or abs(rounded) >= RATE_LIMIT:
            errors.append("Invalid rate: Rate must be less than 100000000.")
        else:
            promocode.rate = rounded
    elif promocode.type == PromocodeType.PERCENT:
        if (
            not rate.is_finite()
            or decimal_scale(rate) > 0
            or not PERCENT_MIN <= int(rate) <= PERCENT_MAX
        ):
            errors.append(
                "Invalid rate: When the rate is a percent, the rate must be "
                "an integer between 0 and 100."
            )


def validate_promocode(promocode: Promocode) -> List[str]:
    """Check ``promocode`` against every rule.

    Returns:
        The list of violated-rule messages, empty when the code is valid.
    """
    errors: List[str] = []

    _validate_title(promocode, errors)

    if promocode.description is None:
        errors.append("Invalid description: Description must exist.")
    elif len(promocode.description) > DESCRIPTION_MAX_LENGTH:
        errors.append(
            "Invalid description: Description must be 100 characters or less."
        )

    if promocode.type not in PromocodeType.values:
        errors.append("Invalid type: Type must be either 'flat' or 'percent'.")

    _validate_rate(promocode, errors)

    return errors
