"""Purchase domain exceptions."""

from __future__ import annotations

from typing import Dict, List

from modules.core.exceptions import BusinessRuleFailed, ValidationFailed
from modules.purchases.constants import INACTIVE_PRODUCTS_MESSAGE


class InvalidCreditCard(ValidationFailed):
    """The embedded credit card breaks one or more rules."""

    separator = " "


class InactiveProducts(BusinessRuleFailed):
    """One or more line items reference a product that is not active.

    ``inactive_products`` holds ``{"id", "name"}`` for each offender.
    """

    def __init__(self, inactive_products: List[Dict[str, str]]) -> None:
        self.message = INACTIVE_PRODUCTS_MESSAGE
        self.inactive_products = list(inactive_products)
        super().__init__(self.message)
