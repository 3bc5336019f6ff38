"""Unit tests for validate_credit_card.

The clock is frozen at 2024-06-15 so expiry checks are deterministic.
"""

from __future__ import annotations

from datetime import date

import pytest
from freezegun import freeze_time

from modules.purchases.dtos import CreditCardDTO
from modules.purchases.validators import parse_expiration, validate_credit_card

pytestmark = pytest.mark.unit


def _card(**overrides) -> CreditCardDTO:
    fields = {
        "card_number": "4111111111111111",
        "cvv": "123",
        "expiration": "12/26",
        "cardholder": "Max Perkins",
    }
    fields.update(overrides)
    return CreditCardDTO(**fields)


@freeze_time("2024-06-15")
class TestValidateCreditCard:
    def test_valid_card(self):
        assert validate_credit_card(_card()) == []

    def test_missing_card(self):
        assert validate_credit_card(None) == ["Credit card information is missing."]

    @pytest.mark.parametrize(
        "number", [None, "", "411111111111111", "41111111111111112", "4111-1111-1111-11"]
    )
    def test_card_number_must_have_16_digits(self, number):
        assert validate_credit_card(_card(card_number=number)) == [
            "Credit card number must have 16 digits."
        ]

    @pytest.mark.parametrize("cvv", [None, "12", "1234", "12a"])
    def test_cvv_must_have_3_digits(self, cvv):
        assert validate_credit_card(_card(cvv=cvv)) == ["CVV must have 3 digits."]

    def test_missing_expiration(self):
        assert validate_credit_card(_card(expiration=None)) == [
            "Expiration date is missing."
        ]

    @pytest.mark.parametrize("expiration", ["1226", "13/26", "00/26", "12/2026", "ab/cd"])
    def test_malformed_expiration(self, expiration):
        assert validate_credit_card(_card(expiration=expiration)) == [
            "Expiration date must use the MM/yy format."
        ]

    def test_expired_last_month(self):
        assert validate_credit_card(_card(expiration="05/24")) == [
            "Credit card is expired."
        ]

    def test_current_month_is_still_valid(self):
        assert validate_credit_card(_card(expiration="06/24")) == []

    @pytest.mark.parametrize("cardholder", [None, ""])
    def test_missing_cardholder(self, cardholder):
        assert validate_credit_card(_card(cardholder=cardholder)) == [
            "Cardholder name is missing."
        ]

    def test_all_failures_are_reported(self):
        card = CreditCardDTO()

        assert validate_credit_card(card) == [
            "Credit card number must have 16 digits.",
            "CVV must have 3 digits.",
            "Expiration date is missing.",
            "Cardholder name is missing.",
        ]


class TestParseExpiration:
    def test_last_day_of_month(self):
        assert parse_expiration("02/28") == date(2028, 2, 29)

    def test_december(self):
        assert parse_expiration("12/99") == date(2099, 12, 31)

    def test_malformed(self):
        assert parse_expiration("2/28") is None


@freeze_time("2024-07-01")
def test_card_expires_after_last_day_of_month():
    assert validate_credit_card(_card(expiration="06/24")) == ["Credit card is expired."]
