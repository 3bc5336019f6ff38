from __future__ import annotations

import pytest

from django.db import DatabaseError, IntegrityError

from modules.core.exceptions import (
    DomainError,
    PersistenceFailed,
    ValidationFailed,
    persistence_guard,
)
from modules.purchases.exceptions import InvalidCreditCard

pytestmark = pytest.mark.unit


class TestValidationFailed:
    def test_keeps_every_message(self):
        exc = ValidationFailed(["first", "second"])
        assert exc.errors == ["first", "second"]
        assert str(exc) == "first, second"

    def test_subclass_can_change_separator(self):
        exc = InvalidCreditCard(["Bad number.", "Bad CVV."])
        assert str(exc) == "Bad number. Bad CVV."
        assert isinstance(exc, DomainError)


class TestPersistenceGuard:
    def test_passes_through_when_nothing_fails(self):
        with persistence_guard("test.event"):
            value = 1
        assert value == 1

    @pytest.mark.parametrize("error", [DatabaseError("boom"), IntegrityError("dup")])
    def test_wraps_database_errors(self, error):
        with pytest.raises(PersistenceFailed) as exc_info:
            with persistence_guard("test.event", key="value"):
                raise error

        assert str(exc_info.value) == "Internal server error."
        assert exc_info.value.__cause__ is error

    def test_other_errors_propagate_unchanged(self):
        with pytest.raises(KeyError):
            with persistence_guard("test.event"):
                raise KeyError("missing")
