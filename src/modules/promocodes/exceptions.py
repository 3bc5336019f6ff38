"""Promocode domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import ConflictFailed, NotFound, ValidationFailed

TITLE_TAKEN_MESSAGE = "Invalid title: title must be unique."


class PromocodeTitleTaken(ConflictFailed):
    """Another promocode already uses this title."""

    def __init__(self, message: str = TITLE_TAKEN_MESSAGE) -> None:
        super().__init__(message)


class InvalidPromocode(ValidationFailed):
    """The promocode breaks one or more rules."""


class PromocodeNotFound(NotFound):
    """No promocode carries the requested title."""
