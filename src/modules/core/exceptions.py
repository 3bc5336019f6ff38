"""Domain exception taxonomy shared by every module.

Services raise these (or module-specific subclasses); the API layer
(Views) catches them and translates each family into one HTTP status:

- ``NotFound``           -> 404
- ``ValidationFailed``   -> 400
- ``ConflictFailed``     -> 409
- ``BusinessRuleFailed`` -> 422
- ``PersistenceFailed``  -> 500
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List

import structlog
from django.db import DatabaseError

logger = structlog.get_logger(__name__)


class DomainError(Exception):
    """Root of every error a service raises on purpose."""


class NotFound(DomainError):
    """The requested identity does not exist."""


class ValidationFailed(DomainError):
    """One or more field rules were violated.

    ``errors`` keeps every collected message; ``str(exc)`` joins them
    with ``separator``.
    """

    separator = ", "

    def __init__(self, errors: List[str]) -> None:
        self.errors = list(errors)
        super().__init__(self.separator.join(self.errors))


class ConflictFailed(DomainError):
    """A uniqueness rule was violated."""


class BusinessRuleFailed(DomainError):
    """A cross-entity business rule rejected the request."""


class PersistenceFailed(DomainError):
    """The database failed; the original error is chained, never exposed."""


@contextmanager
def persistence_guard(event: str, **context) -> Iterator[None]:
    """Log any ``DatabaseError`` raised inside the block and re-raise it
    as ``PersistenceFailed``."""
    try:
        yield
    except DatabaseError as exc:
        logger.error(event, error=str(exc), **context)
        raise PersistenceFailed("Internal server error.") from exc
