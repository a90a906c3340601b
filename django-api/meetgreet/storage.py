"""Helpers shared by the Django ORM store implementations."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from django.db import DatabaseError

from meetgreet.domain.errors import StorageError

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Turn database failures into StorageError.

    Usable as a context manager or as a decorator. Integrity violations a store
    wants to report differently must be caught before they reach this block.
    """
    try:
        yield
    except DatabaseError as exc:
        logger.error("Storage failure during %s", operation, exc_info=exc)
        raise StorageError() from exc
