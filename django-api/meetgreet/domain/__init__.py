from meetgreet.domain.errors import (
    CapacityExceededError,
    ConflictError,
    DomainError,
    ErrorCode,
    ForbiddenError,
    InvalidArgumentError,
    InvalidStateError,
    NotFoundError,
    StorageError,
    UnauthenticatedError,
)
from meetgreet.domain.pagination import Page, PageRequest

__all__ = [
    "DomainError",
    "ErrorCode",
    "NotFoundError",
    "InvalidArgumentError",
    "InvalidStateError",
    "ConflictError",
    "CapacityExceededError",
    "ForbiddenError",
    "UnauthenticatedError",
    "StorageError",
    "Page",
    "PageRequest",
]
