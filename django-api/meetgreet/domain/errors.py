"""Domain error codes shared by the accounts, events and bookings apps."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    NOT_FOUND = "NOT_FOUND"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INVALID_STATE = "INVALID_STATE"
    CONFLICT = "CONFLICT"
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"
    FORBIDDEN = "FORBIDDEN"
    UNAUTHENTICATED = "UNAUTHENTICATED"
    STORAGE_ERROR = "STORAGE_ERROR"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class NotFoundError(DomainError):
    """Raised when an entity does not exist."""

    def __init__(self, resource: str) -> None:
        super().__init__(code=ErrorCode.NOT_FOUND, message=f"{resource} not found")


class InvalidArgumentError(DomainError):
    """Raised for malformed identifiers, enum values or fields."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_ARGUMENT, message=message)


class InvalidStateError(DomainError):
    """Raised when a request is well formed but illegal in the current lifecycle state."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_STATE, message=message)


class ConflictError(DomainError):
    """Raised when a write would duplicate an existing record."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.CONFLICT, message=message)


class CapacityExceededError(DomainError):
    """Raised when admission is denied because an event is full."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.CAPACITY_EXCEEDED,
            message="This event is fully booked",
        )


class ForbiddenError(DomainError):
    """Raised when an authenticated caller may not perform an action."""

    def __init__(self, message: str = "You do not have permission to perform this action") -> None:
        super().__init__(code=ErrorCode.FORBIDDEN, message=message)


class UnauthenticatedError(DomainError):
    """Raised when credentials are missing or wrong."""

    def __init__(self, message: str = "Not authorized to access this route") -> None:
        super().__init__(code=ErrorCode.UNAUTHENTICATED, message=message)


class StorageError(DomainError):
    """Raised when the persistence layer fails. Details stay in the logs."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.STORAGE_ERROR, message="Storage failure")
