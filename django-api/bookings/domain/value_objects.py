"""Domain primitives for bookings."""

from dataclasses import dataclass
from enum import Enum
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class BookingId:
    """Unique identifier for a Booking."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


class BookingStatus(Enum):
    """Booking lifecycle status.

    pending -> confirmed | cancelled, confirmed -> completed (check-in only)
    or cancelled. Cancelled and completed are terminal for cancel and check-in.
    """

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"

    @property
    def is_active(self) -> bool:
        return self in ACTIVE_STATUSES

    @classmethod
    def choices(cls) -> list[tuple[str, str]]:
        return [(status.value, status.name.title()) for status in cls]


# Active bookings count against capacity.
ACTIVE_STATUSES = frozenset({BookingStatus.PENDING, BookingStatus.CONFIRMED})
