"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from contextlib import AbstractContextManager
from datetime import datetime
from typing import Any

from accounts.domain import UserId
from bookings.domain import Booking, BookingFilter, BookingId, BookingView
from events.domain import Event, EventId
from meetgreet.domain import Page, PageRequest


class BookingStore(ABC):
    """Interface for booking persistence operations."""

    @abstractmethod
    def lock_event(self, event_id: EventId) -> AbstractContextManager[Event | None]:
        """Open an atomic section that excludes other writers of this event's bookings.

        Yields the event as read inside the section, or None if it does not
        exist. Everything done through the store inside the section commits or
        rolls back together.
        """
        ...

    @abstractmethod
    def get_booking(self, booking_id: BookingId) -> Booking | None:
        """Return a booking by ID, or None if not found."""
        ...

    @abstractmethod
    def get_booking_view(self, booking_id: BookingId) -> BookingView | None:
        """Return a booking with its event and fan summaries, or None if not found."""
        ...

    @abstractmethod
    def list_bookings(self, filters: BookingFilter, page: PageRequest) -> Page[BookingView]:
        """Return matching bookings with their event and fan summaries, newest first."""
        ...

    @abstractmethod
    def find_active_booking(self, event_id: EventId, fan_id: UserId) -> Booking | None:
        """Return the fan's pending or confirmed booking for the event, if any."""
        ...

    @abstractmethod
    def count_active_bookings(self, event_id: EventId) -> int:
        """Count pending and confirmed bookings of the event."""
        ...

    @abstractmethod
    def insert_booking(
        self,
        event_id: EventId,
        fan_id: UserId,
        special_requests: str | None,
        booked_at: datetime,
    ) -> Booking:
        """Persist a new pending booking.

        Raises:
            ConflictError: If the fan already holds an active booking for the event.
        """
        ...

    @abstractmethod
    def update_booking(self, booking_id: BookingId, changes: Mapping[str, Any]) -> Booking:
        """Overwrite ``status``, ``check_in_time`` and/or ``notes``.

        Raises:
            NotFoundError: If the booking no longer exists.
            ConflictError: If the change would give a fan two active bookings for one event.
        """
        ...
