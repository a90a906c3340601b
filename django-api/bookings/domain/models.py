"""Domain models representing persisted state.

Django ORM models are in bookings/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, datetime, time

from accounts.domain import UserId
from bookings.domain.value_objects import BookingId, BookingStatus
from events.domain import EventId, Venue


@dataclass(frozen=True)
class Booking:
    """Domain representation of a meet & greet Booking."""

    id: BookingId
    event_id: EventId
    fan_id: UserId
    booking_date: datetime
    status: BookingStatus
    special_requests: str | None
    check_in_time: datetime | None
    notes: str | None
    created_at: datetime
    updated_at: datetime

    @property
    def is_active(self) -> bool:
        return self.status.is_active


@dataclass(frozen=True)
class EventSummary:
    """The parts of an event shown alongside its bookings."""

    id: EventId
    title: str
    event_date: date
    start_time: time
    end_time: time
    venue: Venue
    artist_id: UserId


@dataclass(frozen=True)
class FanSummary:
    id: UserId
    first_name: str
    last_name: str
    email: str
    profile_image: str | None


@dataclass(frozen=True)
class BookingView:
    """Read model for listing and viewing: a booking with who booked what."""

    booking: Booking
    event: EventSummary
    fan: FanSummary


@dataclass(frozen=True)
class BookingFilter:
    """Optional list filters. ``artist_id`` matches the artist of the booked event."""

    status: BookingStatus | None = None
    event_id: EventId | None = None
    fan_id: UserId | None = None
    artist_id: UserId | None = None
