"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, datetime, time

from accounts.domain import UserId
from events.domain.value_objects import Capacity, EventId, EventStatus

# Fields a patch may touch. Capacity, status and ownership are not among them.
EDITABLE_FIELDS = frozenset(
    {
        "title",
        "description",
        "event_date",
        "start_time",
        "end_time",
        "venue_name",
        "address",
        "city",
        "state",
        "zip_code",
        "country",
        "image_url",
        "artist_id",
    }
)


@dataclass(frozen=True)
class Venue:
    """Where an event takes place."""

    name: str
    address: str
    city: str
    state: str
    zip_code: str
    country: str


@dataclass(frozen=True)
class EventDraft:
    """Validated input for a new event."""

    title: str
    description: str
    event_date: date
    start_time: time
    end_time: time
    venue: Venue
    total_capacity: Capacity
    artist_id: UserId
    image_url: str | None = None


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    description: str
    event_date: date
    start_time: time
    end_time: time
    venue: Venue
    total_capacity: Capacity
    status: EventStatus
    image_url: str | None
    artist_id: UserId
    created_by: UserId
    created_at: datetime
    updated_at: datetime

    def starts_at(self, tz) -> datetime:
        return datetime.combine(self.event_date, self.start_time, tzinfo=tz)

    def is_past(self, now: datetime) -> bool:
        """An event is past once its start instant is behind ``now``."""
        return self.starts_at(now.tzinfo) < now

    @property
    def is_cancelled(self) -> bool:
        return self.status is EventStatus.CANCELLED


@dataclass(frozen=True)
class EventFilter:
    """Optional list filters."""

    status: EventStatus | None = None
    artist_id: UserId | None = None
