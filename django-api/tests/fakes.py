"""In-memory store implementations for service tests.

They keep the same contracts as the Django stores, including the partial
unique rule on active bookings, but do not serialize writers themselves:
that is the admission controller's job.
"""

import threading
import time
import uuid
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from datetime import date, datetime, timedelta, timezone
from typing import Any

from accounts.domain import Caller, Role, UserId
from bookings.domain import (
    Booking,
    BookingFilter,
    BookingId,
    BookingStatus,
    BookingView,
    EventSummary,
    FanSummary,
)
from bookings.stores.interfaces import BookingStore
from events.domain import Capacity, Event, EventDraft, EventFilter, EventId, EventStatus, Venue
from events.stores.interfaces import EventStore
from meetgreet.domain import Page, PageRequest
from meetgreet.domain.errors import ConflictError, NotFoundError

NOW = datetime(2030, 6, 1, 12, 0, tzinfo=timezone.utc)

_VENUE_FIELDS = {
    "venue_name": "name",
    "address": "address",
    "city": "city",
    "state": "state",
    "zip_code": "zip_code",
    "country": "country",
}


def caller(role: Role) -> Caller:
    return Caller(id=UserId(uuid.uuid4()), role=role)


def venue() -> Venue:
    return Venue(
        name="Paradiso",
        address="Weteringschans 6",
        city="Amsterdam",
        state="NH",
        zip_code="1017 SG",
        country="NL",
    )


def draft(artist_id: UserId, capacity: int = 10, event_date: date | None = None) -> EventDraft:
    return EventDraft(
        title="Signing session",
        description="Meet the band after soundcheck",
        event_date=event_date or (NOW + timedelta(days=7)).date(),
        start_time=datetime.strptime("18:00", "%H:%M").time(),
        end_time=datetime.strptime("19:30", "%H:%M").time(),
        venue=venue(),
        total_capacity=Capacity(capacity),
        artist_id=artist_id,
    )


@dataclass
class InMemoryDatabase:
    events: dict[EventId, Event] = field(default_factory=dict)
    bookings: dict[BookingId, Booking] = field(default_factory=dict)
    artists: set[UserId] = field(default_factory=set)
    fans: dict[UserId, FanSummary] = field(default_factory=dict)
    guard: threading.RLock = field(default_factory=threading.RLock)

    def add_event(
        self,
        artist_id: UserId,
        created_by: UserId | None = None,
        capacity: int = 10,
        starts_in: timedelta = timedelta(days=7),
        status: EventStatus = EventStatus.SCHEDULED,
    ) -> Event:
        start = NOW + starts_in
        event = Event(
            id=EventId(uuid.uuid4()),
            title="Signing session",
            description="Meet the band after soundcheck",
            event_date=start.date(),
            start_time=start.time(),
            end_time=(start + timedelta(hours=1)).time(),
            venue=venue(),
            total_capacity=Capacity(capacity),
            status=status,
            image_url=None,
            artist_id=artist_id,
            created_by=created_by or artist_id,
            created_at=NOW,
            updated_at=NOW,
        )
        self.artists.add(artist_id)
        self.events[event.id] = event
        return event

    def active_count(self, event_id: EventId) -> int:
        return sum(1 for b in self.bookings.values() if b.event_id == event_id and b.is_active)

    def view(self, booking: Booking) -> BookingView:
        event = self.events[booking.event_id]
        fan = self.fans.get(booking.fan_id) or FanSummary(
            id=booking.fan_id,
            first_name="Fan",
            last_name=str(booking.fan_id)[:8],
            email=f"{booking.fan_id}@example.com",
            profile_image=None,
        )
        summary = EventSummary(
            id=event.id,
            title=event.title,
            event_date=event.event_date,
            start_time=event.start_time,
            end_time=event.end_time,
            venue=event.venue,
            artist_id=event.artist_id,
        )
        return BookingView(booking=booking, event=summary, fan=fan)


class InMemoryEventStore(EventStore):
    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    def list_events(self, filters: EventFilter, page: PageRequest) -> Page[Event]:
        with self._db.guard:
            matches = [
                e
                for e in self._db.events.values()
                if (filters.status is None or e.status is filters.status)
                and (filters.artist_id is None or e.artist_id == filters.artist_id)
            ]
        matches.sort(key=lambda e: (e.event_date, e.start_time))
        items = matches[page.offset : page.offset + page.limit]
        return Page(items=tuple(items), total=len(matches), request=page)

    def get_event(self, event_id: EventId) -> Event | None:
        with self._db.guard:
            return self._db.events.get(event_id)

    def artist_exists(self, artist_id: UserId) -> bool:
        return artist_id in self._db.artists

    def create_event(self, draft: EventDraft, created_by: UserId) -> Event:
        event = Event(
            id=EventId(uuid.uuid4()),
            title=draft.title,
            description=draft.description,
            event_date=draft.event_date,
            start_time=draft.start_time,
            end_time=draft.end_time,
            venue=draft.venue,
            total_capacity=draft.total_capacity,
            status=EventStatus.SCHEDULED,
            image_url=draft.image_url,
            artist_id=draft.artist_id,
            created_by=created_by,
            created_at=NOW,
            updated_at=NOW,
        )
        with self._db.guard:
            self._db.events[event.id] = event
        return event

    def update_event(self, event_id: EventId, changes: Mapping[str, Any]) -> Event:
        with self._db.guard:
            event = self._db.events[event_id]
            venue_changes = {_VENUE_FIELDS[k]: v for k, v in changes.items() if k in _VENUE_FIELDS}
            plain = {k: v for k, v in changes.items() if k not in _VENUE_FIELDS}
            event = replace(event, venue=replace(event.venue, **venue_changes), **plain)
            self._db.events[event_id] = event
            return event

    def set_status(self, event_id: EventId, status: EventStatus) -> Event:
        with self._db.guard:
            event = replace(self._db.events[event_id], status=status)
            self._db.events[event_id] = event
            return event

    def delete_event(self, event_id: EventId) -> None:
        with self._db.guard:
            self._db.events.pop(event_id, None)
            for booking_id in [b.id for b in self._db.bookings.values() if b.event_id == event_id]:
                del self._db.bookings[booking_id]


class InMemoryBookingStore(BookingStore):
    """``read_delay`` widens the gap between counting and inserting."""

    def __init__(self, db: InMemoryDatabase, read_delay: float = 0.0) -> None:
        self._db = db
        self._read_delay = read_delay

    @contextmanager
    def lock_event(self, event_id: EventId) -> Iterator[Event | None]:
        with self._db.guard:
            event = self._db.events.get(event_id)
        yield event

    def get_booking(self, booking_id: BookingId) -> Booking | None:
        with self._db.guard:
            return self._db.bookings.get(booking_id)

    def get_booking_view(self, booking_id: BookingId) -> BookingView | None:
        with self._db.guard:
            booking = self._db.bookings.get(booking_id)
            return self._db.view(booking) if booking else None

    def list_bookings(self, filters: BookingFilter, page: PageRequest) -> Page[BookingView]:
        with self._db.guard:
            matches = [
                b
                for b in self._db.bookings.values()
                if (filters.status is None or b.status is filters.status)
                and (filters.event_id is None or b.event_id == filters.event_id)
                and (filters.fan_id is None or b.fan_id == filters.fan_id)
                and (
                    filters.artist_id is None
                    or self._db.events[b.event_id].artist_id == filters.artist_id
                )
            ]
        matches.sort(key=lambda b: b.created_at, reverse=True)
        with self._db.guard:
            items = tuple(self._db.view(b) for b in matches[page.offset : page.offset + page.limit])
        return Page(items=items, total=len(matches), request=page)

    def find_active_booking(self, event_id: EventId, fan_id: UserId) -> Booking | None:
        with self._db.guard:
            return next(
                (
                    b
                    for b in self._db.bookings.values()
                    if b.event_id == event_id and b.fan_id == fan_id and b.is_active
                ),
                None,
            )

    def count_active_bookings(self, event_id: EventId) -> int:
        with self._db.guard:
            count = self._db.active_count(event_id)
        if self._read_delay:
            time.sleep(self._read_delay)
        return count

    def insert_booking(
        self,
        event_id: EventId,
        fan_id: UserId,
        special_requests: str | None,
        booked_at: datetime,
    ) -> Booking:
        booking = Booking(
            id=BookingId(uuid.uuid4()),
            event_id=event_id,
            fan_id=fan_id,
            booking_date=booked_at,
            status=BookingStatus.PENDING,
            special_requests=special_requests,
            check_in_time=None,
            notes=None,
            created_at=booked_at,
            updated_at=booked_at,
        )
        with self._db.guard:
            self._check_unique(booking)
            self._db.bookings[booking.id] = booking
        return booking

    def update_booking(self, booking_id: BookingId, changes: Mapping[str, Any]) -> Booking:
        with self._db.guard:
            if booking_id not in self._db.bookings:
                raise NotFoundError("Booking")
            booking = replace(self._db.bookings[booking_id], **changes)
            self._check_unique(booking)
            self._db.bookings[booking_id] = booking
            return booking

    def _check_unique(self, candidate: Booking) -> None:
        if not candidate.is_active:
            return
        for other in self._db.bookings.values():
            if (
                other.id != candidate.id
                and other.is_active
                and other.event_id == candidate.event_id
                and other.fan_id == candidate.fan_id
            ):
                raise ConflictError("You already have a booking for this event")
