"""Django ORM implementation of the BookingStore."""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from datetime import datetime
from typing import Any

from django.db import IntegrityError, transaction

from accounts.domain import UserId
from bookings.domain import (
    ACTIVE_STATUSES,
    Booking,
    BookingFilter,
    BookingId,
    BookingStatus,
    BookingView,
    EventSummary,
    FanSummary,
)
from bookings.models import Booking as BookingModel
from bookings.stores.interfaces import BookingStore
from events.domain import Event, EventId, Venue
from events.models import Event as EventModel
from events.stores.django_store import to_domain as event_to_domain
from meetgreet.domain import Page, PageRequest
from meetgreet.domain.errors import ConflictError, NotFoundError
from meetgreet.storage import storage_errors

_ACTIVE_VALUES = [status.value for status in ACTIVE_STATUSES]
_DUPLICATE_MESSAGE = "You already have a booking for this event"


def to_domain(row: BookingModel) -> Booking:
    return Booking(
        id=BookingId(row.id),
        event_id=EventId(row.event_id),
        fan_id=UserId(row.fan_id),
        booking_date=row.booking_date,
        status=BookingStatus(row.status),
        special_requests=row.special_requests,
        check_in_time=row.check_in_time,
        notes=row.notes,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def to_view(row: BookingModel) -> BookingView:
    """Map a row fetched with ``select_related("event", "fan")``."""
    event, fan = row.event, row.fan
    return BookingView(
        booking=to_domain(row),
        event=EventSummary(
            id=EventId(event.id),
            title=event.title,
            event_date=event.event_date,
            start_time=event.start_time,
            end_time=event.end_time,
            venue=Venue(
                name=event.venue_name,
                address=event.address,
                city=event.city,
                state=event.state,
                zip_code=event.zip_code,
                country=event.country,
            ),
            artist_id=UserId(event.artist_id),
        ),
        fan=FanSummary(
            id=UserId(fan.id),
            first_name=fan.first_name,
            last_name=fan.last_name,
            email=fan.email,
            profile_image=fan.profile_image,
        ),
    )

class DjangoBookingStore(BookingStore):
    """Booking store backed by the configured database.

    ``lock_event`` takes a row lock on the event (SELECT ... FOR UPDATE), so
    concurrent admission sections for the same event queue up in the database.
    Backends without row locks (SQLite) serialize writers on the database lock.
    """

    @contextmanager
    def lock_event(self, event_id: EventId) -> Iterator[Event | None]:
        with storage_errors("lock_event"), transaction.atomic():
            row = EventModel.objects.select_for_update().filter(pk=event_id.value).first()
            yield event_to_domain(row) if row else None

    @storage_errors("get_booking")
    def get_booking(self, booking_id: BookingId) -> Booking | None:
        row = BookingModel.objects.filter(pk=booking_id.value).first()
        return to_domain(row) if row else None

    @storage_errors("get_booking_view")
    def get_booking_view(self, booking_id: BookingId) -> BookingView | None:
        row = BookingModel.objects.select_related("event", "fan").filter(pk=booking_id.value).first()
        return to_view(row) if row else None

    @storage_errors("list_bookings")
    def list_bookings(self, filters: BookingFilter, page: PageRequest) -> Page[BookingView]:
        queryset = BookingModel.objects.select_related("event", "fan")
        if filters.status is not None:
            queryset = queryset.filter(status=filters.status.value)
        if filters.event_id is not None:
            queryset = queryset.filter(event_id=filters.event_id.value)
        if filters.fan_id is not None:
            queryset = queryset.filter(fan_id=filters.fan_id.value)
        if filters.artist_id is not None:
            queryset = queryset.filter(event__artist_id=filters.artist_id.value)

        total = queryset.count()
        rows = queryset.order_by("-created_at")[page.offset : page.offset + page.limit]
        return Page(items=tuple(to_view(row) for row in rows), total=total, request=page)

    @storage_errors("find_active_booking")
    def find_active_booking(self, event_id: EventId, fan_id: UserId) -> Booking | None:
        row = BookingModel.objects.filter(
            event_id=event_id.value,
            fan_id=fan_id.value,
            status__in=_ACTIVE_VALUES,
        ).first()
        return to_domain(row) if row else None

    @storage_errors("count_active_bookings")
    def count_active_bookings(self, event_id: EventId) -> int:
        return BookingModel.objects.filter(event_id=event_id.value, status__in=_ACTIVE_VALUES).count()

    @storage_errors("insert_booking")
    def insert_booking(
        self,
        event_id: EventId,
        fan_id: UserId,
        special_requests: str | None,
        booked_at: datetime,
    ) -> Booking:
        try:
            with transaction.atomic():
                row = BookingModel.objects.create(
                    event_id=event_id.value,
                    fan_id=fan_id.value,
                    booking_date=booked_at,
                    status=BookingStatus.PENDING.value,
                    special_requests=special_requests,
                )
        except IntegrityError as exc:
            raise ConflictError(_DUPLICATE_MESSAGE) from exc
        return to_domain(row)

    @storage_errors("update_booking")
    def update_booking(self, booking_id: BookingId, changes: Mapping[str, Any]) -> Booking:
        row = BookingModel.objects.filter(pk=booking_id.value).first()
        if row is None:
            raise NotFoundError("Booking")
        for field, value in changes.items():
            setattr(row, field, value.value if isinstance(value, BookingStatus) else value)
        try:
            with transaction.atomic():
                row.save(update_fields=[*changes.keys(), "updated_at"])
        except IntegrityError as exc:
            raise ConflictError(_DUPLICATE_MESSAGE) from exc
        return to_domain(row)
