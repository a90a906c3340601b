"""Tests for the Django ORM stores.

Run with: pytest tests/test_django_stores.py -v
"""

import uuid
from unittest import mock

import pytest
from django.db import DatabaseError
from django.utils import timezone

from accounts.domain import Role, UserId
from bookings.domain import BookingFilter, BookingId, BookingStatus
from bookings.models import Booking
from bookings.stores import DjangoBookingStore
from events.domain import EventFilter, EventId, EventStatus
from events.stores import DjangoEventStore
from meetgreet.domain import PageRequest
from meetgreet.domain.errors import ConflictError, NotFoundError, StorageError


@pytest.fixture
def bookings() -> DjangoBookingStore:
    return DjangoBookingStore()


@pytest.fixture
def events() -> DjangoEventStore:
    return DjangoEventStore()


@pytest.mark.django_db
class TestDjangoBookingStore:
    """Tests for DjangoBookingStore."""

    def test_insert_and_count(self, bookings, event, fan):
        event_id = EventId(event.id)
        booking = bookings.insert_booking(event_id, UserId(fan.id), "Hi", booked_at=timezone.now())

        assert booking.status is BookingStatus.PENDING
        assert bookings.count_active_bookings(event_id) == 1
        assert bookings.find_active_booking(event_id, UserId(fan.id)) == booking

    def test_second_active_booking_violates_constraint(self, bookings, event, fan):
        event_id = EventId(event.id)
        bookings.insert_booking(event_id, UserId(fan.id), None, booked_at=timezone.now())

        with pytest.raises(ConflictError):
            bookings.insert_booking(event_id, UserId(fan.id), None, booked_at=timezone.now())
        assert Booking.objects.count() == 1

    def test_cancelled_booking_does_not_block_new_one(self, bookings, event, fan):
        event_id = EventId(event.id)
        first = bookings.insert_booking(event_id, UserId(fan.id), None, booked_at=timezone.now())
        bookings.update_booking(first.id, {"status": BookingStatus.CANCELLED})

        bookings.insert_booking(event_id, UserId(fan.id), None, booked_at=timezone.now())
        assert bookings.count_active_bookings(event_id) == 1
        assert Booking.objects.count() == 2

    def test_reactivation_violates_constraint(self, bookings, event, fan):
        event_id = EventId(event.id)
        first = bookings.insert_booking(event_id, UserId(fan.id), None, booked_at=timezone.now())
        bookings.update_booking(first.id, {"status": BookingStatus.CANCELLED})
        bookings.insert_booking(event_id, UserId(fan.id), None, booked_at=timezone.now())

        with pytest.raises(ConflictError):
            bookings.update_booking(first.id, {"status": BookingStatus.CONFIRMED})

    def test_completed_does_not_count(self, bookings, event, fan):
        event_id = EventId(event.id)
        booking = bookings.insert_booking(event_id, UserId(fan.id), None, booked_at=timezone.now())
        bookings.update_booking(booking.id, {"status": BookingStatus.COMPLETED, "check_in_time": timezone.now()})
        assert bookings.count_active_bookings(event_id) == 0

    def test_lock_event_yields_event(self, bookings, event):
        with bookings.lock_event(EventId(event.id)) as locked:
            assert locked is not None
            assert locked.id == EventId(event.id)
            assert locked.total_capacity.value == 10

    def test_lock_event_missing(self, bookings):
        with bookings.lock_event(EventId(uuid.uuid4())) as locked:
            assert locked is None

    def test_list_by_artist(self, bookings, make_event, make_user, artist, fan):
        own = make_event(artist)
        foreign = make_event(make_user(Role.ARTIST))
        Booking.objects.create(event=own, fan=fan)
        Booking.objects.create(event=foreign, fan=fan)

        page = bookings.list_bookings(BookingFilter(artist_id=UserId(artist.id)), PageRequest())
        assert page.total == 1
        assert page.items[0].booking.event_id == EventId(own.id)
        assert page.items[0].event.artist_id == UserId(artist.id)
        assert page.items[0].fan.email == fan.email

    def test_booking_view(self, bookings, event, fan):
        row = Booking.objects.create(event=event, fan=fan, notes="Bring ID")

        view = bookings.get_booking_view(BookingId(row.id))
        assert view.booking.notes == "Bring ID"
        assert view.event.venue.address == "Weteringschans 6"
        assert view.fan.id == UserId(fan.id)
        assert bookings.get_booking_view(BookingId(uuid.uuid4())) is None

    def test_update_missing_booking(self, bookings):
        with pytest.raises(NotFoundError, match="Booking not found"):
            bookings.update_booking(BookingId(uuid.uuid4()), {"notes": "gone"})

    def test_database_failure_becomes_storage_error(self, bookings, event):
        with mock.patch.object(Booking.objects, "filter", side_effect=DatabaseError("disk I/O error")):
            with pytest.raises(StorageError):
                bookings.count_active_bookings(EventId(event.id))


@pytest.mark.django_db
class TestDjangoEventStore:
    """Tests for DjangoEventStore."""

    def test_artist_exists_checks_role(self, events, artist, fan):
        assert events.artist_exists(UserId(artist.id))
        assert not events.artist_exists(UserId(fan.id))
        assert not events.artist_exists(UserId(uuid.uuid4()))

    def test_update_venue_and_artist(self, events, event, make_user):
        new_artist = make_user(Role.ARTIST)
        updated = events.update_event(
            EventId(event.id),
            {"venue_name": "Ziggo Dome", "artist_id": UserId(new_artist.id)},
        )
        assert updated.venue.name == "Ziggo Dome"
        assert updated.artist_id == UserId(new_artist.id)

    def test_set_status(self, events, event):
        updated = events.set_status(EventId(event.id), EventStatus.IN_PROGRESS)
        assert updated.status is EventStatus.IN_PROGRESS

    def test_list_filters(self, events, make_event, artist):
        make_event(artist, status="completed")
        scheduled = make_event(artist)

        page = events.list_events(EventFilter(status=EventStatus.SCHEDULED), PageRequest())
        assert [e.id for e in page.items] == [EventId(scheduled.id)]

    def test_delete_cascades_to_bookings(self, events, event, fan):
        Booking.objects.create(event=event, fan=fan)
        events.delete_event(EventId(event.id))
        assert events.get_event(EventId(event.id)) is None
        assert Booking.objects.count() == 0
