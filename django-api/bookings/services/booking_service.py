"""Booking service - the booking ledger.

Every operation runs its checks in a fixed order and mutates last, so a
failing check never leaves a partial write behind. Writes that change which
bookings are active run inside the event's admission section.
"""

import logging
from collections.abc import Callable
from datetime import datetime

from django.utils import timezone

from accounts.domain import Action, Caller, Ownership, Role, require
from bookings.domain import Booking, BookingFilter, BookingId, BookingStatus, BookingView
from bookings.services.admission import Admission, CapacityAdmissionController
from bookings.stores.interfaces import BookingStore
from events.domain import Event
from events.services import parse_event_id
from events.stores.interfaces import EventStore
from meetgreet.domain import Page, PageRequest
from meetgreet.domain.errors import (
    CapacityExceededError,
    ConflictError,
    InvalidArgumentError,
    InvalidStateError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


def parse_booking_id(booking_id: str) -> BookingId:
    try:
        return BookingId.from_string(str(booking_id))
    except ValueError:
        raise InvalidArgumentError("Invalid booking ID format") from None


def parse_booking_status(status: str) -> BookingStatus:
    try:
        return BookingStatus(status)
    except ValueError:
        raise InvalidArgumentError("Invalid status value") from None


class BookingService:
    """Service for booking ledger operations."""

    def __init__(
        self,
        bookings: BookingStore,
        events: EventStore,
        admission: CapacityAdmissionController | None = None,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._bookings = bookings
        self._events = events
        self._admission = admission or CapacityAdmissionController(bookings)
        self._clock = clock

    def create_booking(self, caller: Caller, event_id: str, special_requests: str | None = None) -> Booking:
        """Book the caller onto an event in the pending status.

        Raises, first failure wins:
            ForbiddenError: If the caller is not a fan.
            InvalidArgumentError: If the event_id is not a valid UUID.
            NotFoundError: If the event does not exist.
            InvalidStateError: If the event is past or cancelled.
            ConflictError: If the fan already holds an active booking for it.
            CapacityExceededError: If the event is full.
        """
        require(Action.CREATE_BOOKING, caller, message="Only fans can create bookings")
        parsed_id = parse_event_id(event_id)

        with self._admission.exclusive(parsed_id) as event:
            if event is None:
                raise NotFoundError("Event")
            if event.is_past(self._clock()):
                raise InvalidStateError("Cannot book past events")
            if event.is_cancelled:
                raise InvalidStateError("Cannot book cancelled events")
            if self._bookings.find_active_booking(parsed_id, caller.id) is not None:
                raise ConflictError("You already have a booking for this event")
            if self._admission.admit(event) is Admission.DENY:
                raise CapacityExceededError()

            booking = self._bookings.insert_booking(
                parsed_id,
                caller.id,
                special_requests,
                booked_at=self._clock(),
            )

        logger.info("Booking created: %s for event %s by fan %s", booking.id, parsed_id, caller.id)
        return booking

    def list_bookings(
        self,
        caller: Caller,
        filters: BookingFilter,
        page: PageRequest,
    ) -> Page[BookingView]:
        """Return bookings visible to the caller.

        Fans see their own bookings and artists the bookings of their events;
        admins, managers and staff see all of them.
        """
        if caller.role is Role.FAN:
            filters = BookingFilter(status=filters.status, event_id=filters.event_id, fan_id=caller.id)
        elif caller.role is Role.ARTIST:
            filters = BookingFilter(status=filters.status, event_id=filters.event_id, artist_id=caller.id)
        return self._bookings.list_bookings(filters, page)

    def get_booking(self, caller: Caller, booking_id: str) -> BookingView:
        """Return a booking the caller may view, with its event and fan summaries.

        Raises:
            InvalidArgumentError: If the booking_id is not a valid UUID.
            NotFoundError: If the booking does not exist.
            ForbiddenError: Unless admin, manager, the owning fan or the owning artist.
        """
        view = self._bookings.get_booking_view(parse_booking_id(booking_id))
        if view is None:
            raise NotFoundError("Booking")
        require(
            Action.VIEW_BOOKING,
            caller,
            Ownership(fan_id=view.booking.fan_id, artist_id=view.event.artist_id),
            "Not authorized to view this booking",
        )
        return view

    def set_status(self, caller: Caller, booking_id: str, status: str) -> Booking:
        """Overwrite the booking status. The transition graph is not checked.

        Raises:
            InvalidArgumentError: If the status is not a known value. Checked first.
            NotFoundError: If the booking or its event does not exist.
            ForbiddenError: Unless admin, manager or the owning artist.
            ConflictError: If reactivating would give the fan two active bookings.
        """
        new_status = parse_booking_status(status)
        booking, event = self._load_with_event(parse_booking_id(booking_id))
        require(
            Action.CHANGE_BOOKING_STATUS,
            caller,
            Ownership(artist_id=event.artist_id),
            "Not authorized to update this booking",
        )

        with self._admission.exclusive(event.id) as locked:
            if locked is None:
                raise NotFoundError("Event")
            updated = self._bookings.update_booking(booking.id, {"status": new_status})

        logger.info("Booking status changed: %s to %s by %s", booking.id, new_status.value, caller.id)
        return updated

    def cancel(self, caller: Caller, booking_id: str) -> Booking:
        """Cancel the caller's own booking.

        Raises:
            NotFoundError: If the booking or its event does not exist.
            ForbiddenError: Unless the caller is the fan who booked.
            InvalidStateError: If already cancelled, completed, or the event is past.
        """
        parsed_id = parse_booking_id(booking_id)
        booking = self._load(parsed_id)
        require(
            Action.CANCEL_BOOKING,
            caller,
            Ownership(fan_id=booking.fan_id),
            "Not authorized to cancel this booking",
        )

        with self._admission.exclusive(booking.event_id) as event:
            current = self._load(parsed_id)
            if current.status is BookingStatus.CANCELLED:
                raise InvalidStateError("Booking is already cancelled")
            if current.status is BookingStatus.COMPLETED:
                raise InvalidStateError("Cannot cancel a completed booking")
            if event is None:
                raise NotFoundError("Event")
            if event.is_past(self._clock()):
                raise InvalidStateError("Cannot cancel bookings for past events")

            updated = self._bookings.update_booking(parsed_id, {"status": BookingStatus.CANCELLED})

        logger.info("Booking cancelled: %s by fan %s", parsed_id, caller.id)
        return updated

    def check_in(self, caller: Caller, booking_id: str) -> Booking:
        """Mark a confirmed booking completed and stamp the check-in time.

        Raises:
            NotFoundError: If the booking does not exist.
            ForbiddenError: Unless admin, manager, staff or the owning artist.
            InvalidStateError: Unless the booking is confirmed.
        """
        booking, event = self._load_with_event(parse_booking_id(booking_id))
        require(
            Action.CHECK_IN_BOOKING,
            caller,
            Ownership(artist_id=event.artist_id),
            "Not authorized to check in this booking",
        )

        with self._admission.exclusive(event.id) as locked:
            if locked is None:
                raise NotFoundError("Event")
            current = self._load(booking.id)
            if current.status is not BookingStatus.CONFIRMED:
                raise InvalidStateError("Only confirmed bookings can be checked in")
            updated = self._bookings.update_booking(
                booking.id,
                {"status": BookingStatus.COMPLETED, "check_in_time": self._clock()},
            )

        logger.info("Booking checked in: %s by %s", booking.id, caller.id)
        return updated

    def annotate(self, caller: Caller, booking_id: str, notes: str) -> Booking:
        """Overwrite the staff notes of a booking.

        Raises:
            NotFoundError: If the booking does not exist.
            ForbiddenError: Unless admin, manager, staff or the owning artist.
        """
        booking, event = self._load_with_event(parse_booking_id(booking_id))
        require(
            Action.ANNOTATE_BOOKING,
            caller,
            Ownership(artist_id=event.artist_id),
            "Not authorized to add notes to this booking",
        )
        updated = self._bookings.update_booking(booking.id, {"notes": notes})
        logger.info("Booking notes updated: %s by %s", booking.id, caller.id)
        return updated

    def _load(self, booking_id: BookingId) -> Booking:
        booking = self._bookings.get_booking(booking_id)
        if booking is None:
            raise NotFoundError("Booking")
        return booking

    def _load_with_event(self, booking_id: BookingId) -> tuple[Booking, Event]:
        booking = self._load(booking_id)
        event = self._events.get_event(booking.event_id)
        if event is None:
            raise NotFoundError("Event")
        return booking, event
