"""Capacity admission: decides whether an event can take one more booking.

Admission is computed from the live count of active bookings, never from a
running counter. The count, the comparison and the insert that follows must
happen inside ``exclusive()`` for the same event, otherwise two concurrent
requests can both see a free seat.
"""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum

from bookings.stores.interfaces import BookingStore
from events.domain import Event, EventId

logger = logging.getLogger(__name__)


class Admission(Enum):
    ALLOW = "allow"
    DENY = "deny"


class EventLocks:
    """Process-local registry of per-event mutexes.

    Entries are reference counted and dropped once nobody holds or waits on
    them, so the registry does not grow with the number of events ever booked.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[EventId, tuple[threading.Lock, int]] = {}

    @contextmanager
    def hold(self, event_id: EventId) -> Iterator[None]:
        with self._guard:
            lock, users = self._locks.get(event_id, (None, 0))
            if lock is None:
                lock = threading.Lock()
            self._locks[event_id] = (lock, users + 1)

        lock.acquire()
        try:
            yield
        finally:
            lock.release()
            with self._guard:
                lock, users = self._locks[event_id]
                if users == 1:
                    del self._locks[event_id]
                else:
                    self._locks[event_id] = (lock, users - 1)

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)


# Shared by every service instance in the process.
event_locks = EventLocks()


class CapacityAdmissionController:
    """Serializes booking writes per event and admits against capacity."""

    def __init__(self, store: BookingStore, locks: EventLocks = event_locks) -> None:
        self._store = store
        self._locks = locks

    @contextmanager
    def exclusive(self, event_id: EventId) -> Iterator[Event | None]:
        """Run the body as the only writer of this event's bookings.

        The in-process mutex orders threads of this worker; the store's
        section orders this worker against other processes.
        """
        with self._locks.hold(event_id), self._store.lock_event(event_id) as event:
            yield event

    def admit(self, event: Event) -> Admission:
        active = self._store.count_active_bookings(event.id)
        if active >= event.total_capacity.value:
            logger.info(
                "Admission denied for event %s: %d/%d active",
                event.id,
                active,
                event.total_capacity.value,
            )
            return Admission.DENY
        return Admission.ALLOW
