"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Mapping
from typing import Any

from accounts.domain import Action, Caller, Ownership, require
from events.domain import EDITABLE_FIELDS, Event, EventDraft, EventFilter, EventId, EventStatus
from events.stores.interfaces import EventStore
from meetgreet.domain import Page, PageRequest
from meetgreet.domain.errors import InvalidArgumentError, NotFoundError

logger = logging.getLogger(__name__)


def parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(str(event_id))
    except ValueError:
        raise InvalidArgumentError("Invalid event ID format") from None


def parse_event_status(status: str) -> EventStatus:
    try:
        return EventStatus(status)
    except ValueError:
        raise InvalidArgumentError("Invalid status value") from None


class EventService:
    """Service for event registry operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self, filters: EventFilter, page: PageRequest) -> Page[Event]:
        """Return a page of events."""
        return self._store.list_events(filters, page)

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidArgumentError: If the event_id is not a valid UUID.
            NotFoundError: If the event does not exist.
        """
        return self._load(parse_event_id(event_id))

    def create_event(self, caller: Caller, draft: EventDraft) -> Event:
        """Create an event owned by ``draft.artist_id`` and created by the caller.

        Raises:
            ForbiddenError: If the caller is not an artist, manager or admin.
            InvalidArgumentError: If the referenced artist does not exist.
        """
        require(Action.CREATE_EVENT, caller)
        if not self._store.artist_exists(draft.artist_id):
            raise InvalidArgumentError("Artist not found")

        event = self._store.create_event(draft, created_by=caller.id)
        logger.info("Event created: %s by %s", event.id, caller.id)
        return event

    def update_event(self, caller: Caller, event_id: str, patch: Mapping[str, Any]) -> Event:
        """Apply a partial update.

        Raises:
            InvalidArgumentError: If the id is malformed or the patch touches a
                field that cannot be edited (capacity, status, ownership).
            NotFoundError: If the event does not exist.
            ForbiddenError: Unless the caller is admin, manager or the creator.
        """
        parsed_id = parse_event_id(event_id)
        locked = sorted(set(patch) - EDITABLE_FIELDS)
        if locked:
            raise InvalidArgumentError(f"Fields cannot be updated: {', '.join(locked)}")

        event = self._load(parsed_id)
        require(
            Action.UPDATE_EVENT,
            caller,
            Ownership(creator_id=event.created_by),
            "Not authorized to update this event",
        )
        if "artist_id" in patch and not self._store.artist_exists(patch["artist_id"]):
            raise InvalidArgumentError("Artist not found")
        if not patch:
            return event

        updated = self._store.update_event(parsed_id, patch)
        logger.info("Event updated: %s by %s (%s)", parsed_id, caller.id, ", ".join(sorted(patch)))
        return updated

    def delete_event(self, caller: Caller, event_id: str) -> None:
        """Delete an event and its bookings.

        Raises:
            NotFoundError: If the event does not exist.
            ForbiddenError: Unless the caller is admin or the creator.
        """
        parsed_id = parse_event_id(event_id)
        event = self._load(parsed_id)
        require(
            Action.DELETE_EVENT,
            caller,
            Ownership(creator_id=event.created_by),
            "Not authorized to delete this event",
        )
        self._store.delete_event(parsed_id)
        logger.info("Event deleted: %s by %s", parsed_id, caller.id)

    def set_status(self, caller: Caller, event_id: str, status: str) -> Event:
        """Overwrite the event status. Transition order is not validated.

        Raises:
            InvalidArgumentError: If the status is not a known value. Checked first.
            NotFoundError: If the event does not exist.
            ForbiddenError: Unless the caller is admin, manager or the creator.
        """
        new_status = parse_event_status(status)
        parsed_id = parse_event_id(event_id)
        event = self._load(parsed_id)
        require(
            Action.CHANGE_EVENT_STATUS,
            caller,
            Ownership(creator_id=event.created_by),
            "Not authorized to update this event",
        )
        updated = self._store.set_status(parsed_id, new_status)
        logger.info("Event status changed: %s to %s by %s", parsed_id, new_status.value, caller.id)
        return updated

    def _load(self, event_id: EventId) -> Event:
        event = self._store.get_event(event_id)
        if event is None:
            raise NotFoundError("Event")
        return event
