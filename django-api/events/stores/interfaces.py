"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from accounts.domain import UserId
from events.domain import Event, EventDraft, EventFilter, EventId, EventStatus
from meetgreet.domain import Page, PageRequest


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self, filters: EventFilter, page: PageRequest) -> Page[Event]:
        """Return matching events ordered by event_date, then start_time, ascending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def artist_exists(self, artist_id: UserId) -> bool:
        """Check if an active account with the artist role has this ID."""
        ...

    @abstractmethod
    def create_event(self, draft: EventDraft, created_by: UserId) -> Event:
        """Persist a new event in the scheduled status."""
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, changes: Mapping[str, Any]) -> Event:
        """Apply changes to editable fields and return the updated event."""
        ...

    @abstractmethod
    def set_status(self, event_id: EventId, status: EventStatus) -> Event:
        """Overwrite the status and return the updated event."""
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> None:
        """Delete an event together with its bookings."""
        ...
