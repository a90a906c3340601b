from events.domain.models import EDITABLE_FIELDS, Event, EventDraft, EventFilter, Venue
from events.domain.value_objects import Capacity, EventId, EventStatus

__all__ = [
    "Event",
    "EventDraft",
    "EventFilter",
    "Venue",
    "EventId",
    "EventStatus",
    "Capacity",
    "EDITABLE_FIELDS",
]
