"""Django ORM implementation of the EventStore."""

from collections.abc import Mapping
from typing import Any

from accounts.domain import Role, UserId
from accounts.models import User
from events.domain import Capacity, Event, EventDraft, EventFilter, EventId, EventStatus, Venue
from events.models import Event as EventModel
from events.stores.interfaces import EventStore
from meetgreet.domain import Page, PageRequest
from meetgreet.storage import storage_errors

# Domain venue attribute -> ORM column.
_VENUE_COLUMNS = {
    "name": "venue_name",
    "address": "address",
    "city": "city",
    "state": "state",
    "zip_code": "zip_code",
    "country": "country",
}


def to_domain(row: EventModel) -> Event:
    return Event(
        id=EventId(row.id),
        title=row.title,
        description=row.description,
        event_date=row.event_date,
        start_time=row.start_time,
        end_time=row.end_time,
        venue=Venue(**{attr: getattr(row, column) for attr, column in _VENUE_COLUMNS.items()}),
        total_capacity=Capacity(row.total_capacity),
        status=EventStatus(row.status),
        image_url=row.image_url,
        artist_id=UserId(row.artist_id),
        created_by=UserId(row.created_by_id),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class DjangoEventStore(EventStore):
    """Event store backed by the configured database."""

    @storage_errors("list_events")
    def list_events(self, filters: EventFilter, page: PageRequest) -> Page[Event]:
        queryset = EventModel.objects.all()
        if filters.status is not None:
            queryset = queryset.filter(status=filters.status.value)
        if filters.artist_id is not None:
            queryset = queryset.filter(artist_id=filters.artist_id.value)

        total = queryset.count()
        rows = queryset.order_by("event_date", "start_time")[page.offset : page.offset + page.limit]
        return Page(items=tuple(to_domain(row) for row in rows), total=total, request=page)

    @storage_errors("get_event")
    def get_event(self, event_id: EventId) -> Event | None:
        row = EventModel.objects.filter(pk=event_id.value).first()
        return to_domain(row) if row else None

    @storage_errors("artist_exists")
    def artist_exists(self, artist_id: UserId) -> bool:
        return User.objects.filter(
            pk=artist_id.value,
            role=Role.ARTIST.value,
            is_active=True,
        ).exists()

    @storage_errors("create_event")
    def create_event(self, draft: EventDraft, created_by: UserId) -> Event:
        row = EventModel.objects.create(
            title=draft.title,
            description=draft.description,
            event_date=draft.event_date,
            start_time=draft.start_time,
            end_time=draft.end_time,
            venue_name=draft.venue.name,
            address=draft.venue.address,
            city=draft.venue.city,
            state=draft.venue.state,
            zip_code=draft.venue.zip_code,
            country=draft.venue.country,
            total_capacity=draft.total_capacity.value,
            status=EventStatus.SCHEDULED.value,
            image_url=draft.image_url,
            artist_id=draft.artist_id.value,
            created_by_id=created_by.value,
        )
        return to_domain(row)

    @storage_errors("update_event")
    def update_event(self, event_id: EventId, changes: Mapping[str, Any]) -> Event:
        row = EventModel.objects.get(pk=event_id.value)
        update_fields = ["updated_at"]
        for field, value in changes.items():
            if field == "artist_id":
                row.artist_id = value.value
                update_fields.append("artist")
            else:
                setattr(row, field, value)
                update_fields.append(field)
        # save() rather than queryset.update() so post_save invalidates caches.
        row.save(update_fields=update_fields)
        return to_domain(row)

    @storage_errors("set_status")
    def set_status(self, event_id: EventId, status: EventStatus) -> Event:
        row = EventModel.objects.get(pk=event_id.value)
        row.status = status.value
        row.save(update_fields=["status", "updated_at"])
        return to_domain(row)

    @storage_errors("delete_event")
    def delete_event(self, event_id: EventId) -> None:
        row = EventModel.objects.filter(pk=event_id.value).first()
        if row is not None:
            row.delete()
