"""Serializers for transforming domain models to API responses, and API input to domain values."""

from rest_framework import serializers

from accounts.domain import UserId
from events.domain import Capacity, EventDraft, EventStatus, Venue
from meetgreet.handlers.pagination import PageQuerySerializer

TIME_FORMAT = "%H:%M"


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField(source="id.value")
    title = serializers.CharField()
    description = serializers.CharField()
    eventDate = serializers.DateField(source="event_date")
    startTime = serializers.TimeField(source="start_time", format=TIME_FORMAT)
    endTime = serializers.TimeField(source="end_time", format=TIME_FORMAT)
    venueName = serializers.CharField(source="venue.name")
    address = serializers.CharField(source="venue.address")
    city = serializers.CharField(source="venue.city")
    state = serializers.CharField(source="venue.state")
    zipCode = serializers.CharField(source="venue.zip_code")
    country = serializers.CharField(source="venue.country")
    totalCapacity = serializers.IntegerField(source="total_capacity.value")
    status = serializers.CharField(source="status.value")
    imageUrl = serializers.CharField(source="image_url", allow_null=True)
    artistId = serializers.CharField(source="artist_id.value")
    createdBy = serializers.CharField(source="created_by.value")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class EventInputSerializer(serializers.Serializer):
    """Validates POST /events bodies, and PUT bodies with ``partial=True``."""

    title = serializers.CharField(max_length=255)
    description = serializers.CharField()
    eventDate = serializers.DateField(source="event_date")
    startTime = serializers.TimeField(source="start_time", input_formats=[TIME_FORMAT])
    endTime = serializers.TimeField(source="end_time", input_formats=[TIME_FORMAT])
    venueName = serializers.CharField(source="venue_name", max_length=255)
    address = serializers.CharField(max_length=255)
    city = serializers.CharField(max_length=120)
    state = serializers.CharField(max_length=120)
    zipCode = serializers.CharField(source="zip_code", max_length=20)
    country = serializers.CharField(max_length=120)
    totalCapacity = serializers.IntegerField(source="total_capacity", min_value=1)
    imageUrl = serializers.URLField(source="image_url", max_length=500, required=False, allow_null=True)
    artistId = serializers.UUIDField(source="artist_id")

    def validate(self, attrs):
        # On updates, keys outside the editable set are refused rather than dropped.
        if self.partial:
            unknown = sorted(set(self.initial_data) - set(self.fields))
            if unknown:
                raise serializers.ValidationError(f"Fields cannot be updated: {', '.join(unknown)}")
        return attrs

    def to_draft(self) -> EventDraft:
        data = self.validated_data
        return EventDraft(
            title=data["title"],
            description=data["description"],
            event_date=data["event_date"],
            start_time=data["start_time"],
            end_time=data["end_time"],
            venue=Venue(
                name=data["venue_name"],
                address=data["address"],
                city=data["city"],
                state=data["state"],
                zip_code=data["zip_code"],
                country=data["country"],
            ),
            total_capacity=Capacity(data["total_capacity"]),
            artist_id=UserId(data["artist_id"]),
            image_url=data.get("image_url"),
        )

    def to_patch(self) -> dict:
        patch = dict(self.validated_data)
        if "artist_id" in patch:
            patch["artist_id"] = UserId(patch["artist_id"])
        return patch


class EventStatusSerializer(serializers.Serializer):
    # Free-form so unknown values reach the service, which rejects them.
    status = serializers.CharField()


class EventListQuerySerializer(PageQuerySerializer):
    status = serializers.ChoiceField(choices=[status.value for status in EventStatus], required=False)
    artistId = serializers.UUIDField(source="artist_id", required=False)
