"""Serializers for bookings."""

from rest_framework import serializers

from bookings.domain import BookingStatus, BookingView
from meetgreet.handlers.pagination import PageQuerySerializer

TIME_FORMAT = "%H:%M"


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking domain model."""

    id = serializers.CharField(source="id.value")
    eventId = serializers.CharField(source="event_id.value")
    fanId = serializers.CharField(source="fan_id.value")
    bookingDate = serializers.DateTimeField(source="booking_date")
    status = serializers.CharField(source="status.value")
    specialRequests = serializers.CharField(source="special_requests", allow_null=True)
    checkInTime = serializers.DateTimeField(source="check_in_time", allow_null=True)
    notes = serializers.CharField(allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class EventSummarySerializer(serializers.Serializer):
    id = serializers.CharField(source="id.value")
    title = serializers.CharField()
    eventDate = serializers.DateField(source="event_date")
    startTime = serializers.TimeField(source="start_time", format=TIME_FORMAT)
    endTime = serializers.TimeField(source="end_time", format=TIME_FORMAT)
    venueName = serializers.CharField(source="venue.name")


class EventAddressSummarySerializer(EventSummarySerializer):
    address = serializers.CharField(source="venue.address")
    city = serializers.CharField(source="venue.city")
    state = serializers.CharField(source="venue.state")
    zipCode = serializers.CharField(source="venue.zip_code")
    country = serializers.CharField(source="venue.country")


class FanSummarySerializer(serializers.Serializer):
    id = serializers.CharField(source="id.value")
    firstName = serializers.CharField(source="first_name")
    lastName = serializers.CharField(source="last_name")
    email = serializers.EmailField()
    profileImage = serializers.CharField(source="profile_image", allow_null=True)


class BookingViewSerializer(serializers.Serializer):
    """Booking fields plus ``event`` and ``fan`` summaries. Listings omit the venue address."""

    event_serializer_class = EventSummarySerializer

    def to_representation(self, instance: BookingView) -> dict:
        data = BookingSerializer(instance.booking).data
        data["event"] = self.event_serializer_class(instance.event).data
        data["fan"] = FanSummarySerializer(instance.fan).data
        return data


class BookingDetailSerializer(BookingViewSerializer):
    event_serializer_class = EventAddressSummarySerializer


class BookingCreateSerializer(serializers.Serializer):
    eventId = serializers.UUIDField(source="event_id")
    specialRequests = serializers.CharField(
        source="special_requests",
        required=False,
        allow_blank=True,
        allow_null=True,
    )


class BookingStatusSerializer(serializers.Serializer):
    # Free-form so unknown values reach the service, which rejects them.
    status = serializers.CharField()


class BookingNotesSerializer(serializers.Serializer):
    notes = serializers.CharField(allow_blank=True, trim_whitespace=False)


class BookingListQuerySerializer(PageQuerySerializer):
    status = serializers.ChoiceField(choices=[status.value for status in BookingStatus], required=False)
    eventId = serializers.UUIDField(source="event_id", required=False)
