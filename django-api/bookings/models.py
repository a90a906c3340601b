"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.conf import settings
from django.db import models
from django.utils import timezone

from bookings.domain.value_objects import ACTIVE_STATUSES, BookingStatus
from events.models import Event


class Booking(models.Model):
    """Persistence model for meet & greet bookings."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="bookings")
    fan = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    booking_date = models.DateTimeField(default=timezone.now)
    status = models.CharField(
        max_length=16,
        choices=BookingStatus.choices(),
        default=BookingStatus.PENDING.value,
    )
    special_requests = models.TextField(blank=True, null=True)
    check_in_time = models.DateTimeField(blank=True, null=True)
    notes = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["event", "status"], name="bookings_event_status_idx"),
            models.Index(fields=["fan"], name="bookings_fan_idx"),
            models.Index(fields=["status"], name="bookings_status_idx"),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["event", "fan"],
                condition=models.Q(status__in=sorted(s.value for s in ACTIVE_STATUSES)),
                name="unique_active_booking_per_fan",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.fan_id} @ {self.event_id} ({self.status})"
