"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from events.domain.value_objects import EventStatus


class Event(models.Model):
    """Persistence model for meet & greet events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField()
    event_date = models.DateField()
    start_time = models.TimeField()
    end_time = models.TimeField()
    venue_name = models.CharField(max_length=255)
    address = models.CharField(max_length=255)
    city = models.CharField(max_length=120)
    state = models.CharField(max_length=120)
    zip_code = models.CharField(max_length=20)
    country = models.CharField(max_length=120)
    total_capacity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    status = models.CharField(
        max_length=16,
        choices=EventStatus.choices(),
        default=EventStatus.SCHEDULED.value,
    )
    image_url = models.URLField(max_length=500, blank=True, null=True)
    artist = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="performances",
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="created_events",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["event_date", "start_time"]
        indexes = [
            models.Index(fields=["status"], name="events_status_idx"),
            models.Index(fields=["event_date"], name="events_date_idx"),
            models.Index(fields=["artist"], name="events_artist_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.title} - {self.event_date}"
