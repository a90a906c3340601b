from django.contrib import admin

from bookings.models import Booking
from events.models import Event


class BookingInline(admin.TabularInline):
    model = Booking
    extra = 0
    fields = ["fan", "status", "booking_date", "check_in_time"]
    readonly_fields = ["booking_date"]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "artist", "event_date", "start_time", "venue_name", "total_capacity", "status"]
    list_filter = ["status", "event_date"]
    search_fields = ["title", "venue_name", "city"]
    inlines = [BookingInline]
