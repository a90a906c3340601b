from django.contrib import admin

from bookings.models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ["event", "fan", "status", "booking_date", "check_in_time"]
    list_filter = ["status", "event"]
    search_fields = ["fan__email", "event__title"]
    readonly_fields = ["booking_date", "created_at", "updated_at"]
