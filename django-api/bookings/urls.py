from django.urls import path

from bookings.handlers.views import (
    BookingCancelView,
    BookingCheckInView,
    BookingDetailView,
    BookingListView,
    BookingNotesView,
    BookingStatusView,
)

urlpatterns = [
    path("bookings", BookingListView.as_view(), name="booking-list"),
    path("bookings/<str:booking_id>", BookingDetailView.as_view(), name="booking-detail"),
    path("bookings/<str:booking_id>/status", BookingStatusView.as_view(), name="booking-status"),
    path("bookings/<str:booking_id>/cancel", BookingCancelView.as_view(), name="booking-cancel"),
    path("bookings/<str:booking_id>/check-in", BookingCheckInView.as_view(), name="booking-check-in"),
    path("bookings/<str:booking_id>/notes", BookingNotesView.as_view(), name="booking-notes"),
]
