from bookings.domain.models import Booking, BookingFilter, BookingView, EventSummary, FanSummary
from bookings.domain.value_objects import ACTIVE_STATUSES, BookingId, BookingStatus

__all__ = [
    "Booking",
    "BookingFilter",
    "BookingView",
    "EventSummary",
    "FanSummary",
    "BookingId",
    "BookingStatus",
    "ACTIVE_STATUSES",
]
