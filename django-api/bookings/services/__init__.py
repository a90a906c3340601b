from bookings.services.admission import (
    Admission,
    CapacityAdmissionController,
    EventLocks,
    event_locks,
)
from bookings.services.booking_service import (
    BookingService,
    parse_booking_id,
    parse_booking_status,
)

__all__ = [
    "Admission",
    "CapacityAdmissionController",
    "EventLocks",
    "event_locks",
    "BookingService",
    "parse_booking_id",
    "parse_booking_status",
]
