"""HTTP handlers (views) for bookings. All of them require authentication."""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.authentication import caller_from_request
from bookings.domain import BookingFilter, BookingStatus
from bookings.handlers.serializers import (
    BookingCreateSerializer,
    BookingDetailSerializer,
    BookingListQuerySerializer,
    BookingNotesSerializer,
    BookingSerializer,
    BookingStatusSerializer,
    BookingViewSerializer,
)
from bookings.services import BookingService
from bookings.stores import DjangoBookingStore
from events.domain import EventId
from events.stores import DjangoEventStore
from meetgreet.handlers.pagination import paginated_body


def get_booking_service() -> BookingService:
    return BookingService(DjangoBookingStore(), DjangoEventStore())


class BookingListView(APIView):
    """Handler for GET /api/bookings and POST /api/bookings"""

    def get(self, request: Request) -> Response:
        query = BookingListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        data = query.validated_data

        filters = BookingFilter(
            status=BookingStatus(data["status"]) if "status" in data else None,
            event_id=EventId(data["event_id"]) if "event_id" in data else None,
        )
        page = get_booking_service().list_bookings(
            caller_from_request(request), filters, query.page_request()
        )
        items = BookingViewSerializer(page.items, many=True).data
        return Response(paginated_body(page, "bookings", items))

    def post(self, request: Request) -> Response:
        payload = BookingCreateSerializer(data=request.data)
        payload.is_valid(raise_exception=True)

        booking = get_booking_service().create_booking(
            caller_from_request(request),
            str(payload.validated_data["event_id"]),
            payload.validated_data.get("special_requests"),
        )
        return Response(
            {"success": True, "booking": BookingSerializer(booking).data},
            status=status.HTTP_201_CREATED,
        )


class BookingDetailView(APIView):
    """Handler for GET /api/bookings/{booking_id}"""

    def get(self, request: Request, booking_id: str) -> Response:
        view = get_booking_service().get_booking(caller_from_request(request), booking_id)
        return Response({"success": True, "booking": BookingDetailSerializer(view).data})


class BookingStatusView(APIView):
    """Handler for PATCH /api/bookings/{booking_id}/status"""

    def patch(self, request: Request, booking_id: str) -> Response:
        payload = BookingStatusSerializer(data=request.data)
        payload.is_valid(raise_exception=True)

        booking = get_booking_service().set_status(
            caller_from_request(request), booking_id, payload.validated_data["status"]
        )
        return Response({"success": True, "booking": BookingSerializer(booking).data})


class BookingCancelView(APIView):
    """Handler for PATCH /api/bookings/{booking_id}/cancel"""

    def patch(self, request: Request, booking_id: str) -> Response:
        booking = get_booking_service().cancel(caller_from_request(request), booking_id)
        return Response(
            {
                "success": True,
                "message": "Booking has been cancelled",
                "booking": BookingSerializer(booking).data,
            }
        )


class BookingCheckInView(APIView):
    """Handler for PATCH /api/bookings/{booking_id}/check-in"""

    def patch(self, request: Request, booking_id: str) -> Response:
        booking = get_booking_service().check_in(caller_from_request(request), booking_id)
        return Response(
            {
                "success": True,
                "message": "Fan checked in successfully",
                "booking": BookingSerializer(booking).data,
            }
        )


class BookingNotesView(APIView):
    """Handler for PATCH /api/bookings/{booking_id}/notes"""

    def patch(self, request: Request, booking_id: str) -> Response:
        payload = BookingNotesSerializer(data=request.data)
        payload.is_valid(raise_exception=True)

        booking = get_booking_service().annotate(
            caller_from_request(request), booking_id, payload.validated_data["notes"]
        )
        return Response(
            {
                "success": True,
                "message": "Notes added successfully",
                "booking": BookingSerializer(booking).data,
            }
        )
