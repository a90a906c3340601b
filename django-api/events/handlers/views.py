"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain error mapping to the exception handler
- Never contain business logic
- Never expose internal error details
"""

from django.core.cache import cache
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.authentication import caller_from_request
from accounts.domain import UserId
from events.domain import EventFilter, EventStatus
from events.handlers import cache as event_cache
from events.handlers.serializers import (
    EventInputSerializer,
    EventListQuerySerializer,
    EventSerializer,
    EventStatusSerializer,
)
from events.services import EventService, parse_event_id
from events.stores import DjangoEventStore
from meetgreet.handlers.pagination import paginated_body


def get_event_service() -> EventService:
    return EventService(DjangoEventStore())


class PublicReadMixin:
    """GET is public; every other method needs an authenticated caller."""

    def get_permissions(self):
        if self.request.method == "GET":
            return [AllowAny()]
        return [IsAuthenticated()]


class EventListView(PublicReadMixin, APIView):
    """Handler for GET /api/events and POST /api/events"""

    def get(self, request: Request) -> Response:
        query = EventListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        key = event_cache.list_key(request.query_params.dict())
        body = cache.get(key)
        if body is None:
            data = query.validated_data
            filters = EventFilter(
                status=EventStatus(data["status"]) if "status" in data else None,
                artist_id=UserId(data["artist_id"]) if "artist_id" in data else None,
            )
            page = get_event_service().list_events(filters, query.page_request())
            body = paginated_body(page, "events", EventSerializer(page.items, many=True).data)
            event_cache.remember(key, body)
        return Response(body)

    def post(self, request: Request) -> Response:
        payload = EventInputSerializer(data=request.data)
        payload.is_valid(raise_exception=True)

        event = get_event_service().create_event(caller_from_request(request), payload.to_draft())
        return Response(
            {"success": True, "event": EventSerializer(event).data},
            status=status.HTTP_201_CREATED,
        )


class EventDetailView(PublicReadMixin, APIView):
    """Handler for GET, PUT and DELETE /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        key = event_cache.detail_key(str(parse_event_id(event_id)))
        body = cache.get(key)
        if body is None:
            event = get_event_service().get_event(event_id)
            body = {"success": True, "event": EventSerializer(event).data}
            event_cache.remember(key, body)
        return Response(body)

    def put(self, request: Request, event_id: str) -> Response:
        payload = EventInputSerializer(data=request.data, partial=True)
        payload.is_valid(raise_exception=True)

        event = get_event_service().update_event(
            caller_from_request(request), event_id, payload.to_patch()
        )
        return Response({"success": True, "event": EventSerializer(event).data})

    def delete(self, request: Request, event_id: str) -> Response:
        get_event_service().delete_event(caller_from_request(request), event_id)
        return Response({"success": True, "message": "Event deleted successfully"})


class EventStatusView(APIView):
    """Handler for PATCH /api/events/{event_id}/status"""

    def patch(self, request: Request, event_id: str) -> Response:
        payload = EventStatusSerializer(data=request.data)
        payload.is_valid(raise_exception=True)

        event = get_event_service().set_status(
            caller_from_request(request), event_id, payload.validated_data["status"]
        )
        return Response({"success": True, "event": EventSerializer(event).data})
