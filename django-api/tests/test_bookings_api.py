"""Integration tests for the booking ledger HTTP surface.

Run with: pytest tests/test_bookings_api.py -v
"""

import uuid

import pytest
from rest_framework.test import APIClient

from accounts.domain import Role
from bookings.models import Booking


def book(client, event, **extra):
    return client.post("/api/bookings", {"eventId": str(event.id), **extra}, format="json")


@pytest.mark.django_db
class TestCreateBooking:
    """Tests for POST /api/bookings"""

    def test_fan_books_event(self, auth_client, event, fan):
        response = book(auth_client(fan), event, specialRequests="Can I bring a poster?")

        assert response.status_code == 201
        body = response.json()["booking"]
        assert body["status"] == "pending"
        assert body["eventId"] == str(event.id)
        assert body["fanId"] == str(fan.id)
        assert body["specialRequests"] == "Can I bring a poster?"
        assert body["checkInTime"] is None

    def test_requires_authentication(self, api_client: APIClient, event):
        response = book(api_client, event)
        assert response.status_code == 401
        assert response.json() == {
            "success": False,
            "error": "Authentication credentials were not provided.",
            "status": "fail",
        }

    def test_bad_token_rejected(self, api_client: APIClient, event):
        api_client.credentials(HTTP_AUTHORIZATION="Bearer not.a.token")
        response = book(api_client, event)
        assert response.status_code == 401

    def test_non_fan_forbidden(self, auth_client, event, artist):
        response = book(auth_client(artist), event)
        assert response.status_code == 403
        assert response.json()["error"] == "Only fans can create bookings"

    def test_unknown_event(self, auth_client, fan):
        response = auth_client(fan).post("/api/bookings", {"eventId": str(uuid.uuid4())}, format="json")
        assert response.status_code == 404
        assert response.json()["error"] == "Event not found"

    def test_malformed_event_id(self, auth_client, fan):
        response = auth_client(fan).post("/api/bookings", {"eventId": "abc"}, format="json")
        assert response.status_code == 400

    def test_past_event(self, auth_client, make_event, artist, fan):
        past = make_event(artist, days_ahead=-1)
        response = book(auth_client(fan), past)
        assert response.status_code == 400
        assert response.json()["error"] == "Cannot book past events"

    def test_cancelled_event(self, auth_client, make_event, artist, fan):
        cancelled = make_event(artist, status="cancelled")
        response = book(auth_client(fan), cancelled)
        assert response.status_code == 400
        assert response.json()["error"] == "Cannot book cancelled events"

    def test_duplicate(self, auth_client, event, fan):
        client = auth_client(fan)
        book(client, event)
        response = book(client, event)
        assert response.status_code == 400
        assert response.json()["error"] == "You already have a booking for this event"
        assert Booking.objects.count() == 1

    def test_capacity_one_flow(self, auth_client, make_event, make_user, artist):
        single = make_event(artist, total_capacity=1)
        fan_a = auth_client(make_user(Role.FAN))
        fan_b = auth_client(make_user(Role.FAN))

        first = book(fan_a, single)
        assert first.status_code == 201

        full = book(fan_b, single)
        assert full.status_code == 400
        assert full.json()["error"] == "This event is fully booked"

        cancelled = fan_a.patch(f"/api/bookings/{first.json()['booking']['id']}/cancel")
        assert cancelled.status_code == 200
        assert cancelled.json()["message"] == "Booking has been cancelled"

        assert book(fan_b, single).status_code == 201


@pytest.mark.django_db
class TestListBookings:
    """Tests for GET /api/bookings"""

    def test_fan_sees_own_bookings(self, auth_client, event, make_user):
        fan_a, fan_b = make_user(Role.FAN), make_user(Role.FAN)
        Booking.objects.create(event=event, fan=fan_a)
        Booking.objects.create(event=event, fan=fan_b)

        response = auth_client(fan_a).get("/api/bookings")

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 1
        assert body["bookings"][0]["fanId"] == str(fan_a.id)

    def test_artist_sees_bookings_for_own_events(self, auth_client, make_event, make_user, artist, fan):
        other_event = make_event(make_user(Role.ARTIST))
        own_event = make_event(artist)
        Booking.objects.create(event=own_event, fan=fan)
        Booking.objects.create(event=other_event, fan=fan)

        body = auth_client(artist).get("/api/bookings").json()
        assert body["count"] == 1
        assert body["bookings"][0]["eventId"] == str(own_event.id)

    def test_admin_filters_by_event_and_status(self, auth_client, make_event, artist, admin, make_user):
        event_a, event_b = make_event(artist), make_event(artist)
        kept = Booking.objects.create(event=event_a, fan=make_user(Role.FAN), status="confirmed")
        Booking.objects.create(event=event_a, fan=make_user(Role.FAN), status="pending")
        Booking.objects.create(event=event_b, fan=make_user(Role.FAN), status="confirmed")

        body = auth_client(admin).get(
            "/api/bookings", {"eventId": str(event_a.id), "status": "confirmed"}
        ).json()
        assert [b["id"] for b in body["bookings"]] == [str(kept.id)]

    def test_pagination(self, auth_client, event, manager, make_user):
        for _ in range(3):
            Booking.objects.create(event=event, fan=make_user(Role.FAN))

        body = auth_client(manager).get("/api/bookings", {"page": 2, "limit": 2}).json()
        assert body["count"] == 3
        assert body["totalPages"] == 2
        assert body["currentPage"] == 2
        assert len(body["bookings"]) == 1

    def test_listing_embeds_event_and_fan(self, auth_client, event, artist, make_user):
        fan = make_user(Role.FAN, first_name="Ada", last_name="Lovelace", email="ada@example.com")
        Booking.objects.create(event=event, fan=fan)

        entry = auth_client(artist).get("/api/bookings").json()["bookings"][0]
        assert entry["event"] == {
            "id": str(event.id),
            "title": "Acoustic meet & greet",
            "eventDate": event.event_date.isoformat(),
            "startTime": "18:00",
            "endTime": "19:00",
            "venueName": "Paradiso",
        }
        assert entry["fan"] == {
            "id": str(fan.id),
            "firstName": "Ada",
            "lastName": "Lovelace",
            "email": "ada@example.com",
            "profileImage": None,
        }


@pytest.mark.django_db
class TestBookingDetail:
    """Tests for GET /api/bookings/{id}"""

    def test_owner_views(self, auth_client, event, fan):
        booking = Booking.objects.create(event=event, fan=fan)
        response = auth_client(fan).get(f"/api/bookings/{booking.id}")
        assert response.status_code == 200
        assert response.json()["booking"]["id"] == str(booking.id)

    def test_detail_embeds_venue_address_and_fan(self, auth_client, event, fan, artist):
        booking = Booking.objects.create(event=event, fan=fan)

        body = auth_client(artist).get(f"/api/bookings/{booking.id}").json()["booking"]
        assert body["eventId"] == str(event.id)
        assert body["event"]["venueName"] == "Paradiso"
        assert body["event"]["address"] == "Weteringschans 6"
        assert body["event"]["zipCode"] == "1017 SG"
        assert body["event"]["country"] == "NL"
        assert body["fan"]["email"] == fan.email
        assert body["fan"]["firstName"] == fan.first_name

    def test_other_fan_forbidden(self, auth_client, event, fan, make_user):
        booking = Booking.objects.create(event=event, fan=fan)
        response = auth_client(make_user(Role.FAN)).get(f"/api/bookings/{booking.id}")
        assert response.status_code == 403

    def test_not_found(self, auth_client, admin):
        response = auth_client(admin).get(f"/api/bookings/{uuid.uuid4()}")
        assert response.status_code == 404
        assert response.json()["error"] == "Booking not found"


@pytest.mark.django_db
class TestBookingLifecycle:
    """Tests for the status, cancel, check-in and notes endpoints."""

    def test_artist_confirms_then_staff_checks_in(self, auth_client, event, artist, fan, staff):
        booking = Booking.objects.create(event=event, fan=fan)

        confirmed = auth_client(artist).patch(
            f"/api/bookings/{booking.id}/status", {"status": "confirmed"}, format="json"
        )
        assert confirmed.status_code == 200
        assert confirmed.json()["booking"]["status"] == "confirmed"

        checked = auth_client(staff).patch(f"/api/bookings/{booking.id}/check-in")
        assert checked.status_code == 200
        assert checked.json()["message"] == "Fan checked in successfully"
        assert checked.json()["booking"]["status"] == "completed"
        assert checked.json()["booking"]["checkInTime"] is not None

    def test_check_in_pending_rejected(self, auth_client, event, fan, staff):
        booking = Booking.objects.create(event=event, fan=fan)
        response = auth_client(staff).patch(f"/api/bookings/{booking.id}/check-in")
        assert response.status_code == 400
        assert response.json()["error"] == "Only confirmed bookings can be checked in"

    def test_unknown_status_value(self, auth_client, event, fan, manager):
        booking = Booking.objects.create(event=event, fan=fan)
        response = auth_client(manager).patch(
            f"/api/bookings/{booking.id}/status", {"status": "archived"}, format="json"
        )
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid status value"

    def test_staff_cannot_change_status(self, auth_client, event, fan, staff):
        booking = Booking.objects.create(event=event, fan=fan)
        response = auth_client(staff).patch(
            f"/api/bookings/{booking.id}/status", {"status": "confirmed"}, format="json"
        )
        assert response.status_code == 403

    def test_cancel_twice(self, auth_client, event, fan):
        booking = Booking.objects.create(event=event, fan=fan)
        client = auth_client(fan)
        assert client.patch(f"/api/bookings/{booking.id}/cancel").status_code == 200

        again = client.patch(f"/api/bookings/{booking.id}/cancel")
        assert again.status_code == 400
        assert again.json()["error"] == "Booking is already cancelled"

    def test_admin_cannot_cancel_for_fan(self, auth_client, event, fan, admin):
        booking = Booking.objects.create(event=event, fan=fan)
        response = auth_client(admin).patch(f"/api/bookings/{booking.id}/cancel")
        assert response.status_code == 403
        booking.refresh_from_db()
        assert booking.status == "pending"

    def test_notes(self, auth_client, event, fan, staff):
        booking = Booking.objects.create(event=event, fan=fan)
        response = auth_client(staff).patch(
            f"/api/bookings/{booking.id}/notes", {"notes": "Needs step-free access"}, format="json"
        )
        assert response.status_code == 200
        assert response.json()["message"] == "Notes added successfully"
        assert response.json()["booking"]["notes"] == "Needs step-free access"

    def test_notes_require_body(self, auth_client, event, fan, staff):
        booking = Booking.objects.create(event=event, fan=fan)
        response = auth_client(staff).patch(f"/api/bookings/{booking.id}/notes", {}, format="json")
        assert response.status_code == 400

    def test_wrong_method(self, auth_client, event, fan):
        booking = Booking.objects.create(event=event, fan=fan)
        response = auth_client(fan).delete(f"/api/bookings/{booking.id}")
        assert response.status_code == 405
        assert response.json()["success"] is False
