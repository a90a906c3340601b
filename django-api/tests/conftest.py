"""Pytest configuration and shared fixtures."""

from datetime import date, timedelta

import pytest
from rest_framework.test import APIClient

from accounts.domain import Role, UserId
from accounts.services import TokenCodec
from fakes import InMemoryBookingStore, InMemoryDatabase, InMemoryEventStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def fast_password_hashing(settings):
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


# In-memory stores


@pytest.fixture
def memory_db() -> InMemoryDatabase:
    return InMemoryDatabase()


@pytest.fixture
def event_store(memory_db) -> InMemoryEventStore:
    return InMemoryEventStore(memory_db)


@pytest.fixture
def booking_store(memory_db) -> InMemoryBookingStore:
    return InMemoryBookingStore(memory_db)


# Database-backed users and events


@pytest.fixture
def make_user(db):
    from accounts.models import User

    counter = iter(range(1, 10_000))

    def _make_user(role: Role = Role.FAN, **extra):
        n = next(counter)
        extra.setdefault("email", f"{role.value}{n}@example.com")
        extra.setdefault("first_name", role.value.title())
        extra.setdefault("last_name", f"User{n}")
        return User.objects.create_user(password="secret123", role=role.value, **extra)

    return _make_user


@pytest.fixture
def auth_client():
    """Return an APIClient that sends a bearer token for ``user``."""

    def _auth_client(user) -> APIClient:
        client = APIClient()
        token = TokenCodec.from_settings().issue(UserId(user.id))
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
        return client

    return _auth_client


@pytest.fixture
def artist(make_user):
    return make_user(Role.ARTIST)


@pytest.fixture
def fan(make_user):
    return make_user(Role.FAN)


@pytest.fixture
def manager(make_user):
    return make_user(Role.MANAGER)


@pytest.fixture
def staff(make_user):
    return make_user(Role.STAFF)


@pytest.fixture
def admin(make_user):
    return make_user(Role.ADMIN)


@pytest.fixture
def make_event(db):
    from events.models import Event

    def _make_event(artist, created_by=None, total_capacity: int = 10, days_ahead: int = 30, **extra):
        extra.setdefault("title", "Acoustic meet & greet")
        extra.setdefault("description", "Photos and signatures after the show")
        extra.setdefault("start_time", "18:00")
        extra.setdefault("end_time", "19:00")
        return Event.objects.create(
            event_date=date.today() + timedelta(days=days_ahead),
            venue_name="Paradiso",
            address="Weteringschans 6",
            city="Amsterdam",
            state="NH",
            zip_code="1017 SG",
            country="NL",
            total_capacity=total_capacity,
            artist=artist,
            created_by=created_by or artist,
            **extra,
        )

    return _make_event


@pytest.fixture
def event(make_event, artist):
    return make_event(artist)
