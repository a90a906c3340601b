"""Cache keys for public event reads.

Detail responses live under ``events:{id}``. List responses are keyed by a
version number plus the query string, so one version bump drops every list
page at once.
"""

from collections.abc import Mapping
from urllib.parse import urlencode

from django.conf import settings
from django.core.cache import cache

LIST_VERSION_KEY = "events:list:version"


def detail_key(event_id: str) -> str:
    return f"events:{event_id}"


def list_version() -> int:
    return cache.get_or_set(LIST_VERSION_KEY, 1, timeout=None)


def list_key(params: Mapping[str, str]) -> str:
    return f"events:list:v{list_version()}:{urlencode(sorted(params.items()))}"


def remember(key: str, body: dict) -> None:
    cache.set(key, body, timeout=settings.EVENT_CACHE_TTL)


def invalidate_event(event_id: str) -> None:
    cache.delete(detail_key(event_id))
    try:
        cache.incr(LIST_VERSION_KEY)
    except ValueError:
        cache.set(LIST_VERSION_KEY, list_version() + 1, timeout=None)
