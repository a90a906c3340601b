"""Authorization policy: which role, or which owner, may perform which action.

The table below is the only authorization mechanism in the system. Each
action lists its exact permitted roles plus the ownership facts that grant
access on their own. There is no role hierarchy: an admin is allowed
somewhere only because ``Role.ADMIN`` is listed there.
"""

from dataclasses import dataclass
from enum import Enum

from accounts.domain.models import Caller
from accounts.domain.value_objects import Role, UserId
from meetgreet.domain.errors import ForbiddenError


class Action(Enum):
    CREATE_EVENT = "create_event"
    UPDATE_EVENT = "update_event"
    DELETE_EVENT = "delete_event"
    CHANGE_EVENT_STATUS = "change_event_status"
    CREATE_BOOKING = "create_booking"
    VIEW_BOOKING = "view_booking"
    CHANGE_BOOKING_STATUS = "change_booking_status"
    CANCEL_BOOKING = "cancel_booking"
    CHECK_IN_BOOKING = "check_in_booking"
    ANNOTATE_BOOKING = "annotate_booking"


@dataclass(frozen=True)
class Ownership:
    """Ownership facts about the resource an action targets."""

    creator_id: UserId | None = None
    fan_id: UserId | None = None
    artist_id: UserId | None = None


@dataclass(frozen=True)
class Rule:
    roles: frozenset[Role] = frozenset()
    creator: bool = False
    fan: bool = False
    # Granted only to callers with Role.ARTIST whose id is the event's artist.
    artist: bool = False


_STAFF_LIKE = frozenset({Role.ADMIN, Role.MANAGER, Role.STAFF})

RULES: dict[Action, Rule] = {
    Action.CREATE_EVENT: Rule(roles=frozenset({Role.ADMIN, Role.MANAGER, Role.ARTIST})),
    Action.UPDATE_EVENT: Rule(roles=frozenset({Role.ADMIN, Role.MANAGER}), creator=True),
    Action.DELETE_EVENT: Rule(roles=frozenset({Role.ADMIN}), creator=True),
    Action.CHANGE_EVENT_STATUS: Rule(roles=frozenset({Role.ADMIN, Role.MANAGER}), creator=True),
    Action.CREATE_BOOKING: Rule(roles=frozenset({Role.FAN})),
    Action.VIEW_BOOKING: Rule(roles=frozenset({Role.ADMIN, Role.MANAGER}), fan=True, artist=True),
    Action.CHANGE_BOOKING_STATUS: Rule(roles=frozenset({Role.ADMIN, Role.MANAGER}), artist=True),
    Action.CANCEL_BOOKING: Rule(fan=True),
    Action.CHECK_IN_BOOKING: Rule(roles=_STAFF_LIKE, artist=True),
    Action.ANNOTATE_BOOKING: Rule(roles=_STAFF_LIKE, artist=True),
}


def can_perform(
    action: Action,
    role: Role,
    caller_id: UserId,
    owners: Ownership = Ownership(),
) -> bool:
    """Return whether a caller with ``role`` and ``caller_id`` may perform ``action``."""
    rule = RULES[action]
    if role in rule.roles:
        return True
    if rule.creator and owners.creator_id is not None and owners.creator_id == caller_id:
        return True
    if rule.fan and owners.fan_id is not None and owners.fan_id == caller_id:
        return True
    if (
        rule.artist
        and role is Role.ARTIST
        and owners.artist_id is not None
        and owners.artist_id == caller_id
    ):
        return True
    return False


def require(
    action: Action,
    caller: Caller,
    owners: Ownership = Ownership(),
    message: str | None = None,
) -> None:
    """Raise ForbiddenError unless ``caller`` may perform ``action``."""
    if not can_perform(action, caller.role, caller.id, owners):
        raise ForbiddenError(message) if message else ForbiddenError()
