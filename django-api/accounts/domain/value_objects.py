"""Domain primitives for user accounts."""

from dataclasses import dataclass
from enum import Enum
from typing import Self
from uuid import UUID


class Role(Enum):
    """Closed set of account roles. Roles do not inherit from each other."""

    ADMIN = "admin"
    ARTIST = "artist"
    MANAGER = "manager"
    FAN = "fan"
    STAFF = "staff"

    @classmethod
    def choices(cls) -> list[tuple[str, str]]:
        return [(role.value, role.name.title()) for role in cls]


# Roles an anonymous visitor may pick at registration. The rest are granted by an admin.
SELF_REGISTERED_ROLES = frozenset({Role.ARTIST, Role.FAN})


@dataclass(frozen=True)
class UserId:
    """Unique identifier for a User."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)
