"""Domain models for accounts and the authenticated caller."""

from dataclasses import dataclass
from datetime import datetime

from accounts.domain.value_objects import Role, UserId


@dataclass(frozen=True)
class Caller:
    """The authenticated principal a service acts on behalf of."""

    id: UserId
    role: Role


@dataclass(frozen=True)
class Account:
    """Domain representation of a User, without credentials."""

    id: UserId
    email: str
    first_name: str
    last_name: str
    role: Role
    is_verified: bool
    profile_image: str | None
    last_login: datetime | None

    def as_caller(self) -> Caller:
        return Caller(id=self.id, role=self.role)
