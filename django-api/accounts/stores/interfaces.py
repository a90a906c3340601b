"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from accounts.domain import Account, Role, UserId


class UserStore(ABC):
    """Interface for account persistence operations."""

    @abstractmethod
    def get_user(self, user_id: UserId) -> Account | None:
        """Return an active account by ID, or None if not found."""
        ...

    @abstractmethod
    def email_taken(self, email: str) -> bool:
        """Check if an account with this email exists."""
        ...

    @abstractmethod
    def create_user(
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        role: Role,
    ) -> Account:
        """Persist a new account with a hashed password.

        Raises:
            ConflictError: If the email is already registered.
        """
        ...

    @abstractmethod
    def authenticate(self, email: str, password: str) -> Account | None:
        """Return the account if the credentials match, else None."""
        ...

    @abstractmethod
    def record_login(self, user_id: UserId, at: datetime) -> None:
        """Stamp the account's last login time."""
        ...
