"""Account service - registration, login and profile lookup."""

import logging
from collections.abc import Callable
from datetime import datetime

from django.utils import timezone

from accounts.domain import SELF_REGISTERED_ROLES, Account, Role, UserId
from accounts.services.tokens import TokenCodec
from accounts.stores.interfaces import UserStore
from meetgreet.domain.errors import (
    ConflictError,
    InvalidArgumentError,
    NotFoundError,
    UnauthenticatedError,
)

logger = logging.getLogger(__name__)


class AuthService:
    """Service for account registration and credential checks."""

    def __init__(
        self,
        store: UserStore,
        tokens: TokenCodec,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._store = store
        self._tokens = tokens
        self._clock = clock

    def register(
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        role: str = Role.FAN.value,
    ) -> tuple[Account, str]:
        """Create an account and return it with a fresh token.

        Raises:
            InvalidArgumentError: If the role is unknown or cannot be self-registered.
            ConflictError: If the email is already registered.
        """
        try:
            parsed_role = Role(role)
        except ValueError:
            raise InvalidArgumentError("Invalid role value") from None
        if parsed_role not in SELF_REGISTERED_ROLES:
            raise InvalidArgumentError(f"Role {parsed_role.value} cannot be self-registered")
        if self._store.email_taken(email):
            raise ConflictError("User with this email already exists")

        account = self._store.create_user(email, password, first_name, last_name, parsed_role)
        logger.info("User registered: %s (%s)", account.id, account.role.value)
        return account, self._tokens.issue(account.id)

    def login(self, email: str, password: str) -> tuple[Account, str]:
        """Check credentials, stamp the login time and return a token.

        Raises:
            UnauthenticatedError: If the credentials do not match an active account.
        """
        account = self._store.authenticate(email, password)
        if account is None:
            raise UnauthenticatedError("Invalid credentials")
        self._store.record_login(account.id, self._clock())
        return account, self._tokens.issue(account.id)

    def me(self, user_id: UserId) -> Account:
        account = self._store.get_user(user_id)
        if account is None:
            raise NotFoundError("User")
        return account
