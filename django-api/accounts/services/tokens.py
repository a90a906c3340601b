"""Bearer token issue and verification (PyJWT)."""

import logging
from datetime import datetime, timedelta, timezone

import jwt

from accounts.domain import UserId
from meetgreet.domain.errors import UnauthenticatedError

logger = logging.getLogger(__name__)


class TokenCodec:
    """Signs and reads access tokens whose subject is a user id."""

    def __init__(self, secret: str, algorithm: str = "HS256", lifetime: timedelta = timedelta(days=7)) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._lifetime = lifetime

    @classmethod
    def from_settings(cls) -> "TokenCodec":
        from django.conf import settings

        return cls(
            secret=settings.JWT_SECRET,
            algorithm=settings.JWT_ALGORITHM,
            lifetime=timedelta(days=settings.JWT_LIFETIME_DAYS),
        )

    def issue(self, user_id: UserId, now: datetime | None = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._lifetime).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def read(self, token: str) -> UserId:
        """Return the token's subject.

        Raises:
            UnauthenticatedError: If the token is malformed, tampered with or expired.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise UnauthenticatedError("Token expired. Please log in again.") from exc
        except jwt.PyJWTError as exc:
            logger.debug("Rejected token: %s", exc)
            raise UnauthenticatedError("Invalid token. Please log in again.") from exc

        try:
            return UserId.from_string(payload["sub"])
        except (TypeError, ValueError) as exc:
            raise UnauthenticatedError("Invalid token. Please log in again.") from exc
