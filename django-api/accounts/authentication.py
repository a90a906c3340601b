"""DRF authentication backed by bearer tokens."""

from rest_framework import exceptions
from rest_framework.authentication import BaseAuthentication, get_authorization_header
from rest_framework.request import Request

from accounts.domain import Caller, Role, UserId
from accounts.models import User
from accounts.services.tokens import TokenCodec
from meetgreet.domain.errors import UnauthenticatedError


class JWTAuthentication(BaseAuthentication):
    """Authenticate ``Authorization: Bearer <token>`` headers."""

    keyword = "Bearer"

    def authenticate(self, request: Request):
        parts = get_authorization_header(request).split()
        if not parts or parts[0].lower() != self.keyword.lower().encode():
            return None
        if len(parts) != 2:
            raise exceptions.AuthenticationFailed("Invalid token header")

        try:
            token = parts[1].decode()
            user_id = TokenCodec.from_settings().read(token)
        except UnicodeError:
            raise exceptions.AuthenticationFailed("Invalid token header") from None
        except UnauthenticatedError as exc:
            raise exceptions.AuthenticationFailed(exc.message) from exc

        user = User.objects.filter(pk=user_id.value, is_active=True).first()
        if user is None:
            raise exceptions.AuthenticationFailed("User not found")
        return user, token

    def authenticate_header(self, request: Request) -> str:
        return self.keyword


def caller_from_request(request: Request) -> Caller:
    """Build the service-level principal from an authenticated request."""
    return Caller(id=UserId(request.user.id), role=Role(request.user.role))
