from accounts.services.auth_service import AuthService
from accounts.services.tokens import TokenCodec

__all__ = ["AuthService", "TokenCodec"]
