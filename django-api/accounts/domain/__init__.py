from accounts.domain.models import Account, Caller
from accounts.domain.policy import Action, Ownership, can_perform, require
from accounts.domain.value_objects import SELF_REGISTERED_ROLES, Role, UserId

__all__ = [
    "Account",
    "Caller",
    "Role",
    "SELF_REGISTERED_ROLES",
    "UserId",
    "Action",
    "Ownership",
    "can_perform",
    "require",
]
