"""Django ORM implementation of the UserStore."""

from datetime import datetime

from django.db import IntegrityError, transaction

from accounts.domain import Account, Role, UserId
from accounts.models import User
from accounts.stores.interfaces import UserStore
from meetgreet.domain.errors import ConflictError
from meetgreet.storage import storage_errors


def to_domain(row: User) -> Account:
    return Account(
        id=UserId(row.id),
        email=row.email,
        first_name=row.first_name,
        last_name=row.last_name,
        role=Role(row.role),
        is_verified=row.is_verified,
        profile_image=row.profile_image,
        last_login=row.last_login,
    )


class DjangoUserStore(UserStore):
    """User store backed by the configured database."""

    @storage_errors("get_user")
    def get_user(self, user_id: UserId) -> Account | None:
        row = User.objects.filter(pk=user_id.value, is_active=True).first()
        return to_domain(row) if row else None

    @storage_errors("email_taken")
    def email_taken(self, email: str) -> bool:
        return User.objects.filter(email__iexact=email).exists()

    @storage_errors("create_user")
    def create_user(
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        role: Role,
    ) -> Account:
        try:
            with transaction.atomic():
                row = User.objects.create_user(
                    email=email,
                    password=password,
                    first_name=first_name,
                    last_name=last_name,
                    role=role.value,
                )
        except IntegrityError as exc:
            raise ConflictError("User with this email already exists") from exc
        return to_domain(row)

    @storage_errors("authenticate")
    def authenticate(self, email: str, password: str) -> Account | None:
        row = User.objects.filter(email__iexact=email, is_active=True).first()
        if row is None or not row.check_password(password):
            return None
        return to_domain(row)

    @storage_errors("record_login")
    def record_login(self, user_id: UserId, at: datetime) -> None:
        User.objects.filter(pk=user_id.value).update(last_login=at)
