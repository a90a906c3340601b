"""Runtime configuration read from the environment.

Every value can be overridden with a ``MEETGREET_``-prefixed environment
variable or an entry in ``django-api/.env``. Django settings are derived
from this object in ``meetgreet/settings.py``.
"""

from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[1]


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MEETGREET_",
        env_file=str(PROJECT_ROOT / ".env"),
        env_ignore_empty=True,
        extra="ignore",
    )

    debug: bool = False
    secret_key: SecretStr = SecretStr("dev-only-django-secret-key-change-in-production")
    allowed_hosts: Annotated[list[str], NoDecode] = ["localhost", "127.0.0.1", "testserver"]

    # Database
    database_engine: str = "django.db.backends.sqlite3"
    database_name: str = str(PROJECT_ROOT / "db.sqlite3")
    database_host: str = ""
    database_port: str = ""
    database_user: str = ""
    database_password: SecretStr = SecretStr("")

    # Authentication
    jwt_secret: SecretStr = SecretStr("dev-only-jwt-signing-secret-change-in-production")
    jwt_algorithm: str = "HS256"
    jwt_lifetime_days: int = 7

    log_level: str = "INFO"
    event_cache_ttl: int = 300  # seconds

    # Pagination
    page_size: int = 10
    max_page_size: int = 100

    @field_validator("allowed_hosts", mode="before")
    @classmethod
    def split_hosts(cls, v: str | list[str]) -> list[str]:
        if isinstance(v, str):
            return [host.strip() for host in v.split(",") if host.strip()]
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()
