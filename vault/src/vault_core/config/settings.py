"""Vault configuration using pydantic-settings."""

from __future__ import annotations

from functools import lru_cache
from typing import ClassVar, Literal

from pydantic import Field, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

# Roughly one year of ten-minute blocks.
DEFAULT_MAX_GRANT_DURATION = 52560


class VaultSettings(BaseSettings):
    """Validated settings for the record vault."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="RECORD_VAULT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    database_url: str | None = Field(
        default=None,
        description="SQLAlchemy URL for the vault database. Defaults to a SQLite file under var/data.",
    )
    echo_sql: bool = Field(default=False, description="Echo SQL statements through the engine logger.")
    max_grant_duration: PositiveInt = Field(
        default=DEFAULT_MAX_GRANT_DURATION,
        description="Inclusive upper bound on a grant duration, in logical time units.",
    )
    log_level: Literal["critical", "error", "warning", "info", "debug"] = Field(
        default="info",
        description="Log level for the vault-admin command line.",
    )


@lru_cache()
def get_settings() -> VaultSettings:
    """Return memoized vault settings."""

    return VaultSettings()
