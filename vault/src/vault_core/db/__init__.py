"""Vault database helpers."""

from .base import Base
from .session import (
    DATABASE_URL,
    SessionLocal,
    create_schema,
    drop_schema,
    engine,
    run_in_session,
)

__all__ = [
    "Base",
    "DATABASE_URL",
    "SessionLocal",
    "create_schema",
    "drop_schema",
    "engine",
    "run_in_session",
]
