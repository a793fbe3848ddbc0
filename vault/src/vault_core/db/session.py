"""Database session and engine helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, TypeVar

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import URL, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from vault_core.config import get_settings

from .base import Base
from . import models  # noqa: F401  # ensure models are imported for metadata

PROJECT_ROOT = Path(__file__).resolve().parents[4]
DEFAULT_DB_PATH = PROJECT_ROOT / "var" / "data" / "vault.db"

T = TypeVar("T")


def _resolve_database_url() -> str:
    raw_url = get_settings().database_url
    if not raw_url:
        DEFAULT_DB_PATH.parent.mkdir(parents=True, exist_ok=True)
        return f"sqlite:///{DEFAULT_DB_PATH.as_posix()}"

    url: URL = make_url(raw_url)
    if url.drivername.startswith("sqlite") and url.database and url.database != ":memory:":
        db_path = Path(url.database)
        if not db_path.is_absolute():
            db_path = PROJECT_ROOT / db_path
        db_path.parent.mkdir(parents=True, exist_ok=True)
        url = url.set(database=str(db_path))
    return url.render_as_string(hide_password=False)


def _is_memory_sqlite(database_url: str) -> bool:
    url = make_url(database_url)
    return url.drivername.startswith("sqlite") and url.database in (None, "", ":memory:")


def build_engine(database_url: str, *, echo: bool = False) -> Engine:
    """Create an engine; in-memory SQLite shares one connection across sessions."""

    if _is_memory_sqlite(database_url):
        return create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    connect_args: dict[str, object] = (
        {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    )
    return create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


DATABASE_URL = _resolve_database_url()

engine: Engine = build_engine(DATABASE_URL, echo=get_settings().echo_sql)

SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
)


def run_in_session(fn: Callable[[Session], T]) -> T:
    """Run ``fn`` in one transaction: commit on return, roll back on any error."""

    with SessionLocal() as session:
        try:
            result = fn(session)
            session.commit()
        except Exception:
            session.rollback()
            raise
        return result


def create_schema(bind: Engine | None = None) -> None:
    Base.metadata.create_all(bind or engine)


def drop_schema(bind: Engine | None = None) -> None:
    Base.metadata.drop_all(bind or engine)


__all__ = [
    "Base",
    "DATABASE_URL",
    "SessionLocal",
    "build_engine",
    "create_schema",
    "drop_schema",
    "engine",
    "run_in_session",
]
