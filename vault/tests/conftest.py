import os

os.environ["RECORD_VAULT_DATABASE_URL"] = "sqlite+pysqlite:///:memory:"

import pytest

from vault_core.config import get_settings
from vault_core.context import Context
from vault_core.db.session import create_schema, drop_schema
from vault_core.service.facade import get_vault_facade

HASH_A = "a" * 64
HASH_B = "b" * 64


@pytest.fixture(autouse=True)
def _fresh_schema():
    get_settings.cache_clear()
    get_vault_facade.cache_clear()
    drop_schema()
    create_schema()
    yield
    get_settings.cache_clear()
    get_vault_facade.cache_clear()


@pytest.fixture
def ctx():
    def _make(caller: str = "alice", now: int = 1) -> Context:
        return Context(caller=caller, now=now)

    return _make


def record_fields(**overrides):
    base = dict(
        title="Deed",
        integrity_hash=HASH_A,
        payload="lot 7",
        category="legal",
        tags=["real-estate"],
    )
    base.update(overrides)
    return base


def content_fields(**overrides):
    fields = record_fields(**overrides)
    fields.pop("category")
    return fields
