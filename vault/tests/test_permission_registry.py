import pytest

from conftest import record_fields
from vault_core.config import get_settings
from vault_core.domain.models import PrivilegeLevel, StorageTier
from vault_core.errors import (
    AccessForbidden,
    InvalidInput,
    PermissionLevelMismatch,
    RecordNotFound,
    TemporalBoundaryViolation,
)
from vault_core.service.permission_registry import PermissionRegistry
from vault_core.service.vault_store import VaultStore


@pytest.fixture
def store():
    return VaultStore(StorageTier.PRIMARY)


@pytest.fixture
def registry():
    return PermissionRegistry()


@pytest.fixture
def entry_id(store, ctx):
    return store.create(ctx("alice", now=1), **record_fields())


def _grant(registry, ctx, entry_id, **overrides):
    base = dict(grantee="bob", level="viewer", duration=100, modification_rights=False)
    base.update(overrides)
    caller = base.pop("caller", "alice")
    now = base.pop("now", 10)
    return registry.grant(ctx(caller, now=now), entry_id, **base)


def test_grant_then_expire_check(registry, ctx, entry_id):
    assert _grant(registry, ctx, entry_id, now=10, duration=100) is True

    grant = registry.get(entry_id, "bob")
    assert grant.privilege_level is PrivilegeLevel.VIEWER
    assert grant.granted_at == 10
    assert grant.expires_at == 110
    assert grant.granted_by == "alice"
    assert grant.is_active(109)
    assert not grant.is_active(110)
    assert not grant.is_active(200)

    # Expiry never changes stored state.
    assert registry.get(entry_id, "bob") == grant


def test_grant_on_missing_record(registry, ctx):
    with pytest.raises(RecordNotFound):
        _grant(registry, ctx, 99)


def test_grant_requires_ownership(registry, ctx, entry_id):
    with pytest.raises(AccessForbidden):
        _grant(registry, ctx, entry_id, caller="mallory", grantee="eve")
    assert registry.get(entry_id, "eve") is None


def test_self_delegation_is_rejected(registry, ctx, entry_id):
    with pytest.raises(InvalidInput):
        _grant(registry, ctx, entry_id, grantee="alice")
    assert registry.get(entry_id, "alice") is None


@pytest.mark.parametrize("grantee", ["", "   ", None])
def test_blank_grantee_is_rejected(registry, ctx, entry_id, grantee):
    with pytest.raises(InvalidInput):
        _grant(registry, ctx, entry_id, grantee=grantee)


@pytest.mark.parametrize("level", ["owner", "", None, 2])
def test_unknown_level_is_rejected(registry, ctx, entry_id, level):
    with pytest.raises(PermissionLevelMismatch):
        _grant(registry, ctx, entry_id, level=level)


@pytest.mark.parametrize("level", ["viewer", "editor", "administrator", PrivilegeLevel.EDITOR, "Editor"])
def test_known_levels_are_accepted(registry, ctx, entry_id, level):
    assert _grant(registry, ctx, entry_id, level=level)


@pytest.mark.parametrize(
    "duration, accepted",
    [
        (0, False),
        (-5, False),
        (1, True),
        (52560, True),
        (52561, False),
    ],
)
def test_duration_bounds(registry, ctx, entry_id, duration, accepted):
    if accepted:
        assert _grant(registry, ctx, entry_id, duration=duration)
        assert registry.get(entry_id, "bob").expires_at == 10 + duration
    else:
        with pytest.raises(TemporalBoundaryViolation):
            _grant(registry, ctx, entry_id, duration=duration)
        assert registry.get(entry_id, "bob") is None


@pytest.mark.parametrize("duration", ["100", 1.5, True])
def test_non_integer_duration_is_rejected(registry, ctx, entry_id, duration):
    with pytest.raises(TemporalBoundaryViolation):
        _grant(registry, ctx, entry_id, duration=duration)


def test_regrant_replaces_previous_grant(registry, ctx, entry_id):
    _grant(registry, ctx, entry_id, level="editor", duration=500, modification_rights=True, now=10)
    _grant(registry, ctx, entry_id, level="viewer", duration=20, modification_rights=False, now=50)

    grant = registry.get(entry_id, "bob")
    assert grant.privilege_level is PrivilegeLevel.VIEWER
    assert grant.granted_at == 50
    assert grant.expires_at == 70
    assert grant.modification_rights is False


def test_grants_are_per_grantee(registry, ctx, entry_id):
    _grant(registry, ctx, entry_id, grantee="bob", level="viewer")
    _grant(registry, ctx, entry_id, grantee="carol", level="administrator", modification_rights=True)

    assert registry.get(entry_id, "bob").privilege_level is PrivilegeLevel.VIEWER
    assert registry.get(entry_id, "carol").privilege_level is PrivilegeLevel.ADMINISTRATOR
    assert registry.get(entry_id, "dave") is None


def test_grant_does_not_touch_the_record(registry, store, ctx, entry_id):
    before = store.get(entry_id).to_dict()
    _grant(registry, ctx, entry_id, level="administrator", modification_rights=True)
    assert store.get(entry_id).to_dict() == before


@pytest.mark.parametrize(
    "overrides, expected",
    [
        ({"caller": "mallory", "grantee": "mallory"}, AccessForbidden),
        ({"grantee": "alice", "level": "owner"}, InvalidInput),
        ({"level": "owner", "duration": 0}, PermissionLevelMismatch),
    ],
)
def test_grant_checks_run_in_documented_order(registry, ctx, entry_id, overrides, expected):
    with pytest.raises(expected):
        _grant(registry, ctx, entry_id, **overrides)


def test_grant_ignores_enhanced_records(registry, ctx):
    enhanced = VaultStore(StorageTier.ENHANCED)
    enhanced_id = enhanced.create(ctx("alice"), **record_fields())

    with pytest.raises(RecordNotFound):
        _grant(registry, ctx, enhanced_id)


def test_max_duration_follows_settings(ctx, entry_id, monkeypatch):
    monkeypatch.setenv("RECORD_VAULT_MAX_GRANT_DURATION", "10")
    get_settings.cache_clear()
    registry = PermissionRegistry()

    assert _grant(registry, ctx, entry_id, duration=10)
    with pytest.raises(TemporalBoundaryViolation):
        _grant(registry, ctx, entry_id, duration=11)


def test_explicit_max_duration_overrides_settings(ctx, entry_id):
    registry = PermissionRegistry(max_duration=5)
    with pytest.raises(TemporalBoundaryViolation):
        _grant(registry, ctx, entry_id, duration=6)
