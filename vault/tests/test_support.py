import pytest

from vault_core.context import Context, LogicalClock
from vault_core.domain.payloads import GrantPayload, RecordPayload
from vault_core.errors import ErrorCode, InvalidInput, RecordNotFound, VaultError
from vault_core import errors
from vault_core.validation import validate_integrity_hash, validate_tags, validate_title


def test_error_codes_are_distinct_per_kind():
    kinds = [
        errors.AccessForbidden,
        errors.InvalidInput,
        errors.RecordNotFound,
        errors.DuplicateEntry,
        errors.ContentValidationFailed,
        errors.InsufficientPrivilege,
        errors.TemporalBoundaryViolation,
        errors.PermissionLevelMismatch,
        errors.CategoryValidationError,
    ]
    assert [kind.code for kind in kinds] == list(ErrorCode)
    assert all(issubclass(kind, VaultError) for kind in kinds)
    assert errors.GrantExpired.code is ErrorCode.EXPIRED


def test_error_payload():
    assert InvalidInput("bad title", field="title").to_dict() == {
        "error": "invalid_input",
        "code": 101,
        "message": "bad title",
        "field": "title",
    }
    missing = RecordNotFound(3)
    assert missing.entry_id == 3
    assert "field" not in missing.to_dict()


@pytest.mark.parametrize("caller, now", [("", 1), ("  ", 1), (None, 1), ("alice", -1), ("alice", True), ("alice", "5")])
def test_context_rejects_malformed_values(caller, now):
    with pytest.raises(InvalidInput):
        Context(caller=caller, now=now)


def test_logical_clock_is_monotonic():
    clock = LogicalClock(start=10)
    assert clock.context_for("alice") == Context(caller="alice", now=10)
    assert clock.advance() == 11
    assert clock.advance(5) == 16
    assert clock.now == 16
    with pytest.raises(ValueError):
        clock.advance(0)


@pytest.mark.parametrize("length, valid", [(0, False), (1, True), (50, True), (51, False)])
def test_title_length_boundaries(length, valid):
    if valid:
        assert validate_title("t" * length)
    else:
        with pytest.raises(InvalidInput):
            validate_title("t" * length)


@pytest.mark.parametrize("length", [0, 63, 65])
def test_integrity_hash_must_be_exactly_64_chars(length):
    with pytest.raises(InvalidInput):
        validate_integrity_hash("a" * length)


@pytest.mark.parametrize("tags", ["solo", None, 7, [1], ["ok", None]])
def test_tags_must_be_a_list_of_strings(tags):
    with pytest.raises(errors.ContentValidationFailed):
        validate_tags(tags)


@pytest.mark.parametrize("tags", [[""], ["ok", ""], ["ok", "x" * 31]])
def test_tag_length_outside_bounds_fails_the_whole_list(tags):
    with pytest.raises(errors.ContentValidationFailed):
        validate_tags(tags)


def test_tag_count_boundaries():
    assert validate_tags(["a"]) == ["a"]
    assert validate_tags(["a"] * 5) == ["a"] * 5
    assert validate_tags(("x" * 30,)) == ["x" * 30]


def test_payload_models_accept_field_names_and_aliases():
    by_alias = RecordPayload.from_dict(
        {"title": "Deed", "integrityHash": "a" * 64, "payload": "lot 7", "category": "legal", "tags": ["x"]}
    )
    by_name = RecordPayload(title="Deed", integrity_hash="a" * 64, payload="lot 7", category="legal", tags=["x"])
    assert by_alias == by_name
    assert RecordPayload.from_json(by_alias.to_json()) == by_alias

    grant = GrantPayload.from_dict({"grantee": "bob", "level": "viewer", "duration": 5, "modificationRights": True})
    assert grant.modification_rights is True
    assert grant.to_dict()["modificationRights"] is True
