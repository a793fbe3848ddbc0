"""Fail-fast field checks shared by the vault store and permission registry.

Each check raises the failure kind callers use to tell the violated rule
apart, so the order in which a caller runs them fixes which kind wins when
several fields are malformed at once.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .domain.models import PrivilegeLevel
from .errors import (
    CategoryValidationError,
    ContentValidationFailed,
    InvalidInput,
    PermissionLevelMismatch,
    TemporalBoundaryViolation,
)

TITLE_MAX_LENGTH = 50
INTEGRITY_HASH_LENGTH = 64
PAYLOAD_MAX_LENGTH = 200
CATEGORY_MAX_LENGTH = 20
TAG_MAX_LENGTH = 30
TAGS_MAX_COUNT = 5


def _within(value: Any, low: int, high: int) -> bool:
    return isinstance(value, str) and low <= len(value) <= high


def validate_title(title: Any) -> str:
    if not _within(title, 1, TITLE_MAX_LENGTH):
        raise InvalidInput(f"title must be 1..{TITLE_MAX_LENGTH} characters.", field="title")
    return title


def validate_integrity_hash(integrity_hash: Any) -> str:
    if not _within(integrity_hash, INTEGRITY_HASH_LENGTH, INTEGRITY_HASH_LENGTH):
        raise InvalidInput(
            f"integrity_hash must be exactly {INTEGRITY_HASH_LENGTH} characters.",
            field="integrity_hash",
        )
    return integrity_hash


def validate_payload(payload: Any) -> str:
    if not _within(payload, 1, PAYLOAD_MAX_LENGTH):
        raise ContentValidationFailed(f"payload must be 1..{PAYLOAD_MAX_LENGTH} characters.", field="payload")
    return payload


def validate_category(category: Any) -> str:
    if not _within(category, 1, CATEGORY_MAX_LENGTH):
        raise CategoryValidationError(f"category must be 1..{CATEGORY_MAX_LENGTH} characters.", field="category")
    return category


def validate_tags(tags: Any) -> list[str]:
    # A bare string is a sequence too; reject it rather than splitting into characters.
    if isinstance(tags, (str, bytes)) or not isinstance(tags, Sequence):
        raise ContentValidationFailed("tags must be a list of strings.", field="tags")
    if not 1 <= len(tags) <= TAGS_MAX_COUNT:
        raise ContentValidationFailed(f"tags must hold 1..{TAGS_MAX_COUNT} entries.", field="tags")
    for tag in tags:
        if not _within(tag, 1, TAG_MAX_LENGTH):
            raise ContentValidationFailed(f"each tag must be 1..{TAG_MAX_LENGTH} characters.", field="tags")
    return list(tags)


def validate_record_fields(
    *,
    title: Any,
    integrity_hash: Any,
    payload: Any,
    tags: Any,
    category: Any = None,
    check_category: bool = False,
) -> None:
    """Run the record checks in declaration order, stopping at the first failure."""

    validate_title(title)
    validate_integrity_hash(integrity_hash)
    validate_payload(payload)
    if check_category:
        validate_category(category)
    validate_tags(tags)


def validate_grantee(grantee: Any, *, caller: str) -> str:
    if not isinstance(grantee, str) or not grantee.strip():
        raise InvalidInput("grantee must be a non-empty principal.", field="grantee")
    if grantee == caller:
        raise InvalidInput("Cannot grant access to yourself.", field="grantee")
    return grantee


def parse_privilege_level(level: Any) -> PrivilegeLevel:
    if isinstance(level, PrivilegeLevel):
        return level
    if isinstance(level, str):
        try:
            return PrivilegeLevel(level.strip().lower())
        except ValueError:
            pass
    raise PermissionLevelMismatch(
        "level must be one of: " + ", ".join(item.value for item in PrivilegeLevel),
        field="level",
    )


def validate_duration(duration: Any, *, max_duration: int) -> int:
    if isinstance(duration, bool) or not isinstance(duration, int):
        raise TemporalBoundaryViolation("duration must be an integer.", field="duration")
    if not 0 < duration <= max_duration:
        raise TemporalBoundaryViolation(f"duration must be in (0, {max_duration}].", field="duration")
    return duration


__all__ = [
    "CATEGORY_MAX_LENGTH",
    "INTEGRITY_HASH_LENGTH",
    "PAYLOAD_MAX_LENGTH",
    "TAGS_MAX_COUNT",
    "TAG_MAX_LENGTH",
    "TITLE_MAX_LENGTH",
    "parse_privilege_level",
    "validate_category",
    "validate_duration",
    "validate_grantee",
    "validate_integrity_hash",
    "validate_payload",
    "validate_record_fields",
    "validate_tags",
    "validate_title",
]
