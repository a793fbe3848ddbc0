"""Domain models for vault records and permission grants."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class StorageTier(str, Enum):
    PRIMARY = "primary"
    ENHANCED = "enhanced"


class ValidationPolicy(str, Enum):
    STRICT = "strict"
    LENIENT = "lenient"


class PrivilegeLevel(str, Enum):
    VIEWER = "viewer"
    EDITOR = "editor"
    ADMINISTRATOR = "administrator"

    @property
    def rank(self) -> int:
        return _LEVEL_RANK[self]

    def satisfies(self, required: "PrivilegeLevel") -> bool:
        return self.rank >= required.rank


_LEVEL_RANK = {
    PrivilegeLevel.VIEWER: 1,
    PrivilegeLevel.EDITOR: 2,
    PrivilegeLevel.ADMINISTRATOR: 3,
}


@dataclass
class Record:
    id: int
    owner: str
    title: str
    integrity_hash: str
    payload: str
    category: str
    tags: List[str]
    created_at: int
    updated_at: int
    tier: StorageTier = StorageTier.PRIMARY

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "owner": self.owner,
            "title": self.title,
            "integrity_hash": self.integrity_hash,
            "payload": self.payload,
            "category": self.category,
            "tags": list(self.tags),
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "tier": self.tier.value,
        }


@dataclass
class PermissionGrant:
    entry_id: int
    grantee: str
    privilege_level: PrivilegeLevel
    granted_at: int
    expires_at: int
    modification_rights: bool
    granted_by: Optional[str] = None

    def is_active(self, now: int) -> bool:
        return now < self.expires_at

    def to_dict(self) -> dict:
        return {
            "entry_id": self.entry_id,
            "grantee": self.grantee,
            "privilege_level": self.privilege_level.value,
            "granted_at": self.granted_at,
            "expires_at": self.expires_at,
            "modification_rights": self.modification_rights,
            "granted_by": self.granted_by,
        }


@dataclass
class AccessDecision:
    entry_id: int
    principal: str
    is_owner: bool
    privilege_level: Optional[PrivilegeLevel] = None
    modification_rights: bool = False
    expires_at: Optional[int] = None
    reasons: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "entry_id": self.entry_id,
            "principal": self.principal,
            "is_owner": self.is_owner,
            "privilege_level": self.privilege_level.value if self.privilege_level else None,
            "modification_rights": self.modification_rights,
            "expires_at": self.expires_at,
            "reasons": list(self.reasons),
        }


__all__ = [
    "AccessDecision",
    "PermissionGrant",
    "PrivilegeLevel",
    "Record",
    "StorageTier",
    "ValidationPolicy",
]
