"""Domain types shared by the store, registry and access policy."""

from .models import AccessDecision, PermissionGrant, PrivilegeLevel, Record, StorageTier, ValidationPolicy
from .payloads import GrantPayload, RecordPayload

__all__ = [
    "AccessDecision",
    "GrantPayload",
    "PermissionGrant",
    "PrivilegeLevel",
    "Record",
    "RecordPayload",
    "StorageTier",
    "ValidationPolicy",
]
