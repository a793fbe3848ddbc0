"""Permissioned record vault with time-bounded access grants."""

from .context import Context, LogicalClock
from .domain.models import PermissionGrant, PrivilegeLevel, Record, StorageTier, ValidationPolicy
from .errors import (
    AccessForbidden,
    CategoryValidationError,
    ContentValidationFailed,
    DuplicateEntry,
    ErrorCode,
    GrantExpired,
    InsufficientPrivilege,
    InvalidInput,
    PermissionLevelMismatch,
    RecordNotFound,
    TemporalBoundaryViolation,
    VaultError,
)

__version__ = "0.1.0"

__all__ = [
    "AccessForbidden",
    "CategoryValidationError",
    "ContentValidationFailed",
    "Context",
    "DuplicateEntry",
    "ErrorCode",
    "GrantExpired",
    "InsufficientPrivilege",
    "InvalidInput",
    "LogicalClock",
    "PermissionGrant",
    "PermissionLevelMismatch",
    "PrivilegeLevel",
    "Record",
    "RecordNotFound",
    "StorageTier",
    "TemporalBoundaryViolation",
    "ValidationPolicy",
    "VaultError",
]
