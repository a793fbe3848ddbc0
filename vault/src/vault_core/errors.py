"""Failure kinds reported by vault operations."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Optional


class ErrorCode(IntEnum):
    UNAUTHORIZED = 100
    INVALID_INPUT = 101
    NOT_FOUND = 102
    ALREADY_EXISTS = 103
    CONTENT_VALIDATION_FAILED = 104
    INSUFFICIENT_PRIVILEGE = 105
    EXPIRED = 106
    PERMISSION_LEVEL_MISMATCH = 107
    CATEGORY_VALIDATION_FAILED = 108


class VaultError(Exception):
    """Base class for every failure a vault operation can report."""

    code: ErrorCode = ErrorCode.INVALID_INPUT
    error: str = "vault_error"

    def __init__(self, message: str, *, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "error": self.error,
            "code": int(self.code),
            "message": self.message,
        }
        if self.field is not None:
            payload["field"] = self.field
        return payload


class AccessForbidden(VaultError):
    code = ErrorCode.UNAUTHORIZED
    error = "forbidden"


class InvalidInput(VaultError):
    code = ErrorCode.INVALID_INPUT
    error = "invalid_input"


class RecordNotFound(VaultError):
    code = ErrorCode.NOT_FOUND
    error = "not_found"

    def __init__(self, entry_id: Any) -> None:
        super().__init__(f"Record '{entry_id}' not found.")
        self.entry_id = entry_id


class DuplicateEntry(VaultError):
    code = ErrorCode.ALREADY_EXISTS
    error = "conflict"


class ContentValidationFailed(VaultError):
    code = ErrorCode.CONTENT_VALIDATION_FAILED
    error = "content_validation_failed"


class InsufficientPrivilege(VaultError):
    code = ErrorCode.INSUFFICIENT_PRIVILEGE
    error = "insufficient_privilege"


class TemporalBoundaryViolation(VaultError):
    code = ErrorCode.EXPIRED
    error = "temporal_boundary_violation"


class GrantExpired(VaultError):
    code = ErrorCode.EXPIRED
    error = "grant_expired"


class PermissionLevelMismatch(VaultError):
    code = ErrorCode.PERMISSION_LEVEL_MISMATCH
    error = "permission_level_mismatch"


class CategoryValidationError(VaultError):
    code = ErrorCode.CATEGORY_VALIDATION_FAILED
    error = "category_validation_failed"


__all__ = [
    "AccessForbidden",
    "CategoryValidationError",
    "ContentValidationFailed",
    "DuplicateEntry",
    "ErrorCode",
    "GrantExpired",
    "InsufficientPrivilege",
    "InvalidInput",
    "PermissionLevelMismatch",
    "RecordNotFound",
    "TemporalBoundaryViolation",
    "VaultError",
]
