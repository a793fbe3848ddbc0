"""Database model package."""

from .audit_event import AuditEventRecord
from .grant import PermissionGrantRecord
from .record import EnhancedVaultRecord, VaultRecord
from .sequence import RECORD_SEQUENCE, SequenceRecord

__all__ = [
    "AuditEventRecord",
    "EnhancedVaultRecord",
    "PermissionGrantRecord",
    "RECORD_SEQUENCE",
    "SequenceRecord",
    "VaultRecord",
]
