"""Repositories over the vault tables."""

from .audit import AuditRepository
from .grants import GrantRepository
from .records import RecordRepository
from .sequence import SequenceRepository

__all__ = ["AuditRepository", "GrantRepository", "RecordRepository", "SequenceRepository"]
