"""Repository for vault records across storage tiers."""

from __future__ import annotations

from typing import Iterable, Optional, Type, Union

from sqlalchemy.orm import Session

from vault_core.db.models import EnhancedVaultRecord, VaultRecord
from vault_core.domain.models import StorageTier

RecordRow = Union[VaultRecord, EnhancedVaultRecord]

_TIER_MODELS: dict[StorageTier, Type[RecordRow]] = {
    StorageTier.PRIMARY: VaultRecord,
    StorageTier.ENHANCED: EnhancedVaultRecord,
}


class RecordRepository:
    def __init__(self, tier: StorageTier = StorageTier.PRIMARY) -> None:
        self.tier = StorageTier(tier)
        self._model = _TIER_MODELS[self.tier]

    def get(self, entry_id: int, *, session: Session) -> Optional[RecordRow]:
        return session.get(self._model, entry_id)

    def exists(self, entry_id: int, *, session: Session) -> bool:
        return self.get(entry_id, session=session) is not None

    def insert(
        self,
        *,
        entry_id: int,
        owner: str,
        title: str,
        integrity_hash: str,
        payload: str,
        category: str,
        tags: Iterable[str],
        now: int,
        session: Session,
    ) -> RecordRow:
        record = self._model(
            id=entry_id,
            owner=owner,
            title=title,
            integrity_hash=integrity_hash,
            payload=payload,
            category=category,
            tags=list(tags),
            created_at=now,
            updated_at=now,
        )
        session.add(record)
        session.flush()
        return record

    def replace_content(
        self,
        record: RecordRow,
        *,
        title: str,
        integrity_hash: str,
        payload: str,
        tags: Iterable[str],
        now: int,
        session: Session,
    ) -> RecordRow:
        record.title = title
        record.integrity_hash = integrity_hash
        record.payload = payload
        record.tags = list(tags)
        record.updated_at = now
        session.add(record)
        session.flush()
        return record
