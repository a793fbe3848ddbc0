"""Service layer for creating and updating vault records."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from vault_core.context import Context
from vault_core.db.session import run_in_session
from vault_core.domain.models import Record, StorageTier, ValidationPolicy
from vault_core.errors import AccessForbidden, DuplicateEntry, InvalidInput, RecordNotFound
from vault_core.repo.audit import AuditRepository
from vault_core.repo.records import RecordRepository
from vault_core.repo.sequence import SequenceRepository
from vault_core.validation import validate_record_fields

LOGGER = logging.getLogger(__name__)


class VaultStore:
    """Records of one storage tier plus the shared identifier sequence.

    Every public method runs as a single transaction: either all of its
    writes commit or none do.
    """

    def __init__(
        self,
        tier: StorageTier = StorageTier.PRIMARY,
        *,
        records: Optional[RecordRepository] = None,
        sequence: Optional[SequenceRepository] = None,
        audit: Optional[AuditRepository] = None,
    ) -> None:
        self.tier = StorageTier(tier)
        self._records = records or RecordRepository(self.tier)
        self._sequence = sequence or SequenceRepository()
        self._audit = audit or AuditRepository()

    def create(
        self,
        ctx: Context,
        *,
        title: str,
        integrity_hash: str,
        payload: str,
        category: str,
        tags: Iterable[str],
    ) -> int:
        tags = _as_tag_list(tags)
        validate_record_fields(
            title=title,
            integrity_hash=integrity_hash,
            payload=payload,
            category=category,
            tags=tags,
            check_category=True,
        )

        def _create(session) -> int:
            current = self._sequence.current(session=session)
            next_id = current + 1
            if self._records.exists(next_id, session=session):
                raise DuplicateEntry(f"Record '{next_id}' already exists in {self.tier.value} storage.")
            if not self._sequence.advance(expected=current, session=session):
                raise DuplicateEntry(f"Record id {next_id} was claimed by a concurrent create.")
            self._records.insert(
                entry_id=next_id,
                owner=ctx.caller,
                title=title,
                integrity_hash=integrity_hash,
                payload=payload,
                category=category,
                tags=tags,
                now=ctx.now,
                session=session,
            )
            self._audit.record(
                action="record.create",
                actor=ctx.caller,
                target_id=next_id,
                logical_time=ctx.now,
                tier=self.tier.value,
                details={"category": category, "tags": tags},
                session=session,
            )
            return next_id

        entry_id = run_in_session(_create)
        LOGGER.info("Created %s record %s owned by %s", self.tier.value, entry_id, ctx.caller)
        return entry_id

    def update(
        self,
        ctx: Context,
        entry_id: int,
        *,
        title: str,
        integrity_hash: str,
        payload: str,
        tags: Iterable[str],
        policy: ValidationPolicy = ValidationPolicy.STRICT,
    ) -> bool:
        policy = ValidationPolicy(policy)
        tags = _as_tag_list(tags)

        def _update(session) -> bool:
            record = self._records.get(entry_id, session=session)
            if record is None:
                raise RecordNotFound(entry_id)
            if record.owner != ctx.caller:
                raise AccessForbidden(
                    f"Only the owner may update record '{entry_id}'.",
                    field="caller",
                )
            if policy is ValidationPolicy.STRICT:
                validate_record_fields(
                    title=title,
                    integrity_hash=integrity_hash,
                    payload=payload,
                    tags=tags,
                )
            else:
                _require_text_fields(title=title, integrity_hash=integrity_hash, payload=payload, tags=tags)
            self._records.replace_content(
                record,
                title=title,
                integrity_hash=integrity_hash,
                payload=payload,
                tags=tags,
                now=ctx.now,
                session=session,
            )
            self._audit.record(
                action="record.update",
                actor=ctx.caller,
                target_id=entry_id,
                logical_time=ctx.now,
                tier=self.tier.value,
                details={"policy": policy.value},
                session=session,
            )
            return True

        result = run_in_session(_update)
        LOGGER.info(
            "Updated %s record %s (%s) at t=%s",
            self.tier.value,
            entry_id,
            policy.value,
            ctx.now,
        )
        return result

    def update_lenient(
        self,
        ctx: Context,
        entry_id: int,
        *,
        title: str,
        integrity_hash: str,
        payload: str,
        tags: Iterable[str],
    ) -> bool:
        """Ownership-checked update that skips field-format validation.

        Length and count rules are not applied, but values must still be text
        and ``tags`` a sequence of text; anything else raises ``InvalidInput``.
        """

        return self.update(
            ctx,
            entry_id,
            title=title,
            integrity_hash=integrity_hash,
            payload=payload,
            tags=tags,
            policy=ValidationPolicy.LENIENT,
        )

    def get(self, entry_id: int) -> Optional[Record]:
        def _get(session) -> Optional[Record]:
            record = self._records.get(entry_id, session=session)
            if record is None:
                return None
            return _record_to_domain(record, self.tier)

        return run_in_session(_get)

    def counter(self) -> int:
        return run_in_session(lambda session: self._sequence.current(session=session))


def _as_tag_list(tags) -> list:
    # Strings and non-iterables are left for the tag check to reject.
    if tags is None or isinstance(tags, (str, bytes)):
        return tags
    try:
        return list(tags)
    except TypeError:
        return tags


def _require_text_fields(*, title, integrity_hash, payload, tags) -> None:
    # Lenient updates skip length rules but the columns still only hold text.
    for name, value in (("title", title), ("integrity_hash", integrity_hash), ("payload", payload)):
        if not isinstance(value, str):
            raise InvalidInput(f"{name} must be a string.", field=name)
    if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
        raise InvalidInput("tags must be a list of strings.", field="tags")


def _record_to_domain(record, tier: StorageTier) -> Record:
    return Record(
        id=record.id,
        owner=record.owner,
        title=record.title,
        integrity_hash=record.integrity_hash,
        payload=record.payload,
        category=record.category,
        tags=list(record.tags or []),
        created_at=record.created_at,
        updated_at=record.updated_at,
        tier=tier,
    )


__all__ = ["VaultStore"]
