"""Repository for the shared record identifier counter."""

from __future__ import annotations

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from vault_core.db.models import RECORD_SEQUENCE, SequenceRecord


class SequenceRepository:
    def __init__(self, name: str = RECORD_SEQUENCE) -> None:
        self.name = name

    def current(self, *, session: Session) -> int:
        row = session.get(SequenceRecord, self.name)
        return row.value if row is not None else 0

    def advance(self, *, expected: int, session: Session) -> bool:
        """Move the counter from ``expected`` to ``expected + 1``.

        Returns False when another writer advanced it first.
        """

        if session.get(SequenceRecord, self.name) is None:
            if expected != 0:
                return False
            session.add(SequenceRecord(name=self.name, value=1))
            try:
                session.flush()
            except IntegrityError:
                # Another writer inserted the first row after our read.
                return False
            return True
        result = session.execute(
            update(SequenceRecord)
            .where(SequenceRecord.name == self.name, SequenceRecord.value == expected)
            .values(value=expected + 1)
        )
        return result.rowcount == 1
