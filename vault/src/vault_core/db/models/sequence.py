"""ORM model for the record identifier sequence."""

from __future__ import annotations

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from ..base import Base

RECORD_SEQUENCE = "record_id"


class SequenceRecord(Base):
    __tablename__ = "vault_sequences"

    name: Mapped[str] = mapped_column(String(64), primary_key=True)
    value: Mapped[int] = mapped_column(BigInteger, default=0, nullable=False)
