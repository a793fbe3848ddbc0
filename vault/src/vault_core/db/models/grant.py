"""ORM model for permission grants."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import BigInteger, Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ..base import Base


class PermissionGrantRecord(Base):
    __tablename__ = "vault_permission_grants"

    entry_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("vault_records.id"),
        primary_key=True,
    )
    grantee: Mapped[str] = mapped_column(String(128), primary_key=True, index=True)
    privilege_level: Mapped[str] = mapped_column(String(32), nullable=False)
    granted_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
    expires_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
    modification_rights: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    granted_by: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
