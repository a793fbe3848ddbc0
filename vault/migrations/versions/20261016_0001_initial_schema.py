"""Initial vault schema."""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "20261016_0001"
down_revision = None
branch_labels = None
depends_on = None


def _record_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("owner", sa.String(length=128), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("integrity_hash", sa.Text(), nullable=False),
        sa.Column("payload", sa.Text(), nullable=False),
        sa.Column("category", sa.String(length=20), nullable=False),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.BigInteger(), nullable=False),
        sa.Column("updated_at", sa.BigInteger(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table("vault_records", *_record_columns())
    op.create_index("ix_vault_records_owner", "vault_records", ["owner"], unique=False)

    op.create_table("vault_enhanced_records", *_record_columns())
    op.create_index(
        "ix_vault_enhanced_records_owner",
        "vault_enhanced_records",
        ["owner"],
        unique=False,
    )

    op.create_table(
        "vault_sequences",
        sa.Column("name", sa.String(length=64), primary_key=True),
        sa.Column("value", sa.BigInteger(), nullable=False),
    )

    op.create_table(
        "vault_permission_grants",
        sa.Column("entry_id", sa.Integer(), nullable=False),
        sa.Column("grantee", sa.String(length=128), nullable=False),
        sa.Column("privilege_level", sa.String(length=32), nullable=False),
        sa.Column("granted_at", sa.BigInteger(), nullable=False),
        sa.Column("expires_at", sa.BigInteger(), nullable=False),
        sa.Column("modification_rights", sa.Boolean(), nullable=False),
        sa.Column("granted_by", sa.String(length=128), nullable=True),
        sa.ForeignKeyConstraint(["entry_id"], ["vault_records.id"]),
        sa.PrimaryKeyConstraint("entry_id", "grantee"),
    )
    op.create_index(
        "ix_vault_permission_grants_grantee",
        "vault_permission_grants",
        ["grantee"],
        unique=False,
    )

    op.create_table(
        "vault_audit_events",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("action", sa.String(length=64), nullable=False),
        sa.Column("actor", sa.String(length=128), nullable=False),
        sa.Column("tier", sa.String(length=16), nullable=True),
        sa.Column("target_id", sa.String(length=128), nullable=False),
        sa.Column("logical_time", sa.BigInteger(), nullable=False),
        sa.Column("details", sa.JSON(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_vault_audit_events_action", "vault_audit_events", ["action"], unique=False)
    op.create_index("ix_vault_audit_events_actor", "vault_audit_events", ["actor"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_vault_audit_events_actor", table_name="vault_audit_events")
    op.drop_index("ix_vault_audit_events_action", table_name="vault_audit_events")
    op.drop_table("vault_audit_events")
    op.drop_index("ix_vault_permission_grants_grantee", table_name="vault_permission_grants")
    op.drop_table("vault_permission_grants")
    op.drop_table("vault_sequences")
    op.drop_index("ix_vault_enhanced_records_owner", table_name="vault_enhanced_records")
    op.drop_table("vault_enhanced_records")
    op.drop_index("ix_vault_records_owner", table_name="vault_records")
    op.drop_table("vault_records")
