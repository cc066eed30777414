"""add users, prompt_versions and prompt_active_refs tables

Revision ID: 20261019_prompt_store
Revises:
Create Date: 2026-10-19

Append-only prompt version log per pack kind (direct, workflow) and the
single active pointer per kind.
"""

from collections.abc import Sequence

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20261019_prompt_store"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=32), nullable=False, server_default="user"),
        sa.Column("status", sa.String(length=32), nullable=False, server_default="active"),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
    )
    op.create_table(
        "prompt_versions",
        sa.Column("seq", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("version_id", sa.String(length=36), nullable=False),
        sa.Column("kind", sa.String(length=32), nullable=False),
        sa.Column("sha256", sa.String(length=64), nullable=False),
        sa.Column(
            "pack",
            sa.JSON().with_variant(postgresql.JSONB(), "postgresql"),
            nullable=False,
        ),
        sa.Column("note", sa.Text(), nullable=True),
        sa.Column("created_at", sa.BigInteger(), nullable=False),
        sa.Column("created_by_id", sa.String(length=255), nullable=False),
        sa.Column("created_by_username", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("seq"),
        sa.UniqueConstraint("version_id"),
    )
    op.create_index(
        "ix_prompt_versions_kind_created",
        "prompt_versions",
        ["kind", "created_at"],
    )
    op.create_index(
        "ix_prompt_versions_kind_sha256",
        "prompt_versions",
        ["kind", "sha256"],
    )
    op.create_table(
        "prompt_active_refs",
        sa.Column("kind", sa.String(length=32), nullable=False),
        sa.Column("version_id", sa.String(length=36), nullable=False),
        sa.Column("updated_at", sa.BigInteger(), nullable=False),
        sa.Column("updated_by_id", sa.String(length=255), nullable=False),
        sa.Column("updated_by_username", sa.String(length=255), nullable=False),
        sa.ForeignKeyConstraint(["version_id"], ["prompt_versions.version_id"]),
        sa.PrimaryKeyConstraint("kind"),
    )


def downgrade() -> None:
    op.drop_table("prompt_active_refs")
    op.drop_index("ix_prompt_versions_kind_sha256", table_name="prompt_versions")
    op.drop_index("ix_prompt_versions_kind_created", table_name="prompt_versions")
    op.drop_table("prompt_versions")
    op.drop_table("users")
