"""PromptVersion model: append-only log of prompt pack versions."""

from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, BigInteger, Index, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from prompt_studio.db.session import Base


class PromptVersionRecord(Base):
    """Immutable snapshot of a direct or workflow prompt pack.

    ``seq`` records insertion order and breaks ties between versions created
    in the same millisecond.
    """

    __tablename__ = "prompt_versions"
    __table_args__ = (
        Index("ix_prompt_versions_kind_created", "kind", "created_at"),
        Index("ix_prompt_versions_kind_sha256", "kind", "sha256"),
    )

    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    version_id: Mapped[str] = mapped_column(String(36), unique=True, nullable=False)
    kind: Mapped[str] = mapped_column(String(32), nullable=False)
    sha256: Mapped[str] = mapped_column(String(64), nullable=False)
    pack: Mapped[dict[str, Any]] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"), nullable=False
    )
    note: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False)  # epoch ms
    created_by_id: Mapped[str] = mapped_column(String(255), nullable=False)
    created_by_username: Mapped[str] = mapped_column(String(255), nullable=False)
