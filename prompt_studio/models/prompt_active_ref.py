"""PromptActiveRef model: the live version pointer, one row per pack kind."""

from __future__ import annotations

from sqlalchemy import BigInteger, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from prompt_studio.db.session import Base


class PromptActiveRef(Base):
    """Active version of a pack kind with who moved it last and when."""

    __tablename__ = "prompt_active_refs"

    kind: Mapped[str] = mapped_column(String(32), primary_key=True)
    version_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("prompt_versions.version_id"), nullable=False
    )
    updated_at: Mapped[int] = mapped_column(BigInteger, nullable=False)  # epoch ms
    updated_by_id: Mapped[str] = mapped_column(String(255), nullable=False)
    updated_by_username: Mapped[str] = mapped_column(String(255), nullable=False)
