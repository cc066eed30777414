"""User model."""

from datetime import UTC, datetime

import bcrypt as _bcrypt
from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from prompt_studio.db.session import Base

ROLE_ADMIN = "admin"
ROLE_USER = "user"
STATUS_ACTIVE = "active"
STATUS_INACTIVE = "inactive"


class User(Base):
    """Studio user; admins manage prompt versions."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(32), default=ROLE_USER, nullable=False)
    status: Mapped[str] = mapped_column(String(32), default=STATUS_ACTIVE, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=lambda: datetime.now(UTC), nullable=False
    )

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN and self.status == STATUS_ACTIVE

    def set_password(self, password: str) -> None:
        """Hash and store password using bcrypt."""
        self.password_hash = _bcrypt.hashpw(password.encode("utf-8"), _bcrypt.gensalt()).decode(
            "utf-8"
        )

    def verify_password(self, password: str) -> bool:
        """Verify password against stored hash."""
        return _bcrypt.checkpw(password.encode("utf-8"), self.password_hash.encode("utf-8"))
