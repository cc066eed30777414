"""
Database session management. SQLAlchemy 2.x style.
"""

from collections.abc import Generator

from sqlalchemy import Engine, create_engine, make_url, text
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from prompt_studio.config import Settings, get_settings


def is_memory_sqlite(url: str) -> bool:
    """True for SQLite URLs without a database file (``sqlite://``, ``:memory:``)."""
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return False
    return parsed.database in (None, "", ":memory:")


def build_engine(settings: Settings) -> Engine:
    """Create the engine for settings.database_url."""
    if is_memory_sqlite(settings.database_url):
        # One shared connection, otherwise every checkout sees an empty database
        return create_engine(
            settings.database_url,
            echo=settings.debug,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    if settings.is_sqlite:
        # File databases get a connection per session; requests may hop threadpool threads
        return create_engine(
            settings.database_url,
            echo=settings.debug,
            connect_args={"check_same_thread": False, "timeout": settings.db_connect_timeout},
        )
    return create_engine(
        settings.database_url,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
        echo=settings.debug,
        connect_args={
            "connect_timeout": settings.db_connect_timeout,
            "options": "-c timezone=UTC",
        },
    )


settings = get_settings()
engine = build_engine(settings)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class Base(DeclarativeBase):
    """Declarative base for SQLAlchemy models."""


def check_db_connection() -> None:
    """
    Verify database connectivity. Raises if unreachable.
    Call during application startup.
    """
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))


def get_db() -> Generator[Session, None, None]:
    """Dependency for FastAPI to get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
