"""Database package: engine, session factory and declarative base."""

from prompt_studio.db.session import Base, SessionLocal, engine, get_db

__all__ = ["Base", "SessionLocal", "engine", "get_db"]
