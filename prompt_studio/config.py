"""
Application configuration. Loads from environment variables.
Secrets and sensitive config must never be hardcoded.
"""

import os

from dotenv import load_dotenv

load_dotenv()
from functools import lru_cache
from typing import Optional


@lru_cache(maxsize=1)
def get_settings() -> "Settings":
    """Return cached settings instance."""
    return Settings()


class Settings:
    """Application settings loaded from environment."""

    # App
    app_name: str = "Prompt Studio"
    debug: bool = False

    # Database (postgresql+psycopg for psycopg3; sqlite:// accepted for local runs)
    database_url: str = "postgresql+psycopg://localhost:5432/prompt_studio_dev"
    db_connect_timeout: int = 10  # seconds

    # Security
    secret_key: str = ""

    # Prompt seeds: directory holding direct/*.md and workflow/*.md; None = bundled seeds
    prompt_seed_dir: Optional[str] = None
    prompt_seed_on_startup: bool = True

    def __init__(self) -> None:
        self.app_name = os.getenv("APP_NAME", self.app_name)
        self.debug = os.getenv("DEBUG", "false").lower() == "true"

        default_user = os.getenv("PGUSER") or os.getenv("USER") or "postgres"
        default_url = (
            f"postgresql+psycopg://{default_user}:"
            f"{os.getenv('PGPASSWORD', '')}@"
            f"{os.getenv('PGHOST', 'localhost')}:"
            f"{os.getenv('PGPORT', '5432')}/"
            f"{os.getenv('PGDATABASE', 'prompt_studio_dev')}"
        )
        raw_url = os.getenv("DATABASE_URL", default_url)
        # Ensure psycopg3 driver if URL uses generic postgresql://
        if raw_url.startswith("postgresql://") and not raw_url.startswith("postgresql+psycopg"):
            raw_url = raw_url.replace("postgresql://", "postgresql+psycopg://", 1)
        self.database_url = raw_url
        self.db_connect_timeout = int(os.getenv("DB_CONNECT_TIMEOUT", str(self.db_connect_timeout)))

        self.secret_key = os.getenv("SECRET_KEY", "")

        self.prompt_seed_dir = os.getenv("PROMPT_SEED_DIR") or None
        self.prompt_seed_on_startup = (
            os.getenv("PROMPT_SEED_ON_STARTUP", "true").lower() == "true"
        )

    @property
    def is_sqlite(self) -> bool:
        """True when DATABASE_URL points at SQLite (tests, local tinkering)."""
        return self.database_url.startswith("sqlite")
