"""
Prompt Studio FastAPI application entry point.

Admin flow: edit pack → create version (hashed, immutable) → publish (move active pointer)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from prompt_studio import __version__
from prompt_studio.config import get_settings
from prompt_studio.db.session import SessionLocal, check_db_connection, engine

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def seed_prompt_stores() -> None:
    """Seed every empty prompt store from the seed prompts."""
    from prompt_studio.prompts.packs import PromptKind
    from prompt_studio.services.prompt_seed import ensure_initialized

    settings = get_settings()
    db = SessionLocal()
    try:
        for kind in PromptKind:
            ensure_initialized(db, kind, settings.prompt_seed_dir)
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    logger.info("Prompt Studio starting")
    try:
        try:
            check_db_connection()
            logger.info("Database connection verified")
        except Exception as e:
            logger.critical("Database unreachable: %s", e)
            raise

        if get_settings().prompt_seed_on_startup:
            try:
                seed_prompt_stores()
            except Exception as e:
                logger.critical("Prompt store seeding failed at startup: %s", e)
                raise

        yield
    finally:
        logger.info("Prompt Studio shutting down")
        engine.dispose()
        logger.info("Database connection pool closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # Mount API routes
    from prompt_studio.api.auth import router as auth_router
    from prompt_studio.api.prompts import direct_prompts_router, workflow_prompts_router

    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(
        direct_prompts_router, prefix="/api/admin/direct-prompts", tags=["direct-prompts"]
    )
    app.include_router(
        workflow_prompts_router, prefix="/api/admin/workflow-prompts", tags=["workflow-prompts"]
    )

    @app.get("/health")
    def health() -> dict:
        """Health check endpoint. Confirms DB connectivity."""
        from sqlalchemy import text

        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return {
                "status": "ok",
                "version": __version__,
                "database": "connected",
            }
        except Exception:
            from fastapi.responses import JSONResponse

            return JSONResponse(
                status_code=503,
                content={
                    "status": "unhealthy",
                    "version": __version__,
                    "database": "disconnected",
                },
            )

    return app


app = create_app()
