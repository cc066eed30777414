"""Seeding and seed fallback for the prompt stores."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from prompt_studio.prompts.loader import load_seed_pack
from prompt_studio.prompts.packs import SYSTEM_ACTOR, PromptKind, PromptPack, PromptVersion
from prompt_studio.services.prompt_active import get_active, get_active_ref
from prompt_studio.services.prompt_store import create_version, has_versions

logger = logging.getLogger(__name__)

SEED_NOTE = "Seed from docs"


def ensure_initialized(
    db: Session,
    kind: PromptKind | str,
    seed_dir: str | None = None,
) -> PromptVersion | None:
    """Seed an empty store for *kind* with its seed pack, published by the system actor.

    Does nothing when the kind already has versions or an active pointer.
    Returns the seeded version, or None when nothing was seeded.
    """
    kind = PromptKind(kind)
    if get_active_ref(db, kind) is not None or has_versions(db, kind):
        return None

    seed = load_seed_pack(kind, seed_dir)
    if seed is None:
        logger.warning("No %s prompt seed found; initialized empty store", kind.value)
        return None

    version = create_version(db, kind, seed, SYSTEM_ACTOR, note=SEED_NOTE, publish=True)
    logger.info("Seeded %s prompt store with version %s", kind.value, version.version_id)
    return version


def get_active_pack(
    db: Session,
    kind: PromptKind | str,
    seed_dir: str | None = None,
) -> PromptPack | None:
    """Return the live pack for *kind*, falling back to the seed pack when nothing is active."""
    kind = PromptKind(kind)
    state = get_active(db, kind)
    if state.version is not None:
        return state.version.pack
    return load_seed_pack(kind, seed_dir)
