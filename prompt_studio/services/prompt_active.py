"""Active prompt pointer: one live version per pack kind.

The pointer starts unset (no row) and moves forward only through activate()
or create_version(publish=True). Writes are upserts keyed on the kind, so
concurrent activations leave exactly one of them in place.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from prompt_studio.models.prompt_active_ref import PromptActiveRef
from prompt_studio.prompts.errors import UnknownVersionError, VersionNotFoundError
from prompt_studio.prompts.packs import ActiveRef, ActiveState, Actor, PromptKind
from prompt_studio.services.prompt_store import get_version, now_ms, storage_failure

logger = logging.getLogger(__name__)


def _to_ref(row: PromptActiveRef) -> ActiveRef:
    return ActiveRef(
        version_id=row.version_id,
        updated_at=row.updated_at,
        updated_by=Actor(id=row.updated_by_id, username=row.updated_by_username),
    )


def write_active_ref(
    db: Session,
    kind: PromptKind,
    version_id: str,
    actor: Actor,
    updated_at: int | None = None,
) -> ActiveRef:
    """Upsert the pointer row for *kind* without committing.

    Callers own the transaction and must have checked that *version_id* exists.
    """
    ref = ActiveRef(
        version_id=version_id,
        updated_at=updated_at if updated_at is not None else now_ms(),
        updated_by=actor,
    )
    values = {
        "kind": kind.value,
        "version_id": ref.version_id,
        "updated_at": ref.updated_at,
        "updated_by_id": actor.id,
        "updated_by_username": actor.username,
    }

    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        from sqlalchemy.dialects.postgresql import insert
    elif dialect == "sqlite":
        from sqlalchemy.dialects.sqlite import insert
    else:
        db.merge(PromptActiveRef(**values))
        db.flush()
        return ref

    stmt = insert(PromptActiveRef).values(**values)
    excluded = stmt.excluded
    stmt = stmt.on_conflict_do_update(
        index_elements=[PromptActiveRef.kind],
        set_={
            "version_id": excluded.version_id,
            "updated_at": excluded.updated_at,
            "updated_by_id": excluded.updated_by_id,
            "updated_by_username": excluded.updated_by_username,
        },
    )
    db.execute(stmt)
    return ref


def activate(db: Session, kind: PromptKind | str, version_id: str, actor: Actor) -> ActiveRef:
    """Make *version_id* the live version of *kind*.

    Re-activating the current version still advances updated_at/updated_by.

    Raises:
        UnknownVersionError: no such version for *kind*; the pointer is unchanged.
        StorageFailureError: the write failed; the pointer is unchanged.
    """
    kind = PromptKind(kind)
    try:
        get_version(db, kind, version_id)
    except VersionNotFoundError:
        raise UnknownVersionError(kind.value, version_id) from None

    try:
        ref = write_active_ref(db, kind, version_id, actor)
        db.commit()
    except SQLAlchemyError as e:
        raise storage_failure(db, "write", kind, e) from e

    logger.info(
        "Prompt version activated: kind=%s version_id=%s by=%s",
        kind.value,
        version_id,
        actor.username,
    )
    return ref


def get_active_ref(db: Session, kind: PromptKind | str) -> ActiveRef | None:
    """Return the pointer for *kind*, or None if nothing was ever activated."""
    kind = PromptKind(kind)
    try:
        # populate_existing: pointer may have moved since this session loaded it
        row = db.get(PromptActiveRef, kind.value, populate_existing=True)
    except SQLAlchemyError as e:
        raise storage_failure(db, "read", kind, e) from e
    if row is None:
        return None
    return _to_ref(row)


def get_active(db: Session, kind: PromptKind | str) -> ActiveState:
    """Return the pointer for *kind* with the version it points at."""
    kind = PromptKind(kind)
    ref = get_active_ref(db, kind)
    if ref is None:
        return ActiveState(ref=None, version=None)
    try:
        version = get_version(db, kind, ref.version_id)
    except VersionNotFoundError:
        logger.error(
            "Active prompt ref points at missing version: kind=%s version_id=%s",
            kind.value,
            ref.version_id,
        )
        version = None
    return ActiveState(ref=ref, version=version)
