"""Prompt version store: append-only, per pack kind.

Versions are never updated or deleted. Each write is one transaction; any
database error rolls the session back and surfaces as StorageFailureError.
"""

from __future__ import annotations

import logging
import uuid
from datetime import UTC, datetime
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from prompt_studio.models.prompt_version import PromptVersionRecord
from prompt_studio.prompts.errors import (
    EmptyPromptError,
    PromptEncodingError,
    StorageFailureError,
    VersionNotFoundError,
)
from prompt_studio.prompts.packs import (
    Actor,
    PromptKind,
    PromptPack,
    PromptVersion,
    PromptVersionMeta,
    pack_from_payload,
)
from prompt_studio.services.prompt_hash import hash_pack, verify_version_integrity

logger = logging.getLogger(__name__)


def now_ms() -> int:
    """Current time as Unix epoch milliseconds."""
    return int(datetime.now(UTC).timestamp() * 1000)


def storage_failure(db: Session, action: str, kind: PromptKind, exc: SQLAlchemyError) -> StorageFailureError:
    """Roll back *db*, log *exc* and build the error to raise in its place.

    Must be called from inside the ``except`` block handling *exc*.
    """
    db.rollback()
    logger.exception("Prompt store %s failed: kind=%s", action, kind.value)
    return StorageFailureError(f"Failed to {action} {kind.value} prompt store: {exc.__class__.__name__}")


def _to_version(row: PromptVersionRecord) -> PromptVersion:
    """Rebuild a version from its row; a pack that no longer validates is a storage fault."""
    kind = PromptKind(row.kind)
    try:
        pack = pack_from_payload(kind, row.pack, accept_legacy=True)
    except (EmptyPromptError, PromptEncodingError) as e:
        logger.error(
            "Stored prompt pack is invalid: kind=%s version_id=%s error=%s",
            kind.value,
            row.version_id,
            e,
        )
        raise StorageFailureError(
            f"Stored {kind.value} prompt version {row.version_id!r} is corrupt: {e}"
        ) from e
    return PromptVersion(
        kind=kind,
        version_id=row.version_id,
        sha256=row.sha256,
        created_at=row.created_at,
        created_by=Actor(id=row.created_by_id, username=row.created_by_username),
        pack=pack,
        note=row.note,
    )


def create_version(
    db: Session,
    kind: PromptKind | str,
    pack: PromptPack | dict[str, Any],
    author: Actor,
    note: str | None = None,
    publish: bool = False,
) -> PromptVersion:
    """Append a new version of *pack* for *kind*.

    The pack is trimmed and validated, hashed, given a fresh UUID and stamped
    with the current time. With ``publish=True`` the kind's active pointer is
    moved to the new version in the same transaction.

    Raises:
        EmptyPromptError: a prompt field is missing or blank.
        PromptEncodingError: a prompt field is not text.
        StorageFailureError: the database write failed; nothing was stored.
    """
    kind = PromptKind(kind)
    normalized = pack_from_payload(kind, pack)
    note = note.strip() if note else None

    version = PromptVersion(
        kind=kind,
        version_id=str(uuid.uuid4()),
        sha256=hash_pack(normalized),
        created_at=now_ms(),
        created_by=author,
        pack=normalized,
        note=note or None,
    )
    row = PromptVersionRecord(
        version_id=version.version_id,
        kind=kind.value,
        sha256=version.sha256,
        pack=normalized.to_payload(),
        note=version.note,
        created_at=version.created_at,
        created_by_id=author.id,
        created_by_username=author.username,
    )

    try:
        db.add(row)
        if publish:
            from prompt_studio.services.prompt_active import write_active_ref

            db.flush()
            write_active_ref(db, kind, version.version_id, author, updated_at=version.created_at)
        db.commit()
    except SQLAlchemyError as e:
        raise storage_failure(db, "write", kind, e) from e

    logger.info(
        "Prompt version created: kind=%s version_id=%s sha256=%s by=%s published=%s",
        kind.value,
        version.version_id,
        version.sha256[:12],
        author.username,
        publish,
    )
    return version


def get_version(db: Session, kind: PromptKind | str, version_id: str) -> PromptVersion:
    """Return the full version *version_id* of *kind*.

    Raises VersionNotFoundError if it does not exist for that kind, and
    StorageFailureError if its stored pack no longer validates.
    """
    kind = PromptKind(kind)
    try:
        row = (
            db.query(PromptVersionRecord)
            .filter(
                PromptVersionRecord.kind == kind.value,
                PromptVersionRecord.version_id == version_id,
            )
            .first()
        )
    except SQLAlchemyError as e:
        raise storage_failure(db, "read", kind, e) from e
    if row is None:
        raise VersionNotFoundError(kind.value, version_id)

    version = _to_version(row)
    if not verify_version_integrity(version):
        logger.warning(
            "Prompt version hash mismatch: kind=%s version_id=%s stored=%s",
            kind.value,
            version_id,
            version.sha256,
        )
    return version


def list_versions(db: Session, kind: PromptKind | str) -> list[PromptVersionMeta]:
    """List version metadata for *kind*, newest first.

    Ties on created_at are broken by insertion order (later insert first).
    Pack content is not loaded; use get_version for that.
    """
    kind = PromptKind(kind)
    try:
        rows = (
            db.query(
                PromptVersionRecord.version_id,
                PromptVersionRecord.sha256,
                PromptVersionRecord.created_at,
                PromptVersionRecord.created_by_id,
                PromptVersionRecord.created_by_username,
                PromptVersionRecord.note,
            )
            .filter(PromptVersionRecord.kind == kind.value)
            .order_by(PromptVersionRecord.created_at.desc(), PromptVersionRecord.seq.desc())
            .all()
        )
    except SQLAlchemyError as e:
        raise storage_failure(db, "read", kind, e) from e

    return [
        PromptVersionMeta(
            version_id=row.version_id,
            sha256=row.sha256,
            created_at=row.created_at,
            created_by=Actor(id=row.created_by_id, username=row.created_by_username),
            note=row.note,
        )
        for row in rows
    ]


def has_versions(db: Session, kind: PromptKind | str) -> bool:
    """True when at least one version of *kind* exists."""
    kind = PromptKind(kind)
    try:
        row = db.query(PromptVersionRecord.seq).filter(PromptVersionRecord.kind == kind.value).first()
    except SQLAlchemyError as e:
        raise storage_failure(db, "read", kind, e) from e
    return row is not None
