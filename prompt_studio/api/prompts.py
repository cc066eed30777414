"""Prompt version admin API: one router per pack kind.

Mounted at /api/admin/direct-prompts and /api/admin/workflow-prompts.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from prompt_studio.api.deps import get_db, require_admin
from prompt_studio.models.user import User
from prompt_studio.prompts.errors import (
    EmptyPromptError,
    PromptEncodingError,
    StorageFailureError,
    VersionNotFoundError,
)
from prompt_studio.prompts.packs import PromptKind
from prompt_studio.schemas.prompts import (
    ActivePromptResponse,
    ActiveRefRead,
    PromptVersionCreate,
    PromptVersionCreated,
    PromptVersionListResponse,
    PromptVersionMetaRead,
    PromptVersionRead,
    PromptVersionResponse,
    PublishRequest,
    PublishResponse,
)
from prompt_studio.services.auth import actor_for_user
from prompt_studio.services.prompt_active import activate, get_active
from prompt_studio.services.prompt_store import create_version, get_version, list_versions


def _storage_unavailable() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Prompt store unavailable; no changes were made",
    )


def _not_found(exc: VersionNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


def build_prompt_router(kind: PromptKind) -> APIRouter:
    """Create the admin routes for one pack kind."""
    router = APIRouter()

    @router.get("/active", response_model=ActivePromptResponse)
    def api_get_active(
        db: Session = Depends(get_db),
        _admin: User = Depends(require_admin),
    ) -> ActivePromptResponse:
        """Return the active pointer and its version (both null when unset)."""
        try:
            state = get_active(db, kind)
        except StorageFailureError:
            raise _storage_unavailable() from None
        return ActivePromptResponse(
            ref=ActiveRefRead.from_ref(state.ref) if state.ref else None,
            version=PromptVersionRead.from_version(state.version) if state.version else None,
        )

    @router.get("/versions", response_model=PromptVersionListResponse)
    def api_list_versions(
        db: Session = Depends(get_db),
        _admin: User = Depends(require_admin),
    ) -> PromptVersionListResponse:
        """List version metadata, newest first."""
        try:
            metas = list_versions(db, kind)
        except StorageFailureError:
            raise _storage_unavailable() from None
        return PromptVersionListResponse(
            versions=[PromptVersionMetaRead.from_meta(m) for m in metas]
        )

    @router.get("/versions/{version_id}", response_model=PromptVersionResponse)
    def api_get_version(
        version_id: str,
        db: Session = Depends(get_db),
        _admin: User = Depends(require_admin),
    ) -> PromptVersionResponse:
        """Return one version including its pack."""
        try:
            version = get_version(db, kind, version_id)
        except VersionNotFoundError as e:
            raise _not_found(e) from None
        except StorageFailureError:
            raise _storage_unavailable() from None
        return PromptVersionResponse(version=PromptVersionRead.from_version(version))

    @router.post("/versions", response_model=PromptVersionCreated, status_code=201)
    def api_create_version(
        body: PromptVersionCreate,
        db: Session = Depends(get_db),
        admin: User = Depends(require_admin),
    ) -> PromptVersionCreated:
        """Create a version from pack content; publish=true also activates it."""
        try:
            version = create_version(
                db,
                kind,
                body.pack,
                actor_for_user(admin),
                note=body.note,
                publish=body.publish,
            )
        except EmptyPromptError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from None
        except PromptEncodingError as e:
            raise HTTPException(status_code=422, detail=str(e)) from None
        except StorageFailureError:
            raise _storage_unavailable() from None
        return PromptVersionCreated(version=PromptVersionMetaRead.from_meta(version.meta()))

    @router.post("/publish", response_model=PublishResponse)
    def api_publish(
        body: PublishRequest,
        db: Session = Depends(get_db),
        admin: User = Depends(require_admin),
    ) -> PublishResponse:
        """Move the active pointer to an existing version."""
        try:
            ref = activate(db, kind, body.version_id, actor_for_user(admin))
            version = get_version(db, kind, ref.version_id)
        except VersionNotFoundError as e:
            raise _not_found(e) from None
        except StorageFailureError:
            raise _storage_unavailable() from None
        return PublishResponse(
            ref=ActiveRefRead.from_ref(ref),
            version=PromptVersionMetaRead.from_meta(version.meta()),
        )

    return router


direct_prompts_router = build_prompt_router(PromptKind.DIRECT)
workflow_prompts_router = build_prompt_router(PromptKind.WORKFLOW)
