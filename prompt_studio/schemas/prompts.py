"""Prompt version admin API schemas.

Field names are camelCase on the wire (versionId, createdAt, ...), matching
the admin UI's types.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from prompt_studio.prompts.packs import ActiveRef, Actor, PromptVersion, PromptVersionMeta


class CamelModel(BaseModel):
    """Base schema serializing with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ActorRead(CamelModel):
    id: str
    username: str

    @classmethod
    def from_actor(cls, actor: Actor) -> ActorRead:
        return cls(id=actor.id, username=actor.username)


class PromptVersionMetaRead(CamelModel):
    """Version metadata without pack content."""

    version_id: str
    sha256: str
    created_at: int = Field(..., description="Unix epoch milliseconds")
    created_by: ActorRead
    note: str | None = None

    @classmethod
    def from_meta(cls, meta: PromptVersionMeta) -> PromptVersionMetaRead:
        return cls(
            version_id=meta.version_id,
            sha256=meta.sha256,
            created_at=meta.created_at,
            created_by=ActorRead.from_actor(meta.created_by),
            note=meta.note,
        )


class PromptVersionRead(PromptVersionMetaRead):
    """Full version including the pack."""

    pack: dict[str, str]

    @classmethod
    def from_version(cls, version: PromptVersion) -> PromptVersionRead:
        return cls(
            version_id=version.version_id,
            sha256=version.sha256,
            created_at=version.created_at,
            created_by=ActorRead.from_actor(version.created_by),
            note=version.note,
            pack=version.pack.to_payload(),
        )


class ActiveRefRead(CamelModel):
    version_id: str
    updated_at: int = Field(..., description="Unix epoch milliseconds")
    updated_by: ActorRead

    @classmethod
    def from_ref(cls, ref: ActiveRef) -> ActiveRefRead:
        return cls(
            version_id=ref.version_id,
            updated_at=ref.updated_at,
            updated_by=ActorRead.from_actor(ref.updated_by),
        )


class ActivePromptResponse(CamelModel):
    """Active pointer and the version it resolves to; both null when unset."""

    ref: ActiveRefRead | None = None
    version: PromptVersionRead | None = None


class PromptVersionListResponse(CamelModel):
    versions: list[PromptVersionMetaRead]


class PromptVersionResponse(CamelModel):
    version: PromptVersionRead


class PromptVersionCreate(CamelModel):
    """Body for creating a version; pack fields are validated per kind by the service."""

    pack: dict[str, Any]
    note: str | None = Field(None, max_length=2000)
    publish: bool = False


class PromptVersionCreated(CamelModel):
    version: PromptVersionMetaRead


class PublishRequest(CamelModel):
    version_id: str = Field(..., min_length=1, max_length=64)


class PublishResponse(CamelModel):
    ref: ActiveRefRead
    version: PromptVersionMetaRead
