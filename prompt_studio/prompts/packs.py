"""Prompt pack kinds, pack payloads and the version/active-pointer records.

Packs travel over the wire and into storage as JSON objects with camelCase
field names (``directSystemPrompt``, ``plannerSystemPrompt``,
``painterSystemPrompt``). The field order declared here is the canonical
order used for content hashing.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Union

from prompt_studio.prompts.errors import EmptyPromptError, PromptEncodingError


class PromptKind(str, Enum):
    """Editorial features that own a prompt pack."""

    DIRECT = "direct"
    WORKFLOW = "workflow"


@dataclass(frozen=True)
class Actor:
    """User performing a create/activate operation."""

    id: str
    username: str

    def to_payload(self) -> dict[str, str]:
        return {"id": self.id, "username": self.username}

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Actor:
        return cls(id=str(payload["id"]), username=str(payload["username"]))


SYSTEM_ACTOR = Actor(id="system", username="system")


class _PackFields:
    """Shared payload mapping for pack dataclasses."""

    kind: ClassVar[PromptKind]
    # (attribute, wire name) in canonical order
    wire_fields: ClassVar[tuple[tuple[str, str], ...]]
    # wire name -> older field names still accepted when reading
    legacy_aliases: ClassVar[dict[str, tuple[str, ...]]] = {}

    def to_payload(self) -> dict[str, Any]:
        return {wire: getattr(self, attr) for attr, wire in self.wire_fields}


@dataclass(frozen=True)
class DirectPromptPack(_PackFields):
    """Single system prompt used by the direct-to-image painter."""

    direct_system_prompt: str

    kind: ClassVar[PromptKind] = PromptKind.DIRECT
    wire_fields: ClassVar[tuple[tuple[str, str], ...]] = (
        ("direct_system_prompt", "directSystemPrompt"),
    )


@dataclass(frozen=True)
class WorkflowPromptPack(_PackFields):
    """Planner and painter system prompts used by the storyboard workflow."""

    planner_system_prompt: str
    painter_system_prompt: str

    kind: ClassVar[PromptKind] = PromptKind.WORKFLOW
    wire_fields: ClassVar[tuple[tuple[str, str], ...]] = (
        ("planner_system_prompt", "plannerSystemPrompt"),
        ("painter_system_prompt", "painterSystemPrompt"),
    )
    legacy_aliases: ClassVar[dict[str, tuple[str, ...]]] = {
        "plannerSystemPrompt": ("storyboardBrainSystemPrompt",),
        "painterSystemPrompt": ("heroPainterPrompt", "shotPainterPrompt", "gridPainterPrompt"),
    }


PromptPack = Union[DirectPromptPack, WorkflowPromptPack]

PACK_TYPES: dict[PromptKind, type[DirectPromptPack] | type[WorkflowPromptPack]] = {
    PromptKind.DIRECT: DirectPromptPack,
    PromptKind.WORKFLOW: WorkflowPromptPack,
}


def _first_present(payload: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        value = payload.get(key)
        if value is not None:
            return value
    return None


def pack_from_payload(
    kind: PromptKind | str,
    payload: Mapping[str, Any] | PromptPack,
    accept_legacy: bool = False,
) -> PromptPack:
    """Build a normalized pack of *kind* from a wire payload or another pack.

    Every field is trimmed. Raises EmptyPromptError when a field is missing or
    blank, PromptEncodingError when a field is not text. Older field names are
    only honoured with ``accept_legacy`` (rows written before the rename).
    """
    pack_cls = PACK_TYPES[PromptKind(kind)]
    if isinstance(payload, _PackFields):
        payload = payload.to_payload()
    if not isinstance(payload, Mapping):
        raise PromptEncodingError("pack", f"expected an object, got {type(payload).__name__}")

    values: dict[str, str] = {}
    for attr, wire in pack_cls.wire_fields:
        keys = (wire, *pack_cls.legacy_aliases.get(wire, ())) if accept_legacy else (wire,)
        raw = _first_present(payload, keys)
        if raw is None:
            raise EmptyPromptError(wire)
        if not isinstance(raw, str):
            raise PromptEncodingError(wire, f"expected text, got {type(raw).__name__}")
        text = raw.strip()
        if not text:
            raise EmptyPromptError(wire)
        values[attr] = text
    return pack_cls(**values)


@dataclass(frozen=True)
class PromptVersionMeta:
    """Listing view of a version (no pack content)."""

    version_id: str
    sha256: str
    created_at: int
    created_by: Actor
    note: str | None = None


@dataclass(frozen=True)
class PromptVersion:
    """Immutable, hashed, timestamped snapshot of a pack."""

    kind: PromptKind
    version_id: str
    sha256: str
    created_at: int
    created_by: Actor
    pack: PromptPack
    note: str | None = None

    def meta(self) -> PromptVersionMeta:
        return PromptVersionMeta(
            version_id=self.version_id,
            sha256=self.sha256,
            created_at=self.created_at,
            created_by=self.created_by,
            note=self.note,
        )


@dataclass(frozen=True)
class ActiveRef:
    """Currently-live version pointer for a pack kind."""

    version_id: str
    updated_at: int
    updated_by: Actor


@dataclass(frozen=True)
class ActiveState:
    """Active pointer together with the version it resolves to (both None when unset)."""

    ref: ActiveRef | None
    version: PromptVersion | None
