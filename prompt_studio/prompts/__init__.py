"""Prompt pack types, errors and bundled seed prompts."""

from prompt_studio.prompts.errors import (
    EmptyPromptError,
    PromptEncodingError,
    PromptStoreError,
    StorageFailureError,
    UnknownVersionError,
    VersionNotFoundError,
)
from prompt_studio.prompts.packs import (
    SYSTEM_ACTOR,
    ActiveRef,
    ActiveState,
    Actor,
    DirectPromptPack,
    PromptKind,
    PromptPack,
    PromptVersion,
    PromptVersionMeta,
    WorkflowPromptPack,
    pack_from_payload,
)

__all__ = [
    "SYSTEM_ACTOR",
    "ActiveRef",
    "ActiveState",
    "Actor",
    "DirectPromptPack",
    "EmptyPromptError",
    "PromptEncodingError",
    "PromptKind",
    "PromptPack",
    "PromptStoreError",
    "PromptVersion",
    "PromptVersionMeta",
    "StorageFailureError",
    "UnknownVersionError",
    "VersionNotFoundError",
    "WorkflowPromptPack",
    "pack_from_payload",
]
