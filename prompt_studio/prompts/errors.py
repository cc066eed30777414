"""Errors raised by the prompt version store and active pointer."""

from __future__ import annotations


class PromptStoreError(Exception):
    """Base class for prompt store failures surfaced to callers."""


class VersionNotFoundError(PromptStoreError, LookupError):
    """Raised when a version id does not exist for the requested pack kind."""

    def __init__(self, kind: str, version_id: str) -> None:
        self.kind = kind
        self.version_id = version_id
        super().__init__(f"{kind} prompt version {version_id!r} not found")


class UnknownVersionError(VersionNotFoundError):
    """Raised when activation targets a version that does not exist."""


class PromptEncodingError(PromptStoreError, TypeError):
    """Raised when a pack field is not text (or not encodable as UTF-8)."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")


class EmptyPromptError(PromptStoreError, ValueError):
    """Raised when a prompt field is missing or blank after trimming."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field} must not be empty")


class StorageFailureError(PromptStoreError):
    """Raised when the database rejects or fails a read/write."""
