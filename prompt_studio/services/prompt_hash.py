"""Content hashing for prompt packs."""

from __future__ import annotations

import hashlib
import json

from prompt_studio.prompts.errors import PromptEncodingError
from prompt_studio.prompts.packs import PromptPack, PromptVersion


def canonical_pack_json(pack: PromptPack) -> str:
    """Serialize *pack* in canonical form: fixed field order, compact JSON, no ASCII escaping.

    Raises PromptEncodingError if a field value is not text.
    """
    payload = pack.to_payload()
    for field, value in payload.items():
        if not isinstance(value, str):
            raise PromptEncodingError(field, f"expected text, got {type(value).__name__}")
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def hash_pack(pack: PromptPack) -> str:
    """Compute SHA-256 of the canonical pack JSON as 64 lowercase hex characters."""
    canonical = canonical_pack_json(pack)
    try:
        encoded = canonical.encode("utf-8")
    except UnicodeEncodeError as e:
        raise PromptEncodingError("pack", f"not encodable as UTF-8 ({e.reason})") from e
    return hashlib.sha256(encoded).hexdigest()


def verify_version_integrity(version: PromptVersion) -> bool:
    """Return True when the stored sha256 matches the version's pack content."""
    return hash_pack(version.pack) == version.sha256
