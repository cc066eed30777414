"""SQLAlchemy models."""

from prompt_studio.models.prompt_active_ref import PromptActiveRef
from prompt_studio.models.prompt_version import PromptVersionRecord
from prompt_studio.models.user import User

__all__ = [
    "PromptActiveRef",
    "PromptVersionRecord",
    "User",
]
