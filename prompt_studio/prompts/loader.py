"""
Seed prompt loader.

Loads the default system prompts shipped under prompts/seeds/ (or a
directory named by PROMPT_SEED_DIR) and turns them into packs. Seeds
initialize an empty store and serve as the fallback when no version of a
kind is active.

Layout:
    seeds/direct/direct_system.md
    seeds/workflow/planner_system.md
    seeds/workflow/painter_system.md
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from prompt_studio.prompts.packs import (
    DirectPromptPack,
    PromptKind,
    PromptPack,
    WorkflowPromptPack,
)

logger = logging.getLogger(__name__)

# Directory bundled with the package
_SEEDS_DIR = Path(__file__).parent / "seeds"

_SEED_FILES: dict[PromptKind, tuple[str, ...]] = {
    PromptKind.DIRECT: ("direct_system.md",),
    PromptKind.WORKFLOW: ("planner_system.md", "painter_system.md"),
}


def _read_seed_file(path: Path) -> str | None:
    if not path.is_file():
        return None
    text = path.read_text(encoding="utf-8").strip()
    return text or None


@lru_cache(maxsize=16)
def load_seed_pack(kind: PromptKind, seed_dir: str | None = None) -> PromptPack | None:
    """Load the seed pack for *kind*.

    Args:
        kind: Pack kind to load.
        seed_dir: Root seed directory; defaults to the bundled seeds.

    Returns:
        The seed pack, or None when any of its files is missing or blank.
    """
    kind = PromptKind(kind)
    root = Path(seed_dir) if seed_dir else _SEEDS_DIR
    kind_dir = root / kind.value

    texts: list[str] = []
    for name in _SEED_FILES[kind]:
        text = _read_seed_file(kind_dir / name)
        if text is None:
            logger.warning("Seed prompt missing or empty: %s", kind_dir / name)
            return None
        texts.append(text)

    if kind is PromptKind.DIRECT:
        return DirectPromptPack(direct_system_prompt=texts[0])
    return WorkflowPromptPack(planner_system_prompt=texts[0], painter_system_prompt=texts[1])
