"""Tests for seeding empty prompt stores and the seed fallback."""

from __future__ import annotations

from pathlib import Path

from prompt_studio.prompts.loader import load_seed_pack
from prompt_studio.prompts.packs import SYSTEM_ACTOR, Actor, DirectPromptPack, PromptKind
from prompt_studio.services.prompt_active import activate, get_active, get_active_ref
from prompt_studio.services.prompt_seed import SEED_NOTE, ensure_initialized, get_active_pack
from prompt_studio.services.prompt_store import create_version, list_versions

ALICE = Actor(id="u1", username="alice")


def _seed_dir(tmp_path: Path, text: str = "Seeded direct prompt") -> str:
    (tmp_path / "direct").mkdir()
    (tmp_path / "direct" / "direct_system.md").write_text(text, encoding="utf-8")
    return str(tmp_path)


class TestEnsureInitialized:
    def test_seeds_and_publishes_bundled_workflow_pack(self, db) -> None:
        version = ensure_initialized(db, PromptKind.WORKFLOW)

        assert version is not None
        assert version.created_by == SYSTEM_ACTOR
        assert version.note == SEED_NOTE
        assert version.pack == load_seed_pack(PromptKind.WORKFLOW)

        state = get_active(db, "workflow")
        assert state.ref.version_id == version.version_id
        assert state.ref.updated_by == SYSTEM_ACTOR

    def test_idempotent(self, db) -> None:
        first = ensure_initialized(db, "direct")
        second = ensure_initialized(db, "direct")
        assert first is not None
        assert second is None
        assert len(list_versions(db, "direct")) == 1

    def test_existing_versions_are_left_alone(self, db) -> None:
        create_version(db, "direct", {"directSystemPrompt": "mine"}, ALICE)
        assert ensure_initialized(db, "direct") is None
        assert get_active_ref(db, "direct") is None
        assert len(list_versions(db, "direct")) == 1

    def test_custom_seed_dir(self, db, tmp_path: Path) -> None:
        version = ensure_initialized(db, "direct", _seed_dir(tmp_path))
        assert version.pack == DirectPromptPack(direct_system_prompt="Seeded direct prompt")

    def test_missing_seed_leaves_store_empty(self, db, tmp_path: Path) -> None:
        assert ensure_initialized(db, "workflow", str(tmp_path)) is None
        assert list_versions(db, "workflow") == []
        assert get_active_ref(db, "workflow") is None

    def test_seeding_one_kind_does_not_touch_other(self, db) -> None:
        ensure_initialized(db, "direct")
        assert list_versions(db, "workflow") == []


class TestGetActivePack:
    def test_falls_back_to_seed_when_unset(self, db, tmp_path: Path) -> None:
        pack = get_active_pack(db, "direct", _seed_dir(tmp_path, "fallback"))
        assert pack == DirectPromptPack(direct_system_prompt="fallback")

    def test_returns_active_version_pack(self, db, tmp_path: Path) -> None:
        version = create_version(db, "direct", {"directSystemPrompt": "live"}, ALICE)
        activate(db, "direct", version.version_id, ALICE)
        pack = get_active_pack(db, "direct", _seed_dir(tmp_path, "fallback"))
        assert pack == DirectPromptPack(direct_system_prompt="live")

    def test_none_without_active_or_seed(self, db, tmp_path: Path) -> None:
        assert get_active_pack(db, "workflow", str(tmp_path)) is None
