"""Tests for pack normalization and the bundled seed prompts."""

from __future__ import annotations

from pathlib import Path

import pytest

from prompt_studio.prompts.errors import EmptyPromptError, PromptEncodingError
from prompt_studio.prompts.loader import load_seed_pack
from prompt_studio.prompts.packs import (
    DirectPromptPack,
    PromptKind,
    WorkflowPromptPack,
    pack_from_payload,
)


class TestPackFromPayload:
    def test_direct_pack_is_trimmed(self) -> None:
        pack = pack_from_payload("direct", {"directSystemPrompt": "  Be helpful.\n"})
        assert pack == DirectPromptPack(direct_system_prompt="Be helpful.")

    def test_workflow_pack(self) -> None:
        pack = pack_from_payload(
            PromptKind.WORKFLOW,
            {"plannerSystemPrompt": " plan ", "painterSystemPrompt": "paint"},
        )
        assert pack == WorkflowPromptPack(planner_system_prompt="plan", painter_system_prompt="paint")

    def test_accepts_pack_instance(self) -> None:
        pack = pack_from_payload("direct", DirectPromptPack(direct_system_prompt=" hi "))
        assert pack.direct_system_prompt == "hi"

    def test_legacy_workflow_field_names_rejected_by_default(self) -> None:
        with pytest.raises(EmptyPromptError) as exc_info:
            pack_from_payload(
                PromptKind.WORKFLOW,
                {"storyboardBrainSystemPrompt": "old planner", "shotPainterPrompt": "old painter"},
            )
        assert exc_info.value.field == "plannerSystemPrompt"

    def test_legacy_workflow_field_names(self) -> None:
        pack = pack_from_payload(
            PromptKind.WORKFLOW,
            {"storyboardBrainSystemPrompt": "old planner", "shotPainterPrompt": "old painter"},
            accept_legacy=True,
        )
        assert pack == WorkflowPromptPack(
            planner_system_prompt="old planner", painter_system_prompt="old painter"
        )

    def test_current_field_wins_over_legacy(self) -> None:
        pack = pack_from_payload(
            PromptKind.WORKFLOW,
            {
                "plannerSystemPrompt": "new",
                "storyboardBrainSystemPrompt": "old",
                "painterSystemPrompt": "paint",
            },
            accept_legacy=True,
        )
        assert pack.planner_system_prompt == "new"

    def test_unknown_fields_are_dropped(self) -> None:
        pack = pack_from_payload("direct", {"directSystemPrompt": "x", "extra": "ignored"})
        assert pack.to_payload() == {"directSystemPrompt": "x"}

    @pytest.mark.parametrize("value", ["", "   ", "\n\t"])
    def test_blank_prompt_rejected(self, value: str) -> None:
        with pytest.raises(EmptyPromptError) as exc_info:
            pack_from_payload("direct", {"directSystemPrompt": value})
        assert exc_info.value.field == "directSystemPrompt"

    def test_missing_painter_rejected(self) -> None:
        with pytest.raises(EmptyPromptError) as exc_info:
            pack_from_payload("workflow", {"plannerSystemPrompt": "plan"})
        assert exc_info.value.field == "painterSystemPrompt"

    def test_wrong_kind_pack_rejected(self) -> None:
        with pytest.raises(EmptyPromptError):
            pack_from_payload("workflow", DirectPromptPack(direct_system_prompt="x"))

    def test_non_text_field_rejected(self) -> None:
        with pytest.raises(PromptEncodingError):
            pack_from_payload("direct", {"directSystemPrompt": ["not", "text"]})

    def test_non_mapping_payload_rejected(self) -> None:
        with pytest.raises(PromptEncodingError):
            pack_from_payload("direct", "just a string")  # type: ignore[arg-type]

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValueError):
            pack_from_payload("brain", {"directSystemPrompt": "x"})


class TestLoadSeedPack:
    def test_bundled_direct_seed(self) -> None:
        pack = load_seed_pack(PromptKind.DIRECT)
        assert isinstance(pack, DirectPromptPack)
        assert pack.direct_system_prompt
        assert pack.direct_system_prompt == pack.direct_system_prompt.strip()

    def test_bundled_workflow_seed(self) -> None:
        pack = load_seed_pack(PromptKind.WORKFLOW)
        assert isinstance(pack, WorkflowPromptPack)
        assert pack.planner_system_prompt
        assert pack.painter_system_prompt

    def test_custom_seed_dir(self, tmp_path: Path) -> None:
        (tmp_path / "direct").mkdir()
        (tmp_path / "direct" / "direct_system.md").write_text("\nCustom seed\n", encoding="utf-8")
        pack = load_seed_pack(PromptKind.DIRECT, str(tmp_path))
        assert pack == DirectPromptPack(direct_system_prompt="Custom seed")

    def test_missing_workflow_file_returns_none(self, tmp_path: Path) -> None:
        (tmp_path / "workflow").mkdir()
        (tmp_path / "workflow" / "planner_system.md").write_text("plan", encoding="utf-8")
        assert load_seed_pack(PromptKind.WORKFLOW, str(tmp_path)) is None

    def test_blank_seed_returns_none(self, tmp_path: Path) -> None:
        (tmp_path / "direct").mkdir()
        (tmp_path / "direct" / "direct_system.md").write_text("   \n", encoding="utf-8")
        assert load_seed_pack(PromptKind.DIRECT, str(tmp_path)) is None
