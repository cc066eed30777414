"""Tests for the create_user and publish_prompt CLI scripts."""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from prompt_studio.models.user import ROLE_ADMIN, User
from prompt_studio.services.auth import create_user
from prompt_studio.services.prompt_active import get_active_ref
from prompt_studio.services.prompt_store import get_version, list_versions
from tests.test_constants import TEST_ADMIN_USERNAME, TEST_PASSWORD


def _run_main(main, argv: list[str]) -> None:
    old_argv = sys.argv
    try:
        sys.argv = argv
        main()
    finally:
        sys.argv = old_argv


# ── create_user ──────────────────────────────────────────────────────


class TestCreateUserScript:
    def test_creates_admin(self, db, capsys) -> None:
        from prompt_studio.scripts.create_user import main

        with patch("prompt_studio.scripts.create_user.SessionLocal", return_value=db):
            _run_main(
                main,
                ["create_user", "--username", TEST_ADMIN_USERNAME, "--password", TEST_PASSWORD, "--admin"],
            )

        assert "role=admin" in capsys.readouterr().out
        user = db.query(User).filter(User.username == TEST_ADMIN_USERNAME).one()
        assert user.is_admin

    def test_exits_1_when_duplicate(self, db, capsys) -> None:
        from prompt_studio.scripts.create_user import main

        create_user(db, TEST_ADMIN_USERNAME, TEST_PASSWORD)
        with patch("prompt_studio.scripts.create_user.SessionLocal", return_value=db):
            with pytest.raises(SystemExit) as exc_info:
                _run_main(
                    main,
                    ["create_user", "--username", TEST_ADMIN_USERNAME, "--password", TEST_PASSWORD],
                )
        assert exc_info.value.code == 1
        assert "already exists" in capsys.readouterr().out


# ── publish_prompt ───────────────────────────────────────────────────


class TestPublishPromptScript:
    def test_creates_and_publishes_workflow(self, db, tmp_path: Path, capsys) -> None:
        from prompt_studio.scripts.publish_prompt import main

        planner = tmp_path / "planner.md"
        painter = tmp_path / "painter.md"
        planner.write_text("  Plan the shoot.\n", encoding="utf-8")
        painter.write_text("Paint the shot.", encoding="utf-8")

        with patch("prompt_studio.scripts.publish_prompt.SessionLocal", return_value=db):
            _run_main(
                main,
                [
                    "publish_prompt",
                    "workflow",
                    "--planner-file",
                    str(planner),
                    "--painter-file",
                    str(painter),
                    "--note",
                    "spring shoot",
                    "--publish",
                ],
            )

        assert "published" in capsys.readouterr().out
        ref = get_active_ref(db, "workflow")
        version = get_version(db, "workflow", ref.version_id)
        assert version.sha256 == "beb5c7c1f752063dfe08263889624b0f74224174412e9d316090d4f1d37a82f9"
        assert version.note == "spring shoot"
        assert version.created_by.username == "system"

    def test_records_named_author(self, db, tmp_path: Path) -> None:
        from prompt_studio.scripts.publish_prompt import main

        user = create_user(db, TEST_ADMIN_USERNAME, TEST_PASSWORD, role=ROLE_ADMIN)
        prompt = tmp_path / "direct.md"
        prompt.write_text("Be helpful.", encoding="utf-8")

        with patch("prompt_studio.scripts.publish_prompt.SessionLocal", return_value=db):
            _run_main(
                main,
                [
                    "publish_prompt",
                    "direct",
                    "--direct-file",
                    str(prompt),
                    "--username",
                    TEST_ADMIN_USERNAME,
                ],
            )

        db.add(user)  # main() closed the shared session, detaching user
        (meta,) = list_versions(db, "direct")
        assert meta.created_by.id == str(user.id)
        assert get_active_ref(db, "direct") is None

    def test_blank_file_exits_1(self, db, tmp_path: Path, capsys) -> None:
        from prompt_studio.scripts.publish_prompt import main

        prompt = tmp_path / "direct.md"
        prompt.write_text("   \n", encoding="utf-8")

        with patch("prompt_studio.scripts.publish_prompt.SessionLocal", return_value=db):
            with pytest.raises(SystemExit) as exc_info:
                _run_main(main, ["publish_prompt", "direct", "--direct-file", str(prompt)])

        assert exc_info.value.code == 1
        assert "directSystemPrompt must not be empty" in capsys.readouterr().out
        assert list_versions(db, "direct") == []

    def test_list_marks_active_version(self, db, tmp_path: Path, capsys) -> None:
        from prompt_studio.scripts.publish_prompt import main

        prompt = tmp_path / "direct.md"
        prompt.write_text("Be helpful.", encoding="utf-8")
        with patch("prompt_studio.scripts.publish_prompt.SessionLocal", return_value=db):
            _run_main(
                main,
                ["publish_prompt", "direct", "--direct-file", str(prompt), "--publish"],
            )
            capsys.readouterr()
            _run_main(main, ["publish_prompt", "direct", "--list"])

        out = capsys.readouterr().out
        ref = get_active_ref(db, "direct")
        assert out.startswith(f"* {ref.version_id}")
        assert "6811cef91247" in out
