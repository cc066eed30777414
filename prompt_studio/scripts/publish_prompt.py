"""Create (and optionally publish) a prompt version from markdown files.

Usage:
    python -m prompt_studio.scripts.publish_prompt direct --direct-file direct_system.md --publish
    python -m prompt_studio.scripts.publish_prompt workflow \\
        --planner-file planner_system.md --painter-file painter_system.md --note "spring shoot"
    python -m prompt_studio.scripts.publish_prompt direct --list
"""

from __future__ import annotations

import argparse
import sys
from datetime import UTC, datetime
from pathlib import Path

from prompt_studio.db.session import SessionLocal
from prompt_studio.models.user import User
from prompt_studio.prompts.errors import PromptStoreError
from prompt_studio.prompts.packs import SYSTEM_ACTOR, PromptKind
from prompt_studio.services.auth import actor_for_user
from prompt_studio.services.prompt_active import get_active_ref
from prompt_studio.services.prompt_store import create_version, list_versions


def _read(path: str) -> str:
    return Path(path).read_text(encoding="utf-8")


def _print_versions(db, kind: PromptKind) -> None:
    ref = get_active_ref(db, kind)
    for meta in list_versions(db, kind):
        marker = "*" if ref is not None and ref.version_id == meta.version_id else " "
        created = datetime.fromtimestamp(meta.created_at / 1000, tz=UTC).isoformat(timespec="seconds")
        print(
            f"{marker} {meta.version_id}  {meta.sha256[:12]}  {created}  "
            f"{meta.created_by.username}  {meta.note or ''}"
        )


def main() -> None:
    parser = argparse.ArgumentParser(description="Create or list prompt versions")
    parser.add_argument("kind", choices=[k.value for k in PromptKind])
    parser.add_argument("--direct-file", help="directSystemPrompt markdown (direct kind)")
    parser.add_argument("--planner-file", help="plannerSystemPrompt markdown (workflow kind)")
    parser.add_argument("--painter-file", help="painterSystemPrompt markdown (workflow kind)")
    parser.add_argument("--note", help="Free-text note stored on the version")
    parser.add_argument("--publish", action="store_true", help="Activate the new version")
    parser.add_argument("--username", help="Record this existing user as author (default: system)")
    parser.add_argument("--list", action="store_true", help="List versions and exit")
    args = parser.parse_args()

    kind = PromptKind(args.kind)
    db = SessionLocal()
    try:
        if args.list:
            _print_versions(db, kind)
            return

        if kind is PromptKind.DIRECT:
            if not args.direct_file:
                parser.error("--direct-file is required for direct prompts")
            pack = {"directSystemPrompt": _read(args.direct_file)}
        else:
            if not (args.planner_file and args.painter_file):
                parser.error("--planner-file and --painter-file are required for workflow prompts")
            pack = {
                "plannerSystemPrompt": _read(args.planner_file),
                "painterSystemPrompt": _read(args.painter_file),
            }

        actor = SYSTEM_ACTOR
        if args.username:
            user = db.query(User).filter(User.username == args.username).first()
            if user is None:
                print(f"User '{args.username}' not found.")
                sys.exit(1)
            actor = actor_for_user(user)

        try:
            version = create_version(db, kind, pack, actor, note=args.note, publish=args.publish)
        except PromptStoreError as e:
            print(f"Failed to create {kind.value} prompt version: {e}")
            sys.exit(1)

        state = "published" if args.publish else "created"
        print(f"Version {version.version_id} {state} (sha256={version.sha256}).")
    finally:
        db.close()


if __name__ == "__main__":
    main()
