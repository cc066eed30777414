"""Create a Prompt Studio user.

Usage:
    python -m prompt_studio.scripts.create_user --username admin --password <password> --admin
"""

from __future__ import annotations

import argparse
import sys

from prompt_studio.db.session import SessionLocal
from prompt_studio.models.user import ROLE_ADMIN, ROLE_USER, User
from prompt_studio.services.auth import create_user


def main() -> None:
    parser = argparse.ArgumentParser(description="Create a Prompt Studio user")
    parser.add_argument("--username", required=True, help="Username for the new user")
    parser.add_argument("--password", required=True, help="Password for the new user")
    parser.add_argument(
        "--admin", action="store_true", help="Grant admin role (can manage prompt versions)"
    )
    args = parser.parse_args()

    db = SessionLocal()
    try:
        existing = db.query(User).filter(User.username == args.username).first()
        if existing:
            print(f"User '{args.username}' already exists.")
            sys.exit(1)

        role = ROLE_ADMIN if args.admin else ROLE_USER
        user = create_user(db, args.username, args.password, role=role)
        print(f"User '{user.username}' created successfully (id={user.id}, role={user.role}).")
    finally:
        db.close()


if __name__ == "__main__":
    main()
