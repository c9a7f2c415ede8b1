"""
Register a user account from the command line.

Run this from the backend root:

    (.venv) python create_user.py --username alice --email alice@example.com --password s3cret

Tables are created first if they do not exist yet.
"""

import argparse
import sys

from pydantic import ValidationError

from app.core.config import settings
from app.core.errors import AuthenticationError
from app.core.logging import setup_logging
from app.db.init_db import init_db
from app.db.session import SessionLocal
from app.schemas.user import UserCreate, UserRead
from app.services.auth_service import register_user


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Register a user account.")
    parser.add_argument("--username", required=True)
    parser.add_argument("--email", required=True)
    parser.add_argument("--password", required=True)
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        payload = UserCreate(username=args.username, email=args.email, password=args.password)
    except ValidationError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 2

    setup_logging(settings.log_level)
    init_db()

    db = SessionLocal()
    try:
        try:
            user = register_user(
                db,
                username=payload.username,
                email=payload.email,
                password=payload.password,
            )
        except AuthenticationError as exc:
            print(f"[ERROR] {exc}", file=sys.stderr)
            return 1

        summary = UserRead.model_validate(user)
        print(f"[INFO] Registered user {summary.username} <{summary.email}> (id={summary.id})")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
