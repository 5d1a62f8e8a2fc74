#!/usr/bin/env python3
"""
Register a user directly in the configured store (DATABASE_URL).

Usage:
  python scripts/add_user.py --username alice --email alice@example.com \
      [--first-name Alice] [--last-name Smith] [--date-of-birth 1990-01-31]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

# Make the userservice package importable when run from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from userservice.core.config import get_settings  # noqa: E402
from userservice.core.log import configure_logging  # noqa: E402
from userservice.db.create_tables import create_all  # noqa: E402
from userservice.domain.users import FieldValidationError  # noqa: E402
from userservice.repositories import SQLUserRepository  # noqa: E402
from userservice.schemas import UserDto  # noqa: E402
from userservice.services.user_service import ConflictError, UserService  # noqa: E402


def build_user(args: argparse.Namespace) -> UserDto:
    payload = {
        "username": (args.username or "").strip(),
        "email": (args.email or "").strip(),
        "firstName": args.first_name,
        "lastName": args.last_name,
        "dateOfBirth": args.date_of_birth,
    }
    try:
        return UserDto.model_validate(payload)
    except ValidationError as exc:
        error = exc.errors()[0]
        raise FieldValidationError(str(error["loc"][-1]), error.get("input")) from exc


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Register a user")
    ap.add_argument("--username", required=True)
    ap.add_argument("--email", required=True)
    ap.add_argument("--first-name")
    ap.add_argument("--last-name")
    ap.add_argument("--date-of-birth", help="YYYY-MM-DD")
    args = ap.parse_args(argv)

    configure_logging(get_settings().log_level)
    create_all()
    service = UserService(SQLUserRepository())
    try:
        created = service.create_user(build_user(args))
    except (FieldValidationError, ConflictError) as exc:
        raise SystemExit(str(exc)) from exc
    print("OK: user registered")
    print(f"  Id: {created.id}")
    print(f"  Username: {created.username}")
    print(f"  Email: {created.email}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
