#!/usr/bin/env python3
"""
Append a user to the data file without going through HTTP.

Usage:
  python scripts/add_user.py --name Ann [--role admin] [--path data.json]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from users_api.core.config import get_settings
from users_api.repositories.json_storage import JsonUserRepository
from users_api.services.user_service import UserService


def main() -> None:
    ap = argparse.ArgumentParser(description="Add a user to the data file")
    ap.add_argument("--name", required=True, help="User name")
    ap.add_argument("--role", help="User role (omitted from the record when not given)")
    ap.add_argument("--path", help="Data file (default: USERS_DATA_FILE or data.json)")
    args = ap.parse_args()

    path = Path(args.path) if args.path else get_settings().data_file
    payload = {"name": args.name}
    if args.role is not None:
        payload["role"] = args.role

    user = UserService(JsonUserRepository(path)).create_user(payload)
    print("OK: user added")
    print(f"  ID: {user['id']}")
    print(f"  Name: {user['name']}")
    if "role" in user:
        print(f"  Role: {user['role']}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI use
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
