#!/usr/bin/env python3
"""
Create the users data file with an empty collection.

Usage:
  python scripts/init_store.py [--path data.json] [--force]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from users_api.core.config import get_settings
from users_api.repositories.json_storage import save


def main() -> None:
    ap = argparse.ArgumentParser(description="Create an empty users data file")
    ap.add_argument("--path", help="Data file (default: USERS_DATA_FILE or data.json)")
    ap.add_argument("--force", action="store_true", help="Overwrite an existing file")
    args = ap.parse_args()

    path = Path(args.path) if args.path else get_settings().data_file
    if path.exists() and not args.force:
        raise SystemExit(f"'{path}' already exists (use --force to overwrite)")
    path.parent.mkdir(parents=True, exist_ok=True)
    save(path, [])
    print(f"OK: empty collection written to {path}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI use
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
