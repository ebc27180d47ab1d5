"""
JSON-file persistence for the users collection.

The whole collection lives in one file holding a JSON array. Services never
touch the file directly: they go through ``JsonUserRepository``, which
serialises every read-modify-write cycle behind a single lock.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator
import json
import logging
import os
import threading

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the data file is missing, unreadable or not a JSON array."""


def load(path: Path) -> list:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as exc:
        raise StorageError(f"Data file {path} does not exist") from exc
    except (OSError, ValueError) as exc:
        raise StorageError(f"Could not read data file {path}: {exc}") from exc
    if not isinstance(data, list):
        raise StorageError(f"Data file {path} does not contain a JSON array")
    return data


def save(path: Path, users: list) -> None:
    # Write to a sibling file first so readers never see a half-written array.
    tmp = path.with_name(f"{path.name}.tmp")
    try:
        tmp.write_text(json.dumps(users, ensure_ascii=False, indent=2), encoding="utf-8")
        os.replace(tmp, path)
    except OSError as exc:
        tmp.unlink(missing_ok=True)
        raise StorageError(f"Could not write data file {path}: {exc}") from exc


@dataclass
class UserTransaction:
    """Collection loaded for one cycle; saved on exit only if marked dirty."""

    users: list
    dirty: bool = field(default=False)

    def mark_dirty(self) -> None:
        self.dirty = True


class JsonUserRepository:
    """Access to the users file, one read-modify-write cycle at a time."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def list_users(self) -> list:
        with self._lock:
            return load(self.path)

    @contextmanager
    def transaction(self) -> Iterator[UserTransaction]:
        with self._lock:
            tx = UserTransaction(load(self.path))
            yield tx
            if tx.dirty:
                save(self.path, tx.users)
                logger.debug("Saved %d users to %s", len(tx.users), self.path)
