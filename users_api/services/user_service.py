"""User record use cases: list, create, get, update, delete."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from users_api.domain.users import (
    apply_update,
    build_user,
    find_user_index,
    next_user_id,
    parse_user_id,
)
from users_api.repositories.json_storage import JsonUserRepository

logger = logging.getLogger(__name__)


class UserServiceError(Exception):
    """Base exception for user workflows."""


class UserNotFoundError(UserServiceError):
    """Raised when no stored record has the requested id."""

    def __init__(self, user_id: str | None):
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class UserService:
    """Each call is one load/act/save cycle against the repository."""

    def __init__(self, repository: JsonUserRepository) -> None:
        self.repository = repository

    def list_users(self) -> list:
        return self.repository.list_users()

    def create_user(self, payload: Optional[Mapping[str, Any]] = None) -> dict:
        with self.repository.transaction() as tx:
            user = build_user(next_user_id(tx.users), payload or {})
            tx.users.append(user)
            tx.mark_dirty()
        self._log_mutation("Created", user, tx.users)
        return user

    def get_user(self, raw_id: str | None) -> dict:
        with self.repository.transaction() as tx:
            idx = self._require_index(tx.users, raw_id)
            return tx.users[idx]

    def update_user(self, raw_id: str | None, payload: Optional[Mapping[str, Any]] = None) -> dict:
        with self.repository.transaction() as tx:
            idx = self._require_index(tx.users, raw_id)
            user = apply_update(tx.users[idx], payload or {})
            tx.mark_dirty()
        self._log_mutation("Updated", user, tx.users)
        return user

    def delete_user(self, raw_id: str | None) -> dict:
        with self.repository.transaction() as tx:
            idx = self._require_index(tx.users, raw_id)
            user = tx.users.pop(idx)
            tx.mark_dirty()
        self._log_mutation("Deleted", user, tx.users)
        return user

    def _require_index(self, users: list, raw_id: str | None) -> int:
        idx = find_user_index(users, parse_user_id(raw_id))
        if idx is None:
            raise UserNotFoundError(raw_id)
        return idx

    def _log_mutation(self, action: str, user: dict, users: list) -> None:
        logger.info("%s user %s (%d users stored)", action, user.get("id"), len(users))
        logger.debug("Users now: %s", users)
