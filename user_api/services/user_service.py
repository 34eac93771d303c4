# user_api/services/user_service.py

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator
from uuid import UUID

from user_api.core.exceptions import (
    BadRequestError,
    ConflictError,
    DuplicateEmailError,
    InternalServerError,
    NotFoundError,
    StorageError,
)
from user_api.core.interfaces.user_gateway import UserGateway
from user_api.entities.user import NewUser, User, UserChanges, UserStatus

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "Email already exists"
USER_NOT_FOUND = "User not found"


def parse_user_id(raw: str) -> UUID:
    try:
        return UUID(str(raw))
    except ValueError as exc:
        raise BadRequestError("Invalid user ID format") from exc


@contextmanager
def _storage_call(failure_message: str) -> Iterator[None]:
    """Translate storage-level failures into the API error they stand for."""
    try:
        yield
    except DuplicateEmailError as exc:
        # The unique constraint caught what the pre-check missed
        raise ConflictError(EMAIL_TAKEN) from exc
    except StorageError as exc:
        raise InternalServerError(failure_message) from exc


class UserService:
    def __init__(self, user_gateway: UserGateway) -> None:
        self._users = user_gateway

    def create_user(self, data: NewUser) -> User:
        with _storage_call("Failed to check email existence"):
            if self._users.exists_by_email(data.email):
                raise ConflictError(EMAIL_TAKEN)

        with _storage_call("Failed to create user"):
            created = self._users.create(data)

        logger.info("user created: %s", created.user_id)
        return created

    def get_user(self, user_id: str) -> User:
        uid = parse_user_id(user_id)

        with _storage_call("Failed to get user"):
            user = self._users.get_by_id(uid)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)
        return user

    def list_users(self, *, status: UserStatus | None = None) -> list[User]:
        with _storage_call("Failed to list users"):
            if status is None:
                return self._users.list_all()
            return self._users.list_by_status(status)

    def update_user(self, user_id: str, changes: UserChanges) -> User:
        uid = parse_user_id(user_id)

        with _storage_call("Failed to check user"):
            if not self._users.exists_by_id(uid):
                raise NotFoundError(USER_NOT_FOUND)

        if changes.email is not None:
            with _storage_call("Failed to get user"):
                current = self._users.get_by_id(uid)
            if current is None:
                raise NotFoundError(USER_NOT_FOUND)

            # Re-submitting the record's own email is not a conflict
            if changes.email != current.email:
                with _storage_call("Failed to check email"):
                    if self._users.exists_by_email(changes.email):
                        raise ConflictError(EMAIL_TAKEN)

        with _storage_call("Failed to update user"):
            updated = self._users.update(uid, changes)
        if updated is None:
            # Deleted between the existence check and the write
            raise NotFoundError(USER_NOT_FOUND)

        logger.info("user updated: %s", uid)
        return updated

    def delete_user(self, user_id: str) -> None:
        uid = parse_user_id(user_id)

        with _storage_call("Failed to check user"):
            if not self._users.exists_by_id(uid):
                raise NotFoundError(USER_NOT_FOUND)

        with _storage_call("Failed to delete user"):
            deleted = self._users.delete(uid)
        if not deleted:
            raise NotFoundError(USER_NOT_FOUND)

        logger.info("user deleted: %s", uid)
