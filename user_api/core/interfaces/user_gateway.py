# user_api/core/interfaces/user_gateway.py
from __future__ import annotations

from typing import Protocol
from uuid import UUID

from user_api.entities.user import NewUser, User, UserChanges, UserStatus


class UserGateway(Protocol):
    """Storage operations over the ``users`` table.

    Implementations raise ``DuplicateEmailError`` when the unique email
    constraint rejects a write and ``StorageError`` for any other failure.
    """

    def create(self, data: NewUser) -> User:
        ...

    def get_by_id(self, user_id: UUID) -> User | None:
        ...

    def get_by_email(self, email: str) -> User | None:
        ...

    def list_all(self) -> list[User]:
        ...

    def list_by_status(self, status: UserStatus) -> list[User]:
        ...

    def update(self, user_id: UUID, changes: UserChanges) -> User | None:
        """Apply non-``None`` fields; returns ``None`` when the row is gone."""
        ...

    def delete(self, user_id: UUID) -> bool:
        ...

    def exists_by_id(self, user_id: UUID) -> bool:
        ...

    def exists_by_email(self, email: str) -> bool:
        ...
