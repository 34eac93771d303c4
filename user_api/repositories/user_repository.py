# user_api/repositories/user_repository.py

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import ColumnElement, delete, func, literal, null, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from user_api.core.base_repository import BaseRepository
from user_api.core.exceptions import DuplicateEmailError
from user_api.entities.user import NewUser, User, UserChanges, UserStatus
from user_api.infrastructure.database.models.user_model import UserModel
from user_api.infrastructure.database.timestamps import next_updated_at
from user_api.mappers.user_mapper import changed_columns, row_to_entity

_users = UserModel.__table__


def _is_duplicate_email(exc: IntegrityError) -> bool:
    # PostgreSQL names the constraint, SQLite names the column
    text = str(exc.orig).lower()
    return "users_email_key" in text or "users.email" in text


def _coalesce(column: Any, value: Any) -> ColumnElement:
    new_value = null() if value is None else literal(value, column.type)
    return func.coalesce(new_value, column)


class UserRepository(BaseRepository[UserModel]):
    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def create(self, data: NewUser) -> User:
        model = UserModel(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            phone=data.phone,
            age=data.age,
            status=data.status,
        )
        with self._storage_errors("create user"):
            try:
                self._session.add(model)
                self._session.flush()
            except IntegrityError as exc:
                if _is_duplicate_email(exc):
                    raise DuplicateEmailError(data.email) from exc
                raise
        return row_to_entity(model)

    def get_by_id(self, user_id: UUID) -> User | None:
        stmt = (
            select(UserModel)
            .where(UserModel.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        with self._storage_errors("get user by id"):
            model = self._session.execute(stmt).scalar_one_or_none()
        return row_to_entity(model) if model is not None else None

    def get_by_email(self, email: str) -> User | None:
        stmt = (
            select(UserModel)
            .where(UserModel.email == email)
            .execution_options(populate_existing=True)
        )
        with self._storage_errors("get user by email"):
            model = self._session.execute(stmt).scalar_one_or_none()
        return row_to_entity(model) if model is not None else None

    def list_all(self) -> list[User]:
        stmt = (
            select(UserModel)
            .order_by(UserModel.created_at.desc())
            .execution_options(populate_existing=True)
        )
        with self._storage_errors("list users"):
            models = self._session.execute(stmt).scalars().all()
        return [row_to_entity(m) for m in models]

    def list_by_status(self, status: UserStatus) -> list[User]:
        stmt = (
            select(UserModel)
            .where(UserModel.status == status)
            .order_by(UserModel.created_at.desc())
            .execution_options(populate_existing=True)
        )
        with self._storage_errors("list users by status"):
            models = self._session.execute(stmt).scalars().all()
        return [row_to_entity(m) for m in models]

    def update(self, user_id: UUID, changes: UserChanges) -> User | None:
        values = {
            name: _coalesce(_users.c[name], value)
            for name, value in changed_columns(changes).items()
        }
        values["updated_at"] = next_updated_at(_users.c.updated_at)

        stmt = (
            update(_users)
            .where(_users.c.user_id == user_id)
            .values(**values)
            .returning(*_users.c)
        )
        with self._storage_errors("update user"):
            try:
                row = self._session.execute(stmt).one_or_none()
            except IntegrityError as exc:
                if changes.email is not None and _is_duplicate_email(exc):
                    raise DuplicateEmailError(changes.email) from exc
                raise
        return row_to_entity(row) if row is not None else None

    def delete(self, user_id: UUID) -> bool:
        stmt = delete(_users).where(_users.c.user_id == user_id)
        with self._storage_errors("delete user"):
            result = self._session.execute(stmt)
        return (result.rowcount or 0) > 0

    def exists_by_id(self, user_id: UUID) -> bool:
        with self._storage_errors("check user"):
            return self._exists(UserModel.user_id == user_id)

    def exists_by_email(self, email: str) -> bool:
        with self._storage_errors("check email"):
            return self._exists(UserModel.email == email)
