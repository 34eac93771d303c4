# user_api/mappers/user_mapper.py
"""Conversions between wire shapes, entities and storage rows.

Optional fields use ``None`` as "no value" on every side: an absent or null
key in a request, a NULL column, and a key left out of a response.
"""

from __future__ import annotations

from typing import Any, Iterable

from user_api.api.schemas.user_schema import (
    CreateUserRequest,
    ListUsersResponse,
    UpdateUserRequest,
    UserResponse,
)
from user_api.entities.user import NewUser, User, UserChanges, UserStatus

_CHANGE_FIELDS = ("first_name", "last_name", "email", "phone", "age", "status")


def to_new_user(payload: CreateUserRequest) -> NewUser:
    return NewUser(
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        phone=payload.phone,
        age=payload.age,
        status=payload.status or UserStatus.ACTIVE,
    )


def to_changes(payload: UpdateUserRequest) -> UserChanges:
    supplied = {
        name: getattr(payload, name)
        for name in _CHANGE_FIELDS
        if name in payload.model_fields_set
    }
    # An explicit null is treated like an absent key
    return UserChanges(**{k: v for k, v in supplied.items() if v is not None})


def changed_columns(changes: UserChanges) -> dict[str, Any]:
    """Every updatable column with its new value, or ``None`` to keep it."""
    return {name: getattr(changes, name) for name in _CHANGE_FIELDS}


def row_to_entity(row: Any) -> User:
    """Works for ``UserModel`` instances and Core result rows alike."""
    return User(
        user_id=row.user_id,
        first_name=row.first_name,
        last_name=row.last_name,
        email=row.email,
        phone=row.phone,
        age=row.age,
        status=UserStatus(row.status),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def to_response(user: User) -> UserResponse:
    return UserResponse(
        user_id=user.user_id,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        phone=user.phone,
        age=user.age,
        status=user.status,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


def to_list_response(users: Iterable[User]) -> ListUsersResponse:
    items = [to_response(u) for u in users]
    return ListUsersResponse(users=items, total=len(items))


def dump_response(model: UserResponse | ListUsersResponse) -> dict[str, Any]:
    # exclude_none drops phone/age when unset; nothing else is ever None
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)
