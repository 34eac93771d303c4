# user_api/api/routes/user_routes.py

from __future__ import annotations

from typing import Any

from flask import Blueprint, jsonify, request

from user_api.api.schemas.user_schema import (
    CreateUserRequest,
    ListUsersQuery,
    MessageResponse,
    UpdateUserRequest,
)
from user_api.api.validation import validate_payload
from user_api.core.exceptions import BadRequestError
from user_api.infrastructure.database.session import db_session
from user_api.mappers import user_mapper
from user_api.repositories.user_repository import UserRepository
from user_api.services.user_service import UserService

bp_users = Blueprint("users", __name__)


# -------------------------
# Helpers
# -------------------------

def _build_service(session) -> UserService:
    return UserService(UserRepository(session))


def _read_json() -> dict[str, Any]:
    payload = request.get_json(force=True, silent=True)
    if not isinstance(payload, dict):
        raise BadRequestError("Invalid request body")
    return payload


# -------------------------
# Routes
# -------------------------

@bp_users.post("")
def create_user():
    payload = validate_payload(CreateUserRequest, _read_json())

    with db_session() as session:
        created = _build_service(session).create_user(user_mapper.to_new_user(payload))

    return jsonify(user_mapper.dump_response(user_mapper.to_response(created))), 201


@bp_users.get("")
def list_users():
    query = validate_payload(ListUsersQuery, request.args.to_dict())

    with db_session() as session:
        users = _build_service(session).list_users(status=query.status)

    return jsonify(user_mapper.dump_response(user_mapper.to_list_response(users))), 200


@bp_users.get("/<user_id>")
def get_user(user_id: str):
    with db_session() as session:
        user = _build_service(session).get_user(user_id)

    return jsonify(user_mapper.dump_response(user_mapper.to_response(user))), 200


@bp_users.patch("/<user_id>")
def update_user(user_id: str):
    payload = validate_payload(UpdateUserRequest, _read_json())

    with db_session() as session:
        updated = _build_service(session).update_user(user_id, user_mapper.to_changes(payload))

    return jsonify(user_mapper.dump_response(user_mapper.to_response(updated))), 200


@bp_users.delete("/<user_id>")
def delete_user(user_id: str):
    with db_session() as session:
        _build_service(session).delete_user(user_id)

    return jsonify(MessageResponse(message="User deleted successfully").model_dump()), 200
