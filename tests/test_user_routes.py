"""HTTP surface of /api/v1/users, end to end on SQLite."""

from datetime import datetime
from uuid import UUID, uuid4

import pytest
from sqlalchemy.exc import OperationalError

from user_api.core.exceptions import StorageError
from user_api.repositories.user_repository import UserRepository
from user_api.services.user_service import UserService

USERS = "/api/v1/users"


def _create(client, **overrides):
    payload = {"firstName": "John", "lastName": "Doe", "email": "john@example.com"}
    payload.update(overrides)
    return client.post(USERS, json=payload)


class TestCreate:
    def test_created_with_defaults(self, client):
        resp = _create(client)

        assert resp.status_code == 201
        body = resp.get_json()
        UUID(body["userId"])
        assert body["firstName"] == "John"
        assert body["lastName"] == "Doe"
        assert body["email"] == "john@example.com"
        assert body["status"] == "Active"
        assert "phone" not in body
        assert "age" not in body
        datetime.fromisoformat(body["createdAt"])
        datetime.fromisoformat(body["updatedAt"])

    def test_optional_fields_round_trip(self, client):
        body = _create(client, phone="+14155552671", age=30, status="Inactive").get_json()

        assert body["phone"] == "+14155552671"
        assert body["age"] == 30
        assert body["status"] == "Inactive"

    def test_duplicate_email(self, client):
        assert _create(client).status_code == 201

        resp = _create(client, firstName="Another", lastName="Person")

        assert resp.status_code == 409
        assert resp.get_json() == {"error": "Conflict", "message": "Email already exists"}

    def test_duplicate_caught_by_unique_constraint(self, client, monkeypatch):
        assert _create(client).status_code == 201
        # Let the pre-check miss so the insert itself hits the constraint
        monkeypatch.setattr(UserRepository, "exists_by_email", lambda self, email: False)

        resp = _create(client)

        assert resp.status_code == 409
        assert client.get(USERS).get_json()["total"] == 1

    def test_invalid_email(self, client):
        resp = _create(client, email="not-an-email")

        assert resp.status_code == 400
        body = resp.get_json()
        assert body["error"] == "Validation Failed"
        assert body["message"] == "One or more fields failed validation"
        assert body["details"]["email"] == "email must be a valid email address"

    def test_name_length_bounds(self, client):
        resp = _create(client, firstName="J", lastName="D" * 51)

        assert resp.status_code == 400
        assert resp.get_json()["details"] == {
            "firstName": "firstName must be at least 2 characters",
            "lastName": "lastName must not exceed 50 characters",
        }

    def test_display_name_email_is_not_stored(self, client):
        resp = _create(client, email="John Doe <john@example.com>")

        assert resp.status_code == 400
        assert resp.get_json()["details"] == {"email": "email must be a valid email address"}
        assert client.get(USERS).get_json()["total"] == 0

    def test_age_beyond_integer_column(self, client):
        resp = _create(client, age=2**63)

        assert resp.status_code == 400
        assert resp.get_json()["details"] == {"age": "age must not exceed 2147483647"}

    def test_missing_fields(self, client):
        resp = client.post(USERS, json={})

        assert resp.status_code == 400
        assert set(resp.get_json()["details"]) == {"firstName", "lastName", "email"}

    @pytest.mark.parametrize("data", ["{not json", "[1, 2]", ""])
    def test_malformed_body(self, client, data):
        resp = client.post(USERS, data=data, content_type="application/json")

        assert resp.status_code == 400
        assert resp.get_json() == {"error": "Bad Request", "message": "Invalid request body"}


class TestRead:
    def test_get_matches_create(self, client):
        created = _create(client, phone="+14155552671").get_json()

        resp = client.get(f"{USERS}/{created['userId']}")

        assert resp.status_code == 200
        assert resp.get_json() == created

    def test_get_missing(self, client):
        resp = client.get(f"{USERS}/{uuid4()}")

        assert resp.status_code == 404
        assert resp.get_json() == {"error": "Not Found", "message": "User not found"}

    def test_get_bad_id(self, client):
        resp = client.get(f"{USERS}/not-a-valid-uuid")

        assert resp.status_code == 400
        assert resp.get_json()["message"] == "Invalid user ID format"

    def test_list_empty(self, client):
        resp = client.get(USERS)

        assert resp.status_code == 200
        assert resp.get_json() == {"users": [], "total": 0}

    def test_list_counts(self, client):
        for i in range(3):
            _create(client, email=f"user{i}@example.com")

        body = client.get(USERS).get_json()

        assert body["total"] == 3
        assert len(body["users"]) == 3

    def test_list_by_status(self, client):
        _create(client, email="a@example.com")
        _create(client, email="b@example.com", status="Inactive")

        body = client.get(USERS, query_string={"status": "Inactive"}).get_json()

        assert body["total"] == 1
        assert body["users"][0]["email"] == "b@example.com"

    def test_list_bad_status(self, client):
        resp = client.get(USERS, query_string={"status": "Archived"})

        assert resp.status_code == 400
        assert resp.get_json()["details"] == {"status": "status must be one of: Active Inactive"}


class TestUpdate:
    def test_partial_update(self, client):
        created = _create(client, age=30).get_json()

        resp = client.patch(f"{USERS}/{created['userId']}", json={"lastName": "Smith"})

        assert resp.status_code == 200
        body = resp.get_json()
        assert body["lastName"] == "Smith"
        for key in ("userId", "firstName", "email", "age", "status", "createdAt"):
            assert body[key] == created[key]

        assert client.get(f"{USERS}/{created['userId']}").get_json() == body

    def test_empty_body_keeps_record(self, client):
        created = _create(client).get_json()

        body = client.patch(f"{USERS}/{created['userId']}", json={}).get_json()

        assert {k: v for k, v in body.items() if k != "updatedAt"} == {
            k: v for k, v in created.items() if k != "updatedAt"
        }
        assert datetime.fromisoformat(body["updatedAt"]) > datetime.fromisoformat(created["updatedAt"])

    def test_missing_user(self, client):
        resp = client.patch(f"{USERS}/{uuid4()}", json={"firstName": "Jane"})

        assert resp.status_code == 404

    def test_bad_id(self, client):
        assert client.patch(f"{USERS}/not-a-valid-uuid", json={}).status_code == 400

    def test_validation(self, client):
        created = _create(client).get_json()

        resp = client.patch(f"{USERS}/{created['userId']}", json={"age": 0})

        assert resp.status_code == 400
        assert resp.get_json()["details"] == {"age": "age must be greater than 0"}

    def test_display_name_email_and_long_name(self, client):
        created = _create(client).get_json()

        resp = client.patch(
            f"{USERS}/{created['userId']}",
            json={"firstName": "J" * 51, "email": "Jane <jane@example.com>"},
        )

        assert resp.status_code == 400
        assert resp.get_json()["details"] == {
            "firstName": "firstName must not exceed 50 characters",
            "email": "email must be a valid email address",
        }
        assert client.get(f"{USERS}/{created['userId']}").get_json() == created

    def test_email_conflict(self, client):
        _create(client, email="taken@example.com")
        created = _create(client, email="mine@example.com").get_json()

        resp = client.patch(f"{USERS}/{created['userId']}", json={"email": "taken@example.com"})

        assert resp.status_code == 409

    def test_same_email_is_allowed(self, client):
        created = _create(client).get_json()

        resp = client.patch(f"{USERS}/{created['userId']}", json={"email": created["email"]})

        assert resp.status_code == 200


class TestDelete:
    def test_delete_then_get(self, client):
        created = _create(client).get_json()

        resp = client.delete(f"{USERS}/{created['userId']}")

        assert resp.status_code == 200
        assert resp.get_json() == {"message": "User deleted successfully"}
        assert client.get(f"{USERS}/{created['userId']}").status_code == 404

    def test_delete_missing(self, client):
        assert client.delete(f"{USERS}/{uuid4()}").status_code == 404

    def test_delete_bad_id(self, client):
        assert client.delete(f"{USERS}/not-a-valid-uuid").status_code == 400

    def test_email_reusable_after_delete(self, client):
        created = _create(client).get_json()
        client.delete(f"{USERS}/{created['userId']}")

        assert _create(client).status_code == 201


class TestErrors:
    def test_storage_failure_hides_cause(self, client, monkeypatch):
        def broken(self):
            raise StorageError("list users failed") from OperationalError("SELECT", {}, Exception("db is down"))

        monkeypatch.setattr(UserRepository, "list_all", broken)

        resp = client.get(USERS)

        assert resp.status_code == 500
        assert resp.get_json() == {"error": "Internal Server Error", "message": "Failed to list users"}
        assert "db is down" not in resp.get_data(as_text=True)

    def test_unexpected_exception(self, client, monkeypatch):
        def explode(self, **kwargs):
            raise RuntimeError("secret internals")

        monkeypatch.setattr(UserService, "list_users", explode)

        resp = client.get(USERS)

        assert resp.status_code == 500
        assert resp.get_json() == {"error": "Internal Server Error", "message": "An unexpected error occurred"}
        assert "secret" not in resp.get_data(as_text=True)

    def test_unknown_route(self, client):
        resp = client.get("/api/v1/nothing-here")

        assert resp.status_code == 404
        assert resp.get_json()["error"] == "Not Found"

    def test_method_not_allowed(self, client):
        resp = client.put(USERS, json={})

        assert resp.status_code == 405
        assert resp.get_json()["error"] == "Method Not Allowed"
