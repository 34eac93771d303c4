"""Shared pytest fixtures.

The application reads its settings at import time, so the database URL is
pointed at an in-memory SQLite database before anything from ``user_api`` is
imported.
"""

import os

os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402

from tests.fixtures.gateways import InMemoryUserGateway  # noqa: E402
from user_api.infrastructure.database.init_db import create_schema, drop_schema  # noqa: E402
from user_api.infrastructure.database.session import get_engine  # noqa: E402
from user_api.main import create_app  # noqa: E402
from user_api.services.user_service import UserService  # noqa: E402


@pytest.fixture()
def schema():
    create_schema()
    yield get_engine()
    drop_schema()


@pytest.fixture()
def db(schema):
    session = Session(bind=schema, autoflush=False, expire_on_commit=False)
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture()
def app(schema):
    app = create_app()
    app.config["TESTING"] = True
    return app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def gateway():
    return InMemoryUserGateway()


@pytest.fixture()
def service(gateway):
    return UserService(gateway)
