"""Database schema creation."""

import logging

from sqlalchemy import Engine

from user_api.infrastructure.database.base_model import BaseModel
from user_api.infrastructure.database.models import UserModel  # noqa: F401
from user_api.infrastructure.database.session import get_engine

logger = logging.getLogger(__name__)


def create_schema(engine: Engine | None = None) -> None:
    """Create every table registered on the declarative base."""
    engine = engine or get_engine()
    BaseModel.metadata.create_all(engine)
    logger.info("Database schema ready (%s)", ", ".join(BaseModel.metadata.tables))


def drop_schema(engine: Engine | None = None) -> None:
    engine = engine or get_engine()
    BaseModel.metadata.drop_all(engine)
