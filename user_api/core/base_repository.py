# user_api/core/base_repository.py

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Generic, Iterator, TypeVar

from sqlalchemy import exists, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from user_api.core.exceptions import StorageError

TModel = TypeVar("TModel")


class BaseRepository(Generic[TModel]):
    def __init__(self, session: Session) -> None:
        self._session = session

    def _exists(self, *criteria: Any) -> bool:
        stmt = select(exists().where(*criteria))
        return bool(self._session.execute(stmt).scalar())

    @contextmanager
    def _storage_errors(self, action: str) -> Iterator[None]:
        try:
            yield
        except StorageError:
            raise
        except SQLAlchemyError as exc:
            raise StorageError(f"{action} failed") from exc
