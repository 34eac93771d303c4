# user_api/infrastructure/database/timestamps.py
"""Timestamps evaluated by the database rather than the application clock."""

from sqlalchemy import DateTime
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.functions import FunctionElement

# Millisecond precision; SQLite's CURRENT_TIMESTAMP only has whole seconds.
# Parenthesized so it is also a valid column DEFAULT.
_SQLITE_NOW = "(strftime('%Y-%m-%d %H:%M:%f', 'now'))"


class db_now(FunctionElement):
    """Wall-clock time of the database server at evaluation."""

    type = DateTime(timezone=True)
    inherit_cache = True


class next_updated_at(FunctionElement):
    """``db_now()``, pushed past the given column so it always moves forward."""

    type = DateTime(timezone=True)
    inherit_cache = True


@compiles(db_now)
def _now_default(element, compiler, **kw):
    return "CURRENT_TIMESTAMP"


@compiles(db_now, "postgresql")
def _now_postgresql(element, compiler, **kw):
    return "clock_timestamp()"


@compiles(db_now, "sqlite")
def _now_sqlite(element, compiler, **kw):
    return _SQLITE_NOW


@compiles(next_updated_at)
def _next_default(element, compiler, **kw):
    return "CURRENT_TIMESTAMP"


@compiles(next_updated_at, "postgresql")
def _next_postgresql(element, compiler, **kw):
    (column,) = element.clauses
    previous = compiler.process(column, **kw)
    return f"GREATEST(clock_timestamp(), {previous} + interval '1 microsecond')"


@compiles(next_updated_at, "sqlite")
def _next_sqlite(element, compiler, **kw):
    (column,) = element.clauses
    previous = compiler.process(column, **kw)
    return f"max({_SQLITE_NOW}, strftime('%Y-%m-%d %H:%M:%f', {previous}, '+0.001 seconds'))"
