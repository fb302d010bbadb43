# This file wraps database access so catalog services can run parameterized SQL safely.
# It exists to keep SQL execution details out of router code and make testing easier.
# Reads return plain dictionaries; writes report affected rows or the generated id.
# Keeping this layer small makes query behavior easier to audit and troubleshoot.

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool


def build_engine(database_url: str) -> Engine:
    """Create an engine; SQLite connections are shared across the request threadpool."""

    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            options["poolclass"] = StaticPool
        return create_engine(database_url, future=True, **options)
    return create_engine(database_url, pool_pre_ping=True, future=True)


class DatabaseClient:
    """Minimal SQLAlchemy wrapper for API read/write access."""

    def __init__(self, *, database_url: str | None = None, engine: Engine | None = None) -> None:
        if engine is None:
            if not database_url:
                raise ValueError("Either database_url or engine is required.")
            engine = build_engine(database_url)
        self._engine: Engine = engine

    @property
    def engine(self) -> Engine:
        return self._engine

    def can_connect(self) -> bool:
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            return False

    def fetch_all(self, query: str, params: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        with self._engine.connect() as connection:
            rows = connection.execute(text(query), dict(params or {})).mappings().all()
        return [dict(row) for row in rows]

    def fetch_one(self, query: str, params: Mapping[str, Any] | None = None) -> dict[str, Any] | None:
        with self._engine.connect() as connection:
            row = connection.execute(text(query), dict(params or {})).mappings().first()
        return dict(row) if row is not None else None

    def fetch_scalar(self, query: str, params: Mapping[str, Any] | None = None) -> Any:
        with self._engine.connect() as connection:
            return connection.execute(text(query), dict(params or {})).scalar_one()

    def execute(self, query: str, params: Mapping[str, Any] | None = None) -> int:
        """Run a write statement and return the affected row count."""

        with self._engine.begin() as connection:
            result = connection.execute(text(query), dict(params or {}))
            return result.rowcount

    def insert_returning_id(self, query: str, params: Mapping[str, Any] | None = None) -> int:
        with self._engine.begin() as connection:
            return int(connection.execute(text(query), dict(params or {})).scalar_one())

    def dispose(self) -> None:
        self._engine.dispose()
