# This file implements the storage service for one catalog table (services or products).
# It exists so routers can stay transport-focused while SQL execution and row shaping live in one layer.
# Blocking SQLAlchemy calls run in the threadpool, so handlers await them without stalling the event loop.
# Database errors, and values the driver cannot bind, are reported once as StorageFailure; nothing is retried.

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime
from typing import Any, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from starlette.concurrency import run_in_threadpool

from shoesclean.api import query_builder
from shoesclean.api.db_access import DatabaseClient
from shoesclean.api.error_handlers import NotFound, StorageFailure
from shoesclean.api.pagination import ListQuery
from shoesclean.api.query_builder import CatalogTable
from shoesclean.api.validation import to_number

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CatalogService:
    """Async storage operations and record lifecycle for a single catalog table."""

    def __init__(self, *, db: DatabaseClient, table: CatalogTable, entity_label: str) -> None:
        self.db = db
        self.table = table
        self.entity_label = entity_label

    @property
    def sortable_columns(self) -> frozenset[str]:
        return self.table.sortable_columns

    async def count(self, search_pattern: str | None) -> int:
        sql, params = query_builder.count_statement(self.table, search_pattern)
        total = await self._run("count", self.db.fetch_scalar, sql, params)
        return int(to_number(total))

    async def query(self, list_query: ListQuery) -> list[dict[str, Any]]:
        sql, params = query_builder.list_statement(self.table, list_query)
        rows = await self._run("list", self.db.fetch_all, sql, params)
        return [self._shape_row(row) for row in rows]

    async def get(self, record_id: int) -> dict[str, Any] | None:
        sql, params = query_builder.select_by_id_statement(self.table, record_id)
        row = await self._run("fetch", self.db.fetch_one, sql, params)
        return self._shape_row(row) if row is not None else None

    async def insert(self, values: dict[str, Any]) -> int:
        sql, params = query_builder.insert_statement(self.table, values)
        return await self._run("insert", self.db.insert_returning_id, sql, params)

    async def update(self, record_id: int, values: dict[str, Any]) -> bool:
        sql, params = query_builder.update_statement(self.table, record_id, values)
        affected = await self._run("update", self.db.execute, sql, params)
        return affected > 0

    async def delete(self, record_id: int) -> bool:
        sql, params = query_builder.delete_statement(self.table, record_id)
        affected = await self._run("delete", self.db.execute, sql, params)
        return affected > 0

    async def stats(self) -> dict[str, int | float]:
        sql, params = query_builder.stats_statement(self.table)
        row = await self._run("aggregate", self.db.fetch_one, sql, params) or {}
        return {
            "total": int(to_number(row.get("total"))),
            "average_price": round(to_number(row.get("average_price")), 2),
            "min_price": to_number(row.get("min_price")),
            "max_price": to_number(row.get("max_price")),
        }

    async def list_page(self, list_query: ListQuery) -> dict[str, Any]:
        total_count = await self.count(list_query.search_pattern)
        rows = await self.query(list_query)
        return {"rows": rows, "total_count": total_count}

    async def get_record(self, record_id: int) -> dict[str, Any]:
        record = await self.get(record_id)
        if record is None:
            raise NotFound(f"{self.entity_label} not found")
        return record

    async def create_record(self, values: dict[str, Any]) -> dict[str, Any]:
        new_id = await self.insert(values)
        record = await self.get(new_id)
        if record is None:
            raise StorageFailure(f"Failed to add {self.entity_label.lower()}")
        logger.info("Created %s id=%s", self.entity_label.lower(), new_id)
        return record

    async def update_record(self, record_id: int, values: dict[str, Any]) -> dict[str, Any]:
        # One conditional UPDATE; zero affected rows means the record is gone.
        if not await self.update(record_id, values):
            raise NotFound(f"{self.entity_label} not found")
        logger.info("Updated %s id=%s", self.entity_label.lower(), record_id)
        return await self.get_record(record_id)

    async def delete_record(self, record_id: int) -> dict[str, Any]:
        existing = await self.get_record(record_id)
        if not await self.delete(record_id):
            raise NotFound(f"{self.entity_label} not found")
        logger.info("Deleted %s id=%s", self.entity_label.lower(), record_id)
        return existing

    async def _run(self, action: str, func: Callable[..., T], *args: Any) -> T:
        try:
            return await run_in_threadpool(func, *args)
        except (SQLAlchemyError, OverflowError) as exc:
            logger.error("Storage %s failed on %s: %s", action, self.table.name, exc)
            raise StorageFailure(
                f"Database error during {action} of {self.entity_label.lower()} records"
            ) from exc

    @staticmethod
    def _shape_row(row: dict[str, Any]) -> dict[str, Any]:
        shaped = dict(row)
        for key, value in shaped.items():
            if isinstance(value, (datetime, date)):
                shaped[key] = value.isoformat()
        return shaped
