# This file builds the parameterized SQL statements used by the catalog services.
# It exists so statement text is assembled in one place and values always travel as bound parameters.
# The only identifiers interpolated into SQL text are table and column names from fixed definitions.
# Count and page statements share the same search predicate so totals and rows stay consistent.

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from shoesclean.api.pagination import ListQuery

_IDENTIFIER_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")

Statement = tuple[str, dict[str, Any]]


@dataclass(frozen=True)
class CatalogTable:
    """Static description of one catalog table and the columns the API may touch."""

    name: str
    columns: tuple[str, ...]
    writable_columns: tuple[str, ...]
    sortable_columns: frozenset[str]
    search_columns: tuple[str, ...] = ("name", "description")
    touch_column: str | None = None

    def __post_init__(self) -> None:
        identifiers = (
            self.name,
            *self.columns,
            *self.writable_columns,
            *self.sortable_columns,
            *self.search_columns,
        )
        for identifier in identifiers:
            if not _IDENTIFIER_RE.match(identifier):
                raise ValueError(f"Unsafe SQL identifier: {identifier!r}")
        if self.touch_column is not None and self.touch_column not in self.columns:
            raise ValueError(f"touch_column must be a selected column: {self.touch_column!r}")

    @property
    def select_list(self) -> str:
        return ", ".join(self.columns)


SERVICE_SORT_COLUMNS: frozenset[str] = frozenset(
    {"id", "name", "price", "duration_minutes", "created_at"}
)
PRODUCT_SORT_COLUMNS: frozenset[str] = frozenset({"id", "name", "price", "updated_at"})


def services_table(name: str = "services") -> CatalogTable:
    return CatalogTable(
        name=name,
        columns=("id", "name", "description", "price", "duration_minutes", "created_at"),
        writable_columns=("name", "description", "price", "duration_minutes"),
        sortable_columns=SERVICE_SORT_COLUMNS,
    )


def products_table(name: str = "products") -> CatalogTable:
    return CatalogTable(
        name=name,
        columns=("id", "name", "description", "price", "updated_at"),
        writable_columns=("name", "description", "price"),
        sortable_columns=PRODUCT_SORT_COLUMNS,
        touch_column="updated_at",
    )


def search_predicate(table: CatalogTable, search_pattern: str | None) -> Statement:
    """Return the WHERE clause and binds for an optional `%search%` pattern."""

    if not search_pattern:
        return "", {}
    clauses = " OR ".join(f"{column} LIKE :search_pattern" for column in table.search_columns)
    return f"WHERE {clauses}", {"search_pattern": search_pattern}


def count_statement(table: CatalogTable, search_pattern: str | None) -> Statement:
    where_sql, params = search_predicate(table, search_pattern)
    return f"SELECT COUNT(*) AS total FROM {table.name} {where_sql}".strip(), params


def list_statement(table: CatalogTable, query: ListQuery) -> Statement:
    if query.sort.column not in table.sortable_columns:
        raise ValueError(f"Sort column is not in allowlist: {query.sort.column!r}")

    where_sql, params = search_predicate(table, query.search_pattern)
    sql = f"""
    SELECT {table.select_list}
    FROM {table.name}
    {where_sql}
    ORDER BY {query.sort.column} {query.sort.direction}
    LIMIT :limit OFFSET :offset
    """
    params = dict(params)
    params["limit"] = query.pagination.limit
    params["offset"] = query.pagination.offset
    return sql, params


def select_by_id_statement(table: CatalogTable, record_id: int) -> Statement:
    return (
        f"SELECT {table.select_list} FROM {table.name} WHERE id = :id",
        {"id": record_id},
    )


def _writable_params(table: CatalogTable, values: dict[str, Any]) -> dict[str, Any]:
    missing = [column for column in table.writable_columns if column not in values]
    if missing:
        raise ValueError(f"Missing values for columns: {', '.join(missing)}")
    return {column: values[column] for column in table.writable_columns}


def insert_statement(table: CatalogTable, values: dict[str, Any]) -> Statement:
    params = _writable_params(table, values)
    columns = ", ".join(table.writable_columns)
    binds = ", ".join(f":{column}" for column in table.writable_columns)
    sql = f"INSERT INTO {table.name} ({columns}) VALUES ({binds}) RETURNING id"
    return sql, params


def update_statement(table: CatalogTable, record_id: int, values: dict[str, Any]) -> Statement:
    params = _writable_params(table, values)
    assignments = [f"{column} = :{column}" for column in table.writable_columns]
    if table.touch_column is not None:
        assignments.append(f"{table.touch_column} = CURRENT_TIMESTAMP")
    params["id"] = record_id
    sql = f"UPDATE {table.name} SET {', '.join(assignments)} WHERE id = :id"
    return sql, params


def delete_statement(table: CatalogTable, record_id: int) -> Statement:
    return f"DELETE FROM {table.name} WHERE id = :id", {"id": record_id}


def stats_statement(table: CatalogTable) -> Statement:
    sql = f"""
    SELECT
        COUNT(*) AS total,
        AVG(price) AS average_price,
        MIN(price) AS min_price,
        MAX(price) AS max_price
    FROM {table.name}
    """
    return sql, {}
