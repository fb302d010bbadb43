"""DDL helpers for the catalog tables."""

from __future__ import annotations

import re

from sqlalchemy.engine import Engine

_IDENTIFIER_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")

_ID_COLUMN = {
    "sqlite": "id INTEGER PRIMARY KEY AUTOINCREMENT",
    "postgresql": "id BIGSERIAL PRIMARY KEY",
}
_PRICE_TYPE = {
    "sqlite": "REAL",
    "postgresql": "DOUBLE PRECISION",
}
_TIMESTAMP_TYPE = {
    "sqlite": "TIMESTAMP",
    "postgresql": "TIMESTAMPTZ",
}


def _safe_identifier(identifier: str) -> str:
    if not _IDENTIFIER_RE.match(identifier):
        raise ValueError(f"Unsafe SQL identifier: {identifier!r}")
    return identifier


def services_table_ddl(table_name: str, dialect: str) -> str:
    table = _safe_identifier(table_name)
    return f"""
    CREATE TABLE IF NOT EXISTS {table} (
        {_ID_COLUMN[dialect]},
        name TEXT NOT NULL,
        description TEXT,
        price {_PRICE_TYPE[dialect]} NOT NULL CHECK (price >= 0),
        duration_minutes INTEGER CHECK (duration_minutes IS NULL OR duration_minutes > 0),
        created_at {_TIMESTAMP_TYPE[dialect]} NOT NULL DEFAULT CURRENT_TIMESTAMP
    )
    """


def products_table_ddl(table_name: str, dialect: str) -> str:
    table = _safe_identifier(table_name)
    return f"""
    CREATE TABLE IF NOT EXISTS {table} (
        {_ID_COLUMN[dialect]},
        name TEXT NOT NULL,
        description TEXT,
        price {_PRICE_TYPE[dialect]} NOT NULL CHECK (price >= 0),
        updated_at {_TIMESTAMP_TYPE[dialect]} NOT NULL DEFAULT CURRENT_TIMESTAMP
    )
    """


def apply_catalog_ddl(
    engine: Engine,
    *,
    services_table_name: str = "services",
    products_table_name: str = "products",
) -> None:
    """Create the services and products tables when they do not exist yet."""

    dialect = engine.dialect.name
    if dialect not in _ID_COLUMN:
        raise ValueError(f"Unsupported database dialect for catalog DDL: {dialect!r}")

    with engine.begin() as connection:
        connection.exec_driver_sql(services_table_ddl(services_table_name, dialect))
        connection.exec_driver_sql(products_table_ddl(products_table_name, dialect))
