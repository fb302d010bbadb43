# This file provides shared helpers for API endpoint tests.
# It exists so tests can override catalog dependencies with in-memory SQLite or fakes.
# The helpers build consistent config objects and scoped TestClient contexts.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi.testclient import TestClient

from shoesclean.api.api_config import ApiConfig
from shoesclean.api.app import app
from shoesclean.api.db_access import DatabaseClient
from shoesclean.api.dependencies import get_config, get_product_catalog, get_service_catalog
from shoesclean.api.query_builder import SERVICE_SORT_COLUMNS, products_table, services_table
from shoesclean.api.services.catalog_service import CatalogService
from shoesclean.common.ddl import apply_catalog_ddl


def build_test_config(**overrides: Any) -> ApiConfig:
    """Create deterministic API config for tests."""

    values: dict[str, Any] = {
        "api_name": "Test Shoesclean API",
        "app_version": "1.1.0",
        "environment": "test",
        "database_url": "sqlite://",
        "default_page_size": 10,
        "max_page_size": 100,
        "allowed_origins": ["*"],
        "presentation": "api",
        "dashboard_api_base_url": "",
        "services_table_name": "services",
        "products_table_name": "products",
        "auto_create_schema": True,
    }
    values.update(overrides)
    return ApiConfig(**values)


def build_sqlite_catalogs() -> tuple[CatalogService, CatalogService]:
    """Return service and product catalogs backed by a fresh in-memory database."""

    db = DatabaseClient(database_url="sqlite://")
    apply_catalog_ddl(db.engine)
    return (
        CatalogService(db=db, table=services_table(), entity_label="Service"),
        CatalogService(db=db, table=products_table(), entity_label="Product"),
    )


class SpyCatalog:
    """Catalog fake that records every storage call and returns canned rows."""

    sortable_columns = SERVICE_SORT_COLUMNS

    def __init__(self, *, rows: list[dict[str, Any]] | None = None, total_count: int = 0) -> None:
        self.rows = rows or []
        self.total_count = total_count
        self.calls: list[tuple[str, Any]] = []

    async def list_page(self, list_query: Any) -> dict[str, Any]:
        self.calls.append(("list_page", list_query))
        return {"rows": list(self.rows), "total_count": self.total_count}

    async def stats(self) -> dict[str, Any]:
        self.calls.append(("stats", None))
        return {"total": 7, "average_price": 12.5, "min_price": 5, "max_price": 20}

    async def get_record(self, record_id: int) -> dict[str, Any]:
        self.calls.append(("get_record", record_id))
        return self.rows[0]


@contextmanager
def api_test_client(
    *,
    config: ApiConfig | None = None,
    service_catalog: Any | None = None,
    product_catalog: Any | None = None,
    raise_server_exceptions: bool = True,
) -> Iterator[TestClient]:
    """Yield a TestClient with scoped dependency overrides."""

    resolved_config = config or build_test_config()
    if service_catalog is None or product_catalog is None:
        default_services, default_products = build_sqlite_catalogs()
        service_catalog = service_catalog or default_services
        product_catalog = product_catalog or default_products

    app.dependency_overrides[get_config] = lambda: resolved_config
    app.dependency_overrides[get_service_catalog] = lambda: service_catalog
    app.dependency_overrides[get_product_catalog] = lambda: product_catalog

    try:
        with TestClient(app, raise_server_exceptions=raise_server_exceptions) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
