# This file provides dependency factories for FastAPI routes and startup hooks.
# It exists so the database client and catalog services are created once and shared through dependency injection.
# The setup keeps routers thin and makes endpoint tests easy to override.

from __future__ import annotations

from functools import lru_cache

from shoesclean.api.api_config import ApiConfig, get_api_config
from shoesclean.api.db_access import DatabaseClient
from shoesclean.api.query_builder import products_table, services_table
from shoesclean.api.services.catalog_service import CatalogService


@lru_cache(maxsize=1)
def get_database_client() -> DatabaseClient:
    config = get_api_config()
    return DatabaseClient(database_url=config.database_url)


@lru_cache(maxsize=1)
def get_service_catalog() -> CatalogService:
    config = get_api_config()
    return CatalogService(
        db=get_database_client(),
        table=services_table(config.services_table_name),
        entity_label="Service",
    )


@lru_cache(maxsize=1)
def get_product_catalog() -> CatalogService:
    config = get_api_config()
    return CatalogService(
        db=get_database_client(),
        table=products_table(config.products_table_name),
        entity_label="Product",
    )


def get_config() -> ApiConfig:
    return get_api_config()
