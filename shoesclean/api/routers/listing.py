# This file holds the list-request flow shared by the services and products routers.
# Parameters are validated before any storage call, and pagination metadata is rebuilt from the fresh total.

from __future__ import annotations

from typing import Any

from shoesclean.api.api_config import ApiConfig
from shoesclean.api.pagination import build_list_query, build_pagination_metadata
from shoesclean.api.services.catalog_service import CatalogService


async def list_catalog_page(
    *,
    catalog: CatalogService,
    config: ApiConfig,
    page: str | None,
    limit: str | None,
    search: str | None,
    sort_by: str | None,
    sort_order: str | None,
) -> dict[str, Any]:
    list_query = build_list_query(
        page=page,
        limit=limit,
        search=search,
        sort_by=sort_by,
        sort_order=sort_order,
        allowed_columns=catalog.sortable_columns,
        default_limit=config.default_page_size,
        max_limit=config.max_page_size,
    )
    result = await catalog.list_page(list_query)
    return {
        "rows": result["rows"],
        "pagination": build_pagination_metadata(
            page=list_query.pagination.page,
            limit=list_query.pagination.limit,
            total_count=int(result["total_count"]),
        ),
        "search": list_query.search or None,
        "sort": {"sortBy": list_query.sort.column, "sortOrder": list_query.sort.order},
    }
