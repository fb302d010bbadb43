# This file defines the service catalog endpoints under `/api/services`.
# It exists so the dashboard and API clients can list, fetch, create, update, and delete service records.
# The router validates identifiers, bodies, pagination, and allowlisted sorting before touching storage.
# The stats route is declared before `/{service_id}` so the literal path wins.

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Query

from shoesclean.api.api_config import ApiConfig
from shoesclean.api.dependencies import get_config, get_service_catalog
from shoesclean.api.error_handlers import StorageFailure
from shoesclean.api.routers.listing import list_catalog_page
from shoesclean.api.schemas.catalog_schemas import (
    ServiceDeleteResponse,
    ServiceListResponse,
    ServiceMutationResponse,
    ServiceResponse,
    ServiceStatsResponse,
)
from shoesclean.api.schemas.common import ErrorResponse
from shoesclean.api.services.catalog_service import CatalogService
from shoesclean.api.validation import validate_id, validate_service_payload

router = APIRouter(
    prefix="/api/services",
    tags=["services"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
CatalogDep = Annotated[CatalogService, Depends(get_service_catalog)]
ConfigDep = Annotated[ApiConfig, Depends(get_config)]


@router.get("", response_model=ServiceListResponse)
async def list_services(
    catalog: CatalogDep,
    config: ConfigDep,
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    search: str | None = Query(default=None),
    sort_by: str | None = Query(default=None, alias="sortBy"),
    sort_order: str | None = Query(default=None, alias="sortOrder"),
) -> dict[str, object]:
    result = await list_catalog_page(
        catalog=catalog,
        config=config,
        page=page,
        limit=limit,
        search=search,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return {
        "success": True,
        "services": result["rows"],
        "pagination": result["pagination"],
        "search": result["search"],
        "sort": result["sort"],
    }


@router.get("/stats", response_model=ServiceStatsResponse)
async def service_stats(catalog: CatalogDep) -> dict[str, object]:
    stats = await catalog.stats()
    return {
        "success": True,
        "stats": {
            "totalServices": stats["total"],
            "averagePrice": stats["average_price"],
            "priceRange": {"min": stats["min_price"], "max": stats["max_price"]},
        },
    }


@router.get("/{service_id}", response_model=ServiceResponse)
async def get_service(service_id: str, catalog: CatalogDep) -> dict[str, object]:
    record = await catalog.get_record(validate_id(service_id))
    return {"success": True, "service": record}


@router.post("", response_model=ServiceMutationResponse, status_code=201)
async def create_service(
    catalog: CatalogDep,
    payload: Any = Body(default=None),
) -> dict[str, object]:
    service_data = validate_service_payload(payload)
    try:
        record = await catalog.create_record(service_data.as_params())
    except StorageFailure as exc:
        raise StorageFailure(exc.message, status_code=400) from exc
    return {"success": True, "message": "Service added successfully", "service": record}


@router.put("/{service_id}", response_model=ServiceMutationResponse)
async def update_service(
    service_id: str,
    catalog: CatalogDep,
    payload: Any = Body(default=None),
) -> dict[str, object]:
    record_id = validate_id(service_id)
    service_data = validate_service_payload(payload)
    record = await catalog.update_record(record_id, service_data.as_params())
    return {"success": True, "message": "Service updated successfully", "service": record}


@router.delete("/{service_id}", response_model=ServiceDeleteResponse)
async def delete_service(service_id: str, catalog: CatalogDep) -> dict[str, object]:
    deleted = await catalog.delete_record(validate_id(service_id))
    return {"success": True, "message": "Service deleted successfully", "deletedService": deleted}
