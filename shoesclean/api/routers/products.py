# This file defines the product catalog endpoints under `/api/products`.
# Products share the service validation and pagination rules but carry no duration,
# and storage refreshes `updated_at` on every update.

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Query

from shoesclean.api.api_config import ApiConfig
from shoesclean.api.dependencies import get_config, get_product_catalog
from shoesclean.api.error_handlers import StorageFailure
from shoesclean.api.routers.listing import list_catalog_page
from shoesclean.api.schemas.catalog_schemas import (
    ProductDeleteResponse,
    ProductListResponse,
    ProductMutationResponse,
    ProductResponse,
)
from shoesclean.api.schemas.common import ErrorResponse
from shoesclean.api.services.catalog_service import CatalogService
from shoesclean.api.validation import validate_id, validate_product_payload

router = APIRouter(
    prefix="/api/products",
    tags=["products"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
CatalogDep = Annotated[CatalogService, Depends(get_product_catalog)]
ConfigDep = Annotated[ApiConfig, Depends(get_config)]


@router.get("", response_model=ProductListResponse)
async def list_products(
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
        "products": result["rows"],
        "pagination": result["pagination"],
        "search": result["search"],
        "sort": result["sort"],
    }


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str, catalog: CatalogDep) -> dict[str, object]:
    record = await catalog.get_record(validate_id(product_id))
    return {"success": True, "product": record}


@router.post("", response_model=ProductMutationResponse, status_code=201)
async def create_product(
    catalog: CatalogDep,
    payload: Any = Body(default=None),
) -> dict[str, object]:
    product_data = validate_product_payload(payload)
    try:
        record = await catalog.create_record(product_data.as_params())
    except StorageFailure as exc:
        raise StorageFailure(exc.message, status_code=400) from exc
    return {"success": True, "message": "Product added successfully", "product": record}


@router.put("/{product_id}", response_model=ProductMutationResponse)
async def update_product(
    product_id: str,
    catalog: CatalogDep,
    payload: Any = Body(default=None),
) -> dict[str, object]:
    record_id = validate_id(product_id)
    product_data = validate_product_payload(payload)
    record = await catalog.update_record(record_id, product_data.as_params())
    return {"success": True, "message": "Product updated successfully", "product": record}


@router.delete("/{product_id}", response_model=ProductDeleteResponse)
async def delete_product(product_id: str, catalog: CatalogDep) -> dict[str, object]:
    deleted = await catalog.delete_record(validate_id(product_id))
    return {"success": True, "message": "Product deleted successfully", "deletedProduct": deleted}
