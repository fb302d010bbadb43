# This file defines response schemas for the services and products endpoints.
# Field names follow the JSON contract the dashboard and API client consume.

from __future__ import annotations

from pydantic import BaseModel

from shoesclean.api.schemas.common import JsonNumber, PaginationMetadata, SortMetadata


class ServiceRecord(BaseModel):
    id: int
    name: str
    description: str | None = None
    price: JsonNumber
    duration_minutes: int | None = None
    created_at: str | None = None


class ServiceListResponse(BaseModel):
    success: bool = True
    services: list[ServiceRecord]
    pagination: PaginationMetadata
    search: str | None = None
    sort: SortMetadata


class ServiceResponse(BaseModel):
    success: bool = True
    service: ServiceRecord


class ServiceMutationResponse(BaseModel):
    success: bool = True
    message: str
    service: ServiceRecord


class ServiceDeleteResponse(BaseModel):
    success: bool = True
    message: str
    deletedService: ServiceRecord


class PriceRange(BaseModel):
    min: JsonNumber
    max: JsonNumber


class ServiceStats(BaseModel):
    totalServices: int
    averagePrice: JsonNumber
    priceRange: PriceRange


class ServiceStatsResponse(BaseModel):
    success: bool = True
    stats: ServiceStats


class ProductRecord(BaseModel):
    id: int
    name: str
    description: str | None = None
    price: JsonNumber
    updated_at: str | None = None


class ProductListResponse(BaseModel):
    success: bool = True
    products: list[ProductRecord]
    pagination: PaginationMetadata
    search: str | None = None
    sort: SortMetadata


class ProductResponse(BaseModel):
    success: bool = True
    product: ProductRecord


class ProductMutationResponse(BaseModel):
    success: bool = True
    message: str
    product: ProductRecord


class ProductDeleteResponse(BaseModel):
    success: bool = True
    message: str
    deletedProduct: ProductRecord
