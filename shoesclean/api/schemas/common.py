# This file defines shared schema pieces reused by multiple API endpoints.
# It exists so pagination, sort echo, and error payloads stay consistent across resources.

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field


def _integral_to_int(value: int | float) -> int | float:
    # REAL columns hand back whole prices as floats.
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


JsonNumber = Annotated[int | float, AfterValidator(_integral_to_int)]


class PaginationMetadata(BaseModel):
    currentPage: int = Field(ge=1)
    totalPages: int = Field(ge=0)
    totalItems: int = Field(ge=0)
    itemsPerPage: int = Field(ge=1)
    hasNextPage: bool
    hasPrevPage: bool


class SortMetadata(BaseModel):
    sortBy: str
    sortOrder: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    error_code: str
    request_id: str
    timestamp: datetime
