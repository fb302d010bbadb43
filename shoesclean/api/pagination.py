# This file handles pagination, search, and sort parsing for list endpoints.
# It exists so every catalog router uses the same rules for page size, offsets, and ordering.
# Sort columns are checked against a fixed allowlist because identifiers cannot be bound parameters.
# Pagination metadata is derived here from the current total on every request.

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass
from typing import Any

from shoesclean.api.error_handlers import InvalidPagination, InvalidSortColumn, InvalidSortOrder
from shoesclean.api.validation import MAX_STORAGE_INT

ALLOWED_SORT_ORDERS: frozenset[str] = frozenset({"asc", "desc"})


@dataclass(frozen=True)
class SortSpec:
    column: str
    order: str

    @property
    def direction(self) -> str:
        return self.order.upper()


@dataclass(frozen=True)
class PaginationSpec:
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class ListQuery:
    """Fully validated list request: page window, sort, and optional search text."""

    pagination: PaginationSpec
    sort: SortSpec
    search: str = ""

    @property
    def search_pattern(self) -> str | None:
        return f"%{self.search}%" if self.search else None


def _parse_window_value(raw: str | int | None, default: int) -> int:
    if raw is None:
        return default
    if isinstance(raw, bool):
        raise InvalidPagination()
    if isinstance(raw, int):
        return raw
    text = raw.strip()
    if not text:
        return default
    try:
        return int(text)
    except ValueError as exc:
        raise InvalidPagination() from exc


def normalize_pagination(
    *,
    page: str | int | None,
    limit: str | int | None,
    default_limit: int,
    max_limit: int,
) -> PaginationSpec:
    """Validate and normalize page/limit values."""

    resolved_page = _parse_window_value(page, 1)
    resolved_limit = _parse_window_value(limit, default_limit)
    if resolved_page < 1 or resolved_limit < 1 or resolved_limit > max_limit:
        raise InvalidPagination()
    if (resolved_page - 1) * resolved_limit > MAX_STORAGE_INT:
        raise InvalidPagination()
    return PaginationSpec(page=resolved_page, limit=resolved_limit)


def parse_sort(
    *,
    sort_by: str | None,
    sort_order: str | None,
    allowed_columns: Collection[str],
    default_column: str = "id",
) -> SortSpec:
    """Resolve `sortBy`/`sortOrder` against the column allowlist."""

    column = sort_by if sort_by else default_column
    if column not in allowed_columns:
        raise InvalidSortColumn()

    order = (sort_order or "asc").lower()
    if order not in ALLOWED_SORT_ORDERS:
        raise InvalidSortOrder()
    return SortSpec(column=column, order=order)


def normalize_search(search: str | None) -> str:
    return (search or "").strip()


def build_list_query(
    *,
    page: str | int | None,
    limit: str | int | None,
    search: str | None,
    sort_by: str | None,
    sort_order: str | None,
    allowed_columns: Collection[str],
    default_limit: int = 10,
    max_limit: int = 100,
) -> ListQuery:
    """Validate every list parameter and return a safe query descriptor."""

    pagination = normalize_pagination(
        page=page,
        limit=limit,
        default_limit=default_limit,
        max_limit=max_limit,
    )
    sort = parse_sort(sort_by=sort_by, sort_order=sort_order, allowed_columns=allowed_columns)
    return ListQuery(pagination=pagination, sort=sort, search=normalize_search(search))


def compute_total_pages(*, total_count: int, limit: int) -> int:
    """Compute `ceil(total / limit)`; zero rows means zero pages."""

    if total_count <= 0:
        return 0
    return ((total_count - 1) // limit) + 1


def build_pagination_metadata(*, page: int, limit: int, total_count: int) -> dict[str, Any]:
    total_pages = compute_total_pages(total_count=total_count, limit=limit)
    return {
        "currentPage": page,
        "totalPages": total_pages,
        "totalItems": total_count,
        "itemsPerPage": limit,
        "hasNextPage": page < total_pages,
        "hasPrevPage": page > 1,
    }
