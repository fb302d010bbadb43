# This file validates identifiers and record bodies coming from untrusted HTTP input.
# It exists so routers only ever bind normalized, strongly-typed values into SQL statements.
# Storage scalars are normalized here too, because aggregates do not arrive as one consistent type.
# Everything in this module is a pure function with no I/O.

from __future__ import annotations

import math
import re
from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Any, TypeAlias

from shoesclean.api.error_handlers import InvalidIdentifier, InvalidPayload

StorageScalar: TypeAlias = int | float | Decimal | str | None

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_INTEGER_RE = re.compile(r"^\s*([+-]?\d+)\s*$")

# Largest value a signed 64-bit INTEGER column can hold.
MAX_STORAGE_INT = 2**63 - 1

NAME_ERROR = "Name is required and must be a non-empty string"
PRICE_ERROR = "Price is required and must be a non-negative number"
DESCRIPTION_ERROR = "Description must be a string when provided"
BODY_ERROR = "Request body must be a JSON object"


@dataclass(frozen=True)
class ServicePayload:
    name: str
    description: str | None
    price: int | float
    duration_minutes: int | None

    def as_params(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ProductPayload:
    name: str
    description: str | None
    price: int | float

    def as_params(self) -> dict[str, Any]:
        return asdict(self)


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return -MAX_STORAGE_INT - 1 <= value <= MAX_STORAGE_INT
    return isinstance(value, float) and math.isfinite(value)


def validate_id(raw_id: str) -> int:
    """Parse a path identifier into a positive integer."""

    match = _INTEGER_RE.match(raw_id or "")
    if match is None:
        raise InvalidIdentifier()
    value = int(match.group(1))
    if value <= 0 or value > MAX_STORAGE_INT:
        raise InvalidIdentifier()
    return value


def _require_object(payload: Any) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise InvalidPayload("body", BODY_ERROR)
    return payload


def _validate_name(payload: dict[str, Any]) -> str:
    name = payload.get("name")
    if not isinstance(name, str) or not name.strip():
        raise InvalidPayload("name", NAME_ERROR)
    return name.strip()


def _validate_price(payload: dict[str, Any]) -> int | float:
    price = payload.get("price")
    if not _is_number(price) or price < 0:
        raise InvalidPayload("price", PRICE_ERROR)
    return price


def _normalize_description(payload: dict[str, Any]) -> str | None:
    description = payload.get("description")
    if description is None:
        return None
    if not isinstance(description, str):
        raise InvalidPayload("description", DESCRIPTION_ERROR)
    return description.strip() or None


def _normalize_duration(payload: dict[str, Any]) -> int | None:
    # Invalid durations are dropped rather than rejected.
    duration = payload.get("duration_minutes")
    if not _is_number(duration) or duration <= 0:
        return None
    if isinstance(duration, float):
        if not duration.is_integer() or duration > MAX_STORAGE_INT:
            return None
        return int(duration)
    return duration


def validate_service_payload(payload: Any) -> ServicePayload:
    """Validate and normalize a service body for insert or update."""

    body = _require_object(payload)
    return ServicePayload(
        name=_validate_name(body),
        description=_normalize_description(body),
        price=_validate_price(body),
        duration_minutes=_normalize_duration(body),
    )


def validate_product_payload(payload: Any) -> ProductPayload:
    body = _require_object(payload)
    return ProductPayload(
        name=_validate_name(body),
        description=_normalize_description(body),
        price=_validate_price(body),
    )


def to_number(value: StorageScalar | object) -> int | float:
    """Normalize a scalar returned by storage into a native number.

    Native numbers pass through, `Decimal` converts to `int` or `float`, strings
    parse their leading integer (unparseable text becomes 0), and anything else,
    including `None`, becomes 0.
    """

    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, Decimal):
        if value.is_finite() and value == value.to_integral_value():
            return int(value)
        return float(value)
    if isinstance(value, str):
        match = _LEADING_INT_RE.match(value)
        return int(match.group(1)) if match else 0
    return 0
