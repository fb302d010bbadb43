# This file tests identifier parsing, body validation, and storage number normalization.

from __future__ import annotations

import math
from decimal import Decimal

import pytest

from shoesclean.api.error_handlers import InvalidIdentifier, InvalidPayload
from shoesclean.api.validation import (
    MAX_STORAGE_INT,
    to_number,
    validate_id,
    validate_product_payload,
    validate_service_payload,
)


@pytest.mark.parametrize("raw", ["42", " 42 ", "+42"])
def test_validate_id_accepts_positive_integers(raw: str) -> None:
    assert validate_id(raw) == 42


@pytest.mark.parametrize(
    "raw",
    ["abc", "-3", "0", "1.5", "12abc", "", "  ", "9223372036854775808", "99999999999999999999"],
)
def test_validate_id_rejects_everything_else(raw: str) -> None:
    with pytest.raises(InvalidIdentifier):
        validate_id(raw)


def test_service_payload_is_trimmed_and_normalized() -> None:
    payload = validate_service_payload(
        {
            "name": "  Basic Wash  ",
            "description": "  Outer and sole  ",
            "price": 25000,
            "duration_minutes": 45.0,
            "id": 99,
        }
    )

    assert payload.as_params() == {
        "name": "Basic Wash",
        "description": "Outer and sole",
        "price": 25000,
        "duration_minutes": 45,
    }


@pytest.mark.parametrize("duration", [-5, 0, "30", 12.5, True, None, math.inf])
def test_service_payload_drops_unusable_duration(duration: object) -> None:
    payload = validate_service_payload({"name": "Deep Clean", "price": 1, "duration_minutes": duration})
    assert payload.duration_minutes is None


@pytest.mark.parametrize(
    ("body", "field"),
    [
        ({"price": 10}, "name"),
        ({"name": "   ", "price": 10}, "name"),
        ({"name": 7, "price": 10}, "name"),
        ({"name": "Wash"}, "price"),
        ({"name": "Wash", "price": -1}, "price"),
        ({"name": "Wash", "price": "10"}, "price"),
        ({"name": "Wash", "price": True}, "price"),
        ({"name": "Wash", "price": math.nan}, "price"),
        ({"name": "Wash", "price": 10, "description": 5}, "description"),
        (["Wash", 10], "body"),
        (None, "body"),
    ],
)
def test_invalid_bodies_name_the_offending_field(body: object, field: str) -> None:
    with pytest.raises(InvalidPayload) as excinfo:
        validate_service_payload(body)
    assert excinfo.value.field == field
    assert excinfo.value.status_code == 400


def test_zero_price_is_allowed() -> None:
    assert validate_service_payload({"name": "Free check", "price": 0}).price == 0


def test_product_payload_ignores_duration() -> None:
    payload = validate_product_payload({"name": " Brush ", "price": 1.5, "duration_minutes": 10})
    assert payload.as_params() == {"name": "Brush", "description": None, "price": 1.5}


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (7, 7),
        (2.5, 2.5),
        ("7", 7),
        ("12 items", 12),
        ("n/a", 0),
        (None, 0),
        (True, 0),
        (Decimal("10"), 10),
        (Decimal("10.25"), 10.25),
        (object(), 0),
    ],
)
def test_to_number_normalizes_storage_scalars(value: object, expected: float) -> None:
    result = to_number(value)
    assert result == expected
    assert type(result) is type(expected)


def test_validate_id_accepts_largest_storable_integer() -> None:
    assert validate_id(str(MAX_STORAGE_INT)) == MAX_STORAGE_INT


@pytest.mark.parametrize("price", [MAX_STORAGE_INT + 1, 10**30, -(10**30)])
def test_integer_price_outside_storage_range_is_rejected(price: int) -> None:
    with pytest.raises(InvalidPayload) as excinfo:
        validate_service_payload({"name": "Wash", "price": price})
    assert excinfo.value.field == "price"


def test_float_price_beyond_integer_range_is_kept() -> None:
    assert validate_service_payload({"name": "Wash", "price": 1e30}).price == 1e30


@pytest.mark.parametrize("duration", [MAX_STORAGE_INT + 1, 10**30, 1e30])
def test_duration_outside_storage_range_is_dropped(duration: float) -> None:
    payload = validate_service_payload({"name": "Wash", "price": 1, "duration_minutes": duration})
    assert payload.duration_minutes is None
