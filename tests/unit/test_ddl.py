# This file tests catalog table creation and the constraints it declares.

from __future__ import annotations

import pytest
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.exc import IntegrityError

from shoesclean.common.ddl import apply_catalog_ddl, products_table_ddl, services_table_ddl


def test_postgres_ddl_uses_native_types() -> None:
    ddl = services_table_ddl("services", "postgresql")
    assert "BIGSERIAL PRIMARY KEY" in ddl
    assert "DOUBLE PRECISION" in ddl
    assert "TIMESTAMPTZ" in ddl
    assert "updated_at" in products_table_ddl("products", "postgresql")


def test_ddl_rejects_unsafe_table_names() -> None:
    with pytest.raises(ValueError):
        services_table_ddl("services;--", "sqlite")


def test_apply_catalog_ddl_is_idempotent_on_sqlite() -> None:
    engine = create_engine("sqlite://")
    apply_catalog_ddl(engine, services_table_name="svc", products_table_name="prd")
    apply_catalog_ddl(engine, services_table_name="svc", products_table_name="prd")

    inspector = inspect(engine)
    assert set(inspector.get_table_names()) == {"svc", "prd"}
    assert {column["name"] for column in inspector.get_columns("svc")} == {
        "id",
        "name",
        "description",
        "price",
        "duration_minutes",
        "created_at",
    }


@pytest.mark.parametrize(
    "statement",
    [
        "INSERT INTO services (name, price) VALUES ('Wash', -1)",
        "INSERT INTO services (name, price, duration_minutes) VALUES ('Wash', 1, 0)",
        "INSERT INTO services (price) VALUES (1)",
    ],
)
def test_constraints_reject_invalid_rows(statement: str) -> None:
    engine = create_engine("sqlite://")
    apply_catalog_ddl(engine)
    with pytest.raises(IntegrityError):
        with engine.begin() as connection:
            connection.execute(text(statement))
