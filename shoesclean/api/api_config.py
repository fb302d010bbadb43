# This file defines runtime settings for the API layer in one place.
# It exists so pagination limits, table names, CORS, and the page presentation can be configured without code edits.
# The config loader reads environment variables and applies safe defaults for local development.
# It also validates table names so only safe SQL identifiers reach statement text.

from __future__ import annotations

import os
import re
from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

_IDENTIFIER_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")

Presentation = Literal["api", "dashboard"]


class ApiConfig(BaseModel):
    """Typed API runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    api_name: str = "Shoesclean API"
    app_version: str = "1.1.0"
    host: str = "0.0.0.0"
    port: int = 8000
    environment: str = "local"
    database_url: str
    default_page_size: int = 10
    max_page_size: int = 100
    allowed_origins: list[str] = Field(default_factory=lambda: ["*"])
    presentation: Presentation = "api"
    dashboard_api_base_url: str = ""
    services_table_name: str = "services"
    products_table_name: str = "products"
    auto_create_schema: bool = True

    @field_validator("services_table_name", "products_table_name")
    @classmethod
    def validate_identifier(cls, value: str) -> str:
        if not _IDENTIFIER_RE.match(value):
            raise ValueError(f"Unsafe SQL identifier: {value!r}")
        return value

    @field_validator("default_page_size", "max_page_size")
    @classmethod
    def validate_positive_ints(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Value must be greater than 0.")
        return value

    @field_validator("dashboard_api_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"{name} must be boolean-like, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _env_list(name: str, default: list[str] | None = None) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default or [])
    return [item.strip() for item in raw.split(",") if item.strip()]


def load_api_config(*, load_env: bool = True) -> ApiConfig:
    """Load API configuration from `.env` and process environment."""

    if load_env:
        load_dotenv()

    config_values: dict[str, object] = {
        "api_name": os.getenv("SHOESCLEAN_API_NAME", "Shoesclean API"),
        "app_version": os.getenv("APP_VERSION", "1.1.0"),
        "host": os.getenv("API_HOST", "0.0.0.0"),
        "port": _env_int("API_PORT", 8000),
        "environment": os.getenv("ENV", "local"),
        "database_url": os.getenv("DATABASE_URL", ""),
        "default_page_size": _env_int("SHOESCLEAN_DEFAULT_PAGE_SIZE", 10),
        "max_page_size": _env_int("SHOESCLEAN_MAX_PAGE_SIZE", 100),
        "allowed_origins": _env_list("SHOESCLEAN_ALLOWED_ORIGINS", ["*"]),
        "presentation": os.getenv("SHOESCLEAN_PRESENTATION", "api"),
        "dashboard_api_base_url": os.getenv("SHOESCLEAN_DASHBOARD_API_BASE_URL", ""),
        "services_table_name": os.getenv("SHOESCLEAN_SERVICES_TABLE_NAME", "services"),
        "products_table_name": os.getenv("SHOESCLEAN_PRODUCTS_TABLE_NAME", "products"),
        "auto_create_schema": _env_bool("SHOESCLEAN_AUTO_CREATE_SCHEMA", True),
    }
    if not config_values["database_url"]:
        raise RuntimeError("DATABASE_URL is required for API startup.")

    return ApiConfig.model_validate(config_values)


@lru_cache(maxsize=1)
def get_api_config() -> ApiConfig:
    """Cached accessor for API config."""

    return load_api_config()
