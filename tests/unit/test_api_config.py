# This file tests API configuration loading from the environment.
# It covers defaults, overrides, and rejection of unsafe or contradictory values.

from __future__ import annotations

import pytest
from pydantic import ValidationError

from shoesclean.api.api_config import ApiConfig, load_api_config


def test_defaults_apply_when_only_database_url_is_set(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "SHOESCLEAN_DEFAULT_PAGE_SIZE",
        "SHOESCLEAN_MAX_PAGE_SIZE",
        "SHOESCLEAN_ALLOWED_ORIGINS",
        "SHOESCLEAN_PRESENTATION",
        "APP_VERSION",
    ):
        monkeypatch.delenv(key, raising=False)

    config = load_api_config(load_env=False)

    assert config.database_url == "sqlite://"
    assert config.default_page_size == 10
    assert config.max_page_size == 100
    assert config.allowed_origins == ["*"]
    assert config.presentation == "api"
    assert config.app_version == "1.1.0"
    assert config.auto_create_schema is True


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHOESCLEAN_DEFAULT_PAGE_SIZE", "25")
    monkeypatch.setenv("SHOESCLEAN_ALLOWED_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("SHOESCLEAN_PRESENTATION", "dashboard")
    monkeypatch.setenv("SHOESCLEAN_DASHBOARD_API_BASE_URL", "https://api.example/")
    monkeypatch.setenv("SHOESCLEAN_AUTO_CREATE_SCHEMA", "off")

    config = load_api_config(load_env=False)

    assert config.default_page_size == 25
    assert config.allowed_origins == ["https://a.example", "https://b.example"]
    assert config.presentation == "dashboard"
    assert config.dashboard_api_base_url == "https://api.example"
    assert config.auto_create_schema is False


def test_missing_database_url_is_fatal(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "")
    with pytest.raises(RuntimeError, match="DATABASE_URL is required"):
        load_api_config(load_env=False)


def test_invalid_boolean_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHOESCLEAN_AUTO_CREATE_SCHEMA", "sometimes")
    with pytest.raises(ValueError, match="SHOESCLEAN_AUTO_CREATE_SCHEMA"):
        load_api_config(load_env=False)


@pytest.mark.parametrize(
    "overrides",
    [
        {"services_table_name": "services; DROP TABLE x"},
        {"products_table_name": "1products"},
        {"default_page_size": 0},
        {"presentation": "desktop"},
    ],
)
def test_unsafe_values_fail_validation(overrides: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        ApiConfig(database_url="sqlite://", **overrides)
