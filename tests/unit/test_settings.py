"""
Unit tests for settings.
It asserts expected behavior and guards against regressions in the corresponding component.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

import pytest

from shoesclean.common import settings as settings_module


def test_load_settings_success() -> None:
    settings_module.get_settings.cache_clear()
    settings = settings_module.get_settings()
    assert settings.PROJECT_NAME
    assert settings.DATABASE_URL == "sqlite://"


def test_load_settings_missing_required(monkeypatch: pytest.MonkeyPatch) -> None:
    settings_module.get_settings.cache_clear()
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(RuntimeError, match="Missing required environment variables: DATABASE_URL"):
        settings_module.load_settings(load_env=False)


def test_load_settings_ignores_unrelated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("SOMETHING_ELSE", "value")
    settings = settings_module.load_settings(load_env=False)
    assert settings.LOG_LEVEL == "debug"
    assert not hasattr(settings, "SOMETHING_ELSE")
