"""Settings — environment overrides and ServiceConfig construction."""

import pytest
from pydantic import ValidationError

from cicd_sample.config import Settings, build_service_config


def test_defaults_match_container_contract(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 3000
    assert settings.host == "0.0.0.0"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("APP_VERSION", "2.3.4")
    settings = Settings(_env_file=None)
    assert settings.port == 8080
    assert settings.app_version == "2.3.4"


def test_log_format_is_validated():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_format="xml")
    assert Settings(_env_file=None, log_format="JSON").log_format == "json"


def test_build_service_config_uses_settings_and_default_seed():
    config = build_service_config(
        Settings(_env_file=None, welcome_message="Hello", app_version="0.1.0"),
    )
    assert config.message == "Hello"
    assert config.version == "0.1.0"
    assert [u.id for u in config.directory] == [1, 2, 3]
