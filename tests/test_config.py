"""Tests for environment-driven configuration."""

import dataclasses

import pytest

from inventory_sheets.config import ClientConfig, load_config
from inventory_sheets.domain.retry import RetryPolicy
from inventory_sheets.errors import ConfigurationError


@pytest.fixture
def sheets_env(monkeypatch):
    monkeypatch.setenv("SHEETS_SCRIPT_URL", "https://script.example.com/exec")
    monkeypatch.setenv("SHEETS_USER_EMAIL", "clerk@example.com")
    monkeypatch.setenv("SHEETS_DEBUG", "yes")
    monkeypatch.setenv("SHEETS_MAX_ATTEMPTS", "5")
    monkeypatch.setenv("SHEETS_RETRY_BASE_DELAY", "0.25")


@pytest.fixture
def empty_env(monkeypatch):
    for name in (
        "SHEETS_SCRIPT_URL",
        "SHEETS_USER_EMAIL",
        "SHEETS_DEBUG",
        "SHEETS_MAX_ATTEMPTS",
        "SHEETS_RETRY_BASE_DELAY",
    ):
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:
    def test_defaults(self, empty_env):
        cfg = load_config()
        assert cfg["script_url"] == ""
        assert cfg["user_email"] == ""
        assert cfg["debug"] is False
        assert cfg["retry"] == {"max_attempts": 3, "base_delay": 0.5}

    def test_reads_env(self, sheets_env):
        cfg = load_config()
        assert cfg["script_url"] == "https://script.example.com/exec"
        assert cfg["debug"] is True
        assert cfg["retry"]["max_attempts"] == 5
        assert cfg["retry"]["base_delay"] == 0.25

    def test_invalid_numbers_fall_back(self, empty_env, monkeypatch, capsys):
        monkeypatch.setenv("SHEETS_MAX_ATTEMPTS", "zero")
        monkeypatch.setenv("SHEETS_RETRY_BASE_DELAY", "-1")
        cfg = load_config()
        assert cfg["retry"] == {"max_attempts": 3, "base_delay": 0.5}
        assert "SHEETS_MAX_ATTEMPTS" in capsys.readouterr().err


class TestClientConfig:
    def test_defaults(self):
        c = ClientConfig()
        assert c.script_url == ""
        assert c.debug is False
        assert c.retry == RetryPolicy()
        assert c.is_configured is False

    def test_from_env(self, sheets_env):
        c = ClientConfig.from_env()
        assert c.is_configured is True
        assert c.user_email == "clerk@example.com"
        assert c.retry.max_attempts == 5

    def test_frozen(self):
        c = ClientConfig(script_url="u", user_email="e")
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.debug = True

    def test_validate_missing_url(self):
        with pytest.raises(ConfigurationError, match="SHEETS_SCRIPT_URL"):
            ClientConfig(user_email="e").validate()

    def test_validate_missing_email(self):
        with pytest.raises(ConfigurationError, match="SHEETS_USER_EMAIL"):
            ClientConfig(script_url="u").validate()

    def test_validate_returns_self(self):
        c = ClientConfig(script_url="u", user_email="e")
        assert c.validate() is c
