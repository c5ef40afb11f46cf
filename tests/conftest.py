"""Shared test fixtures for the input validators."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from src.services.config_store import ConfigStore

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep host environment variables and .env files out of Config."""
    for name in ("CONFIG_PATH", "LOG_LEVEL", "API_KEY_MIN_LENGTH"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Provide a config file path inside a not-yet-created directory."""
    return tmp_path / "settings" / "config.json"


@pytest.fixture
def store(config_path: Path) -> ConfigStore:
    """Provide a ConfigStore backed by a temporary file."""
    return ConfigStore(config_path)


@pytest.fixture
def valid_config_data() -> dict[str, Any]:
    """Integration settings that pass every check."""
    return {
        "jira": {
            "url": "https://acme.atlassian.net",
            "email": "dev@acme.com",
            "token": "jira-token-1234567890",
        },
        "linear": {"api_key": "lin_api_abcdefghij"},
        "notion": {"api_key": "secret_notion_key", "parent_page_id": "abc123"},
        "git": {"email": "dev@acme.com", "main_branch": "main"},
        "scheduler": {"enabled": True, "interval": "weekly", "time": "09:00", "day_of_week": 1},
        "repositories": ["/home/dev/project", "relative/repo"],
    }


@pytest.fixture
def invalid_config_data() -> dict[str, Any]:
    """Integration settings with one bad value per section."""
    return {
        "jira": {"url": "ftp://acme.example", "email": "dev@acme.com", "token": "jira-token-1234567890"},
        "git": {"main_branch": "my branch"},
        "scheduler": {"time": "9:00", "day_of_week": "monday"},
        "repositories": ["   "],
    }


@pytest.fixture
def write_config(config_path: Path) -> Callable[[Any], Path]:
    """Return a helper that writes raw JSON-able data to the config path."""

    def _write(data: Any) -> Path:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(data), encoding="utf-8")
        return config_path

    return _write
