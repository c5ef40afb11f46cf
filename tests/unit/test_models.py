"""Unit tests for the pydantic models.

Constructors are called directly with no mocking.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.models.config import DEFAULT_CONFIG_PATH, Config
from src.models.integration_config import (
    CONFIG_VERSION,
    IntegrationConfig,
    SchedulerSettings,
)
from src.models.validation_result import ValidationResult


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_ok(self) -> None:
        result = ValidationResult.ok()
        assert result.valid is True
        assert result.error is None

    def test_fail(self) -> None:
        result = ValidationResult.fail("bad value")
        assert result.valid is False
        assert result.error == "bad value"

    def test_truthiness(self) -> None:
        assert ValidationResult.ok()
        assert not ValidationResult.fail("bad value")

    def test_equality(self) -> None:
        assert ValidationResult.ok() == ValidationResult(valid=True)
        assert ValidationResult.fail("x") != ValidationResult.fail("y")

    def test_valid_with_error_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must not be set"):
            ValidationResult(valid=True, error="oops")

    def test_invalid_without_error_rejected(self) -> None:
        with pytest.raises(ValidationError, match="required"):
            ValidationResult(valid=False)

    def test_invalid_with_empty_error_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ValidationResult(valid=False, error="")

    def test_frozen(self) -> None:
        result = ValidationResult.ok()
        with pytest.raises(ValidationError):
            result.valid = False  # type: ignore[misc]

    def test_strict_bool(self) -> None:
        with pytest.raises(ValidationError):
            ValidationResult(valid="yes")  # type: ignore[arg-type]

    def test_dump_includes_error_key(self) -> None:
        assert ValidationResult.ok().model_dump() == {"valid": True, "error": None}


class TestConfig:
    """Tests for Config settings."""

    def test_defaults(self) -> None:
        config = Config()
        assert config.config_path == DEFAULT_CONFIG_PATH
        assert config.log_level == "INFO"
        assert config.api_key_min_length == 10

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("API_KEY_MIN_LENGTH", "20")
        config = Config()
        assert config.log_level == "DEBUG"
        assert config.api_key_min_length == 20

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValidationError, match="log_level"):
            Config(log_level="LOUD")

    def test_min_length_must_be_positive(self) -> None:
        with pytest.raises(ValidationError, match="api_key_min_length"):
            Config(api_key_min_length=0)

    def test_blank_config_path(self) -> None:
        with pytest.raises(ValidationError, match="config_path"):
            Config(config_path="  ")


class TestIntegrationConfig:
    """Tests for IntegrationConfig and its sections."""

    def test_empty(self) -> None:
        config = IntegrationConfig()
        assert config.version == CONFIG_VERSION
        assert config.jira is None
        assert config.repositories == []

    def test_full(self, valid_config_data: dict) -> None:
        config = IntegrationConfig.model_validate(valid_config_data)
        assert config.jira is not None
        assert config.jira.url == "https://acme.atlassian.net"
        assert config.notion is not None
        assert config.notion.enabled is True
        assert config.scheduler is not None
        assert config.scheduler.day_of_week == 1

    def test_unknown_top_level_keys_ignored(self) -> None:
        config = IntegrationConfig.model_validate({"legacy": True})
        assert not hasattr(config, "legacy")

    def test_unknown_section_keys_rejected(self) -> None:
        with pytest.raises(ValidationError):
            IntegrationConfig.model_validate({"linear": {"api_key": "x", "team": "y"}})

    def test_jira_requires_all_fields(self) -> None:
        with pytest.raises(ValidationError):
            IntegrationConfig.model_validate({"jira": {"url": "https://x.com"}})

    def test_scheduler_interval_choices(self) -> None:
        assert SchedulerSettings(interval="daily").interval == "daily"
        with pytest.raises(ValidationError):
            SchedulerSettings(interval="hourly")  # type: ignore[arg-type]

    def test_scheduler_day_accepts_any_value(self) -> None:
        assert SchedulerSettings(day_of_week="monday").day_of_week == "monday"
