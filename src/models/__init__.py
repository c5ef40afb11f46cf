"""Pydantic data models for the input validators."""

from src.models.config import Config
from src.models.integration_config import (
    CONFIG_VERSION,
    GitSettings,
    IntegrationConfig,
    JiraSettings,
    LinearSettings,
    NotionSettings,
    SchedulerSettings,
)
from src.models.validation_result import ValidationResult
