"""Apply the input validators to integration settings.

Pure functions: nothing here reads or writes the config file.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.core.errors import ConfigValidationError
from src.utils.validation import (
    DEFAULT_API_KEY_MIN_LENGTH,
    validate_api_key,
    validate_branch_name,
    validate_day_of_week,
    validate_email,
    validate_file_path,
    validate_non_empty,
    validate_time_format,
    validate_url,
)

if TYPE_CHECKING:
    from src.models.integration_config import IntegrationConfig
    from src.models.validation_result import ValidationResult


@dataclass(frozen=True)
class ConfigIssue:
    """A single failed check, keyed by dotted field path."""

    field: str
    message: str


def _issue(field: str, label: str, result: ValidationResult) -> ConfigIssue | None:
    if result.valid:
        return None
    return ConfigIssue(field=field, message=f"Invalid {label}: {result.error}")


def check_integration_config(
    config: IntegrationConfig,
    api_key_min_length: int = DEFAULT_API_KEY_MIN_LENGTH,
) -> list[ConfigIssue]:
    """Return every format problem found in the configured sections.

    Sections that are not configured are skipped. Optional git and
    scheduler fields are only checked when set.
    """
    found: list[ConfigIssue | None] = []

    if config.jira:
        found.append(_issue("jira.url", "Jira URL", validate_url(config.jira.url)))
        found.append(_issue("jira.email", "Jira email", validate_email(config.jira.email)))
        found.append(
            _issue("jira.token", "Jira token", validate_api_key(config.jira.token, api_key_min_length))
        )

    if config.linear:
        found.append(
            _issue(
                "linear.api_key",
                "Linear API key",
                validate_api_key(config.linear.api_key, api_key_min_length),
            )
        )

    if config.notion:
        found.append(
            _issue(
                "notion.api_key",
                "Notion API key",
                validate_api_key(config.notion.api_key, api_key_min_length),
            )
        )
        found.append(
            _issue(
                "notion.parent_page_id",
                "Notion parent page ID",
                validate_non_empty(config.notion.parent_page_id, "Notion parent page ID"),
            )
        )

    if config.git:
        if config.git.email:
            found.append(_issue("git.email", "Git email", validate_email(config.git.email)))
        if config.git.main_branch:
            found.append(
                _issue(
                    "git.main_branch",
                    "Git branch name",
                    validate_branch_name(config.git.main_branch),
                )
            )

    if config.scheduler:
        if config.scheduler.time:
            found.append(
                _issue(
                    "scheduler.time",
                    "scheduler time",
                    validate_time_format(config.scheduler.time),
                )
            )
        if config.scheduler.day_of_week is not None:
            found.append(
                _issue(
                    "scheduler.day_of_week",
                    "scheduler day of week",
                    validate_day_of_week(config.scheduler.day_of_week),
                )
            )

    for index, repo in enumerate(config.repositories):
        found.append(
            _issue(f"repositories[{index}]", "repository path", validate_file_path(repo))
        )

    return [issue for issue in found if issue is not None]


def ensure_valid_config(
    config: IntegrationConfig,
    api_key_min_length: int = DEFAULT_API_KEY_MIN_LENGTH,
) -> None:
    """Raise ConfigValidationError if any configured value is malformed."""
    issues = check_integration_config(config, api_key_min_length)
    if issues:
        raise ConfigValidationError(issues)
