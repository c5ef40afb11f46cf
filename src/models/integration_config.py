"""Integration settings models checked by the config validators.

These models hold raw values only. Format rules (URL, email, branch name,
HH:MM time, ...) are applied by ``src.core.config_checks`` so that a bad
value can be reported with a readable message instead of a pydantic error.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

CONFIG_VERSION = "1.0.0"


class JiraSettings(BaseModel):
    """Jira connection settings."""

    model_config = ConfigDict(extra="forbid")

    url: str
    email: str
    token: str


class LinearSettings(BaseModel):
    """Linear connection settings."""

    model_config = ConfigDict(extra="forbid")

    api_key: str


class NotionSettings(BaseModel):
    """Notion export settings."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    api_key: str
    parent_page_id: str


class GitSettings(BaseModel):
    """Git identity and default branch."""

    model_config = ConfigDict(extra="forbid")

    email: str | None = None
    main_branch: str | None = None


class SchedulerSettings(BaseModel):
    """Scheduled collection settings."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = False
    interval: Literal["daily", "weekly"] | None = None
    time: str | None = None
    # Checked by validate_day_of_week, so any value is accepted here.
    day_of_week: Any = None


class IntegrationConfig(BaseModel):
    """Top-level integration configuration persisted by ConfigStore."""

    model_config = ConfigDict(extra="ignore")

    version: str = CONFIG_VERSION
    jira: JiraSettings | None = None
    linear: LinearSettings | None = None
    notion: NotionSettings | None = None
    git: GitSettings | None = None
    scheduler: SchedulerSettings | None = None
    repositories: list[str] = Field(default_factory=list)
