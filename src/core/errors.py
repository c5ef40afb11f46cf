"""Exceptions raised by the configuration layer."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.core.config_checks import ConfigIssue


class ConfigValidationError(ValueError):
    """Raised when integration settings fail one or more format checks."""

    def __init__(self, issues: list[ConfigIssue]) -> None:
        self.issues = list(issues)
        super().__init__("; ".join(issue.message for issue in self.issues))


class ConfigFileError(ValueError):
    """Raised when the config file cannot be read or does not fit the settings schema."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
