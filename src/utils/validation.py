"""Input validation predicates for settings, form fields and CLI arguments.

Every validator returns a ValidationResult and never raises for bad input,
including values of the wrong type.
"""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import urlparse

from src.models.validation_result import ValidationResult

_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_BRANCH_PATTERN = re.compile(r"[a-zA-Z0-9/_.-]+")
_PROJECT_KEY_PATTERN = re.compile(r"[A-Z0-9_-]+")
_TIME_PATTERN = re.compile(r"([01][0-9]|2[0-3]):([0-5][0-9])")

DEFAULT_API_KEY_MIN_LENGTH = 10


def _is_blank(value: Any) -> bool:
    return not value or not isinstance(value, str)


def validate_url(url: Any) -> ValidationResult:
    """Validate an absolute http(s) URL."""
    if _is_blank(url):
        return ValidationResult.fail("URL is required")
    if any(ch.isspace() for ch in url):
        return ValidationResult.fail("Invalid URL format")

    try:
        parsed = urlparse(url)
        # Accessing port raises ValueError for out-of-range or non-numeric ports.
        parsed.port  # noqa: B018
    except ValueError:
        return ValidationResult.fail("Invalid URL format")

    if not parsed.scheme:
        return ValidationResult.fail("Invalid URL format")
    if parsed.scheme not in ("http", "https"):
        return ValidationResult.fail("URL must use http or https protocol")
    if not parsed.hostname:
        return ValidationResult.fail("Invalid URL format")
    return ValidationResult.ok()


def validate_email(email: Any) -> ValidationResult:
    """Validate a ``local@domain.tld`` email address."""
    if _is_blank(email):
        return ValidationResult.fail("Email is required")
    if not _EMAIL_PATTERN.fullmatch(email):
        return ValidationResult.fail("Invalid email format")
    return ValidationResult.ok()


def validate_api_key(api_key: Any, min_length: int = DEFAULT_API_KEY_MIN_LENGTH) -> ValidationResult:
    """Validate an opaque API key by length only."""
    if _is_blank(api_key):
        return ValidationResult.fail("API key is required")
    if len(api_key) < min_length:
        return ValidationResult.fail(f"API key must be at least {min_length} characters")
    return ValidationResult.ok()


def validate_branch_name(branch: Any) -> ValidationResult:
    """Validate a git branch name.

    Allows letters, digits and ``/ _ . -``. The name may not start with
    ``.`` or ``/``.
    """
    if _is_blank(branch):
        return ValidationResult.fail("Branch name is required")
    if not _BRANCH_PATTERN.fullmatch(branch):
        return ValidationResult.fail("Invalid branch name format")
    if branch.startswith((".", "/")):
        return ValidationResult.fail("Branch name cannot start with . or /")
    return ValidationResult.ok()


def validate_file_path(path: Any) -> ValidationResult:
    """Validate that a file path is a non-blank string."""
    if _is_blank(path):
        return ValidationResult.fail("File path is required")
    if not path.strip():
        return ValidationResult.fail("File path cannot be empty")
    return ValidationResult.ok()


def validate_project_key(key: Any) -> ValidationResult:
    """Validate a Jira-style project key (uppercase, digits, ``-`` and ``_``)."""
    if _is_blank(key):
        return ValidationResult.fail("Project key is required")
    if not _PROJECT_KEY_PATTERN.fullmatch(key):
        return ValidationResult.fail(
            "Project key must contain only uppercase letters, numbers, hyphens, and underscores"
        )
    return ValidationResult.ok()


def validate_non_empty(value: Any, field_name: str = "Field") -> ValidationResult:
    if _is_blank(value) or not value.strip():
        return ValidationResult.fail(f"{field_name} is required and cannot be empty")
    return ValidationResult.ok()


def validate_time_format(time: Any) -> ValidationResult:
    """Validate a zero-padded 24-hour ``HH:MM`` time."""
    if _is_blank(time):
        return ValidationResult.fail("Time is required")
    if not _TIME_PATTERN.fullmatch(time):
        return ValidationResult.fail("Time must be in HH:MM format (e.g., 09:00)")
    return ValidationResult.ok()


def validate_day_of_week(day: Any) -> ValidationResult:
    """Validate a day-of-week index, 0 (Sunday) through 6 (Saturday)."""
    # bool is an int subclass but True/False are not day numbers.
    if isinstance(day, bool) or not isinstance(day, int) or not 0 <= day <= 6:
        return ValidationResult.fail("Day of week must be a number between 0 (Sunday) and 6 (Saturday)")
    return ValidationResult.ok()
