"""CLI command implementations for the input validators."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from src.core.config_checks import check_integration_config
from src.core.errors import ConfigFileError
from src.models.config import Config
from src.services.config_store import ConfigStore
from src.utils.logger import configure_logging
from src.utils.validation import (
    validate_api_key,
    validate_branch_name,
    validate_day_of_week,
    validate_email,
    validate_file_path,
    validate_project_key,
    validate_time_format,
    validate_url,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from src.models.validation_result import ValidationResult

_VALIDATORS: dict[str, Callable[[str], ValidationResult]] = {
    "url": validate_url,
    "email": validate_email,
    "branch": validate_branch_name,
    "path": validate_file_path,
    "time": validate_time_format,
    "project-key": validate_project_key,
}

VALUE_KINDS = (*_VALIDATORS, "api-key", "day")


def _get_config() -> Config:
    """Load configuration from .env file."""
    return Config()


def _get_store(config: Config, path: str | None) -> ConfigStore:
    return ConfigStore(path or config.config_path, api_key_min_length=config.api_key_min_length)


def _parse_day(value: str) -> int | str:
    """Return VALUE as an int when it is an ASCII integer, otherwise unchanged."""
    if not value.isascii():
        return value
    try:
        return int(value)
    except ValueError:
        return value


@click.command()
@click.argument("kind", type=click.Choice(VALUE_KINDS))
@click.argument("value")
@click.option("--min-length", type=int, default=None, help="Minimum length for api-key checks")
def check_value(kind: str, value: str, min_length: int | None) -> None:
    """Check a single VALUE against the KIND format rule."""
    config = _get_config()
    configure_logging(config.log_level)

    if kind == "api-key":
        result = validate_api_key(
            value, config.api_key_min_length if min_length is None else min_length
        )
    elif kind == "day":
        result = validate_day_of_week(_parse_day(value))
    else:
        result = _VALIDATORS[kind](value)

    if result.valid:
        click.echo("[VALID]")
        return
    click.echo(f"[INVALID] {result.error}")
    raise SystemExit(1)


@click.command()
@click.argument("path", required=False)
def check_config(path: str | None) -> None:
    """Check every configured integration setting in the config file."""
    config = _get_config()
    configure_logging(config.log_level)
    store = _get_store(config, path)

    try:
        stored = store.load_strict()
    except ConfigFileError as exc:
        click.echo(f"[ERROR] {store.path} could not be loaded: {exc.reason}")
        raise SystemExit(1) from exc

    issues = check_integration_config(stored, config.api_key_min_length)
    if not issues:
        click.echo(f"[SUCCESS] {store.path} is valid")
        return

    click.echo(f"[ERROR] {len(issues)} problem(s) in {store.path}:")
    for issue in issues:
        click.echo(f"  - {issue.field}: {issue.message}")
    raise SystemExit(1)


@click.command()
@click.argument("path", required=False)
def show_config(path: str | None) -> None:
    """Print the stored integration config as JSON."""
    config = _get_config()
    configure_logging(config.log_level)
    store = _get_store(config, path)

    stored = store.load()
    click.echo(json.dumps(stored.model_dump(mode="json", exclude_none=True), indent=2))
