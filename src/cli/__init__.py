"""CLI entry point for the input validators."""

from __future__ import annotations

import click

from src.cli.commands import check_config, check_value, show_config


@click.group()
def cli() -> None:
    """Validate URLs, emails, API keys and other settings."""


cli.add_command(check_value)
cli.add_command(check_config)
cli.add_command(show_config)
