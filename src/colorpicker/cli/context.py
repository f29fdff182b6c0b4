"""Shared helpers for CLI commands."""

import logging
from pathlib import Path
from typing import NoReturn

import click

from colorpicker.exceptions import ConfigurationError, format_error_for_display
from colorpicker.models import AppConfig
from colorpicker.services import ConfigService, run_migrations

logger = logging.getLogger(__name__)


def load_config_service(config_path: Path) -> ConfigService[AppConfig]:
    """
    Load the configuration, run pending migrations and wrap it in a service.

    The file is written back when it did not exist yet or when a migration
    changed something.

    An invalid config file (bad JSON or values) ends the command with the
    error message and a recovery hint; the file is left as it is.
    """
    is_first_launch = not config_path.exists()
    try:
        config = AppConfig.load_or_default(config_path)
    except ConfigurationError as e:
        fail(e)
    migrated = run_migrations(config, is_first_launch=is_first_launch)

    service = ConfigService[AppConfig](AppConfig, migrated, default_path=config_path)
    if is_first_launch or migrated is not config:
        service.save()
    return service


def fail(error: Exception) -> NoReturn:
    """Print an error with its recovery hint and exit with status 1."""
    user_message, recovery_hint = format_error_for_display(error)
    logger.error(f"Command failed: {user_message}")

    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)
    click.get_current_context().exit(1)
