"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from colorpicker import __version__
from colorpicker.models.config import DEFAULT_CONFIG_DIR, DEFAULT_CONFIG_PATH

from .commands import click_action, config_group, convert, copy, paste, recent

logger = logging.getLogger(__name__)


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_MAX_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5

_VERBOSITY_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Send log records to a rotating file.

    Where the file goes:
        --log-file PATH          PATH, at --log-level
        --debug                  ./colorpicker-debug.log, at DEBUG
        otherwise                ~/.colorpicker/logs/colorpicker.log, at a level
                                 chosen by -v (WARNING, -v INFO, -vv DEBUG)
    """
    if log_file:
        log_path = log_file
        level = logging.getLevelNamesMapping()[log_level.upper()]
    elif debug:
        log_path = Path.cwd() / "colorpicker-debug.log"
        level = logging.DEBUG
    else:
        log_path = DEFAULT_CONFIG_DIR / "logs" / "colorpicker.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)
        level = _VERBOSITY_LEVELS[min(verbose, len(_VERBOSITY_LEVELS) - 1)]

    handler = logging.handlers.RotatingFileHandler(
        log_path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)

    logger.info(f"Logging to {log_path} at {logging.getLevelName(level)}")


@click.group()
@click.version_option(version=__version__, prog_name="colorpicker")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Configuration file",
)
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v: INFO, -vv: DEBUG)")
@click.option("--debug", is_flag=True, help="Enable debug mode (DEBUG level, logs to ./colorpicker-debug.log)")
@click.option("--log-file", type=click.Path(path_type=Path), default=None, help="Custom log file path")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    help="Log level for file logging (default: INFO)",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Path,
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str,
):
    """
    Color Picker - convert, copy and paste colors as Hex, HSL, RGB or LCH.

    \b
    Examples:
      # Show a color in every format
      colorpicker convert "#ff8000"

      # Copy a color as LCH
      colorpicker copy "hsl(30, 100%, 50%)" --format lch

      # Read whatever color is on the clipboard
      colorpicker paste

      # Recently picked colors
      colorpicker recent

      # Make clicks on the menu bar item open the sampler
      colorpicker config set --click-action show_color_sampler
    """
    setup_logging(verbose, debug, log_file, log_level)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


cli.add_command(convert)
cli.add_command(copy)
cli.add_command(paste)
cli.add_command(click_action)
cli.add_command(recent)
cli.add_command(config_group)

if __name__ == "__main__":
    cli()
