"""
Config command group.

Commands:
    - config show [--field FIELD]     # Display configuration
    - config set --option VALUE ...   # Update configuration and save
    - config reset [--yes]            # Reset to defaults
"""

import click
from pydantic import ValidationError

from colorpicker.exceptions import wrap_pydantic_error
from colorpicker.models import AppConfig, ColorFormat, MenuBarItemClickAction
from colorpicker.services import MIGRATIONS

from ..context import fail, load_config_service

FORMAT_VALUES = [fmt.value for fmt in ColorFormat]
CLICK_ACTION_VALUES = [action.value for action in MenuBarItemClickAction]


def _format_value(value) -> str:
    if isinstance(value, list):
        return ", ".join(_format_value(item) for item in value) or "(none)"
    if hasattr(value, "to_hex"):
        return value.to_hex()
    if hasattr(value, "value"):
        return str(value.value)
    return str(value)


@click.group(name="config")
def config_group():
    """Configure the color picker."""
    pass


@config_group.command(name="show")
@click.option("--field", "-f", default=None, help="Show a single field")
@click.pass_context
def show(ctx: click.Context, field: str | None):
    """Show the current configuration."""
    service = load_config_service(ctx.obj["config_path"])
    config = service.get_config()

    if field:
        if field not in AppConfig.model_fields:
            raise click.BadParameter(f"Unknown field '{field}'", param_hint="--field")
        click.echo(_format_value(getattr(config, field)))
        return

    click.echo(f"Config file: {service.default_path}\n")
    for name in AppConfig.model_fields:
        click.echo(f"{name}: {_format_value(getattr(config, name))}")


@config_group.command(name="set")
@click.option(
    "--preferred-format",
    "-p",
    type=click.Choice(FORMAT_VALUES, case_sensitive=False),
    default=None,
    help="Format used when copying colors",
)
@click.option(
    "--copy-after-picking/--no-copy-after-picking",
    default=None,
    help="Copy picked colors to the clipboard automatically",
)
@click.option(
    "--click-action",
    "-c",
    type=click.Choice(CLICK_ACTION_VALUES, case_sensitive=False),
    default=None,
    help="What a left click on the menu bar item does",
)
@click.option(
    "--shown-format",
    "shown_formats",
    multiple=True,
    type=click.Choice(FORMAT_VALUES, case_sensitive=False),
    help="Formats to display (repeat for several)",
)
@click.pass_context
def set_values(
    ctx: click.Context,
    preferred_format: str | None,
    copy_after_picking: bool | None,
    click_action: str | None,
    shown_formats: tuple[str, ...],
):
    """Update configuration values and save."""
    updates = {}
    if preferred_format:
        updates["preferred_color_format"] = preferred_format.lower()
    if copy_after_picking is not None:
        updates["copy_color_after_picking"] = copy_after_picking
    if click_action:
        updates["menu_bar_item_click_action"] = click_action.lower()
    if shown_formats:
        updates["shown_color_formats"] = [fmt.lower() for fmt in shown_formats]

    if not updates:
        click.echo("Nothing to update. See 'colorpicker config set --help'.")
        return

    service = load_config_service(ctx.obj["config_path"])
    try:
        service.update(updates)
    except ValidationError as e:
        fail(wrap_pydantic_error(e, str(service.default_path)))
    service.save()

    for key in updates:
        click.echo(f"{key}: {_format_value(service.get(key))}")


@config_group.command(name="reset")
@click.option("--yes", is_flag=True, help="Don't ask for confirmation")
@click.pass_context
def reset(ctx: click.Context, yes: bool):
    """Reset all settings (including recent colors) to defaults."""
    if not yes:
        click.confirm("Reset all settings to defaults?", abort=True)

    service = load_config_service(ctx.obj["config_path"])
    service.reset()
    # Old settings are gone, so the one-time migrations must not run again
    service.set("completed_migrations", [identifier for identifier, _ in MIGRATIONS])
    service.save()
    click.echo("Configuration reset to defaults.")
