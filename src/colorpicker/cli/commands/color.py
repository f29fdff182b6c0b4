"""Color conversion and clipboard commands."""

import click

from colorpicker.clipboard import SystemClipboard
from colorpicker.codec import detect_format
from colorpicker.core import dispatch
from colorpicker.exceptions import ColorParseError
from colorpicker.models import Color, ColorFormat, InputEvent, MenuBarItemClickAction
from colorpicker.services import ClipboardService

from ..context import fail, load_config_service

FORMAT_CHOICE = click.Choice([fmt.value for fmt in ColorFormat], case_sensitive=False)


def _parse_or_fail(text: str) -> Color:
    try:
        return Color.from_string(text)
    except ColorParseError as e:
        fail(e)


def _echo_shown_formats(color: Color, ctx: click.Context) -> None:
    shown = load_config_service(ctx.obj["config_path"]).get("shown_color_formats")
    for fmt in shown:
        click.echo(f"{fmt.label:<4} {color.format(fmt)}")


@click.command()
@click.argument("text")
@click.option("--format", "-f", "fmt", type=FORMAT_CHOICE, default=None, help="Print only this format")
@click.pass_context
def convert(ctx: click.Context, text: str, fmt: str | None):
    """
    Convert a color between formats.

    TEXT may be hex, hsl(), rgb() or lch(). Without --format, the
    configured shown formats are printed in their configured order.

    \b
    Examples:
      colorpicker convert "#ff8000"
      colorpicker convert "rgb(255 128 0)" --format lch
    """
    color = _parse_or_fail(text)

    if fmt:
        click.echo(color.format(ColorFormat(fmt.lower())))
        return

    click.echo(f"Detected format: {detect_format(text).label}")
    _echo_shown_formats(color, ctx)


@click.command()
@click.argument("text")
@click.option("--format", "-f", "fmt", type=FORMAT_CHOICE, default=None, help="Format to copy (default: preferred format)")
@click.pass_context
def copy(ctx: click.Context, text: str, fmt: str | None):
    """Copy a color to the clipboard, converted to a format."""
    color = _parse_or_fail(text)

    if fmt:
        target = ColorFormat(fmt.lower())
    else:
        target = load_config_service(ctx.obj["config_path"]).get("preferred_color_format")

    ClipboardService(SystemClipboard()).copy_as(color, target)
    click.echo(color.format(target))


@click.command()
@click.option("--format", "-f", "fmt", type=FORMAT_CHOICE, default=None, help="Print only this format")
@click.pass_context
def paste(ctx: click.Context, fmt: str | None):
    """Read a color from the clipboard, auto-detecting its format."""
    color = ClipboardService(SystemClipboard()).paste()
    if color is None:
        click.echo("Clipboard does not contain a color.", err=True)
        ctx.exit(1)

    if fmt:
        click.echo(color.format(ColorFormat(fmt.lower())))
    else:
        _echo_shown_formats(color, ctx)


@click.command(name="click")
@click.argument("button", type=click.Choice(["left", "right"], case_sensitive=False))
@click.option(
    "--mode",
    "-m",
    type=click.Choice([action.value for action in MenuBarItemClickAction], case_sensitive=False),
    default=None,
    help="Click mode (default: configured menu_bar_item_click_action)",
)
@click.pass_context
def click_action(ctx: click.Context, button: str, mode: str | None):
    """Show what clicking the menu bar item does."""
    if mode:
        click_mode = MenuBarItemClickAction(mode.lower())
    else:
        click_mode = load_config_service(ctx.obj["config_path"]).get("menu_bar_item_click_action")

    event = InputEvent.LEFT_CLICK if button.lower() == "left" else InputEvent.RIGHT_CLICK
    click.echo(dispatch(click_mode, event).value)
