"""Recently picked colors command."""

import click

from colorpicker.clipboard import SystemClipboard
from colorpicker.core import ColorPickerApp
from colorpicker.exceptions import ColorParseError
from colorpicker.models import Color

from ..context import fail, load_config_service


@click.command()
@click.option("--record", "-r", "record_text", default=None, help="Add a color as the most recent pick")
@click.option("--clear", is_flag=True, help="Forget all recently picked colors")
@click.pass_context
def recent(ctx: click.Context, record_text: str | None, clear: bool):
    """
    List recently picked colors, most recent first.

    Colors are shown in the preferred format. At most six are kept.
    """
    service = load_config_service(ctx.obj["config_path"])
    app = ColorPickerApp(service, SystemClipboard())

    if clear:
        app.recent_colors.clear()
        click.echo("Recent colors cleared.")
        return

    if record_text:
        try:
            app.recent_colors.record(Color.from_string(record_text))
        except ColorParseError as e:
            fail(e)

    colors = list(app.recent_colors.snapshot())
    if not colors:
        click.echo("No recently picked colors.")
        return

    for index, color in enumerate(colors, start=1):
        click.echo(f"[{index}] {app.string_representation(color)}")
