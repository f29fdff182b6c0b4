"""CLI commands for colorpicker."""

from .color import click_action, convert, copy, paste
from .config import config_group
from .recent import recent

__all__ = ["click_action", "config_group", "convert", "copy", "paste", "recent"]
