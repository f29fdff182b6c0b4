"""Menu bar item menu, as plain data.

The host renders these items however its UI toolkit wants and routes
activations back to ColorPickerApp.activate_menu_item().
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from colorpicker.models import Color, ColorFormat, MenuBarItemClickAction


class MenuItemKind(str, Enum):
    """Kinds of menu entries."""

    PICK_COLOR = "pick_color"
    TOGGLE_WINDOW = "toggle_window"
    HEADER = "header"
    RECENT_COLOR = "recent_color"
    SEPARATOR = "separator"
    SETTINGS = "settings"
    QUIT = "quit"


@dataclass(frozen=True)
class MenuItem:
    """A single menu entry. Recent color entries carry their color."""

    kind: MenuItemKind
    title: str = ""
    color: Optional[Color] = None

    @property
    def is_actionable(self) -> bool:
        return self.kind not in (MenuItemKind.HEADER, MenuItemKind.SEPARATOR)


SEPARATOR = MenuItem(MenuItemKind.SEPARATOR)


def build_menu(
    click_action: MenuBarItemClickAction,
    recent_colors: Iterable[Color],
    preferred_format: ColorFormat,
) -> list[MenuItem]:
    """
    Build the menu shown for the menu bar item.

    Entries that duplicate what a left click already does are left out:
    no "Pick Color" when clicking opens the sampler, no "Toggle Window"
    when clicking toggles the window.

    Args:
        click_action: Configured click mode
        recent_colors: Recently picked colors, most recent first
        preferred_format: Format used to title (and copy) recent colors

    Returns:
        Menu items in display order
    """
    items: list[MenuItem] = []

    if click_action != MenuBarItemClickAction.SHOW_COLOR_SAMPLER:
        items.append(MenuItem(MenuItemKind.PICK_COLOR, "Pick Color"))

    if click_action != MenuBarItemClickAction.TOGGLE_WINDOW:
        items.append(MenuItem(MenuItemKind.TOGGLE_WINDOW, "Toggle Window"))

    items.append(SEPARATOR)

    colors = list(recent_colors)
    if colors:
        items.append(MenuItem(MenuItemKind.HEADER, "Recently Picked Colors"))
        items.extend(
            MenuItem(MenuItemKind.RECENT_COLOR, color.format(preferred_format), color)
            for color in colors
        )

    # Added even when there is no history
    items.append(SEPARATOR)
    items.append(MenuItem(MenuItemKind.SETTINGS, "Settings…"))
    items.append(SEPARATOR)
    items.append(MenuItem(MenuItemKind.QUIT, "Quit"))
    return items
