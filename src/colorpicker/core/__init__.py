"""Core color picker logic: history, click dispatch, menu model and the app context."""

from .application import ColorPickerApp
from .dispatcher import dispatch
from .menu import MenuItem, MenuItemKind, build_menu
from .recent_colors import RecentColors

__all__ = [
    "ColorPickerApp",
    "MenuItem",
    "MenuItemKind",
    "RecentColors",
    "build_menu",
    "dispatch",
]
