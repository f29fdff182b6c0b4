"""Data models for the color picker."""

from .color import Color
from .config import DEFAULT_CONFIG_PATH, AppConfig
from .enums import (
    ColorFormat,
    InputEvent,
    LegacyCopyFormat,
    MenuBarItemClickAction,
    StatusItemAction,
)

__all__ = [
    # Models
    "AppConfig",
    "Color",
    "DEFAULT_CONFIG_PATH",
    # Enums
    "ColorFormat",
    "InputEvent",
    "LegacyCopyFormat",
    "MenuBarItemClickAction",
    "StatusItemAction",
]
