"""Protocol definitions for observers and host collaborators."""

from .collaborators import Clipboard, ColorPanel, MenuPresenter, ScreenSampler
from .events import ColorEvent, ConfigEvent, RecentColorsEvent
from .observers import ColorObserver, ConfigObserver, RecentColorsObserver

__all__ = [
    # Collaborators
    "Clipboard",
    "ColorPanel",
    "MenuPresenter",
    "ScreenSampler",
    # Events
    "ColorEvent",
    "ConfigEvent",
    "RecentColorsEvent",
    # Observers
    "ColorObserver",
    "ConfigObserver",
    "RecentColorsObserver",
]
