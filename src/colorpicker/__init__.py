"""colorpicker: color conversion, clipboard round-trip and pick history for a menu bar color picker."""

__version__ = "0.1.0"

from .core import ColorPickerApp, RecentColors, dispatch
from .models import AppConfig, Color, ColorFormat

__all__ = [
    "AppConfig",
    "Color",
    "ColorFormat",
    "ColorPickerApp",
    "RecentColors",
    "dispatch",
]
