"""Enumerations for the color picker."""

from enum import Enum


class ColorFormat(str, Enum):
    """Textual color formats for copy and paste."""

    HEX = "hex"  # #rrggbb / #rrggbbaa
    HSL = "hsl"  # hsl(H, S%, L%)
    RGB = "rgb"  # rgb(R, G, B)
    LCH = "lch"  # lch(L% C H)

    @property
    def label(self) -> str:
        """Display name used in menus ("Copy as HSL")."""
        return "Hex" if self is ColorFormat.HEX else self.value.upper()


class LegacyCopyFormat(str, Enum):
    """Old "format to copy after picking" setting, replaced by ColorFormat + a flag."""

    NONE = "none"
    HEX = "hex"
    HSL = "hsl"
    RGB = "rgb"
    LCH = "lch"


class MenuBarItemClickAction(str, Enum):
    """What a left click on the menu bar item does."""

    SHOW_MENU = "show_menu"
    SHOW_COLOR_SAMPLER = "show_color_sampler"
    TOGGLE_WINDOW = "toggle_window"


class InputEvent(str, Enum):
    """Mouse events delivered by the menu bar item."""

    LEFT_CLICK = "left_click"
    RIGHT_CLICK = "right_click"


class StatusItemAction(str, Enum):
    """Action the host performs in response to a menu bar item click."""

    OPEN_PICKER = "open_picker"
    TOGGLE_WINDOW = "toggle_window"
    SHOW_MENU = "show_menu"
