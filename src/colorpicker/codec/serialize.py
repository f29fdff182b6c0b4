"""Canonical text serialization for each ColorFormat.

The output strings are a contract with whoever consumes copied text:

    hex  #ff8000        #ff800080 when translucent
    hsl  hsl(30, 100%, 50%)        hsl(30, 100%, 50%, 0.5)
    rgb  rgb(255, 128, 0)          rgb(255, 128, 0, 0.5)
    lch  lch(67.1% 95.6 56)        lch(67.1% 95.6 56 / 0.5)
"""

import math

from colorpicker.models.color import Color
from colorpicker.models.enums import ColorFormat


def format_hex(color: Color) -> str:
    """Serialize as '#rrggbb', adding an alpha byte when alpha < 1."""
    r, g, b = color.to_rgb255()
    text = f"#{r:02x}{g:02x}{b:02x}"
    if not color.is_opaque:
        text += f"{_round_half_up(color.a * 255):02x}"
    return text


def format_hsl(color: Color) -> str:
    """Serialize as 'hsl(H, S%, L%)' with integer degrees and percents."""
    h, s, l = color.to_hsl()
    parts = [
        str(_round_half_up(h) % 360),
        f"{_round_half_up(s * 100)}%",
        f"{_round_half_up(l * 100)}%",
    ]
    if not color.is_opaque:
        parts.append(_format_decimal(color.a, 3))
    return f"hsl({', '.join(parts)})"


def format_rgb(color: Color) -> str:
    """Serialize as 'rgb(R, G, B)' with 0-255 integer channels."""
    parts = [str(channel) for channel in color.to_rgb255()]
    if not color.is_opaque:
        parts.append(_format_decimal(color.a, 3))
    return f"rgb({', '.join(parts)})"


def format_lch(color: Color) -> str:
    """Serialize as 'lch(L% C H)'; lightness and chroma to one decimal, hue to a degree."""
    l, c, h = color.to_lch()
    text = f"lch({_format_decimal(l, 1)}% {_format_decimal(c, 1)} {_round_half_up(h) % 360}"
    if not color.is_opaque:
        text += f" / {_format_decimal(color.a, 3)}"
    return text + ")"


_FORMATTERS = {
    ColorFormat.HEX: format_hex,
    ColorFormat.HSL: format_hsl,
    ColorFormat.RGB: format_rgb,
    ColorFormat.LCH: format_lch,
}


def format_color(color: Color, fmt: ColorFormat) -> str:
    """Serialize a color in the requested format."""
    return _FORMATTERS[ColorFormat(fmt)](color)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _format_decimal(value: float, places: int) -> str:
    """Fixed-point with trailing zeros dropped: 0.5 -> '0.5', 100.0 -> '100'."""
    text = f"{value:.{places}f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text
