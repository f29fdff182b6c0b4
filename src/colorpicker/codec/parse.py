"""Lenient parsing of color text.

Each grammar has a strict parser that raises ColorParseError. The public
``parse_color`` tries them in a fixed order (hex, hsl, rgb, lch) and returns
the first success, or ``None``. Nothing is applied partially: a parser either
returns a complete Color or raises.

Accepted input, beyond the canonical serializations:
    - surrounding whitespace, any letter case
    - hex with or without '#', in 3, 4, 6 or 8 digits
    - 'rgba(' / 'hsla(' aliases
    - arguments separated by commas, whitespace, or '/' before alpha
    - percentages for rgb channels and alpha, 'deg' on hues
"""

import logging
import math
import re

from colorpicker.exceptions import ColorParseError
from colorpicker.models.color import Color
from colorpicker.models.enums import ColorFormat

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"^#?([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
_FUNCTION_RE = re.compile(r"^(?P<name>[a-z]+)\(\s*(?P<args>[^()]*?)\s*\)$", re.IGNORECASE)
_TOKEN_RE = re.compile(
    r"^(?P<number>[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:e[+-]?\d+)?)(?P<unit>%|deg)?$",
    re.IGNORECASE,
)
_SEPARATOR_RE = re.compile(r"\s*,\s*|\s*/\s*|\s+")

# Paste detection order; a string is interpreted by the first grammar that accepts it
DETECTION_ORDER = (ColorFormat.HEX, ColorFormat.HSL, ColorFormat.RGB, ColorFormat.LCH)


def parse_hex(text: str) -> Color:
    """Parse '#rgb', '#rgba', '#rrggbb' or '#rrggbbaa' ('#' optional)."""
    match = _HEX_RE.match(text.strip())
    if not match:
        raise ColorParseError(text, "not a hex color")

    digits = match.group(1)
    if len(digits) <= 4:
        digits = "".join(digit * 2 for digit in digits)

    channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
    alpha = channels[3] / 255.0 if len(channels) == 4 else 1.0
    return Color.from_rgb255(channels[0], channels[1], channels[2], a=alpha)


def parse_hsl(text: str) -> Color:
    """Parse 'hsl(H, S%, L%)' with an optional fourth alpha argument."""
    args = _function_args(text, ("hsl", "hsla"))
    _expect_arg_count(text, args, 3)

    hue = _parse_hue(text, args[0])
    saturation = _parse_percentage(text, args[1])
    lightness = _parse_percentage(text, args[2])
    alpha = _parse_alpha(text, args[3]) if len(args) == 4 else 1.0
    return Color.from_hsl(hue, saturation, lightness, a=alpha)


def parse_rgb(text: str) -> Color:
    """Parse 'rgb(R, G, B)' with 0-255 or percentage channels and optional alpha."""
    args = _function_args(text, ("rgb", "rgba"))
    _expect_arg_count(text, args, 3)

    r, g, b = (_parse_channel(text, arg) for arg in args[:3])
    alpha = _parse_alpha(text, args[3]) if len(args) == 4 else 1.0
    return Color(r=r, g=g, b=b, a=alpha)


def parse_lch(text: str) -> Color:
    """Parse 'lch(L% C H)' with optional '/ alpha'; out-of-gamut results are clamped."""
    args = _function_args(text, ("lch",))
    _expect_arg_count(text, args, 3)

    lightness = _parse_lightness(text, args[0])
    chroma = _parse_chroma(text, args[1])
    hue = _parse_hue(text, args[2])
    alpha = _parse_alpha(text, args[3]) if len(args) == 4 else 1.0
    try:
        return Color.from_lch(lightness, chroma, hue, a=alpha)
    except ValueError as e:
        raise ColorParseError(text, "chroma out of range") from e


_PARSERS = {
    ColorFormat.HEX: parse_hex,
    ColorFormat.HSL: parse_hsl,
    ColorFormat.RGB: parse_rgb,
    ColorFormat.LCH: parse_lch,
}


def parse_as(text: str | None, fmt: ColorFormat) -> Color | None:
    """Parse text using a single grammar, returning None on failure."""
    if not text:
        return None
    try:
        return _PARSERS[ColorFormat(fmt)](text)
    except ColorParseError as e:
        logger.debug(e.technical_message)
        return None


def detect_format(text: str | None) -> ColorFormat | None:
    """Return the first format whose grammar accepts the text."""
    for fmt in DETECTION_ORDER:
        if parse_as(text, fmt) is not None:
            return fmt
    return None


def parse_color(text: str | None) -> Color | None:
    """Parse text in any supported format.

    Formats are tried in DETECTION_ORDER and the first successful parse wins.

    Returns:
        The parsed color, or None when the text is empty or matches nothing
    """
    for fmt in DETECTION_ORDER:
        color = parse_as(text, fmt)
        if color is not None:
            return color
    return None


def parse_color_strict(text: str) -> Color:
    """Like parse_color, but raises ColorParseError instead of returning None."""
    color = parse_color(text)
    if color is None:
        raise ColorParseError(text, "does not match hex, hsl, rgb or lch syntax")
    return color


# =================================================================
# Argument helpers
# =================================================================

def _function_args(text: str, names: tuple[str, ...]) -> list[str]:
    match = _FUNCTION_RE.match(text.strip())
    if not match or match.group("name").lower() not in names:
        raise ColorParseError(text, f"not a {names[0]}() color")

    args = match.group("args")
    if not args:
        raise ColorParseError(text, "no arguments")
    return _SEPARATOR_RE.split(args)


def _expect_arg_count(text: str, args: list[str], count: int) -> None:
    if len(args) not in (count, count + 1):
        raise ColorParseError(text, f"expected {count} or {count + 1} arguments, got {len(args)}")


def _split_token(text: str, token: str) -> tuple[float, str]:
    match = _TOKEN_RE.match(token)
    if not match:
        raise ColorParseError(text, f"invalid number {token!r}")

    value = float(match.group("number"))
    if not math.isfinite(value):
        raise ColorParseError(text, f"invalid number {token!r}")
    return value, (match.group("unit") or "").lower()


def _in_range(text: str, token: str, value: float, lo: float, hi: float) -> float:
    if not lo <= value <= hi:
        raise ColorParseError(text, f"{token!r} is out of range {lo:g}-{hi:g}")
    return value


def _parse_hue(text: str, token: str) -> float:
    value, unit = _split_token(text, token)
    if unit not in ("", "deg"):
        raise ColorParseError(text, f"hue {token!r} must be in degrees")
    return value % 360.0


def _parse_percentage(text: str, token: str) -> float:
    # The '%' sign is optional; bare numbers are read as percents too
    value, unit = _split_token(text, token)
    if unit not in ("", "%"):
        raise ColorParseError(text, f"{token!r} must be a percentage")
    return _in_range(text, token, value, 0.0, 100.0) / 100.0


def _parse_channel(text: str, token: str) -> float:
    value, unit = _split_token(text, token)
    if unit == "%":
        return _in_range(text, token, value, 0.0, 100.0) / 100.0
    if unit:
        raise ColorParseError(text, f"invalid channel {token!r}")
    return _in_range(text, token, value, 0.0, 255.0) / 255.0


def _parse_alpha(text: str, token: str) -> float:
    value, unit = _split_token(text, token)
    if unit == "%":
        return _in_range(text, token, value, 0.0, 100.0) / 100.0
    if unit:
        raise ColorParseError(text, f"invalid alpha {token!r}")
    return _in_range(text, token, value, 0.0, 1.0)


def _parse_lightness(text: str, token: str) -> float:
    value, unit = _split_token(text, token)
    if unit not in ("", "%"):
        raise ColorParseError(text, f"lightness {token!r} must be a percentage")
    return _in_range(text, token, value, 0.0, 100.0)


def _parse_chroma(text: str, token: str) -> float:
    value, unit = _split_token(text, token)
    if unit:
        raise ColorParseError(text, f"chroma {token!r} must be a plain number")
    return _in_range(text, token, value, 0.0, math.inf)
