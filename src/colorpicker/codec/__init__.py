"""Text codec for colors: one canonical serializer and one lenient parser per format."""

from .parse import (
    DETECTION_ORDER,
    detect_format,
    parse_as,
    parse_color,
    parse_color_strict,
    parse_hex,
    parse_hsl,
    parse_lch,
    parse_rgb,
)
from .serialize import format_color, format_hex, format_hsl, format_lch, format_rgb

__all__ = [
    # Parsing
    "DETECTION_ORDER",
    "detect_format",
    "parse_as",
    "parse_color",
    "parse_color_strict",
    "parse_hex",
    "parse_hsl",
    "parse_lch",
    "parse_rgb",
    # Serialization
    "format_color",
    "format_hex",
    "format_hsl",
    "format_lch",
    "format_rgb",
]
