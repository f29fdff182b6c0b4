"""Color model and colorspace conversions."""

import colorsys
import logging
import math
import warnings
from functools import lru_cache
from typing import Any

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_validator
from skimage import color as skcolor

from colorpicker.models.enums import ColorFormat

logger = logging.getLogger(__name__)


class Color(BaseModel):
    """Device-independent sRGB color with alpha.

    Channels are floats in the 0-1 range. RGB is the only stored
    representation; HSL, LAB/LCH and hex are derived on demand and memoized
    per color, which works because the model is frozen (and so hashable).

    Equality is component-wise, which is what the recent colors history
    uses for deduplication.
    """

    model_config = ConfigDict(frozen=True)

    r: float = Field(ge=0.0, le=1.0, description="Red (0-1)")
    g: float = Field(ge=0.0, le=1.0, description="Green (0-1)")
    b: float = Field(ge=0.0, le=1.0, description="Blue (0-1)")
    a: float = Field(default=1.0, ge=0.0, le=1.0, description="Alpha (0-1)")

    @model_validator(mode="before")
    @classmethod
    def parse_text(cls, data: Any) -> Any:
        """Accept any supported color string (e.g. '#ff0000') in place of a mapping."""
        if isinstance(data, str):
            from colorpicker.codec import parse_color_strict

            return parse_color_strict(data).model_dump()
        return data

    # =================================================================
    # Constructors
    # =================================================================

    @classmethod
    def from_rgb255(cls, r: float, g: float, b: float, a: float = 1.0) -> "Color":
        """Create a color from 0-255 channel values."""
        return cls(r=r / 255.0, g=g / 255.0, b=b / 255.0, a=a)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, a: float = 1.0) -> "Color":
        """Create a color from hue in degrees and saturation/lightness in 0-1."""
        r, g, b = colorsys.hls_to_rgb((h % 360.0) / 360.0, l, s)
        return cls(r=_clamp(r), g=_clamp(g), b=_clamp(b), a=a)

    @classmethod
    def from_lch(cls, l: float, c: float, h: float, a: float = 1.0) -> "Color":
        """Create a color from CIE LCH (D65).

        Values outside the sRGB gamut are clamped per channel rather than
        rejected, so any LCH triple yields a displayable color.

        Args:
            l: Lightness, 0-100
            c: Chroma, >= 0
            h: Hue in degrees
            a: Alpha, 0-1

        Raises:
            ValueError: If the chroma is so large that the conversion
                overflows to NaN
        """
        lch = np.array([[[l, c, math.radians(h % 360.0)]]], dtype=np.float64)
        lab = skcolor.lch2lab(lch)

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            rgb = skcolor.lab2rgb(lab)
        if not np.isfinite(rgb).all():
            raise ValueError(f"lch({l} {c} {h}) overflows the sRGB conversion")
        if caught:
            logger.debug(f"lch({l} {c} {h}) is outside sRGB, clamping: {caught[0].message}")

        r, g, b = np.clip(rgb[0, 0], 0.0, 1.0)
        return cls(r=float(r), g=float(g), b=float(b), a=a)

    @classmethod
    def from_string(cls, text: str) -> "Color":
        """Parse a color in any supported format.

        Raises:
            ColorParseError: If the text is not a valid color
        """
        from colorpicker.codec import parse_color_strict

        return parse_color_strict(text)

    # =================================================================
    # Derived representations
    # =================================================================

    @property
    def is_opaque(self) -> bool:
        """True when alpha is 1."""
        return self.a >= 1.0

    def to_rgb255(self) -> tuple[int, int, int]:
        """Convert to 0-255 channels, rounding half up.

        Example:
            >>> Color(r=1.0, g=0.5, b=0.0).to_rgb255()
            (255, 128, 0)
        """
        return (_round_half_up(self.r * 255), _round_half_up(self.g * 255), _round_half_up(self.b * 255))

    def to_hsl(self) -> tuple[float, float, float]:
        """Convert to HSL.

        Returns:
            (hue in degrees [0, 360), saturation 0-1, lightness 0-1).
            Grays report hue 0 and saturation 0.
        """
        return _hsl_of(self)

    def to_lab(self) -> tuple[float, float, float]:
        """Convert to CIE LAB (D65, 2 degree observer)."""
        return _lab_of(self)

    def to_lch(self) -> tuple[float, float, float]:
        """Convert to CIE LCH.

        Returns:
            (lightness 0-100, chroma >= 0, hue in degrees [0, 360)).
            Grays report chroma 0 and hue 0.
        """
        return _lch_of(self)

    def to_hex(self) -> str:
        """Convert to a lowercase hex string ('#rrggbb', or '#rrggbbaa' when translucent)."""
        return self.format(ColorFormat.HEX)

    def format(self, fmt: ColorFormat) -> str:
        """Serialize in the given format."""
        from colorpicker.codec import format_color

        return format_color(self, fmt)


def _clamp(value: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return max(lo, min(hi, value))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _is_gray(color: Color) -> bool:
    return color.r == color.g == color.b


@lru_cache(maxsize=256)
def _hsl_of(color: Color) -> tuple[float, float, float]:
    if _is_gray(color):
        return 0.0, 0.0, color.r

    h, l, s = colorsys.rgb_to_hls(color.r, color.g, color.b)
    return (h * 360.0) % 360.0, s, l


@lru_cache(maxsize=256)
def _lab_of(color: Color) -> tuple[float, float, float]:
    rgb = np.array([[[color.r, color.g, color.b]]], dtype=np.float64)
    lab = skcolor.rgb2lab(rgb, illuminant="D65", observer="2")
    l, a, b = lab[0, 0]
    return _clamp(float(l), 0.0, 100.0), float(a), float(b)


@lru_cache(maxsize=256)
def _lch_of(color: Color) -> tuple[float, float, float]:
    l, a, b = _lab_of(color)
    if _is_gray(color):
        return l, 0.0, 0.0

    lch = skcolor.lab2lch(np.array([[[l, a, b]]], dtype=np.float64))
    _, c, h = lch[0, 0]
    return l, float(c), math.degrees(float(h)) % 360.0
