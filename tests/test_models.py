"""Unit tests for the Color and AppConfig models."""

import json

import pytest
from pydantic import ValidationError

from colorpicker.models import (
    AppConfig,
    Color,
    ColorFormat,
    LegacyCopyFormat,
    MenuBarItemClickAction,
)


class TestColor:
    """Test Color model."""

    @pytest.mark.unit
    def test_create_color(self):
        """Test creating a color with RGB values; alpha defaults to opaque."""
        color = Color(r=0.2, g=0.4, b=0.6)
        assert color.r == 0.2
        assert color.g == 0.4
        assert color.b == 0.6
        assert color.a == 1.0
        assert color.is_opaque

    @pytest.mark.unit
    def test_component_range_validation(self):
        """Test that components must be within 0-1."""
        with pytest.raises(ValidationError):
            Color(r=1.5, g=0, b=0)

        with pytest.raises(ValidationError):
            Color(r=0, g=-0.1, b=0)

        with pytest.raises(ValidationError):
            Color(r=0, g=0, b=0, a=2)

    @pytest.mark.unit
    def test_frozen(self):
        """Test that colors are immutable."""
        color = Color(r=0, g=0, b=0)
        with pytest.raises(ValidationError):
            color.r = 1.0

    @pytest.mark.unit
    def test_equality_and_hash(self):
        """Test component-wise equality and hashing."""
        assert Color(r=1, g=0, b=0) == Color.from_rgb255(255, 0, 0)
        assert hash(Color(r=1, g=0, b=0)) == hash(Color.from_rgb255(255, 0, 0))
        assert Color(r=1, g=0, b=0) != Color(r=1, g=0, b=0, a=0.5)
        assert len({Color(r=1, g=0, b=0), Color.from_rgb255(255, 0, 0)}) == 1

    @pytest.mark.unit
    def test_rgb255_round_trip(self):
        """Test conversion to 0-255 channels."""
        assert Color.from_rgb255(255, 128, 0).to_rgb255() == (255, 128, 0)
        assert Color(r=1.0, g=0.5, b=0.0).to_rgb255() == (255, 128, 0)

    @pytest.mark.unit
    def test_to_hsl(self):
        """Test HSL conversion of primaries."""
        assert Color(r=1, g=0, b=0).to_hsl() == pytest.approx((0.0, 1.0, 0.5))
        assert Color(r=0, g=1, b=0).to_hsl() == pytest.approx((120.0, 1.0, 0.5))
        assert Color(r=0, g=0, b=1).to_hsl() == pytest.approx((240.0, 1.0, 0.5))

    @pytest.mark.unit
    def test_gray_has_no_hue(self):
        """Test that grays report hue 0 and no saturation or chroma."""
        gray = Color(r=0.5, g=0.5, b=0.5)
        assert gray.to_hsl() == (0.0, 0.0, 0.5)

        _, chroma, hue = gray.to_lch()
        assert chroma == 0.0
        assert hue == 0.0

    @pytest.mark.unit
    def test_from_hsl(self):
        """Test creating a color from HSL."""
        assert Color.from_hsl(0, 1.0, 0.5) == Color(r=1, g=0, b=0)
        assert Color.from_hsl(0, 0.0, 1.0) == Color(r=1, g=1, b=1)
        assert Color.from_hsl(480, 1.0, 0.5).to_rgb255() == (0, 255, 0)

    @pytest.mark.unit
    def test_to_lch_white_and_black(self):
        """Test LCH lightness endpoints."""
        white_l, white_c, _ = Color(r=1, g=1, b=1).to_lch()
        black_l, black_c, _ = Color(r=0, g=0, b=0).to_lch()

        assert white_l == pytest.approx(100.0, abs=0.01)
        assert black_l == pytest.approx(0.0, abs=0.01)
        assert white_c == 0.0
        assert black_c == 0.0

    @pytest.mark.unit
    def test_to_lch_red(self):
        """Test LCH of sRGB red against the D65 reference values."""
        lightness, chroma, hue = Color(r=1, g=0, b=0).to_lch()
        assert lightness == pytest.approx(53.24, abs=0.1)
        assert chroma == pytest.approx(104.55, abs=0.2)
        assert hue == pytest.approx(40.0, abs=0.5)

    @pytest.mark.unit
    def test_lch_round_trip(self):
        """Test that an in-gamut color survives LCH and back."""
        color = Color.from_rgb255(30, 144, 200)
        back = Color.from_lch(*color.to_lch())
        assert back.r == pytest.approx(color.r, abs=1e-4)
        assert back.g == pytest.approx(color.g, abs=1e-4)
        assert back.b == pytest.approx(color.b, abs=1e-4)

    @pytest.mark.unit
    def test_from_lch_clamps_out_of_gamut(self):
        """Test that out-of-gamut LCH is clamped into 0-1 instead of rejected."""
        color = Color.from_lch(50, 230, 140)
        channels = (color.r, color.g, color.b)
        assert all(0.0 <= channel <= 1.0 for channel in channels)
        assert any(channel in (0.0, 1.0) for channel in channels)

    @pytest.mark.unit
    def test_from_lch_rejects_overflowing_chroma(self):
        """Test that a chroma too large for the conversion raises instead of yielding NaN."""
        with pytest.raises(ValueError):
            Color.from_lch(50, 1e150, 300)

    @pytest.mark.unit
    def test_conversions_are_memoized(self):
        """Test that derived views are computed once per color value."""
        first = Color.from_rgb255(12, 34, 56)
        second = Color.from_rgb255(12, 34, 56)
        assert first.to_lch() is second.to_lch()
        assert first.to_hsl() is second.to_hsl()

    @pytest.mark.unit
    def test_validate_from_string(self):
        """Test that any supported color string validates into a Color."""
        assert Color.model_validate("#ff0000") == Color(r=1, g=0, b=0)
        assert Color.model_validate("rgb(0 255 0)") == Color(r=0, g=1, b=0)

        with pytest.raises(ValidationError):
            Color.model_validate("not a color")

    @pytest.mark.unit
    def test_format(self):
        """Test serializing through the model."""
        color = Color.from_rgb255(255, 128, 0)
        assert color.to_hex() == "#ff8000"
        assert color.format(ColorFormat.RGB) == "rgb(255, 128, 0)"


class TestAppConfig:
    """Test AppConfig model."""

    @pytest.mark.unit
    def test_defaults(self):
        """Test default configuration values."""
        config = AppConfig()
        assert config.preferred_color_format == ColorFormat.HEX
        assert config.copy_color_after_picking is False
        assert config.menu_bar_item_click_action == MenuBarItemClickAction.SHOW_MENU
        assert config.shown_color_formats == list(ColorFormat)
        assert config.recently_picked_colors == []
        assert config.color_format_to_copy_after_picking == LegacyCopyFormat.NONE
        assert config.completed_migrations == []

    @pytest.mark.unit
    def test_save_and_load(self, config_path):
        """Test JSON round trip including recent colors."""
        config = AppConfig(
            preferred_color_format=ColorFormat.LCH,
            recently_picked_colors=[Color(r=1, g=0, b=0), Color(r=0, g=0, b=1, a=0.5)],
        )
        config.save(config_path)

        loaded = AppConfig.load_or_default(config_path)
        assert loaded == config

    @pytest.mark.unit
    def test_recent_colors_accept_strings(self, config_path):
        """Test that hand-edited configs may list colors as strings."""
        config_path.write_text(
            json.dumps({"recently_picked_colors": ["#ff0000", "rgb(0 255 0)"]}),
            encoding="utf-8",
        )

        loaded = AppConfig.load_or_default(config_path)
        assert loaded.recently_picked_colors == [Color(r=1, g=0, b=0), Color(r=0, g=1, b=0)]

    @pytest.mark.unit
    def test_load_missing_file_returns_default(self, tmp_path):
        """Test that a missing file yields defaults and is not created."""
        path = tmp_path / "missing.json"
        assert AppConfig.load_or_default(path) == AppConfig()
        assert not path.exists()
