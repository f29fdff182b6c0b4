"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field

from colorpicker.models.color import Color
from colorpicker.models.enums import ColorFormat, LegacyCopyFormat, MenuBarItemClickAction
from colorpicker.utils.persistence import PydanticPersistence

DEFAULT_CONFIG_DIR = Path.home() / ".colorpicker"
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.json"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    # Copy behavior
    preferred_color_format: ColorFormat = Field(
        default=ColorFormat.HEX,
        description="Format used when copying the current or a recent color",
    )
    copy_color_after_picking: bool = Field(
        default=False,
        description="Copy the picked color to the clipboard in the preferred format",
    )
    shown_color_formats: list[ColorFormat] = Field(
        default_factory=lambda: list(ColorFormat),
        description="Formats listed when displaying a color",
    )

    # Menu bar item
    menu_bar_item_click_action: MenuBarItemClickAction = Field(
        default=MenuBarItemClickAction.SHOW_MENU,
        description="What a left click on the menu bar item does (right click does the alternative)",
    )

    # History, oldest first
    recently_picked_colors: list[Color] = Field(
        default_factory=list,
        description="Recently picked colors, oldest first",
    )

    # Legacy settings kept only so migrations can read them
    color_format_to_copy_after_picking: LegacyCopyFormat = Field(
        default=LegacyCopyFormat.NONE,
        description="Deprecated: replaced by preferred_color_format and copy_color_after_picking",
    )
    completed_migrations: list[str] = Field(
        default_factory=list,
        description="Identifiers of one-time migrations that already ran",
    )

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.colorpicker/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_json_or_default(path or DEFAULT_CONFIG_PATH, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        PydanticPersistence.save_json(self, path or DEFAULT_CONFIG_PATH)
