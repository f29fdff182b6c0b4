"""Tests for configuration persistence, the config service and migrations."""

import json
from unittest.mock import Mock

import pytest
from pydantic import ValidationError

from colorpicker.exceptions import (
    ConfigFileInvalidError,
    ConfigValidationError,
    format_error_for_display,
)
from colorpicker.models import (
    AppConfig,
    Color,
    ColorFormat,
    LegacyCopyFormat,
    MenuBarItemClickAction,
)
from colorpicker.protocols import ConfigEvent
from colorpicker.services import MIGRATIONS, ConfigService, run_migrations
from colorpicker.utils import PydanticPersistence

ALL_MIGRATIONS = [identifier for identifier, _ in MIGRATIONS]


class TestPydanticPersistence:
    """Test JSON load/save with backups."""

    @pytest.mark.unit
    def test_save_creates_parent_dirs(self, tmp_path):
        """Test that saving creates missing directories."""
        path = tmp_path / "nested" / "dir" / "config.json"
        PydanticPersistence.save_json(AppConfig(), path)
        assert path.exists()

    @pytest.mark.unit
    def test_save_creates_backup(self, config_path):
        """Test that overwriting keeps the previous file as .bak."""
        PydanticPersistence.save_json(AppConfig(), config_path)
        PydanticPersistence.save_json(AppConfig(copy_color_after_picking=True), config_path)

        backup = config_path.with_suffix(".json.bak")
        assert backup.exists()
        assert json.loads(backup.read_text())["copy_color_after_picking"] is False
        assert json.loads(config_path.read_text())["copy_color_after_picking"] is True

    @pytest.mark.unit
    def test_no_temp_file_left(self, config_path):
        """Test that the atomic write cleans up its temp file."""
        PydanticPersistence.save_json(AppConfig(), config_path)
        assert not config_path.with_suffix(".json.tmp").exists()

    @pytest.mark.unit
    def test_load_missing_raises(self, tmp_path):
        """Test that load_json doesn't invent a default."""
        with pytest.raises(FileNotFoundError):
            PydanticPersistence.load_json(tmp_path / "missing.json", AppConfig)

    @pytest.mark.unit
    def test_invalid_json(self, config_path):
        """Test that broken JSON raises ConfigFileInvalidError."""
        config_path.write_text("{")
        with pytest.raises(ConfigFileInvalidError) as exc_info:
            PydanticPersistence.load_json(config_path, AppConfig)

        assert exc_info.value.user_message == "Configuration file has invalid syntax"
        assert str(config_path) in exc_info.value.recovery_hint

    @pytest.mark.unit
    def test_empty_file(self, config_path):
        """Test that an empty file has its own message."""
        config_path.write_text("  \n")
        with pytest.raises(ConfigFileInvalidError) as exc_info:
            PydanticPersistence.load_json(config_path, AppConfig)

        assert exc_info.value.user_message == "Configuration file is empty"

    @pytest.mark.unit
    def test_invalid_value(self, config_path):
        """Test that a bad enum value raises ConfigValidationError naming the field."""
        config_path.write_text(json.dumps({"preferred_color_format": "cmyk"}))
        with pytest.raises(ConfigValidationError) as exc_info:
            PydanticPersistence.load_json(config_path, AppConfig)

        assert "preferred_color_format" in exc_info.value.user_message
        assert "hex, hsl, rgb, lch" in exc_info.value.recovery_hint

    @pytest.mark.unit
    def test_invalid_recent_color(self, config_path):
        """Test that an unparseable color string in the history is rejected."""
        config_path.write_text(json.dumps({"recently_picked_colors": ["#ff0000", "nope"]}))
        with pytest.raises(ConfigValidationError) as exc_info:
            AppConfig.load_or_default(config_path)

        assert "recently_picked_colors" in exc_info.value.user_message

    @pytest.mark.unit
    def test_invalid_file_is_not_overwritten(self, config_path):
        """Test that load_or_default propagates errors instead of replacing the file."""
        config_path.write_text("{ not json")
        with pytest.raises(ConfigFileInvalidError):
            AppConfig.load_or_default(config_path)
        assert config_path.read_text() == "{ not json"


class TestConfigService:
    """Test ConfigService."""

    @pytest.mark.unit
    def test_get_and_set(self, config_service):
        """Test reading and writing a single value."""
        assert config_service.get("preferred_color_format") == ColorFormat.HEX
        config_service.set("preferred_color_format", "lch")
        assert config_service.get("preferred_color_format") == ColorFormat.LCH

    @pytest.mark.unit
    def test_get_missing_key_default(self, config_service):
        """Test the default for unknown keys."""
        assert config_service.get("nope", 42) == 42

    @pytest.mark.unit
    def test_unknown_key_rejected(self, config_service):
        """Test that setting an unknown field raises AttributeError."""
        with pytest.raises(AttributeError):
            config_service.set("nope", 1)

    @pytest.mark.unit
    def test_invalid_update_is_all_or_nothing(self, config_service):
        """Test that a failing update leaves every value unchanged."""
        with pytest.raises(ValidationError):
            config_service.update({"copy_color_after_picking": True, "preferred_color_format": "cmyk"})

        assert config_service.get("copy_color_after_picking") is False
        assert config_service.get("preferred_color_format") == ColorFormat.HEX

    @pytest.mark.unit
    def test_update_notifies(self, config_service):
        """Test that observers receive CONFIG_UPDATED with the changed keys."""
        observer = Mock()
        config_service.register_observer(observer)

        config_service.update({"copy_color_after_picking": True})

        observer.on_config_event.assert_called_once_with(
            ConfigEvent.CONFIG_UPDATED,
            keys=["copy_color_after_picking"],
            values={"copy_color_after_picking": True},
        )

    @pytest.mark.unit
    def test_get_config_is_a_copy(self, config_service):
        """Test that the returned config can't change the service."""
        config = config_service.get_config()
        config.shown_color_formats.clear()
        assert config_service.get("shown_color_formats") == list(ColorFormat)

    @pytest.mark.unit
    def test_save_and_load(self, config_service, config_path):
        """Test round-tripping through the default path."""
        config_service.set("recently_picked_colors", [Color(r=1, g=0, b=0)])
        config_service.save()

        other = ConfigService[AppConfig](AppConfig, AppConfig(), default_path=config_path)
        other.load()
        assert other.get("recently_picked_colors") == [Color(r=1, g=0, b=0)]

    @pytest.mark.unit
    def test_reset(self, config_service):
        """Test resetting to defaults emits CONFIG_RESET."""
        observer = Mock()
        config_service.set("copy_color_after_picking", True)
        config_service.register_observer(observer)

        config_service.reset()

        assert config_service.get("copy_color_after_picking") is False
        assert observer.on_config_event.call_args.args[0] is ConfigEvent.CONFIG_RESET

    @pytest.mark.unit
    def test_save_without_path(self):
        """Test that saving without any path is an error."""
        service = ConfigService[AppConfig](AppConfig, AppConfig())
        with pytest.raises(ValueError):
            service.save()


class TestMigrations:
    """Test one-time settings migrations."""

    @pytest.mark.unit
    def test_first_launch_marks_complete(self):
        """Test that a fresh install records all migrations without applying them."""
        migrated = run_migrations(AppConfig(), is_first_launch=True)

        assert migrated.completed_migrations == ALL_MIGRATIONS
        assert migrated.menu_bar_item_click_action == MenuBarItemClickAction.SHOW_MENU

    @pytest.mark.unit
    def test_existing_user_keeps_toggle_window(self):
        """Test that upgrading users keep click-to-toggle."""
        migrated = run_migrations(AppConfig(), is_first_launch=False)

        assert migrated.menu_bar_item_click_action == MenuBarItemClickAction.TOGGLE_WINDOW
        assert migrated.copy_color_after_picking is False
        assert migrated.completed_migrations == ALL_MIGRATIONS

    @pytest.mark.unit
    def test_legacy_copy_format(self):
        """Test that the old copy format becomes the preferred format plus the copy flag."""
        config = AppConfig(color_format_to_copy_after_picking=LegacyCopyFormat.HSL)
        migrated = run_migrations(config, is_first_launch=False)

        assert migrated.preferred_color_format == ColorFormat.HSL
        assert migrated.copy_color_after_picking is True

    @pytest.mark.unit
    def test_idempotent(self):
        """Test that a second run changes nothing."""
        once = run_migrations(AppConfig(), is_first_launch=False)
        twice = run_migrations(once, is_first_launch=False)

        assert twice is once

    @pytest.mark.unit
    def test_input_not_modified(self):
        """Test that the input config is left alone."""
        config = AppConfig()
        run_migrations(config, is_first_launch=False)

        assert config.completed_migrations == []
        assert config.menu_bar_item_click_action == MenuBarItemClickAction.SHOW_MENU

    @pytest.mark.unit
    def test_completed_migration_not_rerun(self):
        """Test that a user who chose a click mode after migrating keeps it."""
        config = AppConfig(
            menu_bar_item_click_action=MenuBarItemClickAction.SHOW_COLOR_SAMPLER,
            completed_migrations=ALL_MIGRATIONS,
        )
        assert run_migrations(config, is_first_launch=False) is config


class TestErrorDisplay:
    """Test format_error_for_display."""

    @pytest.mark.unit
    def test_colorpicker_error(self, config_path):
        """Test that our errors show their user message and hint."""
        error = ConfigFileInvalidError(str(config_path), "File is empty")
        message, hint = format_error_for_display(error)

        assert message == "Configuration file is empty"
        assert str(config_path) in hint

    @pytest.mark.unit
    def test_other_error(self):
        """Test that foreign errors show their type and no hint."""
        message, hint = format_error_for_display(KeyError("x"))

        assert message.startswith("KeyError")
        assert hint is None
