"""One-time settings migrations.

Each migration has a stable identifier and runs at most once per config
file; the identifier is appended to ``AppConfig.completed_migrations`` when
it has run. On a first launch there are no old settings to carry over, so
migrations are marked complete without applying their changes.
"""

import logging
from collections.abc import Callable

from colorpicker.models import AppConfig, ColorFormat, LegacyCopyFormat, MenuBarItemClickAction

logger = logging.getLogger(__name__)

Migration = Callable[[AppConfig], dict]


def _preferred_format_from_legacy(config: AppConfig) -> dict:
    """Split the old "format to copy after picking" into a flag plus a preferred format."""
    legacy = config.color_format_to_copy_after_picking
    if legacy is LegacyCopyFormat.NONE:
        return {}

    return {
        "copy_color_after_picking": True,
        "preferred_color_format": ColorFormat(legacy.value),
    }


def _keep_toggle_window_click_action(config: AppConfig) -> dict:
    """Existing users keep the old behavior where clicking the item toggles the window."""
    return {"menu_bar_item_click_action": MenuBarItemClickAction.TOGGLE_WINDOW}


MIGRATIONS: list[tuple[str, Migration]] = [
    ("migrate_to_preferred_color_format_setting", _preferred_format_from_legacy),
    ("set_defaults_for_menu_bar_item_click_action_setting", _keep_toggle_window_click_action),
]


def run_migrations(config: AppConfig, is_first_launch: bool) -> AppConfig:
    """
    Apply pending migrations.

    Args:
        config: Loaded configuration
        is_first_launch: True when no config file existed before this launch

    Returns:
        A new AppConfig with migration changes applied and recorded. The
        input is not modified.
    """
    completed = list(config.completed_migrations)
    changes: dict = {}

    for identifier, migration in MIGRATIONS:
        if identifier in completed:
            continue

        if is_first_launch:
            logger.debug(f"First launch, skipping migration {identifier}")
        else:
            update = migration(config.model_copy(update=changes))
            if update:
                logger.info(f"Migration {identifier} applied: {sorted(update)}")
            changes.update(update)
        completed.append(identifier)

    if completed == config.completed_migrations:
        return config

    changes["completed_migrations"] = completed
    return AppConfig.model_validate({**config.model_dump(), **changes})
