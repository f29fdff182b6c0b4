"""Domain events for observer pattern.

- Color events: The current (panel) color changed
- Recent colors events: The history was updated
- Config events: Settings were changed, loaded or saved
"""

from enum import Enum


class ColorEvent(Enum):
    """Events for the current color."""

    PICKED = "picked"    # Color came from the screen sampler
    PASTED = "pasted"    # Color came from the clipboard
    CHANGED = "changed"  # Color was set directly


class RecentColorsEvent(Enum):
    """Events from the recently picked colors history."""

    RECORDED = "recorded"  # A color was added or moved to the front
    CLEARED = "cleared"    # History was emptied


class ConfigEvent(Enum):
    """Events from the configuration service."""

    CONFIG_UPDATED = "config_updated"
    CONFIG_RESET = "config_reset"
    CONFIG_LOADED = "config_loaded"
    CONFIG_SAVED = "config_saved"
