"""Observer protocol definitions for domain events."""

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from .events import ColorEvent, ConfigEvent, RecentColorsEvent

if TYPE_CHECKING:
    from colorpicker.models import Color


@runtime_checkable
class ColorObserver(Protocol):
    """Observer that is told whenever the current color changes."""

    def on_color_event(self, event: ColorEvent, color: "Color") -> None:
        """
        Handle a change of the current color.

        Args:
            event: How the color changed
            color: The new current color
        """
        ...


@runtime_checkable
class RecentColorsObserver(Protocol):
    """Observer of the recently picked colors history."""

    def on_recent_colors_event(self, event: RecentColorsEvent, colors: list["Color"]) -> None:
        """
        Handle a history update.

        Args:
            event: The type of update
            colors: The full history after the update, oldest first
        """
        ...


@runtime_checkable
class ConfigObserver(Protocol):
    """Observer of configuration changes."""

    def on_config_event(self, event: ConfigEvent, **kwargs: Any) -> None:
        """
        Handle a configuration event.

        Args:
            event: The configuration event
            **kwargs: Event data (keys/values for updates, path for load/save)
        """
        ...
