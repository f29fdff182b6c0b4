"""Application context tying the color picker components together."""

import logging
from threading import Lock
from typing import Optional

from colorpicker.core.dispatcher import dispatch
from colorpicker.core.menu import MenuItem, MenuItemKind, build_menu
from colorpicker.core.recent_colors import RecentColors
from colorpicker.models import AppConfig, Color, ColorFormat, InputEvent, StatusItemAction
from colorpicker.protocols import (
    Clipboard,
    ColorEvent,
    ColorObserver,
    ColorPanel,
    MenuPresenter,
    RecentColorsEvent,
    ScreenSampler,
)
from colorpicker.services import ClipboardService, ConfigService
from colorpicker.utils import ObserverManager

logger = logging.getLogger(__name__)

DEFAULT_COLOR = Color(r=1.0, g=1.0, b=1.0)


class ColorPickerApp:
    """
    Owns the state of one color picker session.

    The host constructs exactly one of these at startup and hands it the
    platform collaborators. Nothing in here looks anything up globally.

    Responsibilities:
    - The current (panel) color, with observers for changes
    - The recently picked colors, hydrated from and persisted to config
    - Pick, paste and copy flows
    - Menu bar item clicks and menu activations

    Failure Policy:
        Cancelled samples and unparseable clipboard text leave the current
        color unchanged. Persistence errors are logged; they never propagate
        into the host's event loop.
    """

    def __init__(
        self,
        config_service: ConfigService[AppConfig],
        clipboard: Clipboard,
        sampler: Optional[ScreenSampler] = None,
        panel: Optional[ColorPanel] = None,
        menu_presenter: Optional[MenuPresenter] = None,
    ):
        """
        Initialize the application context.

        Args:
            config_service: Configuration (click mode, formats, history)
            clipboard: System clipboard backend
            sampler: Screen sampler used by pick_color()
            panel: Color panel window toggled by clicks and the menu
            menu_presenter: Shows the menu bar item menu
        """
        self._config = config_service
        self._clipboard = ClipboardService(clipboard)
        self._sampler = sampler
        self._panel = panel
        self._menu_presenter = menu_presenter

        self._lock = Lock()
        self._observers = ObserverManager[ColorObserver](observer_type_name="color")

        self.recent_colors = RecentColors(config_service.get("recently_picked_colors", []))
        self.recent_colors.register_observer(self)

        latest = next(self.recent_colors.snapshot(), None)
        self._color = latest or DEFAULT_COLOR

    # =================================================================
    # Current color
    # =================================================================

    @property
    def color(self) -> Color:
        """The color shown in the panel."""
        with self._lock:
            return self._color

    def set_color(self, color: Color, event: ColorEvent = ColorEvent.CHANGED) -> None:
        """Replace the current color and notify observers."""
        with self._lock:
            self._color = color

        self._observers.notify("on_color_event", event, color)

    def register_observer(self, observer: ColorObserver) -> None:
        """Register an observer of the current color."""
        self._observers.register(observer)

    def unregister_observer(self, observer: ColorObserver) -> None:
        self._observers.unregister(observer)

    @property
    def clipboard(self) -> ClipboardService:
        return self._clipboard

    @property
    def preferred_format(self) -> ColorFormat:
        return self._config.get("preferred_color_format")

    def string_representation(self, color: Color) -> str:
        """Color as text in the user's preferred format."""
        return color.format(self.preferred_format)

    # =================================================================
    # Pick / paste / copy
    # =================================================================

    def pick_color(self) -> None:
        """Start sampling a color from the screen."""
        if self._sampler is None:
            logger.warning("No screen sampler available, cannot pick a color")
            return

        self._sampler.sample_once(self._on_color_sampled)

    def _on_color_sampled(self, color: Optional[Color]) -> None:
        if color is None:
            logger.debug("Color sampling cancelled")
            return

        self.set_color(color, ColorEvent.PICKED)
        self.recent_colors.record(color)

        if self._config.get("copy_color_after_picking"):
            self._clipboard.copy_text(self.string_representation(color))

    def paste_color(self) -> Optional[Color]:
        """
        Replace the current color with the one on the clipboard.

        Returns:
            The pasted color, or None if the clipboard holds no color (the
            current color is then left unchanged)
        """
        color = self._clipboard.paste()
        if color is not None:
            self.set_color(color, ColorEvent.PASTED)
        return color

    def can_paste(self) -> bool:
        return self._clipboard.can_paste()

    def copy_color(self, fmt: Optional[ColorFormat] = None) -> None:
        """Copy the current color, in the preferred format unless one is given."""
        self._clipboard.copy_as(self.color, fmt or self.preferred_format)

    # =================================================================
    # Menu bar item
    # =================================================================

    def build_menu(self) -> list[MenuItem]:
        """Menu items for the current settings and history."""
        return build_menu(
            self._config.get("menu_bar_item_click_action"),
            self.recent_colors.snapshot(),
            self.preferred_format,
        )

    def handle_status_item_click(self, event: InputEvent) -> StatusItemAction:
        """
        React to a click on the menu bar item.

        Returns:
            The action that was performed
        """
        action = dispatch(self._config.get("menu_bar_item_click_action"), event)
        logger.debug(f"{InputEvent(event).value} -> {action.value}")
        self.perform(action)
        return action

    def perform(self, action: StatusItemAction) -> None:
        """Carry out a dispatched action using the host collaborators."""
        if action is StatusItemAction.OPEN_PICKER:
            self.pick_color()
        elif action is StatusItemAction.TOGGLE_WINDOW:
            self._toggle_panel()
        elif action is StatusItemAction.SHOW_MENU:
            if self._menu_presenter is None:
                logger.warning("No menu presenter available, cannot show menu")
                return
            self._menu_presenter.present(self.build_menu())

    def activate_menu_item(self, item: MenuItem) -> None:
        """Handle selection of a menu item built by build_menu()."""
        if item.kind is MenuItemKind.PICK_COLOR:
            self.pick_color()
        elif item.kind is MenuItemKind.TOGGLE_WINDOW:
            self._toggle_panel()
        elif item.kind is MenuItemKind.RECENT_COLOR and item.color is not None:
            self._clipboard.copy_text(self.string_representation(item.color))
        else:
            # Settings and Quit belong to the host
            logger.debug(f"Menu item {item.kind.value} is handled by the host")

    def _toggle_panel(self) -> None:
        if self._panel is None:
            logger.warning("No color panel available, cannot toggle window")
            return
        self._panel.toggle()

    # =================================================================
    # Persistence of the history
    # =================================================================

    def on_recent_colors_event(self, event: RecentColorsEvent, colors: list[Color]) -> None:
        """Write the history back to the configuration after every change."""
        self._config.set("recently_picked_colors", colors)

        if self._config.default_path is None:
            return
        try:
            self._config.save()
        except OSError as e:
            logger.error(f"Failed to persist recent colors ({event.value}): {e}")
