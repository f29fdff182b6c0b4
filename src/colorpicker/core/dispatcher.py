"""Decide what a click on the menu bar item does."""

from colorpicker.models import InputEvent, MenuBarItemClickAction, StatusItemAction

# The configured mode chooses the left-click action; right click gives the
# menu, except in menu mode where it opens the picker instead.
_DISPATCH_TABLE: dict[tuple[MenuBarItemClickAction, InputEvent], StatusItemAction] = {
    (MenuBarItemClickAction.SHOW_MENU, InputEvent.LEFT_CLICK): StatusItemAction.SHOW_MENU,
    (MenuBarItemClickAction.SHOW_MENU, InputEvent.RIGHT_CLICK): StatusItemAction.OPEN_PICKER,
    (MenuBarItemClickAction.SHOW_COLOR_SAMPLER, InputEvent.LEFT_CLICK): StatusItemAction.OPEN_PICKER,
    (MenuBarItemClickAction.SHOW_COLOR_SAMPLER, InputEvent.RIGHT_CLICK): StatusItemAction.SHOW_MENU,
    (MenuBarItemClickAction.TOGGLE_WINDOW, InputEvent.LEFT_CLICK): StatusItemAction.TOGGLE_WINDOW,
    (MenuBarItemClickAction.TOGGLE_WINDOW, InputEvent.RIGHT_CLICK): StatusItemAction.SHOW_MENU,
}


def dispatch(mode: MenuBarItemClickAction, event: InputEvent) -> StatusItemAction:
    """
    Map the configured click mode and a mouse event to an action.

    Pure function: no state is kept between calls.

    Example:
        >>> dispatch(MenuBarItemClickAction.TOGGLE_WINDOW, InputEvent.RIGHT_CLICK)
        <StatusItemAction.SHOW_MENU: 'show_menu'>
    """
    return _DISPATCH_TABLE[MenuBarItemClickAction(mode), InputEvent(event)]
