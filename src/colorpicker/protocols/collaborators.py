"""Boundaries to the host platform.

The core never talks to the OS directly. The host supplies objects that
satisfy these protocols: a clipboard, a one-shot screen sampler, the color
panel window and something that can pop up a menu.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from colorpicker.core.menu import MenuItem
    from colorpicker.models import Color


@runtime_checkable
class Clipboard(Protocol):
    """Plain-text system clipboard."""

    def write(self, text: str) -> None:
        """Replace the clipboard contents with text."""
        ...

    def read(self) -> Optional[str]:
        """Return the clipboard text, or None if empty or not text."""
        ...


@runtime_checkable
class ScreenSampler(Protocol):
    """One-shot screen color sampler (e.g. a magnifier loupe)."""

    def sample_once(self, callback: Callable[[Optional["Color"]], None]) -> None:
        """
        Let the user sample one color from the screen.

        The callback runs at most once, with the sampled color or None
        if the user cancelled. It may run after this method returns.
        """
        ...


@runtime_checkable
class ColorPanel(Protocol):
    """The persistent color panel window."""

    def toggle(self) -> None:
        """Show the panel if hidden, hide it if shown."""
        ...


@runtime_checkable
class MenuPresenter(Protocol):
    """Pops up the menu bar item's menu."""

    def present(self, items: list["MenuItem"]) -> None:
        """Display the given menu items."""
        ...
