"""Clipboard backends.

- SystemClipboard: The OS clipboard via pyperclip
- MemoryClipboard: In-process clipboard for headless use and tests
"""

import logging
from typing import Optional

import pyperclip

logger = logging.getLogger(__name__)


class SystemClipboard:
    """
    OS clipboard backed by pyperclip.

    pyperclip needs a platform mechanism (pbcopy, xclip/xsel, wl-clipboard,
    the Windows API). When none is available, writes are logged and dropped
    and reads return None, so clipboard trouble never takes the app down.
    """

    def write(self, text: str) -> None:
        """Copy text to the clipboard."""
        try:
            pyperclip.copy(text)
            logger.debug(f"Copied to clipboard: {text}")
        except pyperclip.PyperclipException as e:
            logger.error(f"Clipboard copy failed: {e}")

    def read(self) -> Optional[str]:
        """Return clipboard text, or None if empty or unavailable."""
        try:
            text = pyperclip.paste()
        except pyperclip.PyperclipException as e:
            logger.error(f"Clipboard paste failed: {e}")
            return None
        return text or None


class MemoryClipboard:
    """Clipboard that lives in memory."""

    def __init__(self, text: Optional[str] = None):
        self._text = text

    def write(self, text: str) -> None:
        self._text = text

    def read(self) -> Optional[str]:
        return self._text


__all__ = ["MemoryClipboard", "SystemClipboard"]
