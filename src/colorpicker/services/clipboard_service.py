"""Copy colors to and paste colors from the clipboard."""

import logging

from colorpicker.codec import format_color, parse_color
from colorpicker.models import Color, ColorFormat
from colorpicker.protocols import Clipboard

logger = logging.getLogger(__name__)


class ClipboardService:
    """
    Clipboard round-trip for colors.

    Copying serializes with the canonical formatter for the chosen format.
    Pasting auto-detects the format (hex, hsl, rgb, lch in that order) and
    yields None for anything that isn't a color, so callers can simply keep
    their current color.
    """

    def __init__(self, clipboard: Clipboard):
        """
        Initialize the clipboard service.

        Args:
            clipboard: Backend implementing the Clipboard protocol
        """
        self._clipboard = clipboard

    def copy_as(self, color: Color, fmt: ColorFormat) -> None:
        """
        Copy a color to the clipboard in the given format.

        Args:
            color: Color to copy
            fmt: Output format
        """
        text = format_color(color, fmt)
        self._clipboard.write(text)
        logger.info(f"Copied color as {ColorFormat(fmt).value}: {text}")

    def copy_text(self, text: str) -> None:
        """Copy an already formatted color string."""
        self._clipboard.write(text)
        logger.info(f"Copied color: {text}")

    def paste(self) -> Color | None:
        """
        Read a color from the clipboard.

        Returns:
            The parsed color, or None if the clipboard is empty or holds
            text that isn't a color
        """
        text = self._clipboard.read()
        if text is None:
            logger.debug("Clipboard is empty")
            return None

        color = parse_color(text)
        if color is None:
            logger.debug(f"Clipboard text is not a color: {text!r}")
        else:
            logger.info(f"Pasted color from {text!r}")
        return color

    def can_paste(self) -> bool:
        """True if the clipboard currently holds a parseable color."""
        return parse_color(self._clipboard.read()) is not None
