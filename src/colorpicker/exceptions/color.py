"""Color parsing exceptions."""

from .base import ColorPickerError


class ColorParseError(ColorPickerError, ValueError):
    """Text could not be interpreted as a color in any supported format.

    Raised by the strict parsing entry points (``Color.from_string`` and the
    per-grammar parsers). The lenient ``parse_color`` catches it and returns
    ``None`` instead, so pasting garbage never reaches the user as an error.
    """

    def __init__(self, text: str, reason: str):
        """
        Initialize color parse error.

        Args:
            text: The text that failed to parse
            reason: Why it failed
        """
        super().__init__(
            user_message=f"Not a valid color: {text!r}",
            technical_message=f"Failed to parse {text!r}: {reason}",
            recoverable=True,
            recovery_hint=(
                "Use one of: #rrggbb, hsl(H, S%, L%), rgb(R, G, B) or lch(L% C H)"
            ),
        )
        self.text = text
        self.reason = reason
