"""Root of the colorpicker exception hierarchy."""

from typing import Optional


class ColorPickerError(Exception):
    """
    Error raised by colorpicker itself.

    Each error carries two messages: a short one for the person at the
    terminal (also what ``str()`` returns) and a detailed one for the log
    file. ``recovery_hint`` tells the user what to do next, and
    ``recoverable`` marks errors the app can continue after (a bad color
    string, a broken config file) as opposed to programming errors.
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message
