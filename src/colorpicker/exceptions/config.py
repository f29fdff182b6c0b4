"""Errors for a config file that can't be read or doesn't validate."""

from typing import Any

from .base import ColorPickerError

# Extra hint lines keyed by a substring of the failing field name
_FIELD_HINTS = {
    "format": "Valid color formats: hex, hsl, rgb, lch",
    "click_action": "Valid click actions: show_menu, show_color_sampler, toggle_window",
    "colors": 'Write colors as {"r": 1, "g": 0, "b": 0} or as strings such as "#ff0000"',
}


class ConfigurationError(ColorPickerError):
    """The configuration can't be used."""


class ConfigFileInvalidError(ConfigurationError):
    """The config file is empty or isn't valid JSON."""

    def __init__(self, file_path: str, parse_error: str):
        if "empty" in parse_error.lower():
            user_msg = "Configuration file is empty"
            recovery = f"Delete {file_path} to start over with default settings"
        else:
            user_msg = "Configuration file has invalid syntax"
            recovery = (
                f"Fix the JSON in {file_path} (look for trailing commas, unquoted "
                "keys and unclosed braces), or delete it to start over with default settings"
            )

        super().__init__(
            user_message=user_msg,
            technical_message=f"Cannot parse {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """A config value has the wrong type or is out of range."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: str | None = None):
        """
        Args:
            field: Dotted path of the failing field, e.g. 'recently_picked_colors.2'
            value: The rejected value
            error_msg: pydantic's description of the problem
            file_path: Config file the value came from, if any
        """
        hint_lines = [f"Correct '{field}' with 'colorpicker config set' or by editing the file"]
        if file_path:
            hint_lines.append(f"Config file: {file_path}")
        hint_lines.extend(hint for key, hint in _FIELD_HINTS.items() if key in field.lower())

        super().__init__(
            user_message=f"Invalid configuration value for '{field}': {error_msg}",
            technical_message=f"{field}={value!r} rejected: {error_msg}",
            recoverable=True,
            recovery_hint="\n".join(hint_lines),
        )
        self.field = field
        self.value = value
        self.file_path = file_path
