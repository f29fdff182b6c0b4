"""
Custom exception hierarchy for colorpicker.

## Exception Hierarchy

```
ColorPickerError (base)
├── ColorParseError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions carry a `user_message`, a `technical_message` for the
logs, a `recoverable` flag and an optional `recovery_hint`.

Parsing clipboard text is the common failure path and is deliberately quiet:
`colorpicker.codec.parse_color` returns ``None`` rather than raising
`ColorParseError`. The exception surfaces only from strict entry points such
as `Color.from_string`, which the CLI and the config model use.
"""

from .base import ColorPickerError
from .color import ColorParseError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import format_error_for_display, wrap_pydantic_error

__all__ = [
    # Base
    "ColorPickerError",
    # Color
    "ColorParseError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Handlers
    "format_error_for_display",
    "wrap_pydantic_error",
]
