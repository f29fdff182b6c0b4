"""
Turning low-level errors into ColorPickerErrors, and showing them.

pydantic reports both broken JSON and bad values as ``ValidationError``;
``wrap_pydantic_error`` tells the two apart so the CLI can print a message
and a hint instead of a traceback:

```python
try:
    config = AppConfig.model_validate_json(text)
except ValidationError as e:
    raise wrap_pydantic_error(e, str(path)) from e
```
"""

from typing import Optional

from pydantic import ValidationError

from .base import ColorPickerError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError


def _location(error: dict) -> str:
    return ".".join(str(part) for part in error.get("loc", ())) or "config"


def wrap_pydantic_error(error: ValidationError, file_path: str) -> ConfigurationError:
    """
    Convert a pydantic ValidationError raised while loading ``file_path``.

    Returns:
        ConfigFileInvalidError for malformed JSON, otherwise a
        ConfigValidationError naming the failing field (or all of them)
    """
    details = error.errors()

    syntax = [detail for detail in details if detail.get("type") == "json_invalid"]
    if syntax:
        return ConfigFileInvalidError(file_path, syntax[0].get("msg", str(error)))

    if len(details) == 1:
        detail = details[0]
        return ConfigValidationError(
            field=_location(detail),
            value=detail.get("input"),
            error_msg=detail.get("msg", "invalid value"),
            file_path=file_path,
        )

    summary = "\n".join(f"  - {_location(detail)}: {detail.get('msg')}" for detail in details)
    return ConfigValidationError(
        field=", ".join(_location(detail) for detail in details),
        value=None,
        error_msg=f"{len(details)} problems:\n{summary}",
        file_path=file_path,
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Message and optional recovery hint for showing an error to the user.

    Errors from outside the package are shown as ``"<Type>: <message>"``.
    """
    if isinstance(error, ColorPickerError):
        return error.user_message, error.recovery_hint
    return f"{type(error).__name__}: {error}", None
