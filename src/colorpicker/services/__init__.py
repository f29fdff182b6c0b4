"""Application services."""

from .clipboard_service import ClipboardService
from .config_service import ConfigService
from .migration import MIGRATIONS, run_migrations

__all__ = ["MIGRATIONS", "ClipboardService", "ConfigService", "run_migrations"]
