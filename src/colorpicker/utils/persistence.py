"""Reading and writing pydantic models as JSON files.

Writes go to ``<name>.tmp`` first and are moved over the target, and the
previous file is kept as ``<name>.bak``. A file that fails to load is never
replaced with defaults; only a missing file is.
"""

import logging
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from colorpicker.exceptions import ConfigFileInvalidError, wrap_pydantic_error

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class PydanticPersistence:
    """
    Static JSON load/save helpers shared by AppConfig and ConfigService.

    Example:
        ```python
        config = PydanticPersistence.load_json_or_default(path, AppConfig)
        PydanticPersistence.save_json(config, path)
        ```
    """

    @staticmethod
    def load_json(path: Path, model_type: type[ModelT]) -> ModelT:
        """
        Read ``path`` and validate it as ``model_type``.

        Raises:
            FileNotFoundError: The file doesn't exist
            ConfigFileInvalidError: The file is empty, unreadable or not JSON
            ConfigValidationError: The JSON doesn't fit the model
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Cannot read {path}: {e}")
            raise ConfigFileInvalidError(str(path), f"Cannot read file: {e}") from e

        if not text.strip():
            raise ConfigFileInvalidError(str(path), "File is empty")

        try:
            model = model_type.model_validate_json(text)
        except ValidationError as e:
            logger.error(f"{path} is not a valid {model_type.__name__}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Loaded {model_type.__name__} from {path}")
        return model

    @staticmethod
    def save_json(data: BaseModel, path: Path, indent: int = 2, backup: bool = True) -> None:
        """
        Write ``data`` to ``path`` atomically, creating parent directories.

        Args:
            data: Model to serialize
            path: Destination file
            indent: JSON indentation
            backup: Copy an existing file to ``<name>.bak`` first

        Raises:
            OSError: The file or its directory can't be written
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        if backup and path.exists():
            shutil.copy2(path, path.with_suffix(path.suffix + ".bak"))

        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            temp_path.write_text(data.model_dump_json(indent=indent), encoding="utf-8")
            temp_path.replace(path)
        except OSError as e:
            logger.error(f"Failed to write {path}: {e}")
            raise
        finally:
            temp_path.unlink(missing_ok=True)

        logger.debug(f"Saved {type(data).__name__} to {path}")

    @staticmethod
    def load_json_or_default(
        path: Path, model_type: type[ModelT], default_factory: Callable[[], ModelT] | None = None
    ) -> ModelT:
        """Like load_json, but a missing file yields a default (which is not written)."""
        try:
            return PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            logger.info(f"No file at {path}, using default {model_type.__name__}")
            return default_factory() if default_factory else model_type()
