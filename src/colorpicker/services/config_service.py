"""Configuration service for managing application configuration."""

import logging
from pathlib import Path
from threading import Lock
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from colorpicker.protocols import ConfigEvent, ConfigObserver
from colorpicker.utils import ObserverManager, PydanticPersistence

logger = logging.getLogger(__name__)

ConfigType = TypeVar("ConfigType", bound=BaseModel)


class ConfigService(Generic[ConfigType]):
    """
    Service for reading, changing and persisting a pydantic configuration.

    Every mutation re-validates the whole model, so an invalid value leaves
    the current configuration untouched. Observers receive a ConfigEvent
    after each change.

    Threading:
        All public methods are thread-safe. The lock is released before
        observers are notified.

    Usage Example:
        ```python
        config = AppConfig.load_or_default()
        service = ConfigService[AppConfig](AppConfig, config, default_path=path)

        fmt = service.get("preferred_color_format")
        service.set("copy_color_after_picking", True)
        service.save()
        ```
    """

    def __init__(
        self,
        config_type: type[ConfigType],
        initial_config: ConfigType,
        default_path: Optional[Path] = None,
    ):
        """
        Initialize the configuration service.

        Args:
            config_type: The pydantic model class (e.g., AppConfig)
            initial_config: The initial configuration instance
            default_path: Default path for save/load operations (optional)
        """
        self._config_type = config_type
        self._config = initial_config
        self._default_path = default_path
        self._lock = Lock()
        self._observers = ObserverManager[ConfigObserver](observer_type_name="config")

        logger.info(f"ConfigService initialized with {config_type.__name__}")

    @property
    def default_path(self) -> Optional[Path]:
        """Path used by load() and save() when none is given."""
        return self._default_path

    # =================================================================
    # Event System
    # =================================================================

    def register_observer(self, observer: ConfigObserver) -> None:
        """Register an observer to receive configuration events."""
        self._observers.register(observer)

    def unregister_observer(self, observer: ConfigObserver) -> None:
        """Unregister an observer."""
        self._observers.unregister(observer)

    def _notify_observers(self, event: ConfigEvent, **kwargs: Any) -> None:
        self._observers.notify("on_config_event", event, **kwargs)

    # =================================================================
    # Configuration Access
    # =================================================================

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by key."""
        with self._lock:
            return getattr(self._config, key, default)

    def get_config(self) -> ConfigType:
        """Get a deep copy of the entire configuration object."""
        with self._lock:
            return self._config.model_copy(deep=True)

    # =================================================================
    # Configuration Mutation
    # =================================================================

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value by key.

        Raises:
            AttributeError: If key doesn't exist in config model
            ValidationError: If value fails validation

        Events:
            Emits CONFIG_UPDATED with keys=[key], values={key: value}
        """
        self.update({key: value})

    def update(self, values: dict[str, Any]) -> None:
        """
        Update multiple configuration values at once (all or nothing).

        Raises:
            AttributeError: If any key doesn't exist in config model
            ValidationError: If any value fails validation

        Events:
            Emits a single CONFIG_UPDATED with all changed keys/values
        """
        with self._lock:
            for key in values:
                if key not in self._config_type.model_fields:
                    raise AttributeError(f"'{self._config_type.__name__}' has no field '{key}'")

            # Pydantic doesn't validate on setattr, so rebuild the model
            try:
                current = self._config.model_dump()
                current.update(values)
                self._config = self._config_type.model_validate(current)
            except ValidationError as e:
                logger.error(f"Validation error updating {list(values)}: {e}")
                raise

        self._notify_observers(ConfigEvent.CONFIG_UPDATED, keys=list(values), values=values)
        logger.debug(f"Config updated: {list(values)}")

    def reset(self) -> None:
        """Reset configuration to default values."""
        with self._lock:
            self._config = self._config_type()
            config_copy = self._config.model_copy(deep=True)

        self._notify_observers(ConfigEvent.CONFIG_RESET, config=config_copy)
        logger.info(f"Config reset to defaults: {self._config_type.__name__}")

    # =================================================================
    # Persistence
    # =================================================================

    def _resolve_path(self, path: Optional[Path]) -> Path:
        file_path = path or self._default_path
        if file_path is None:
            raise ValueError("No path specified and no default_path set")
        return Path(file_path)

    def load(self, path: Optional[Path] = None) -> None:
        """
        Load configuration from file.

        Raises:
            ValueError: If no path specified and no default_path set
            FileNotFoundError: If config file doesn't exist
            ConfigurationError: If the file is invalid
        """
        file_path = self._resolve_path(path)
        new_config = PydanticPersistence.load_json(file_path, self._config_type)

        with self._lock:
            self._config = new_config

        self._notify_observers(ConfigEvent.CONFIG_LOADED, path=file_path)
        logger.info(f"Config loaded from {file_path}")

    def save(self, path: Optional[Path] = None) -> None:
        """
        Save configuration to file.

        Raises:
            ValueError: If no path specified and no default_path set
            OSError: If the file cannot be written
        """
        file_path = self._resolve_path(path)

        with self._lock:
            config_copy = self._config.model_copy(deep=True)

        # I/O outside the lock
        PydanticPersistence.save_json(config_copy, file_path)

        self._notify_observers(ConfigEvent.CONFIG_SAVED, path=file_path)
        logger.info(f"Config saved to {file_path}")
