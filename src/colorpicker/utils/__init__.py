"""Generic utilities that are not specific to colors.

- observer: Thread-safe observer list
- persistence: JSON load/save for pydantic models
"""

from .observer import ObserverManager
from .persistence import PydanticPersistence

__all__ = ["ObserverManager", "PydanticPersistence"]
