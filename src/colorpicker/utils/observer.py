"""Observer registry used by the app, the recent colors history and the config service."""

import logging
from threading import Lock
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=object)


class ObserverManager(Generic[T]):
    """
    Thread-safe list of observers plus a fan-out ``notify``.

    The owner names the callback when notifying, e.g.
    ``notify("on_recent_colors_event", RecentColorsEvent.RECORDED, colors)``,
    so one class serves every observer protocol in the package.

    Callbacks run on the notifying thread with the registry lock released,
    which lets an observer query (or mutate) the object that notified it.
    A failing observer is logged and skipped; the others still run.
    """

    def __init__(self, observer_type_name: str = "observer"):
        """
        Args:
            observer_type_name: Label used in log messages ("color", "config", ...)
        """
        self._observers: list[T] = []
        self._lock = Lock()
        self._name = observer_type_name

    def register(self, observer: T) -> None:
        """Add an observer; registering the same observer twice has no effect."""
        with self._lock:
            if observer in self._observers:
                return
            self._observers.append(observer)
        logger.debug(f"Registered {self._name} observer {observer!r}")

    def unregister(self, observer: T) -> None:
        with self._lock:
            try:
                self._observers.remove(observer)
            except ValueError:
                logger.warning(f"Unregistering unknown {self._name} observer {observer!r}")
                return
        logger.debug(f"Unregistered {self._name} observer {observer!r}")

    def notify(self, callback_name: str, *args: Any, **kwargs: Any) -> None:
        """Call ``callback_name(*args, **kwargs)`` on every registered observer."""
        with self._lock:
            observers = tuple(self._observers)

        for observer in observers:
            callback = getattr(observer, callback_name, None)
            if callback is None:
                logger.error(f"{self._name} observer {observer!r} has no method '{callback_name}'")
                continue
            try:
                callback(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"{self._name} observer {observer!r} failed in {callback_name}: {e}",
                    exc_info=True,
                )

    def clear(self) -> None:
        """Forget all observers."""
        with self._lock:
            self._observers.clear()

    def __contains__(self, observer: object) -> bool:
        with self._lock:
            return observer in self._observers

    def __len__(self) -> int:
        with self._lock:
            return len(self._observers)
