"""Bounded history of recently picked colors."""

import logging
from collections.abc import Iterable, Iterator
from threading import Lock

from colorpicker.models import Color
from colorpicker.protocols import RecentColorsEvent, RecentColorsObserver
from colorpicker.utils import ObserverManager

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 6


class RecentColors:
    """
    Recently picked colors, most recent last internally.

    Recording a color that is already present moves it to the most-recent
    end instead of adding a duplicate, and the oldest colors are dropped once
    the history grows past its capacity. Colors are compared component-wise.

    Invariants (asserted after every mutation):
    - len(self) <= capacity
    - no two entries are equal

    Threading:
        record() and clear() hold the lock for the whole remove/append/trim
        sequence, and snapshot() iterates over a copy taken under the lock.
        Observers are notified after the lock is released.
    """

    def __init__(self, initial: Iterable[Color] = (), capacity: int = DEFAULT_CAPACITY):
        """
        Initialize the history.

        Args:
            initial: Colors to hydrate from, oldest first. Duplicates and
                overflow are normalized the same way record() would.
            capacity: Maximum number of colors kept
        """
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")

        self._capacity = capacity
        self._colors: list[Color] = []
        self._lock = Lock()
        self._observers = ObserverManager[RecentColorsObserver](observer_type_name="recent colors")

        for color in initial:
            self._insert(color)
        self._check_invariants()

    @property
    def capacity(self) -> int:
        return self._capacity

    def register_observer(self, observer: RecentColorsObserver) -> None:
        """Register an observer to receive history updates."""
        self._observers.register(observer)

    def unregister_observer(self, observer: RecentColorsObserver) -> None:
        self._observers.unregister(observer)

    def record(self, color: Color) -> None:
        """Add a color as the most recent entry, moving it if already present."""
        with self._lock:
            self._insert(color)
            self._check_invariants()
            colors = list(self._colors)

        logger.debug(f"Recorded recent color {color.to_hex()} ({len(colors)} total)")
        self._observers.notify("on_recent_colors_event", RecentColorsEvent.RECORDED, colors)

    def clear(self) -> None:
        """Forget all colors."""
        with self._lock:
            self._colors.clear()

        self._observers.notify("on_recent_colors_event", RecentColorsEvent.CLEARED, [])

    def snapshot(self) -> Iterator[Color]:
        """
        Iterate over the colors, most recent first.

        Each call returns an independent iterator over a copy, so the history
        may keep changing while a snapshot is consumed.
        """
        with self._lock:
            colors = tuple(self._colors)
        return reversed(colors)

    def to_list(self) -> list[Color]:
        """Colors oldest first, the order they are persisted in."""
        with self._lock:
            return list(self._colors)

    def __len__(self) -> int:
        with self._lock:
            return len(self._colors)

    def __contains__(self, color: Color) -> bool:
        with self._lock:
            return color in self._colors

    def _insert(self, color: Color) -> None:
        # Caller holds the lock (or is __init__)
        self._colors = [existing for existing in self._colors if existing != color]
        self._colors.append(color)
        del self._colors[: max(0, len(self._colors) - self._capacity)]

    def _check_invariants(self) -> None:
        assert len(self._colors) <= self._capacity, "recent colors exceed capacity"
        assert len(set(self._colors)) == len(self._colors), "recent colors contain duplicates"
