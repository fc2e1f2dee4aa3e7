"""Event bus - named events with observer callbacks.

Each navigator owns its own bus. Host components (variant pickers, the zoom
overlay, analytics hooks) subscribe by event name.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, List

from .logging import log

IMAGE_CHANGED = "image_changed"
VARIANT_CHANGED = "variant_changed"

Callback = Callable[[Any], None]


class EventBus:
    """Synchronous observer registry."""

    def __init__(self):
        self._observers: Dict[str, List[Callback]] = {}

    def subscribe(self, name: str, callback: Callback) -> Callable[[], None]:
        """Register callback for name. Returns an unsubscribe function."""
        self._observers.setdefault(name, []).append(callback)

        def unsubscribe() -> None:
            self.unsubscribe(name, callback)

        return unsubscribe

    def unsubscribe(self, name: str, callback: Callback) -> None:
        callbacks = self._observers.get(name)
        if callbacks and callback in callbacks:
            callbacks.remove(callback)

    def emit(self, name: str, payload: Any = None) -> int:
        """Call every observer of name with payload.

        A failing observer is logged and skipped. Returns the number of
        observers that completed.
        """
        delivered = 0
        for callback in list(self._observers.get(name, ())):
            try:
                callback(payload)
                delivered += 1
            except Exception as e:
                log(f"[EVENT][ERR] {name} observer {callback!r} failed: {e!r}")
        return delivered

    def observer_count(self, name: str) -> int:
        return len(self._observers.get(name, ()))

    def clear(self) -> None:
        """Drop all observers."""
        self._observers.clear()
