"""
Event Emitter
=============
Synchronous named-event fan-out.

Listeners are called in registration order. A listener that raises is
logged and skipped; the remaining listeners still run.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Hashable

logger = logging.getLogger(__name__)

Listener = Callable[..., Any]


class EventEmitter:
    def __init__(self) -> None:
        # event -> [(listener, once)]
        self._listeners: dict[Hashable, list[tuple[Listener, bool]]] = {}

    def on(self, event: Hashable, listener: Listener) -> Listener:
        """Register `listener`; returns it so this can be used as a decorator."""
        self._listeners.setdefault(event, []).append((listener, False))
        return listener

    def once(self, event: Hashable, listener: Listener) -> Listener:
        """Register `listener` to run on the next emit only."""
        self._listeners.setdefault(event, []).append((listener, True))
        return listener

    def off(self, event: Hashable, listener: Listener) -> bool:
        """Remove the first registration of `listener`. Returns False if absent."""
        entries = self._listeners.get(event)
        if not entries:
            return False
        for i, (registered, _) in enumerate(entries):
            if registered == listener:
                del entries[i]
                if not entries:
                    del self._listeners[event]
                return True
        return False

    def emit(self, event: Hashable, *args: Any, **kwargs: Any) -> int:
        """
        Call every listener of `event`.

        Returns:
            Number of listeners called, failing ones included.
        """
        entries = self._listeners.get(event)
        if not entries:
            return 0
        snapshot = list(entries)
        remaining = [entry for entry in entries if not entry[1]]
        if remaining:
            self._listeners[event] = remaining
        else:
            del self._listeners[event]

        for listener, _ in snapshot:
            try:
                listener(*args, **kwargs)
            except Exception:
                logger.exception(f"Listener {listener!r} for event {event!r} failed.")
        return len(snapshot)

    def listener_count(self, event: Hashable) -> int:
        return len(self._listeners.get(event, ()))

    def remove_all_listeners(self, event: Hashable | None = None) -> None:
        if event is None:
            self._listeners.clear()
        else:
            self._listeners.pop(event, None)

    def event_names(self) -> list[Hashable]:
        return list(self._listeners)
