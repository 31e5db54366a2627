"""
Cooperative Channel
===================
Go-style channel for callback code.

With ``capacity=0`` a send completes only when paired with a receive
(rendezvous). With ``capacity > 0`` up to that many values are buffered.
Waiting senders and receivers are served strictly in arrival order.
"""
from __future__ import annotations

from collections import deque
import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


class _Closed:
    def __repr__(self) -> str:
        return "CLOSED"


CLOSED: Any = _Closed()
"""Delivered to receivers once the channel is closed and drained."""


class Channel:
    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}.")
        self.capacity = capacity
        self._buffer: deque[Any] = deque()
        self._senders: deque[tuple[Any, Callable[[bool], None] | None]] = deque()
        self._receivers: deque[Callable[[Any], None]] = deque()
        self._closed = False

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(capacity={self.capacity}, buffered={len(self._buffer)}, "
            f"senders={len(self._senders)}, receivers={len(self._receivers)}, closed={self._closed})"
        )

    def __len__(self) -> int:
        return len(self._buffer)

    @property
    def closed(self) -> bool:
        return self._closed

    def send(self, value: Any, callback: Callable[[bool], None] | None = None) -> bool:
        """
        Send `value`.

        Args:
            value: Payload.
            callback: Called with True once the value is taken (or buffered),
                or with False if the channel closes first.

        Returns:
            True if delivered or buffered now; False if parked or closed.
        """
        if self._closed:
            if callback is not None:
                callback(False)
            return False
        if self._receivers:
            self._receivers.popleft()(value)
        elif len(self._buffer) < self.capacity:
            self._buffer.append(value)
        else:
            self._senders.append((value, callback))
            return False
        if callback is not None:
            callback(True)
        return True

    def _take(self) -> tuple[bool, Any]:
        if self._buffer:
            value = self._buffer.popleft()
            if self._senders:
                parked, cb = self._senders.popleft()
                self._buffer.append(parked)
                if cb is not None:
                    cb(True)
            return True, value
        if self._senders:
            value, cb = self._senders.popleft()
            if cb is not None:
                cb(True)
            return True, value
        return False, None

    def receive(self, callback: Callable[[Any], None]) -> bool:
        """
        Receive the next value into `callback`.

        On a closed, drained channel `callback` gets :data:`CLOSED`.

        Returns:
            True if `callback` ran now; False if it was queued.
        """
        ok, value = self._take()
        if ok:
            callback(value)
            return True
        if self._closed:
            callback(CLOSED)
            return True
        self._receivers.append(callback)
        return False

    def try_receive(self) -> tuple[bool, Any]:
        """Non-waiting receive: ``(True, value)`` or ``(False, None)``."""
        return self._take()

    def close(self) -> None:
        """
        Close the channel. Buffered values stay receivable; waiting receivers
        get :data:`CLOSED` and parked senders are told False.
        """
        if self._closed:
            return
        self._closed = True
        receivers, self._receivers = self._receivers, deque()
        senders, self._senders = self._senders, deque()
        logger.debug(f"Channel closed with {len(receivers)} receiver(s) and {len(senders)} sender(s) waiting.")
        for receiver in receivers:
            receiver(CLOSED)
        for _, cb in senders:
            if cb is not None:
                cb(False)
