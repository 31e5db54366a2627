"""
Publish / Subscribe
===================
Topic-based messaging on top of :class:`EventEmitter`.

Topics are dot-separated (``"orders.created"``). A subscription whose last
segment is ``*`` receives every topic under that prefix, so ``"orders.*"``
matches ``"orders.created"`` and ``"orders.eu.shipped"`` but not
``"orders"``. ``"*"`` alone matches everything.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, Callable

from algokit.patterns.events import EventEmitter

logger = logging.getLogger(__name__)

Handler = Callable[[str, Any], Any]


@dataclass
class Subscription:
    topic: str
    handler: Handler
    _bus: PubSub | None = field(default=None, repr=False)

    @property
    def active(self) -> bool:
        return self._bus is not None

    def cancel(self) -> bool:
        """Unsubscribe. Returns False if already cancelled."""
        if self._bus is None:
            return False
        bus, self._bus = self._bus, None
        return bus._remove(self)


def _matches(pattern: str, topic: str) -> bool:
    if pattern == "*":
        return True
    if pattern.endswith(".*"):
        return topic.startswith(pattern[:-1])
    return pattern == topic


class PubSub:
    def __init__(self) -> None:
        self._events = EventEmitter()
        self._patterns: dict[str, int] = {}

    def subscribe(self, topic: str, handler: Handler) -> Subscription:
        """
        Call ``handler(topic, message)`` for each matching publish.

        Raises:
            ValueError: If `topic` is empty or has ``*`` anywhere but the last segment.
        """
        if not topic:
            raise ValueError("topic must not be empty.")
        if "*" in topic[:-1] or (topic.endswith("*") and topic != "*" and not topic.endswith(".*")):
            raise ValueError(f"Wildcard is only allowed as the last segment: {topic!r}.")
        subscription = Subscription(topic, handler, self)
        self._events.on(topic, handler)
        self._patterns[topic] = self._patterns.get(topic, 0) + 1
        return subscription

    def _remove(self, subscription: Subscription) -> bool:
        removed = self._events.off(subscription.topic, subscription.handler)
        if removed:
            self._patterns[subscription.topic] -= 1
            if not self._patterns[subscription.topic]:
                del self._patterns[subscription.topic]
        return removed

    def publish(self, topic: str, message: Any = None) -> int:
        """
        Deliver `message` to every subscription matching `topic`.

        Returns:
            Number of handlers reached.
        """
        reached = 0
        for pattern in list(self._patterns):
            if _matches(pattern, topic):
                reached += self._events.emit(pattern, topic, message)
        logger.debug(f"Published {topic!r} to {reached} handler(s).")
        return reached

    def subscriber_count(self, topic: str | None = None) -> int:
        if topic is None:
            return sum(self._patterns.values())
        return self._patterns.get(topic, 0)
