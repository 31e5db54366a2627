"""
Chain of responsibility: each handler either answers a request or passes
it along.
"""
from __future__ import annotations

from typing import Any, Callable


class Handler:
    """Base handler. Subclasses override :meth:`process`."""
    def __init__(self) -> None:
        self._next: Handler | None = None

    def set_next(self, handler: Handler) -> Handler:
        """Attach `handler` after this one and return it, for chaining calls."""
        self._next = handler
        return handler

    def process(self, request: Any) -> Any | None:
        return None

    def handle(self, request: Any) -> Any | None:
        """
        Walk the chain until a handler returns something other than None.

        Returns:
            The first non-None result, or None if nobody handled `request`.
        """
        node: Handler | None = self
        while node is not None:
            result = node.process(request)
            if result is not None:
                return result
            node = node._next
        return None


class FunctionHandler(Handler):
    """Handles requests for which `predicate` is true by returning ``action(request)``."""
    def __init__(self, predicate: Callable[[Any], bool], action: Callable[[Any], Any]) -> None:
        super().__init__()
        self.predicate = predicate
        self.action = action

    def process(self, request: Any) -> Any | None:
        if self.predicate(request):
            return self.action(request)
        return None


def build_chain(*handlers: Handler) -> Handler:
    """
    Link `handlers` in order and return the head.

    Raises:
        ValueError: If no handlers are given.
    """
    if not handlers:
        raise ValueError("build_chain needs at least one handler.")
    for current, following in zip(handlers, handlers[1:]):
        current.set_next(following)
    return handlers[0]
