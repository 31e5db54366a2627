"""
Command Bus
===========
Routes command objects to exactly one handler by type, through an optional
middleware pipeline.

Middleware are callables ``(command, next_) -> result`` applied in
registration order, the first registered being outermost. Observers can
listen on :attr:`CommandBus.events` for ``"dispatched"``
``(command, result)`` and ``"failed"`` ``(command, exc)``.
"""
from __future__ import annotations

import logging
from typing import Any, Callable

from algokit.patterns.events import EventEmitter

logger = logging.getLogger(__name__)

CommandHandler = Callable[[Any], Any]
Middleware = Callable[[Any, Callable[[Any], Any]], Any]


class CommandBus:
    def __init__(self) -> None:
        self._handlers: dict[type, CommandHandler] = {}
        self._middleware: list[Middleware] = []
        self.events = EventEmitter()

    def register(self, command_type: type, handler: CommandHandler) -> None:
        """
        Raises:
            ValueError: If `command_type` already has a handler.
        """
        if command_type in self._handlers:
            raise ValueError(f"A handler for {command_type.__name__} is already registered.")
        self._handlers[command_type] = handler

    def unregister(self, command_type: type) -> bool:
        return self._handlers.pop(command_type, None) is not None

    def handles(self, command_type: type) -> bool:
        return command_type in self._handlers

    def use(self, middleware: Middleware) -> None:
        self._middleware.append(middleware)

    def dispatch(self, command: Any) -> Any:
        """
        Run `command` through the middleware into its handler.

        Returns:
            Whatever the handler (or a short-circuiting middleware) returns.

        Raises:
            LookupError: If no handler is registered for ``type(command)``.
            Exception: Anything the handler or middleware raises, after the
                ``"failed"`` event has been emitted.
        """
        handler = self._handlers.get(type(command))
        if handler is None:
            raise LookupError(f"No handler registered for {type(command).__name__}.")

        call = handler
        for middleware in reversed(self._middleware):
            call = self._wrap(middleware, call)

        try:
            result = call(command)
        except Exception as e:
            logger.warning(f"Command {type(command).__name__} failed: {e}")
            self.events.emit("failed", command, e)
            raise
        self.events.emit("dispatched", command, result)
        return result

    @staticmethod
    def _wrap(middleware: Middleware, next_: Callable[[Any], Any]) -> Callable[[Any], Any]:
        return lambda command: middleware(command, next_)
