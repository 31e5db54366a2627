"""
Cooperative Locks
=================
Callback-based lock primitives for a single-threaded event loop.

Nothing here blocks. A caller that cannot proceed leaves a callback in a
FIFO queue; the callback runs when the complementary operation (unlock,
release) hands the resource over. These are not thread-safe; use
:mod:`threading` for that.
"""
from __future__ import annotations

from collections import deque
import logging
from typing import Callable, Hashable

logger = logging.getLogger(__name__)

Callback = Callable[[], None]

_UNHELD = object()


class Mutex:
    """Exclusive lock with FIFO hand-off."""
    def __init__(self) -> None:
        self._locked = False
        self._queue: deque[Callback] = deque()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(locked={self._locked}, waiting={len(self._queue)})"

    @property
    def locked(self) -> bool:
        return self._locked

    @property
    def waiting(self) -> int:
        return len(self._queue)

    def lock(self, callback: Callback) -> bool:
        """
        Acquire the lock, or queue `callback` until it is handed over.

        Returns:
            True if the lock was free and `callback` ran now; False if queued.
        """
        if not self._locked:
            self._locked = True
            callback()
            return True
        self._queue.append(callback)
        return False

    def try_lock(self) -> bool:
        if self._locked:
            return False
        self._locked = True
        return True

    def unlock(self) -> bool:
        """
        Release the lock. The next waiter, if any, becomes the holder and its
        callback runs before this returns.

        Returns:
            False if the mutex was not locked.
        """
        if not self._locked:
            return False
        if self._queue:
            self._queue.popleft()()
        else:
            self._locked = False
        return True


class LockManager:
    """
    Named locks with owners.

    A lock is created on first acquire and forgotten once released with
    nobody waiting.
    """
    def __init__(self) -> None:
        self._holders: dict[Hashable, Hashable] = {}
        self._queues: dict[Hashable, deque[tuple[Hashable, Callback | None]]] = {}

    def acquire(self, name: Hashable, owner: Hashable, callback: Callback | None = None) -> bool:
        """
        Take lock `name` for `owner`.

        Re-acquiring a lock already held by `owner` succeeds immediately.

        Returns:
            True if held now (callback has run); False if queued.
        """
        holder = self._holders.get(name, _UNHELD)
        if holder is _UNHELD or holder == owner:
            self._holders[name] = owner
            if callback is not None:
                callback()
            return True
        self._queues.setdefault(name, deque()).append((owner, callback))
        logger.debug(f"Lock {name!r} held by {holder!r}; {owner!r} queued.")
        return False

    def release(self, name: Hashable, owner: Hashable) -> bool:
        """
        Release `name` if `owner` holds it, handing it to the next waiter.

        Returns:
            False (and no change) if `owner` does not hold `name`.
        """
        if name not in self._holders or self._holders[name] != owner:
            return False
        queue = self._queues.get(name)
        if queue:
            next_owner, callback = queue.popleft()
            if not queue:
                del self._queues[name]
            self._holders[name] = next_owner
            if callback is not None:
                callback()
        else:
            del self._holders[name]
        return True

    def holder(self, name: Hashable) -> Hashable | None:
        """Current owner of `name`; None when unheld (see :meth:`is_locked`)."""
        return self._holders.get(name)

    def is_locked(self, name: Hashable) -> bool:
        return name in self._holders

    def queue_length(self, name: Hashable) -> int:
        return len(self._queues.get(name, ()))


class Semaphore:
    """Counting semaphore with FIFO waiters."""
    def __init__(self, permits: int) -> None:
        if permits < 1:
            raise ValueError(f"permits must be >= 1, got {permits}.")
        self.permits = permits
        self._available = permits
        self._queue: deque[Callback] = deque()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(available={self._available}/{self.permits}, waiting={len(self._queue)})"

    @property
    def available(self) -> int:
        return self._available

    @property
    def waiting(self) -> int:
        return len(self._queue)

    def acquire(self, callback: Callback) -> bool:
        if self._available > 0:
            self._available -= 1
            callback()
            return True
        self._queue.append(callback)
        return False

    def release(self) -> bool:
        """
        Return a permit, passing it straight to the next waiter if any.

        Returns:
            False if every permit is already free.
        """
        if self._queue:
            self._queue.popleft()()
            return True
        if self._available >= self.permits:
            return False
        self._available += 1
        return True
