"""
Tests for the cooperative lock primitives and channel.

Nothing here blocks: waiting is modelled by queued callbacks, so every test
records the order in which callbacks fire.
"""
import pytest

from algokit.concurrency import CLOSED, Channel, LockManager, Mutex, Semaphore


class TestMutex:
    """FIFO hand-off"""

    def test_lock_runs_callback_immediately_when_free(self):
        m = Mutex()
        log = []
        assert m.lock(lambda: log.append("a"))
        assert log == ["a"]
        assert m.locked

    def test_waiters_served_in_order(self):
        m = Mutex()
        log = []
        m.lock(lambda: log.append("a"))
        assert not m.lock(lambda: log.append("b"))
        assert not m.lock(lambda: log.append("c"))
        assert m.waiting == 2
        assert m.unlock()
        assert log == ["a", "b"]
        assert m.locked
        m.unlock()
        m.unlock()
        assert log == ["a", "b", "c"]
        assert not m.locked

    def test_unlock_when_free(self):
        assert not Mutex().unlock()

    def test_try_lock(self):
        m = Mutex()
        assert m.try_lock()
        assert not m.try_lock()
        m.unlock()
        assert m.try_lock()


class TestLockManager:
    """Named locks with owners"""

    def test_acquire_and_release(self):
        lm = LockManager()
        assert lm.acquire("db", "alice")
        assert lm.holder("db") == "alice"
        assert lm.is_locked("db")
        assert lm.release("db", "alice")
        assert not lm.is_locked("db")
        assert lm.holder("db") is None

    def test_release_hands_over(self):
        lm = LockManager()
        log = []
        lm.acquire("db", "alice")
        assert not lm.acquire("db", "bob", lambda: log.append("bob"))
        assert not lm.acquire("db", "carol", lambda: log.append("carol"))
        assert lm.queue_length("db") == 2
        lm.release("db", "alice")
        assert lm.holder("db") == "bob"
        assert log == ["bob"]
        lm.release("db", "bob")
        assert lm.holder("db") == "carol"
        assert lm.queue_length("db") == 0

    def test_release_by_non_owner_is_noop(self):
        lm = LockManager()
        lm.acquire("db", "alice")
        assert not lm.release("db", "mallory")
        assert not lm.release("other", "alice")
        assert lm.holder("db") == "alice"

    def test_reentrant_for_same_owner(self):
        lm = LockManager()
        lm.acquire("db", "alice")
        assert lm.acquire("db", "alice")

    def test_none_owner_is_a_real_holder(self):
        """A lock held by the None owner is not mistaken for a free one"""
        lm = LockManager()
        assert lm.acquire("db", None)
        assert lm.is_locked("db")
        assert not lm.acquire("db", "bob")
        assert lm.queue_length("db") == 1
        assert lm.release("db", None)
        assert lm.holder("db") == "bob"

    def test_independent_names(self):
        lm = LockManager()
        assert lm.acquire("a", "x")
        assert lm.acquire("b", "y")


class TestSemaphore:
    """Counting permits"""

    def test_permits(self):
        sem = Semaphore(2)
        log = []
        assert sem.acquire(lambda: log.append(1))
        assert sem.acquire(lambda: log.append(2))
        assert not sem.acquire(lambda: log.append(3))
        assert sem.available == 0
        assert sem.waiting == 1
        assert sem.release()
        assert log == [1, 2, 3]
        assert sem.available == 0
        sem.release()
        sem.release()
        assert sem.available == 2
        assert not sem.release()

    def test_bad_permits(self):
        with pytest.raises(ValueError):
            Semaphore(0)


class TestChannel:
    """Rendezvous and buffered channels"""

    def test_unbuffered_send_parks_until_receive(self):
        ch = Channel()
        sent = []
        received = []
        assert not ch.send("hello", sent.append)
        assert sent == []
        assert ch.receive(received.append)
        assert received == ["hello"]
        assert sent == [True]

    def test_receive_waits_for_send(self):
        ch = Channel()
        received = []
        assert not ch.receive(received.append)
        assert ch.send(1)
        assert received == [1]

    def test_buffered(self):
        ch = Channel(capacity=2)
        assert ch.send(1)
        assert ch.send(2)
        assert not ch.send(3)
        assert len(ch) == 2
        assert ch.try_receive() == (True, 1)
        # the parked sender moved into the buffer
        assert len(ch) == 2
        assert ch.try_receive() == (True, 2)
        assert ch.try_receive() == (True, 3)
        assert ch.try_receive() == (False, None)

    def test_fifo_pairing(self):
        ch = Channel()
        got = []
        for tag in "abc":
            ch.receive(lambda v, tag=tag: got.append((tag, v)))
        for v in (1, 2, 3):
            ch.send(v)
        assert got == [("a", 1), ("b", 2), ("c", 3)]

    def test_close(self):
        ch = Channel()
        waiting = []
        outcomes = []
        ch.receive(waiting.append)
        ch.close()
        assert waiting == [CLOSED]
        assert ch.closed
        assert not ch.send("late", outcomes.append)
        assert outcomes == [False]
        late = []
        assert ch.receive(late.append)
        assert late == [CLOSED]

    def test_close_drops_parked_senders(self):
        ch = Channel()
        outcomes = []
        ch.send("x", outcomes.append)
        ch.close()
        assert outcomes == [False]

    def test_buffer_drains_after_close(self):
        ch = Channel(capacity=1)
        ch.send("kept")
        ch.close()
        got = []
        ch.receive(got.append)
        ch.receive(got.append)
        assert got == ["kept", CLOSED]

    def test_bad_capacity(self):
        with pytest.raises(ValueError):
            Channel(-1)
