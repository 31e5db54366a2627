from algokit.concurrency.channel import CLOSED, Channel
from algokit.concurrency.mutex import LockManager, Mutex, Semaphore
