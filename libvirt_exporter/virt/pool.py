from contextlib import contextmanager
from threading import Lock


class BufferPool:

    """Free list of reusable lists.

    Released lists are emptied in place so their storage can be reused by the
    next scrape. Acquiring never blocks, a new list is created when the free
    list is empty. Safe to share between overlapping scrapes.
    """

    def __init__(self):
        self._free = []
        self._lock = Lock()

    def acquire(self):
        with self._lock:
            if self._free:
                return self._free.pop()
        return []

    def release(self, buf):
        del buf[:]
        with self._lock:
            self._free.append(buf)

    @contextmanager
    def buffer(self):
        buf = self.acquire()
        try:
            yield buf
        finally:
            self.release(buf)

    def __len__(self):
        with self._lock:
            return len(self._free)


# Domain stats of one bulk fetch
domain_pool = BufferPool()

# QEMU vCPU threads of one domain
thread_pool = BufferPool()
