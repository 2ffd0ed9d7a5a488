"""
utils/autosave.py — Debounced write-through for form documents.

Each storage key owns one pending-timer slot. Scheduling a new write for a
key cancels that key's previous timer, so a burst of edits ends in a single
write of the latest value after the quiet period.

Usage:
    debouncer = Debouncer(save)           # save(key, value) -> bool
    debouncer.schedule('tgrec.sheet1', doc, delay_ms=600)
    debouncer.flush()                      # write everything pending now
"""

import logging
import threading

logger = logging.getLogger(__name__)

DEFAULT_DELAY_MS = 600


class _Pending:
    """One scheduled write: the value and the timer that will write it."""

    __slots__ = ('value', 'timer')

    def __init__(self, value):
        self.value = value
        self.timer = None


class Debouncer:
    """Map of storage key -> cancellable timer, with explicit lifecycle.

    Args:
        writer: callable(key, value) performing the real write.
        timer_factory: callable(interval_seconds, function) returning an
            object with start() and cancel(). Defaults to threading.Timer.
    """

    def __init__(self, writer, timer_factory=threading.Timer):
        self._writer = writer
        self._timer_factory = timer_factory
        self._pending = {}
        self._lock = threading.Lock()
        # One write in flight per key, so an older value never lands last
        self._write_locks = {}

    def schedule(self, key, value, delay_ms=DEFAULT_DELAY_MS):
        """Replace any pending write for key with value, due in delay_ms."""
        entry = _Pending(value)
        entry.timer = self._timer_factory(delay_ms / 1000.0, lambda: self._fire(key, entry))

        with self._lock:
            previous = self._pending.get(key)
            if previous is not None:
                previous.timer.cancel()
            self._pending[key] = entry
        entry.timer.start()

    def peek(self, key):
        """(True, value) if a write is pending for key, else (False, None)."""
        with self._lock:
            entry = self._pending.get(key)
            if entry is None:
                return False, None
            return True, entry.value

    def flush(self, key=None):
        """Write pending values immediately (one key, or all of them)."""
        if key is None:
            with self._lock:
                keys = list(self._pending)
        else:
            keys = [key]
        return sum(self._flush_key(k) for k in keys)

    def cancel_all(self):
        """Drop every pending write without writing it."""
        with self._lock:
            for entry in self._pending.values():
                entry.timer.cancel()
            dropped = len(self._pending)
            self._pending.clear()
        if dropped:
            logger.warning("Discarded %d pending autosave(s)", dropped)
        return dropped

    def _key_lock(self, key):
        with self._lock:
            return self._write_locks.setdefault(key, threading.Lock())

    def _flush_key(self, key):
        with self._key_lock(key):
            with self._lock:
                entry = self._pending.get(key)
                if entry is None:
                    return 0
                entry.timer.cancel()
            self._write(key, entry)
            return 1

    def _fire(self, key, entry):
        with self._key_lock(key):
            with self._lock:
                # A newer schedule or a flush already replaced this entry
                if self._pending.get(key) is not entry:
                    return
            self._write(key, entry)

    def _write(self, key, entry):
        # Caller holds the key's write lock. The entry stays visible to
        # peek() until the write has landed.
        self._writer(key, entry.value)
        with self._lock:
            if self._pending.get(key) is entry:
                del self._pending[key]
