"""
In-process caches for the tenancy core.

Both caches are plain objects handed to the resolver and the section gate,
so tests can inject a fake clock or a pre-filled cache. Reads and writes are
guarded by one lock; writes are last-write-wins.
"""
import time
from threading import Lock
from typing import Any, Callable, Dict, Hashable, Optional, Tuple

MISSING = object()


class MemoryCache:
    """
    Key/value cache with an optional TTL.

    ``ttl=None`` means entries live until ``clear`` is called. With a TTL an
    entry is never served once ``clock()`` has moved ``ttl`` seconds past
    the write.
    """

    def __init__(self, ttl: Optional[float] = None, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self._clock = clock
        self._entries: Dict[Hashable, Tuple[Any, Optional[float]]] = {}
        self._lock = Lock()

    def get(self, key: Hashable, default: Any = MISSING) -> Any:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return default

            value, expires_at = entry
            if expires_at is not None and self._clock() >= expires_at:
                del self._entries[key]
                return default
            return value

    def set(self, key: Hashable, value: Any) -> None:
        expires_at = self._clock() + self.ttl if self.ttl is not None else None
        with self._lock:
            self._entries[key] = (value, expires_at)

    def clear(self, predicate: Optional[Callable[[Hashable], bool]] = None) -> int:
        """Drop every entry, or only those whose key matches ``predicate``."""
        with self._lock:
            if predicate is None:
                dropped = len(self._entries)
                self._entries.clear()
                return dropped

            doomed = [key for key in self._entries if predicate(key)]
            for key in doomed:
                del self._entries[key]
            return len(doomed)

    def __len__(self):
        with self._lock:
            return len(self._entries)
