import threading
import time
from dataclasses import dataclass
from typing import Optional


CACHE_SECONDS = 60


@dataclass(frozen=True)
class CachedQuote:
    payload: dict
    stored_at: float


class QuoteCache:
    """
    Single process-wide slot holding the last computed price payload.

    The lock covers each read and each write, not the upstream fetch in between,
    so two requests that both miss will both fetch; the later write wins.
    """

    def __init__(self, ttl_seconds: float = CACHE_SECONDS, clock=time.time):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._entry: Optional[CachedQuote] = None

    def get_fresh(self) -> Optional[dict]:
        with self._lock:
            entry = self._entry
            if entry is not None and (self._clock() - entry.stored_at) < self.ttl_seconds:
                return entry.payload
            return None

    def get_any(self) -> Optional[dict]:
        # Any age; used as a fallback when upstream rejects.
        with self._lock:
            return self._entry.payload if self._entry is not None else None

    def store(self, payload: dict) -> CachedQuote:
        with self._lock:
            self._entry = CachedQuote(payload=payload, stored_at=self._clock())
            return self._entry

    def age(self) -> Optional[float]:
        with self._lock:
            if self._entry is None:
                return None
            return self._clock() - self._entry.stored_at


QUOTE_CACHE = QuoteCache()
