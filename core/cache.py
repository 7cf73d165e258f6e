"""In-memory cache for the followed rooms snapshot.

This module holds the single time-boxed cache slot owned by each client,
along with freshness checks and cache information for display.
"""

import time
from typing import Callable

from models.room import Snapshot

DEFAULT_TTL_MS = 30_000


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


class CacheSlot:
    """Holds the last successful snapshot and when it was fetched.

    The slot is not locked: two callers that both find it invalid will each
    store their own result and the last write wins.
    """

    def __init__(self, ttl_ms: int = DEFAULT_TTL_MS, clock: Callable[[], int] | None = None):
        self.ttl_ms = ttl_ms
        self.snapshot: Snapshot | None = None
        self.fetched_at_ms: int | None = None
        self._clock = clock or now_ms

    def age_ms(self) -> int | None:
        """Milliseconds since the snapshot was stored, or None if empty."""
        if self.fetched_at_ms is None:
            return None
        return self._clock() - self.fetched_at_ms

    def is_valid(self) -> bool:
        """True if a snapshot is stored and younger than the TTL."""
        if self.snapshot is None or self.fetched_at_ms is None:
            return False
        return self.age_ms() < self.ttl_ms

    def store(self, snapshot: Snapshot):
        """Replace the cached snapshot and stamp it with the current time."""
        self.snapshot = snapshot
        self.fetched_at_ms = self._clock()

    def clear(self):
        """Empty the slot so the next refresh always fetches."""
        self.snapshot = None
        self.fetched_at_ms = None


def get_cache_info(slot: CacheSlot) -> dict:
    """Get information about the current cache slot.

    Args:
        slot: CacheSlot to describe

    Returns:
        Dictionary with exists, fetched_at_ms, age_ms, ttl_ms, is_stale,
        and counts from the cached snapshot
    """
    if slot.snapshot is None:
        return {
            'exists': False,
            'fetched_at_ms': None,
            'age_ms': None,
            'ttl_ms': slot.ttl_ms,
            'is_stale': True,
            'counts': {}
        }

    snapshot = slot.snapshot
    return {
        'exists': True,
        'fetched_at_ms': slot.fetched_at_ms,
        'age_ms': slot.age_ms(),
        'ttl_ms': slot.ttl_ms,
        'is_stale': not slot.is_valid(),
        'counts': {
            'online': snapshot.online_count,
            'total': snapshot.total_followed,
            'entries': len(snapshot.entries),
        }
    }
