"""Resolution cache.

Keeps the most recent resolution so that a response processed several times
in a row (the page re-requests it, or the same blocked video is reopened)
does not trigger a flood of upstream requests. Exhausted resolutions are
cached too: a video that resisted every strategy is not retried until
another video has been resolved.
"""

import copy
import logging
import threading
from collections import OrderedDict

from sidebarunlock.models import CacheEntry, CacheStatus, ContentDocument

logger = logging.getLogger(__name__)


class ResolutionCache:
    """Bounded mapping of video id -> CacheEntry.

    Capacity defaults to one: storing a new id evicts the previous entry.
    Documents are deep-copied on the way in and on the way out, so callers
    can never mutate what the cache holds.

    The `lock` attribute guards read-check-write sequences spanning get()
    and put(); the resolver holds it for the duration of a resolution.
    """

    def __init__(self, capacity: int = 1):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self.lock = threading.RLock()
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()

    def get(self, content_id: str) -> CacheEntry | None:
        """Return a copy of the entry for content_id, or None."""
        with self.lock:
            entry = self._entries.get(content_id)
            if entry is None:
                return None
            return CacheEntry(
                content_id=entry.content_id,
                document=copy.deepcopy(entry.document),
                status=entry.status,
                created_at=entry.created_at,
            )

    def put(self, content_id: str, document: ContentDocument, status: CacheStatus) -> None:
        """Store a copy of document, evicting the oldest entries over capacity."""
        with self.lock:
            self._entries.pop(content_id, None)
            self._entries[content_id] = CacheEntry(
                content_id=content_id,
                document=copy.deepcopy(document),
                status=status,
            )
            while len(self._entries) > self.capacity:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug(f"Evicted cached resolution for {evicted}")

    def clear(self) -> None:
        with self.lock:
            self._entries.clear()

    def __contains__(self, content_id: str) -> bool:
        return content_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)
