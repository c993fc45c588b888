"""In-memory cache of cache-busted static URLs."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

logger = logging.getLogger(__name__)

_MISSING = object()


class StaticUrlCache:
    """Maps input URLs to their computed cache-busted URL.

    Entries are never evicted, so this is only meant for the small, fixed set
    of stylesheets and scripts referenced by page templates. ``None`` results
    are cached like any other value.
    """

    def __init__(self) -> None:
        self._entries: dict[str, str | None] = {}
        self._lock = threading.Lock()

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get_or_compute(
        self, url: str, compute: Callable[[str], str | None]
    ) -> str | None:
        with self._lock:
            cached = self._entries.get(url, _MISSING)
        if cached is not _MISSING:
            return cached  # type: ignore[return-value]

        # Computed outside the lock; concurrent misses on one key both write
        # the same deterministic value.
        logger.debug("Static URL cache miss for %s", url)
        value = compute(url)
        with self._lock:
            self._entries[url] = value
        return value

    def snapshot(self) -> dict[str, str | None]:
        with self._lock:
            return dict(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
