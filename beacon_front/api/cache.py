"""
Cache des pages rendues — tient lieu de génération statique avec revalidation.

Une entrée vit `ttl` secondes puis est recalculée à la requête suivante.
Au plus `max_entries` entrées : à l'insertion, les entrées expirées sont purgées
puis les plus anciennes évincées. Jamais utilisé en prévisualisation ; les 404
ne sont pas mis en cache.
"""
import threading
import time
from typing import Callable, Dict, Optional, Tuple

DEFAULT_MAX_ENTRIES = 1000


class PageCache:
    """
    Usage:
        >>> cache = PageCache(ttl=60)
        >>> cache.set("/about/", "<html>...</html>")
        >>> cache.get("/about/")
        '<html>...</html>'
    """

    def __init__(
        self,
        ttl: int = 60,
        clock: Callable[[], float] = time.monotonic,
        max_entries: int = DEFAULT_MAX_ENTRIES,
    ):
        self.ttl = ttl
        self.max_entries = max_entries
        self._clock = clock
        # ordre d'insertion = ordre d'ancienneté
        self._entries: Dict[str, Tuple[float, str]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            expires_at, html = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                return None
            return html

    def set(self, key: str, html: str) -> None:
        if self.ttl <= 0 or self.max_entries <= 0:
            return
        with self._lock:
            now = self._clock()
            self._entries.pop(key, None)
            if len(self._entries) >= self.max_entries:
                self._sweep(now)
            while len(self._entries) >= self.max_entries:
                del self._entries[next(iter(self._entries))]
            self._entries[key] = (now + self.ttl, html)

    def _sweep(self, now: float) -> None:
        expired = [k for k, (expires_at, _) in self._entries.items() if now >= expires_at]
        for k in expired:
            del self._entries[k]

    def invalidate(self, key: Optional[str] = None) -> None:
        """Une clé, ou tout le cache si `key` est None."""
        with self._lock:
            if key is None:
                self._entries.clear()
            else:
                self._entries.pop(key, None)

    def __len__(self) -> int:
        return len(self._entries)
