"""
TTL-basierter In-Memory-Cache fuer selten geaenderte Stammdaten
(Profissionais, Provisionsregeln, Gebuehrenordnung).

Thread-safe ueber threading.Lock. Lazy-Eviction bei get().
Invalidierung ueber Prefix-Match nach Schreibzugriffen.
"""

import hashlib
import json
import logging
import threading
import time
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)

# ── Default-TTLs (Sekunden) ──────────────────────────────────────────────
TTL_PROFESSIONALS = 180
TTL_SERVICE_COMMISSIONS = 180
TTL_FEE_SCHEDULE = 300

PREFIX_PROFESSIONALS = 'professionals'
PREFIX_SERVICE_COMMISSIONS = 'service_commissions'
PREFIX_FEE_SCHEDULE = 'fee_schedule'


def make_key(prefix: str, **kwargs) -> str:
    """Deterministischer Key aus Prefix + sortierten Parametern (None wird ignoriert)."""
    filtered = {k: v for k, v in sorted(kwargs.items()) if v is not None}
    if not filtered:
        return prefix
    raw = json.dumps(filtered, sort_keys=True, default=str)
    suffix = hashlib.md5(raw.encode()).hexdigest()[:10]
    return f"{prefix}:{suffix}"


class _CacheEntry:
    __slots__ = ("value", "expires_at")

    def __init__(self, value: Any, ttl: float, now: float):
        self.value = value
        self.expires_at = now + ttl


class ReadModelCache:
    """Thread-safe In-Memory-Cache mit Ablaufzeit je Eintrag."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._store: Dict[str, _CacheEntry] = {}
        self._lock = threading.Lock()
        self._clock = clock

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None
            if self._clock() > entry.expires_at:
                del self._store[key]
                return None
            return entry.value

    def set(self, key: str, value: Any, ttl: float = 120) -> None:
        with self._lock:
            self._store[key] = _CacheEntry(value, ttl, self._clock())

    def get_or_load(self, key: str, loader: Callable[[], Any], ttl: float = 120) -> Any:
        """Wert aus dem Cache oder ``loader()``; leere Ergebnisse werden nicht gemerkt."""
        value = self.get(key)
        if value is not None:
            return value
        value = loader()
        if value:
            self.set(key, value, ttl)
        return value

    def invalidate(self, key_prefix: str) -> int:
        """Loescht alle Eintraege deren Key mit *key_prefix* beginnt."""
        with self._lock:
            to_delete = [k for k in self._store if k.startswith(key_prefix)]
            for k in to_delete:
                del self._store[k]
        if to_delete:
            logger.debug("Cache invalidiert: prefix=%s, entfernt=%d", key_prefix, len(to_delete))
        return len(to_delete)

    def invalidate_all(self) -> None:
        with self._lock:
            count = len(self._store)
            self._store.clear()
        if count:
            logger.debug("Cache komplett geleert: %d Eintraege entfernt", count)
