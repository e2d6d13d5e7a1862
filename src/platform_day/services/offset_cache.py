# src/platform_day/services/offset_cache.py
import logging
from dataclasses import dataclass
from typing import Callable, Optional
from ..domain.instants import now_ms
from ..domain.offset import DEFAULT_OFFSET, OffsetValue
from ..errors import ConfigFetchFailed, InvalidOffsetFormat
from ..ports.offset_source import OffsetSource

DEFAULT_TTL_MS = 5 * 60 * 1000

@dataclass(frozen=True)
class CachedOffset:
    value: Optional[OffsetValue] = None
    fetched_at_ms: Optional[int] = None

    def is_fresh(self, now: int, ttl_ms: int) -> bool:
        if self.value is None or self.fetched_at_ms is None:
            return False
        return now - self.fetched_at_ms < ttl_ms

_EMPTY = CachedOffset()

class OffsetCache:
    """
    Caches the platform day start for `ttl_ms`.

    The (value, fetched_at_ms) pair lives in one immutable CachedOffset and is
    replaced by a single assignment, so readers never see half an update.
    Concurrent refreshes are not coalesced; last write wins.
    """
    def __init__(
        self,
        source: OffsetSource,
        *,
        ttl_ms: int = DEFAULT_TTL_MS,
        default: OffsetValue = DEFAULT_OFFSET,
        now_ms_provider: Callable[[], int] = now_ms,
    ):
        self.source = source
        self.ttl_ms = ttl_ms
        self.default = default
        self._now_ms = now_ms_provider
        self._entry = _EMPTY

    def peek(self) -> CachedOffset:
        return self._entry

    def get_current_offset(self, force: bool = False) -> OffsetValue:
        now = self._now_ms()
        entry = self._entry
        if not force and entry.is_fresh(now, self.ttl_ms):
            logging.debug("day start cache hit value=%s", entry.value)
            return entry.value

        try:
            value = OffsetValue.parse(self.source.fetch_raw())
        except (ConfigFetchFailed, InvalidOffsetFormat) as e:
            return self._fallback(entry, now, e)

        self._entry = CachedOffset(value, now)
        if value != entry.value:
            logging.info("day start refreshed value=%s previous=%s", value, entry.value)
        return value

    def _fallback(self, entry: CachedOffset, now: int, err: Exception) -> OffsetValue:
        if entry.value is not None:
            # keep the old timestamp: next call retries instead of extending staleness
            logging.warning("day start fetch failed, using cached value=%s err=%s", entry.value, err)
            return entry.value
        logging.warning("day start fetch failed, no cached value, using default=%s err=%s", self.default, err)
        self._entry = CachedOffset(self.default, now)
        return self.default

    def invalidate(self) -> None:
        self._entry = _EMPTY
        logging.info("day start cache invalidated")
