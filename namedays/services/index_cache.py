"""
Process-wide cache of per-year indexes.

The first query for a year builds its index; later queries get the same
instance back. Each year has its own build lock so concurrent first access
builds once, and published indexes are immutable so readers need no lock.

By default nothing is evicted: every year ever queried stays resident
(a few hundred entries per year). Set NAMEDAYS_INDEX_CACHE_MAX_YEARS to keep
only the N most recently used years.
"""
import logging
import threading
import time
from collections import OrderedDict
from typing import Optional

from namedays.config import get_settings
from namedays.services.index_builder import ResolvedIndex, build_index
from namedays.utils.easter import SUPPORTED_YEARS, is_supported_year
from namedays.utils.normalize import current_year

logger = logging.getLogger(__name__)


class IndexCache:
    def __init__(self, max_years: int = 0):
        self._max_years = max_years
        self._indexes: "OrderedDict[int, ResolvedIndex]" = OrderedDict()
        self._lock = threading.Lock()
        self._year_locks: dict[int, threading.Lock] = {}

    @property
    def max_years(self) -> int:
        return self._max_years

    def get(self, year: Optional[int] = None) -> ResolvedIndex:
        """Index for `year` (current year when omitted), building it on first use."""
        if year is None:
            year = current_year()

        index = self._lookup(year)
        if index is not None:
            return index

        with self._year_lock(year):
            # another thread may have published while we waited
            index = self._lookup(year)
            if index is not None:
                return index
            index = self._build(year)
            self._publish(year, index)
            return index

    def _lookup(self, year: int) -> Optional[ResolvedIndex]:
        with self._lock:
            index = self._indexes.get(year)
            if index is not None and self._max_years:
                self._indexes.move_to_end(year)
            return index

    def _year_lock(self, year: int) -> threading.Lock:
        with self._lock:
            return self._year_locks.setdefault(year, threading.Lock())

    def _build(self, year: int) -> ResolvedIndex:
        if not is_supported_year(year):
            logger.warning(
                "Year %d is outside %d-%d; movable dates are unreliable",
                year, SUPPORTED_YEARS.start, SUPPORTED_YEARS.stop - 1,
                extra={"year": year},
            )
        started = time.perf_counter()
        index = build_index(year)
        elapsed_ms = int((time.perf_counter() - started) * 1000)
        logger.info(
            "Built name-day index for %d (%d entries)",
            year, len(index.entries),
            extra={"year": year, "entries": len(index.entries), "elapsed_ms": elapsed_ms},
        )
        return index

    def _publish(self, year: int, index: ResolvedIndex) -> None:
        with self._lock:
            self._indexes[year] = index
            self._year_locks.pop(year, None)
            if self._max_years:
                while len(self._indexes) > self._max_years:
                    evicted, _ = self._indexes.popitem(last=False)
                    logger.debug("Evicted name-day index for %d", evicted, extra={"year": evicted})

    def cached_years(self) -> list[int]:
        with self._lock:
            return list(self._indexes)

    def clear(self) -> None:
        with self._lock:
            self._indexes.clear()
            self._year_locks.clear()

    def __contains__(self, year: object) -> bool:
        with self._lock:
            return year in self._indexes

    def __len__(self) -> int:
        with self._lock:
            return len(self._indexes)


_shared_cache: Optional[IndexCache] = None
_shared_cache_lock = threading.Lock()


def get_index_cache() -> IndexCache:
    """The shared cache, sized from settings on first use."""
    global _shared_cache
    with _shared_cache_lock:
        if _shared_cache is None:
            _shared_cache = IndexCache(max_years=get_settings().index_cache_max_years)
        return _shared_cache


def reset_index_cache() -> None:
    """Drop the shared cache; the next get_index_cache() builds a new one from settings."""
    global _shared_cache
    with _shared_cache_lock:
        _shared_cache = None


def get_index(year: Optional[int] = None) -> ResolvedIndex:
    """Index for `year` from the shared cache."""
    return get_index_cache().get(year)
