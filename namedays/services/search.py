"""
Search service - prefix search over names and substring match over holidays.
"""
from typing import Any, Optional

from namedays.schemas.results import SearchResult
from namedays.services.index_cache import get_index
from namedays.utils.normalize import date_key, normalize


def search_by_prefix(prefix: Any, year: Optional[int] = None) -> list[SearchResult]:
    """
    Entries whose canonical name, variant or Latin form starts with `prefix`.
    One result per (canonical name, date).
    """
    key = normalize(prefix)
    if not key:
        return []

    index = get_index(year)
    results: dict[tuple[str, str], SearchResult] = {}
    for name_key, entries in index.by_name.items():
        if not name_key.startswith(key):
            continue
        for entry in entries:
            entry_date = date_key(entry.month, entry.day)
            if (entry.name, entry_date) not in results:
                results[(entry.name, entry_date)] = SearchResult(
                    name=entry.name,
                    date_key=entry_date,
                    holiday_name=entry.holiday_name,
                )
    return list(results.values())


def names_for_holiday(holiday_query: Any, year: Optional[int] = None) -> list[str]:
    """All names (canonical and variants) of every holiday whose name contains the query."""
    key = normalize(holiday_query)
    if not key:
        return []

    index = get_index(year)
    names: dict[str, None] = {}
    for holiday_key, entries in index.by_holiday.items():
        if key not in holiday_key:
            continue
        for entry in entries:
            for name in entry.all_names:
                names.setdefault(name)
    return list(names)
